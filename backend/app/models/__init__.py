"""ORM Models — SQLAlchemy declarative models for every resource kind.

Invariants:
    - All models inherit from Base and OwnedRecordMixin (db/base.py)
    - __tablename__ matches the `table` of the resource's descriptor
    - Cross-resource references (project_id, course_id, habit_id) are plain
      strings: no foreign keys, no cascades

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata knows every table before the
      store resolves tables by name
"""

from app.models.task import Task  # noqa: F401
from app.models.project import Project  # noqa: F401
from app.models.course import Course  # noqa: F401
from app.models.lesson import Lesson  # noqa: F401
from app.models.book import Book  # noqa: F401
from app.models.note import Note  # noqa: F401
from app.models.habit import Habit  # noqa: F401
from app.models.habit_log import HabitLog  # noqa: F401
from app.models.goal import Goal  # noqa: F401
