"""Database Metadata — declarative Base and the columns every table shares."""
