"""Database Infrastructure — SQLAlchemy declarative Base for the SQL backend."""
