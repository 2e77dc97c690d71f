"""SQLAlchemy storage layer for SecScope."""
