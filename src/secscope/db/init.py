"""Database initialization for SecScope."""

from pathlib import Path

from sqlalchemy import create_engine

from secscope.db.models import Base


def get_engine(db_path: Path):
    """Create an engine for the SQLite database at ``db_path``."""
    return create_engine(f"sqlite:///{db_path}", echo=False)


def init_db(db_path: Path) -> None:
    """Initialize the SQLite database with all tables."""
    # Ensure parent directory exists
    db_path.parent.mkdir(parents=True, exist_ok=True)

    engine = get_engine(db_path)
    Base.metadata.create_all(engine)
    engine.dispose()
