"""Main Store class."""

from pathlib import Path

from sqlalchemy.orm import sessionmaker

from secscope.db.init import get_engine, init_db

from .base import StoreBase
from .library_mixin import LibraryMixin
from .payload_test_mixin import PayloadTestMixin
from .report_mixin import ReportMixin
from .scan_mixin import ScanMixin


class Store(ScanMixin, PayloadTestMixin, LibraryMixin, ReportMixin, StoreBase):
    """Owns the database session for one SecScope project."""

    def __init__(self, db_path: Path):
        self.db_path = db_path
        init_db(self.db_path)
        self.engine = get_engine(self.db_path)
        session_factory = sessionmaker(bind=self.engine)
        self.session = session_factory()

    def close(self) -> None:
        """Close the session and release the engine's connections."""
        self.session.close()
        self.engine.dispose()
