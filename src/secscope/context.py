"""Process-level wiring: one store and classifier shared by the services."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from secscope.config import (
    DEFAULT_AUTHORIZED_BY,
    get_authorized_by,
    get_classifier_thresholds,
    get_project_db_path,
)
from secscope.modules.payloads import PayloadClassifier, PayloadLibrary, PayloadTester
from secscope.modules.report import ReportGenerator
from secscope.modules.store import Store


@dataclass
class AppContext:
    """Explicit dependencies handed to every entrypoint."""

    store: Store
    classifier: PayloadClassifier = field(default_factory=PayloadClassifier)
    authorized_by: str = DEFAULT_AUTHORIZED_BY

    @classmethod
    def for_project(cls, project_dir: Path) -> AppContext:
        """Build a context from a project's storage and configuration."""
        db_path = get_project_db_path(project_dir)
        if db_path is None:
            raise ValueError("Project storage not found. Run 'secscope init' first.")
        return cls(
            store=Store(db_path),
            classifier=PayloadClassifier(thresholds=get_classifier_thresholds(project_dir)),
            authorized_by=get_authorized_by(project_dir),
        )

    @property
    def reports(self) -> ReportGenerator:
        return ReportGenerator(self.store)

    @property
    def payload_tester(self) -> PayloadTester:
        return PayloadTester(self.store, self.classifier)

    @property
    def library(self) -> PayloadLibrary:
        return PayloadLibrary(self.store)

    def close(self) -> None:
        self.store.close()
