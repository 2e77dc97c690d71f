"""Report generator orchestration."""

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from secscope.errors import DependencyError
from secscope.modules.store import Store

from .aggregator import build_report
from .models import Report
from .renderer import render_report

logger = logging.getLogger(__name__)

DEFAULT_AUTHORIZED_BY = "Security Analyst"


@dataclass
class GeneratedReport:
    """Result of one report request."""

    report_id: str | None
    report: Report | str
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        body = self.report.to_dict() if isinstance(self.report, Report) else self.report
        return {"reportId": self.report_id, "report": body, "metadata": dict(self.metadata)}


class ReportGenerator:
    """Builds, renders and snapshots vulnerability reports for stored scans."""

    def __init__(self, store: Store):
        self.store = store

    def generate(
        self,
        scan_id: str,
        format: str = "json",
        authorized_by: str = DEFAULT_AUTHORIZED_BY,
    ) -> GeneratedReport:
        """Generate a report for ``scan_id`` and persist a snapshot of it."""
        logger.info("Generating vulnerability report for scan: %s", scan_id)
        scan = self.store.require_scan(scan_id)

        try:
            vulnerabilities = self.store.list_vulnerabilities(scan_id)
        except DependencyError as exc:
            raise DependencyError("Failed to fetch vulnerabilities") from exc

        try:
            payload_tests = self.store.list_payload_tests([v.id for v in vulnerabilities])
        except DependencyError:
            logger.warning("Payload tests unavailable for scan %s", scan_id, exc_info=True)
            payload_tests = []

        generated_at = datetime.now(UTC)
        report = build_report(
            scan.to_record(),
            [v.to_record() for v in vulnerabilities],
            [t.to_record() for t in payload_tests],
            authorized_by=authorized_by,
            generated_at=generated_at,
        )
        rendered = render_report(report, format)

        report_id = self._snapshot(scan, report.title, authorized_by, rendered, format)
        return GeneratedReport(
            report_id=report_id,
            report=rendered,
            metadata={
                "scanId": scan_id,
                "target": scan.target,
                "generatedBy": authorized_by,
                "generatedAt": generated_at.isoformat(),
                "format": format,
            },
        )

    def _snapshot(
        self,
        scan: Any,
        title: str,
        authorized_by: str,
        rendered: Report | str,
        format: str,
    ) -> str | None:
        data = rendered.to_dict() if isinstance(rendered, Report) else rendered
        try:
            snapshot = self.store.save_report(
                scan,
                title=title,
                generated_by=authorized_by,
                report_data=data,
                report_format=format,
            )
        except DependencyError:
            logger.error("Error storing report for scan %s", scan.id, exc_info=True)
            return None
        return snapshot.id
