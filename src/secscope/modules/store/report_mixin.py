"""Report snapshot persistence for Store."""

from typing import Any

from .db_models import Scan, VulnerabilityReport


class ReportMixin:
    """Provide append-only report snapshot storage."""

    def save_report(
        self,
        scan: Scan,
        title: str,
        generated_by: str,
        report_data: Any,
        report_format: str,
    ) -> VulnerabilityReport:
        """Store a new snapshot; earlier snapshots for the scan are left untouched."""
        snapshot = VulnerabilityReport(
            scan_id=scan.id,
            report_title=title,
            target=scan.target,
            generated_by=generated_by,
            scan_date=scan.started_at,
            total_vulnerabilities=scan.total_vulnerabilities or 0,
            critical_count=scan.critical_count or 0,
            high_count=scan.high_count or 0,
            medium_count=scan.medium_count or 0,
            low_count=scan.low_count or 0,
            report_data=report_data,
            report_format=report_format,
        )
        with self._guard("store report"):
            self.session.add(snapshot)
            self.session.commit()
        return snapshot

    def get_report(self, report_id: str) -> VulnerabilityReport | None:
        with self._guard("fetch report"):
            return self.session.get(VulnerabilityReport, report_id)

    def list_reports(self, scan_id: str | None = None, limit: int = 50) -> list[VulnerabilityReport]:
        """Return report snapshots, newest first."""
        with self._guard("list reports"):
            query = self.session.query(VulnerabilityReport)
            if scan_id:
                query = query.filter_by(scan_id=scan_id)
            return query.order_by(VulnerabilityReport.generated_at.desc()).limit(limit).all()
