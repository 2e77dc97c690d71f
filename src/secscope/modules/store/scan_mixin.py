"""Scan and vulnerability operations for Store."""

from datetime import UTC, datetime

from secscope.errors import NotFoundError, ValidationError
from secscope.models import SEVERITIES

from .db_models import Scan, Vulnerability

SEVERITY_RANK = {severity: rank for rank, severity in enumerate(SEVERITIES)}


class ScanMixin:
    """Provide scan lifecycle and vulnerability record methods."""

    def create_scan(
        self,
        target: str,
        scan_type: str = "port",
        created_by: str = "",
        started_at: datetime | None = None,
        status: str = "running",
        scan_data: dict | None = None,
    ) -> Scan:
        """Create a new scan record."""
        if not target:
            raise ValidationError("Scan target is required")

        scan = Scan(
            target=target,
            scan_type=scan_type,
            created_by=created_by,
            status=status,
            scan_data=scan_data,
            started_at=started_at or datetime.now(UTC),
        )
        with self._guard("create scan"):
            self.session.add(scan)
            self.session.commit()
        return scan

    def get_scan(self, scan_id: str) -> Scan | None:
        """Return the scan with ``scan_id`` or None."""
        with self._guard("fetch scan"):
            return self.session.get(Scan, scan_id)

    def require_scan(self, scan_id: str) -> Scan:
        """Return the scan with ``scan_id`` or raise NotFoundError."""
        scan = self.get_scan(scan_id)
        if scan is None:
            raise NotFoundError("Scan not found")
        return scan

    def list_scans(self, limit: int = 50) -> list[Scan]:
        """Return the most recently started scans."""
        with self._guard("list scans"):
            return (
                self.session.query(Scan).order_by(Scan.started_at.desc()).limit(limit).all()
            )

    def add_vulnerability(
        self,
        scan_id: str,
        cve: str,
        title: str,
        severity: str,
        description: str = "",
        confidence_score: float = 100,
        exploit_available: bool = False,
        service_name: str = "",
        port: int = 0,
        location_url: str = "",
        location_path: str = "",
        location_parameter: str | None = None,
        location_method: str = "GET",
        affected_versions: list[str] | None = None,
        exploit_payloads: list[dict] | None = None,
        evidence: str | None = None,
        discovered_at: datetime | None = None,
    ) -> Vulnerability:
        """Attach a vulnerability to a running scan and refresh its counters."""
        scan = self.require_scan(scan_id)
        if scan.completed_at is not None:
            raise ValidationError(f"Scan {scan_id} is completed and can no longer change")
        if severity not in SEVERITY_RANK:
            raise ValidationError(
                f"severity must be one of {', '.join(SEVERITIES)}, got '{severity}'"
            )
        if not 0 <= confidence_score <= 100:
            raise ValidationError("confidence_score must be between 0 and 100")

        vulnerability = Vulnerability(
            cve=cve,
            title=title,
            severity=severity,
            description=description,
            confidence_score=confidence_score,
            exploit_available=exploit_available,
            service_name=service_name,
            port=port,
            location_url=location_url,
            location_path=location_path,
            location_parameter=location_parameter,
            location_method=location_method,
            affected_versions=affected_versions or [],
            exploit_payloads=exploit_payloads or [],
            evidence=evidence,
            discovered_at=discovered_at or datetime.now(UTC),
        )
        with self._guard("store vulnerability"):
            scan.vulnerabilities.append(vulnerability)
            self._recount(scan)
            self.session.commit()
        return vulnerability

    def get_vulnerability(self, vulnerability_id: str) -> Vulnerability | None:
        with self._guard("fetch vulnerability"):
            return self.session.get(Vulnerability, vulnerability_id)

    def list_vulnerabilities(self, scan_id: str) -> list[Vulnerability]:
        """Return a scan's vulnerabilities, most severe first."""
        with self._guard("fetch vulnerabilities"):
            rows = (
                self.session.query(Vulnerability)
                .filter_by(scan_id=scan_id)
                .order_by(Vulnerability.discovered_at)
                .all()
            )
        return sorted(rows, key=lambda v: SEVERITY_RANK.get(v.severity, len(SEVERITY_RANK)))

    def complete_scan(self, scan_id: str, completed_at: datetime | None = None) -> Scan:
        """Mark a scan completed; it is immutable afterwards."""
        scan = self.require_scan(scan_id)
        if scan.completed_at is not None:
            raise ValidationError(f"Scan {scan_id} is already completed")

        with self._guard("complete scan"):
            scan.status = "completed"
            scan.progress = 100
            scan.completed_at = completed_at or datetime.now(UTC)
            self.session.commit()
        return scan

    def _recount(self, scan: Scan) -> None:
        counts = dict.fromkeys(SEVERITIES, 0)
        for vulnerability in scan.vulnerabilities:
            if vulnerability.severity in counts:
                counts[vulnerability.severity] += 1
        scan.critical_count = counts["critical"]
        scan.high_count = counts["high"]
        scan.medium_count = counts["medium"]
        scan.low_count = counts["low"]
        scan.total_vulnerabilities = len(scan.vulnerabilities)
