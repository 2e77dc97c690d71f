"""Database models for SecScope using SQLAlchemy."""

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import declarative_base, relationship

from secscope.models import (
    ExploitPayload,
    Location,
    PayloadTestRecord,
    ScanRecord,
    VulnerabilityRecord,
    VulnerabilityRef,
)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _new_id() -> str:
    return str(uuid4())


Base = declarative_base()


class Scan(Base):
    """A unit of assessment work against one target."""

    __tablename__ = "scans"

    id = Column(String, primary_key=True, default=_new_id)
    target = Column(String, nullable=False)
    scan_type = Column(String, default="port")
    status = Column(String, default="pending")  # pending, running, completed, failed
    progress = Column(Integer, default=0)
    created_by = Column(String, default="")
    scan_data = Column(JSON, nullable=True)

    critical_count = Column(Integer, default=0)
    high_count = Column(Integer, default=0)
    medium_count = Column(Integer, default=0)
    low_count = Column(Integer, default=0)
    total_vulnerabilities = Column(Integer, default=0)

    started_at = Column(DateTime(timezone=True), default=_utc_now)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    vulnerabilities = relationship(
        "Vulnerability", back_populates="scan", cascade="all, delete-orphan"
    )
    reports = relationship(
        "VulnerabilityReport", back_populates="scan", cascade="all, delete-orphan"
    )

    def to_record(self) -> ScanRecord:
        return ScanRecord(
            id=self.id,
            target=self.target,
            scan_type=self.scan_type or "port",
            status=self.status or "pending",
            started_at=self.started_at,
            completed_at=self.completed_at,
            critical_count=self.critical_count or 0,
            high_count=self.high_count or 0,
            medium_count=self.medium_count or 0,
            low_count=self.low_count or 0,
            total_vulnerabilities=self.total_vulnerabilities or 0,
            progress=self.progress or 0,
            created_by=self.created_by or "",
        )


class Vulnerability(Base):
    """A weakness discovered during a scan."""

    __tablename__ = "vulnerabilities"

    id = Column(String, primary_key=True, default=_new_id)
    scan_id = Column(String, ForeignKey("scans.id"), nullable=False)

    cve = Column(String, nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, default="")
    severity = Column(String, nullable=False)  # critical, high, medium, low
    confidence_score = Column(Float, default=100)
    exploit_available = Column(Boolean, default=False)

    service_name = Column(String, default="")
    port = Column(Integer, default=0)
    location_url = Column(String, default="")
    location_path = Column(String, default="")
    location_parameter = Column(String, nullable=True)
    location_method = Column(String, default="GET")

    affected_versions = Column(JSON, nullable=True)
    exploit_payloads = Column(JSON, nullable=True)
    evidence = Column(Text, nullable=True)

    discovered_at = Column(DateTime(timezone=True), default=_utc_now)

    # Relationships
    scan = relationship("Scan", back_populates="vulnerabilities")
    payload_tests = relationship("PayloadTest", back_populates="vulnerability")

    def to_record(self) -> VulnerabilityRecord:
        return VulnerabilityRecord(
            id=self.id,
            scan_id=self.scan_id,
            cve=self.cve,
            title=self.title,
            severity=self.severity,
            description=self.description or "",
            confidence_score=self.confidence_score if self.confidence_score is not None else 100,
            exploit_available=bool(self.exploit_available),
            service_name=self.service_name or "",
            port=self.port or 0,
            location=Location(
                url=self.location_url or "",
                path=self.location_path or "",
                parameter=self.location_parameter,
                method=self.location_method or "GET",
            ),
            affected_versions=list(self.affected_versions or []),
            discovered_at=self.discovered_at,
            evidence=self.evidence,
            exploit_payloads=[ExploitPayload.from_dict(p) for p in self.exploit_payloads or []],
        )


class PayloadTest(Base):
    """Outcome of one payload classification run."""

    __tablename__ = "payload_tests"

    id = Column(String, primary_key=True, default=_new_id)
    vulnerability_id = Column(String, ForeignKey("vulnerabilities.id"), nullable=True)

    target_url = Column(String, nullable=False)
    payload = Column(Text, nullable=False)
    payload_type = Column(String, nullable=False)
    status = Column(String, nullable=False)  # success, failed, blocked
    response_data = Column(Text, nullable=True)
    response_time = Column(Integer, nullable=True)  # milliseconds
    executed_by = Column(String, default="payload-tester")
    executed_at = Column(DateTime(timezone=True), default=_utc_now)

    # Relationship
    vulnerability = relationship("Vulnerability", back_populates="payload_tests")

    def to_record(self) -> PayloadTestRecord:
        ref = None
        if self.vulnerability is not None:
            ref = VulnerabilityRef(
                cve=self.vulnerability.cve,
                title=self.vulnerability.title,
                severity=self.vulnerability.severity,
            )
        return PayloadTestRecord(
            id=self.id,
            target_url=self.target_url,
            payload=self.payload,
            payload_type=self.payload_type,
            status=self.status,
            response_data=self.response_data,
            response_time=self.response_time,
            executed_by=self.executed_by or "payload-tester",
            executed_at=self.executed_at,
            vulnerability_id=self.vulnerability_id,
            vulnerability=ref,
        )


class PayloadLibraryEntry(Base):
    """A reusable payload collected from a public source."""

    __tablename__ = "payload_library"

    id = Column(String, primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    type = Column(String, nullable=False)
    payload = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    source = Column(String, nullable=False)
    source_url = Column(String, nullable=True)
    category = Column(String, nullable=False)

    created_at = Column(DateTime(timezone=True), default=_utc_now)
    updated_at = Column(DateTime(timezone=True), default=_utc_now, onupdate=_utc_now)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "payload": self.payload,
            "description": self.description,
            "source": self.source,
            "source_url": self.source_url,
            "category": self.category,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


class VulnerabilityReport(Base):
    """Immutable snapshot of a generated report."""

    __tablename__ = "vulnerability_reports"

    id = Column(String, primary_key=True, default=_new_id)
    scan_id = Column(String, ForeignKey("scans.id"), nullable=False)

    report_title = Column(String, nullable=False)
    target = Column(String, nullable=False)
    generated_by = Column(String, nullable=False)
    generated_at = Column(DateTime(timezone=True), default=_utc_now)
    scan_date = Column(DateTime(timezone=True), nullable=True)

    total_vulnerabilities = Column(Integer, default=0)
    critical_count = Column(Integer, default=0)
    high_count = Column(Integer, default=0)
    medium_count = Column(Integer, default=0)
    low_count = Column(Integer, default=0)

    report_data = Column(JSON, nullable=False)  # dict for json, str for html/markdown
    report_format = Column(String, default="json")

    # Relationship
    scan = relationship("Scan", back_populates="reports")
