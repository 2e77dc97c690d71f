"""Plain records passed between the store and the report engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

SEVERITIES = ("critical", "high", "medium", "low")
VERDICTS = ("success", "failed", "blocked")


@dataclass(frozen=True, slots=True)
class ExploitPayload:
    """A payload attached to a vulnerability record."""

    type: str
    payload: str
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExploitPayload:
        return cls(
            type=str(data.get("type", "")),
            payload=str(data.get("payload", "")),
            description=str(data.get("description", "")),
        )

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type, "payload": self.payload, "description": self.description}


@dataclass(frozen=True, slots=True)
class Location:
    """Where a vulnerability was observed."""

    url: str = ""
    path: str = ""
    parameter: str | None = None
    method: str = "GET"

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "path": self.path,
            "parameter": self.parameter,
            "method": self.method,
        }


@dataclass(frozen=True, slots=True)
class ScanRecord:
    id: str
    target: str
    scan_type: str = "port"
    status: str = "pending"
    started_at: datetime | None = None
    completed_at: datetime | None = None
    critical_count: int = 0
    high_count: int = 0
    medium_count: int = 0
    low_count: int = 0
    total_vulnerabilities: int = 0
    progress: int = 0
    created_by: str = ""


@dataclass(frozen=True, slots=True)
class VulnerabilityRecord:
    id: str
    scan_id: str
    cve: str
    title: str
    severity: str
    description: str = ""
    confidence_score: float = 100
    exploit_available: bool = False
    service_name: str = ""
    port: int = 0
    location: Location = field(default_factory=Location)
    affected_versions: list[str] = field(default_factory=list)
    discovered_at: datetime | None = None
    evidence: str | None = None
    exploit_payloads: list[ExploitPayload] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class VulnerabilityRef:
    """The owning vulnerability's identity, joined onto a payload test."""

    cve: str
    title: str
    severity: str

    def to_dict(self) -> dict[str, str]:
        return {"cve": self.cve, "title": self.title, "severity": self.severity}


@dataclass(frozen=True, slots=True)
class PayloadTestRecord:
    id: str
    target_url: str
    payload: str
    payload_type: str
    status: str
    response_data: str | None = None
    response_time: int | None = None
    executed_by: str = "payload-tester"
    executed_at: datetime | None = None
    vulnerability_id: str | None = None
    vulnerability: VulnerabilityRef | None = None
