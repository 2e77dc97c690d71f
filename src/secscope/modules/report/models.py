"""Report aggregate models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from secscope.models import PayloadTestRecord, VulnerabilityRecord

from .scoring import RiskRating


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass
class ScanDetails:
    target: str
    scan_type: str
    start_time: datetime | None
    end_time: datetime | None
    duration: str
    authorized_by: str
    generated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target,
            "scanType": self.scan_type,
            "startTime": _iso(self.start_time),
            "endTime": _iso(self.end_time),
            "duration": self.duration,
            "authorizedBy": self.authorized_by,
            "generatedAt": _iso(self.generated_at),
        }


@dataclass
class Statistics:
    total_vulnerabilities: int = 0
    critical_count: int = 0
    high_count: int = 0
    medium_count: int = 0
    low_count: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "totalVulnerabilities": self.total_vulnerabilities,
            "criticalCount": self.critical_count,
            "highCount": self.high_count,
            "mediumCount": self.medium_count,
            "lowCount": self.low_count,
        }


@dataclass
class EnrichedVulnerability:
    """A vulnerability plus its computed risk rating and remediation advice."""

    record: VulnerabilityRecord
    risk_rating: RiskRating
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        vuln = self.record
        return {
            "cve": vuln.cve,
            "title": vuln.title,
            "severity": vuln.severity,
            "description": vuln.description,
            "service": vuln.service_name,
            "port": vuln.port,
            "location": vuln.location.to_dict(),
            "exploitAvailable": vuln.exploit_available,
            "confidenceScore": vuln.confidence_score,
            "evidence": vuln.evidence,
            "affectedVersions": list(vuln.affected_versions),
            "exploitPayloads": [p.to_dict() for p in vuln.exploit_payloads],
            "discoveredAt": _iso(vuln.discovered_at),
            "riskRating": self.risk_rating.to_dict(),
            "recommendations": list(self.recommendations),
        }


@dataclass
class PayloadTestSummary:
    total_tests: int = 0
    successful_tests: int = 0
    failed_tests: int = 0
    blocked_tests: int = 0
    tests: list[PayloadTestRecord] = field(default_factory=list)

    def counts(self) -> dict[str, int]:
        return {
            "totalTests": self.total_tests,
            "successfulTests": self.successful_tests,
            "failedTests": self.failed_tests,
            "blockedTests": self.blocked_tests,
        }

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = self.counts()
        data["tests"] = [
            {
                "target": test.target_url,
                "payload": test.payload,
                "payloadType": test.payload_type,
                "status": test.status,
                "responseTime": test.response_time,
                "executedAt": _iso(test.executed_at),
                "vulnerability": test.vulnerability.to_dict() if test.vulnerability else None,
            }
            for test in self.tests
        ]
        return data


@dataclass
class RiskAssessment:
    overall_risk: str
    risk_factors: list[str] = field(default_factory=list)
    business_impact: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "overallRisk": self.overall_risk,
            "riskFactors": list(self.risk_factors),
            "businessImpact": self.business_impact,
        }


@dataclass
class Appendix:
    methodology: str
    references: list[str]
    disclaimer: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "methodology": self.methodology,
            "references": list(self.references),
            "disclaimer": self.disclaimer,
        }


@dataclass
class Report:
    """Aggregated assessment for one scan, ready for rendering."""

    title: str
    executive_summary: str
    scan_details: ScanDetails
    statistics: Statistics
    vulnerabilities: list[EnrichedVulnerability]
    payload_tests: PayloadTestSummary
    risk_assessment: RiskAssessment
    recommendations: list[str]
    appendix: Appendix

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "executiveSummary": self.executive_summary,
            "scanDetails": self.scan_details.to_dict(),
            "statistics": self.statistics.to_dict(),
            "vulnerabilities": [v.to_dict() for v in self.vulnerabilities],
            "payloadTests": self.payload_tests.to_dict(),
            "riskAssessment": self.risk_assessment.to_dict(),
            "recommendations": list(self.recommendations),
            "appendix": self.appendix.to_dict(),
        }
