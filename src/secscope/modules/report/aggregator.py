"""Fold a scan and its findings into a Report aggregate.

Everything here is pure: callers fetch the records and persist the result.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from secscope.models import PayloadTestRecord, ScanRecord, VulnerabilityRecord

from .appendix import DISCLAIMER, METHODOLOGY, REFERENCES
from .models import (
    Appendix,
    EnrichedVulnerability,
    PayloadTestSummary,
    Report,
    RiskAssessment,
    ScanDetails,
    Statistics,
)
from .recommendations import overall_recommendations, recommend_for
from .scoring import calculate_risk_rating, round_half_up

ONGOING = "Ongoing"

BUSINESS_IMPACT = {
    "Critical": (
        "High risk of data breaches, service disruption, and regulatory compliance issues. "
        "Immediate action required."
    ),
    "High": (
        "Significant risk of security incidents that could impact business operations "
        "and reputation."
    ),
    "Medium": (
        "Moderate risk that should be addressed to maintain security posture and "
        "prevent escalation."
    ),
    "Low": (
        "Low risk to business operations, but continued monitoring and maintenance "
        "recommended."
    ),
}


def count_severities(vulnerabilities: Sequence[VulnerabilityRecord]) -> Statistics:
    """Count findings per tier; severity must match exactly as stored."""
    severities = [v.severity for v in vulnerabilities]
    return Statistics(
        total_vulnerabilities=len(vulnerabilities),
        critical_count=severities.count("critical"),
        high_count=severities.count("high"),
        medium_count=severities.count("medium"),
        low_count=severities.count("low"),
    )


def summarize_payload_tests(tests: Sequence[PayloadTestRecord]) -> PayloadTestSummary:
    statuses = [t.status for t in tests]
    return PayloadTestSummary(
        total_tests=len(tests),
        successful_tests=statuses.count("success"),
        failed_tests=statuses.count("failed"),
        blocked_tests=statuses.count("blocked"),
        tests=list(tests),
    )


def overall_risk(statistics: Statistics) -> str:
    """Highest tier present wins; this is not an average."""
    if statistics.critical_count > 0:
        return "Critical"
    if statistics.high_count > 0:
        return "High"
    if statistics.medium_count > 0:
        return "Medium"
    return "Low"


def assess_risk(vulnerabilities: Sequence[VulnerabilityRecord]) -> RiskAssessment:
    statistics = count_severities(vulnerabilities)
    risk = overall_risk(statistics)

    factors: list[str] = []
    if statistics.critical_count > 0:
        factors.append(
            f"{statistics.critical_count} critical vulnerabilities with potential for "
            "complete system compromise"
        )
    if statistics.high_count > 0:
        factors.append(
            f"{statistics.high_count} high-severity vulnerabilities requiring urgent attention"
        )
    if any(v.exploit_available for v in vulnerabilities):
        factors.append("Exploits are publicly available for some vulnerabilities")

    return RiskAssessment(
        overall_risk=risk,
        risk_factors=factors,
        business_impact=BUSINESS_IMPACT[risk],
    )


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored in UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def calculate_duration(start: datetime | None, end: datetime | None) -> str:
    if start is None or end is None:
        return ONGOING
    seconds = int(round_half_up((_as_utc(end) - _as_utc(start)).total_seconds()))
    return f"{seconds} seconds"


def executive_summary(scan: ScanRecord, statistics: Statistics) -> str:
    scan_date = scan.started_at.strftime("%Y-%m-%d") if scan.started_at else "an unknown date"
    total = statistics.total_vulnerabilities

    lines = [
        f"This vulnerability assessment was conducted on {scan.target} on {scan_date}.",
        f"The assessment identified {total} vulnerabilities, including "
        f"{statistics.critical_count} critical and {statistics.high_count} "
        "high-severity issues.",
    ]
    if statistics.critical_count > 0:
        lines.append("Critical vulnerabilities require immediate attention and remediation.")
    if statistics.high_count > 0:
        lines.append("High-severity vulnerabilities should be addressed as a priority.")
    if total == 0:
        lines.append("The target system appears to be secure with no vulnerabilities detected.")
    else:
        lines.append(
            "The target system requires security improvements to address the "
            "identified vulnerabilities."
        )
    return "\n".join(lines)


def enrich(vulnerability: VulnerabilityRecord) -> EnrichedVulnerability:
    return EnrichedVulnerability(
        record=vulnerability,
        risk_rating=calculate_risk_rating(
            vulnerability.severity,
            vulnerability.exploit_available,
            vulnerability.confidence_score,
        ),
        recommendations=recommend_for(vulnerability),
    )


def build_report(
    scan: ScanRecord,
    vulnerabilities: Sequence[VulnerabilityRecord],
    payload_tests: Sequence[PayloadTestRecord],
    authorized_by: str = "Security Analyst",
    generated_at: datetime | None = None,
) -> Report:
    """Build the full report aggregate for ``scan``."""
    statistics = count_severities(vulnerabilities)

    return Report(
        title=f"Vulnerability Assessment Report - {scan.target}",
        executive_summary=executive_summary(scan, statistics),
        scan_details=ScanDetails(
            target=scan.target,
            scan_type=scan.scan_type,
            start_time=scan.started_at,
            end_time=scan.completed_at,
            duration=calculate_duration(scan.started_at, scan.completed_at),
            authorized_by=authorized_by,
            generated_at=generated_at or datetime.now(UTC),
        ),
        statistics=statistics,
        vulnerabilities=[enrich(v) for v in vulnerabilities],
        payload_tests=summarize_payload_tests(payload_tests),
        risk_assessment=assess_risk(vulnerabilities),
        recommendations=overall_recommendations(vulnerabilities),
        appendix=Appendix(
            methodology=METHODOLOGY,
            references=list(REFERENCES),
            disclaimer=DISCLAIMER,
        ),
    )
