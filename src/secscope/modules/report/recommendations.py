"""Remediation advice per vulnerability and for the whole assessment."""

from collections.abc import Iterable

from secscope.models import VulnerabilityRecord

SEVERITY_ACTIONS: dict[str, tuple[str, ...]] = {
    "critical": (
        "Immediate patching required - treat as emergency",
        "Consider temporary workarounds or service isolation",
    ),
    "high": (
        "Apply security patches within 24-48 hours",
        "Monitor system logs for exploitation attempts",
    ),
    "medium": (
        "Schedule patching within the next maintenance window",
        "Implement additional monitoring if possible",
    ),
    "low": ("Address during regular maintenance cycles",),
}

SERVICE_ACTIONS: dict[str, tuple[str, ...]] = {
    "Apache": (
        "Update Apache to the latest stable version",
        "Review and harden Apache configuration",
    ),
    "MySQL": (
        "Update MySQL to the latest version",
        "Review database access controls and permissions",
    ),
}

BASELINE_RECOMMENDATIONS: tuple[str, ...] = (
    "Implement a regular vulnerability scanning schedule",
    "Establish a patch management process with defined SLAs",
    "Deploy security monitoring and incident response capabilities",
    "Conduct regular security awareness training for staff",
    "Implement network segmentation where possible",
    "Review and update security policies and procedures",
)

SERVICE_PROGRAM_RECOMMENDATIONS: dict[str, str] = {
    "Apache": "Harden web server configurations and implement WAF protection",
    "MySQL": "Implement database security best practices and access controls",
}


def recommend_for(vulnerability: VulnerabilityRecord) -> list[str]:
    """Severity-tier actions first, then any service-specific additions."""
    recommendations = list(SEVERITY_ACTIONS.get(vulnerability.severity, ()))
    recommendations.extend(SERVICE_ACTIONS.get(vulnerability.service_name, ()))
    return recommendations


def overall_recommendations(vulnerabilities: Iterable[VulnerabilityRecord]) -> list[str]:
    """Program-level advice, extended for services present in the findings."""
    services = {v.service_name for v in vulnerabilities}
    recommendations = list(BASELINE_RECOMMENDATIONS)
    for service, advice in SERVICE_PROGRAM_RECOMMENDATIONS.items():
        if service in services:
            recommendations.append(advice)
    return recommendations
