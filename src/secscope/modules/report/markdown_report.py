"""Markdown report rendering."""

from .models import EnrichedVulnerability, Report


def _bullets(lines: list[str]) -> str:
    return "\n".join(f"- {line}" for line in lines)


def render_vulnerability_markdown(vuln: EnrichedVulnerability) -> str:
    """Render one vulnerability section."""
    record = vuln.record
    return f"""
### {record.title} ({record.cve})

- **Severity:** {record.severity}
- **Service:** {record.service_name}:{record.port}
- **Risk Rating:** {vuln.risk_rating.score}/10 ({vuln.risk_rating.rating})
- **Description:** {record.description}
- **Exploit Available:** {"Yes" if record.exploit_available else "No"}

**Recommendations:**
{_bullets(vuln.recommendations)}
"""


def render_markdown(report: Report) -> str:
    details = report.scan_details
    stats = report.statistics
    risk = report.risk_assessment
    sections = "\n".join(render_vulnerability_markdown(v) for v in report.vulnerabilities)

    return f"""# {report.title}

**Generated:** {details.generated_at.strftime("%Y-%m-%d %H:%M:%S")}  
**Authorized by:** {details.authorized_by}  
**Target:** {details.target}

## Executive Summary

{report.executive_summary}

## Vulnerability Statistics

| Severity | Count |
|----------|-------|
| Critical | {stats.critical_count} |
| High | {stats.high_count} |
| Medium | {stats.medium_count} |
| Low | {stats.low_count} |

## Risk Assessment

**Overall Risk:** {risk.overall_risk}

{_bullets(risk.risk_factors)}

## Vulnerabilities
{sections}
## Overall Recommendations

{_bullets(report.recommendations)}

## Disclaimer

{report.appendix.disclaimer}
"""
