"""HTML report rendering."""

from .models import EnrichedVulnerability, Report

SEVERITY_COLORS = {
    "critical": "#dc3545",
    "high": "#fd7e14",
    "medium": "#ffc107",
    "low": "#28a745",
}


def _severity_styles() -> str:
    return "\n".join(
        f"        .severity-{name} {{ color: {color}; font-weight: bold; }}"
        for name, color in SEVERITY_COLORS.items()
    )


def render_vulnerability_html(vuln: EnrichedVulnerability) -> str:
    """Render one vulnerability card."""
    record = vuln.record
    return f"""
    <div class="vuln-card">
        <h3 class="severity-{record.severity}">{record.title} ({record.cve})</h3>
        <p><strong>Severity:</strong> <span class="severity-{record.severity}">{record.severity.upper()}</span></p>
        <p><strong>Service:</strong> {record.service_name}:{record.port}</p>
        <p><strong>Description:</strong> {record.description}</p>
        <p><strong>Risk Rating:</strong> {vuln.risk_rating.score}/10 ({vuln.risk_rating.rating})</p>
    </div>
"""


def render_html(report: Report) -> str:
    """Render a self-contained HTML document; field values are not escaped."""
    details = report.scan_details
    stats = report.statistics
    cards = "".join(render_vulnerability_html(v) for v in report.vulnerabilities)
    if not report.vulnerabilities:
        cards = "    <p>No vulnerabilities recorded.</p>\n"

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{report.title}</title>
    <style>
        body {{ font-family: Arial, sans-serif; margin: 40px; }}
        .header {{ border-bottom: 2px solid #333; padding-bottom: 20px; }}
{_severity_styles()}
        .vuln-card {{ border: 1px solid #ddd; margin: 10px 0; padding: 15px; border-radius: 5px; }}
        table {{ border-collapse: collapse; width: 100%; }}
        th, td {{ border: 1px solid #ddd; padding: 8px; text-align: left; }}
        th {{ background-color: #f2f2f2; }}
    </style>
</head>
<body>
    <div class="header">
        <h1>{report.title}</h1>
        <p><strong>Generated:</strong> {details.generated_at.strftime("%Y-%m-%d %H:%M:%S")}</p>
        <p><strong>Authorized by:</strong> {details.authorized_by}</p>
        <p><strong>Target:</strong> {details.target}</p>
    </div>

    <h2>Executive Summary</h2>
    <p>{report.executive_summary}</p>

    <h2>Vulnerability Statistics</h2>
    <table>
        <tr><th>Severity</th><th>Count</th></tr>
        <tr><td class="severity-critical">Critical</td><td>{stats.critical_count}</td></tr>
        <tr><td class="severity-high">High</td><td>{stats.high_count}</td></tr>
        <tr><td class="severity-medium">Medium</td><td>{stats.medium_count}</td></tr>
        <tr><td class="severity-low">Low</td><td>{stats.low_count}</td></tr>
    </table>

    <h2>Vulnerabilities</h2>
{cards}
</body>
</html>
"""
