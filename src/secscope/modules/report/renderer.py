"""Format dispatch for generated reports."""

from .html_report import render_html
from .markdown_report import render_markdown
from .models import Report

RENDERERS = {
    "html": render_html,
    "markdown": render_markdown,
}


def render_report(report: Report, format: str = "json") -> Report | str:
    """Render ``report``; unknown formats fall back to the structured aggregate."""
    renderer = RENDERERS.get(format)
    if renderer is None:
        return report
    return renderer(report)
