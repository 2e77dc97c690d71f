"""Vulnerability report engine for SecScope."""

from .aggregator import build_report
from .generator import GeneratedReport, ReportGenerator
from .models import Report
from .renderer import render_report
from .scoring import RiskRating, calculate_risk_rating

__all__ = [
    "GeneratedReport",
    "Report",
    "ReportGenerator",
    "RiskRating",
    "build_report",
    "calculate_risk_rating",
    "render_report",
]
