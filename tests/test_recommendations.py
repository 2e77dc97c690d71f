"""Tests for remediation recommendations."""

from conftest import make_vulnerability

from secscope.modules.report.recommendations import (
    BASELINE_RECOMMENDATIONS,
    overall_recommendations,
    recommend_for,
)


class TestRecommendFor:
    def test_critical_apache(self):
        vuln = make_vulnerability("critical", service_name="Apache")
        assert recommend_for(vuln) == [
            "Immediate patching required - treat as emergency",
            "Consider temporary workarounds or service isolation",
            "Update Apache to the latest stable version",
            "Review and harden Apache configuration",
        ]

    def test_low_unknown_service(self):
        vuln = make_vulnerability("low", service_name="Telnet")
        assert recommend_for(vuln) == ["Address during regular maintenance cycles"]

    def test_mysql_actions_follow_severity_actions(self):
        vuln = make_vulnerability("medium", service_name="MySQL")
        actions = recommend_for(vuln)
        assert actions[0] == "Schedule patching within the next maintenance window"
        assert actions[-1] == "Review database access controls and permissions"

    def test_unknown_severity_gets_no_tier_actions(self):
        vuln = make_vulnerability("informational", service_name="Telnet")
        assert recommend_for(vuln) == []


class TestOverallRecommendations:
    def test_baseline_only(self):
        assert overall_recommendations([]) == list(BASELINE_RECOMMENDATIONS)
        assert len(BASELINE_RECOMMENDATIONS) == 6

    def test_service_additions_in_fixed_order(self):
        vulns = [
            make_vulnerability("low", service_name="MySQL"),
            make_vulnerability("high", service_name="Apache"),
            make_vulnerability("high", service_name="Apache"),
        ]
        result = overall_recommendations(vulns)
        assert result[6:] == [
            "Harden web server configurations and implement WAF protection",
            "Implement database security best practices and access controls",
        ]
