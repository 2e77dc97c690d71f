"""Tests for report aggregation."""

from datetime import UTC, datetime

from conftest import make_scan_record, make_vulnerability

from secscope.models import PayloadTestRecord, VulnerabilityRef
from secscope.modules.report import build_report
from secscope.modules.report.aggregator import (
    assess_risk,
    calculate_duration,
    count_severities,
    executive_summary,
    summarize_payload_tests,
)

EXPLOIT_FACTOR = "Exploits are publicly available for some vulnerabilities"


class TestDuration:
    def test_seconds_between_start_and_end(self):
        start = datetime(2024, 1, 1, 0, 0, 0, tzinfo=UTC)
        end = datetime(2024, 1, 1, 0, 1, 40, tzinfo=UTC)
        assert calculate_duration(start, end) == "100 seconds"

    def test_missing_end_is_ongoing(self):
        assert calculate_duration(datetime(2024, 1, 1, tzinfo=UTC), None) == "Ongoing"

    def test_naive_timestamps_treated_as_utc(self):
        start = datetime(2024, 1, 1, 0, 0, 0)
        end = datetime(2024, 1, 1, 0, 0, 5, tzinfo=UTC)
        assert calculate_duration(start, end) == "5 seconds"

    def test_half_second_rounds_up(self):
        start = datetime(2024, 1, 1, 0, 0, 0, tzinfo=UTC)
        end = datetime(2024, 1, 1, 0, 0, 2, 500000, tzinfo=UTC)
        assert calculate_duration(start, end) == "3 seconds"


class TestRiskAssessment:
    def test_single_critical_dominates(self):
        vulns = [make_vulnerability("low") for _ in range(5)] + [make_vulnerability("critical")]
        assert assess_risk(vulns).overall_risk == "Critical"

    def test_high_without_critical(self):
        assert assess_risk([make_vulnerability("high")]).overall_risk == "High"

    def test_no_findings_is_low(self):
        risk = assess_risk([])
        assert risk.overall_risk == "Low"
        assert risk.risk_factors == []

    def test_exploit_factor_absent_without_exploits(self):
        risk = assess_risk([make_vulnerability("medium")])
        assert EXPLOIT_FACTOR not in risk.risk_factors

    def test_exploit_factor_listed_once(self):
        vulns = [
            make_vulnerability("medium", exploit_available=True),
            make_vulnerability("low", exploit_available=True),
        ]
        assert assess_risk(vulns).risk_factors.count(EXPLOIT_FACTOR) == 1

    def test_factor_sentences(self):
        vulns = [make_vulnerability("critical"), make_vulnerability("high")]
        assert assess_risk(vulns).risk_factors == [
            "1 critical vulnerabilities with potential for complete system compromise",
            "1 high-severity vulnerabilities requiring urgent attention",
        ]


class TestCounting:
    def test_unknown_severity_counts_only_in_total(self):
        stats = count_severities([make_vulnerability("Critical"), make_vulnerability("low")])
        assert stats.total_vulnerabilities == 2
        assert stats.critical_count == 0
        assert stats.low_count == 1

    def test_payload_test_summary(self):
        tests = [
            PayloadTestRecord(
                id=str(i),
                target_url="http://t",
                payload="'",
                payload_type="sql-injection",
                status=status,
                vulnerability=VulnerabilityRef("CVE-1", "t", "high"),
            )
            for i, status in enumerate(["success", "failed", "blocked", "blocked"])
        ]
        assert summarize_payload_tests(tests).counts() == {
            "totalTests": 4,
            "successfulTests": 1,
            "failedTests": 1,
            "blockedTests": 2,
        }


class TestExecutiveSummary:
    def test_clean_target(self):
        scan = make_scan_record()
        summary = executive_summary(scan, count_severities([]))
        assert "on 10.0.0.5 on 2024-01-01" in summary
        assert "appears to be secure" in summary

    def test_findings_need_attention(self):
        vulns = [make_vulnerability("critical")]
        summary = executive_summary(make_scan_record(), count_severities(vulns))
        assert "Critical vulnerabilities require immediate attention" in summary
        assert "requires security improvements" in summary


class TestBuildReport:
    def test_one_critical_two_medium_no_tests(self):
        vulns = [
            make_vulnerability("critical", id="v1"),
            make_vulnerability("medium", id="v2"),
            make_vulnerability("medium", id="v3"),
        ]
        report = build_report(make_scan_record(), vulns, [])

        assert report.statistics.to_dict() == {
            "totalVulnerabilities": 3,
            "criticalCount": 1,
            "highCount": 0,
            "mediumCount": 2,
            "lowCount": 0,
        }
        assert report.risk_assessment.overall_risk == "Critical"
        assert report.risk_assessment.risk_factors == [
            "1 critical vulnerabilities with potential for complete system compromise"
        ]
        assert report.payload_tests.counts() == {
            "totalTests": 0,
            "successfulTests": 0,
            "failedTests": 0,
            "blockedTests": 0,
        }

    def test_report_fields(self):
        generated_at = datetime(2024, 2, 1, tzinfo=UTC)
        report = build_report(
            make_scan_record(),
            [make_vulnerability("high", exploit_available=True)],
            [],
            authorized_by="Alice",
            generated_at=generated_at,
        )
        assert report.title == "Vulnerability Assessment Report - 10.0.0.5"
        assert report.scan_details.duration == "100 seconds"
        assert report.scan_details.authorized_by == "Alice"
        assert report.vulnerabilities[0].risk_rating.score == 8.0

        data = report.to_dict()
        assert data["scanDetails"]["generatedAt"] == generated_at.isoformat()
        assert data["vulnerabilities"][0]["riskRating"] == {"score": 8.0, "rating": "High"}
        assert data["appendix"]["references"]
        assert len(data["recommendations"]) == 6
