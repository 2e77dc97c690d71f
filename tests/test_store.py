"""Tests for the SQLAlchemy-backed store."""

from datetime import UTC, datetime

import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from secscope.db.init import get_engine, init_db
from secscope.errors import DependencyError, NotFoundError, ValidationError


class TestDatabaseInit:
    def test_creates_tables(self, db_path):
        init_db(db_path)
        engine = get_engine(db_path)
        try:
            tables = set(inspect(engine).get_table_names())
        finally:
            engine.dispose()
        assert {
            "scans",
            "vulnerabilities",
            "payload_tests",
            "payload_library",
            "vulnerability_reports",
        } <= tables

    def test_creates_parent_directories(self, temp_dir):
        db_path = temp_dir / "nested" / "deeper" / "secscope.db"
        init_db(db_path)
        assert db_path.exists()


class TestScans:
    def test_create_scan(self, store):
        scan = store.create_scan("example.com", scan_type="vulnerability")
        assert scan.id
        assert scan.status == "running"
        assert scan.total_vulnerabilities == 0

    def test_target_required(self, store):
        with pytest.raises(ValidationError):
            store.create_scan("")

    def test_require_missing_scan(self, store):
        with pytest.raises(NotFoundError, match="Scan not found"):
            store.require_scan("nope")

    def test_counters_follow_vulnerabilities(self, store, sample_scan):
        scan = store.require_scan(sample_scan.id)
        assert scan.critical_count == 1
        assert scan.medium_count == 2
        assert scan.high_count == 0
        assert scan.total_vulnerabilities == 3

    def test_completed_scan_is_immutable(self, store, sample_scan):
        assert store.require_scan(sample_scan.id).status == "completed"
        with pytest.raises(ValidationError):
            store.add_vulnerability(sample_scan.id, cve="CVE-1", title="x", severity="low")
        with pytest.raises(ValidationError):
            store.complete_scan(sample_scan.id)

    def test_rejects_unknown_severity(self, store):
        scan = store.create_scan("example.com")
        with pytest.raises(ValidationError):
            store.add_vulnerability(scan.id, cve="CVE-1", title="x", severity="severe")

    def test_rejects_confidence_out_of_range(self, store):
        scan = store.create_scan("example.com")
        with pytest.raises(ValidationError):
            store.add_vulnerability(
                scan.id, cve="CVE-1", title="x", severity="low", confidence_score=101
            )

    def test_vulnerabilities_most_severe_first(self, store):
        scan = store.create_scan("example.com")
        for severity in ("low", "critical", "medium", "high"):
            store.add_vulnerability(scan.id, cve=f"CVE-{severity}", title=severity, severity=severity)
        severities = [v.severity for v in store.list_vulnerabilities(scan.id)]
        assert severities == ["critical", "high", "medium", "low"]

    def test_vulnerability_record(self, store, sample_scan):
        vuln = store.list_vulnerabilities(sample_scan.id)[0]
        record = vuln.to_record()
        assert record.cve == "CVE-2021-41773"
        assert record.location.path == "/cgi-bin/"
        assert record.exploit_payloads == []

    def test_list_scans_newest_first(self, store):
        store.create_scan("old.example", started_at=datetime(2023, 1, 1, tzinfo=UTC))
        store.create_scan("new.example", started_at=datetime(2024, 1, 1, tzinfo=UTC))
        assert [s.target for s in store.list_scans()] == ["new.example", "old.example"]

    def test_storage_failure_raises_dependency_error(self, store, monkeypatch):
        def broken_query(*args):
            raise SQLAlchemyError("database is locked")

        monkeypatch.setattr(store.session, "query", broken_query)
        with pytest.raises(DependencyError, match="Failed to list scans: database is locked"):
            store.list_scans()


class TestPayloadTests:
    def test_list_by_vulnerability(self, store, sample_scan):
        vuln = store.list_vulnerabilities(sample_scan.id)[0]
        store.record_payload_test(
            target_url="http://t", payload="'", payload_type="sql-injection",
            status="blocked", vulnerability_id=vuln.id,
        )
        store.record_payload_test(
            target_url="http://t", payload="x", payload_type="xss", status="failed"
        )

        tests = store.list_payload_tests([vuln.id])
        assert len(tests) == 1
        assert tests[0].to_record().vulnerability.cve == "CVE-2021-41773"
        assert len(store.recent_payload_tests()) == 2

    def test_empty_id_list(self, store):
        assert store.list_payload_tests([]) == []

    def test_rejects_unknown_status(self, store):
        with pytest.raises(ValidationError):
            store.record_payload_test(
                target_url="http://t", payload="x", payload_type="xss", status="partial"
            )


class TestReports:
    def test_snapshots_are_append_only(self, store, sample_scan):
        scan = store.require_scan(sample_scan.id)
        first = store.save_report(scan, "t", "Alice", {"a": 1}, "json")
        second = store.save_report(scan, "t", "Bob", "# md", "markdown")
        assert first.id != second.id
        assert first.critical_count == 1
        assert {r.id for r in store.list_reports(scan_id=scan.id)} == {first.id, second.id}
        assert store.get_report(first.id).report_data == {"a": 1}
