"""Tests for CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from secscope.cli import app, get_project_dir, require_project
from secscope.modules.store import Store

SAMPLE = Path(__file__).resolve().parent.parent / "samples" / "demo_scan.yml"

runner = CliRunner()


@pytest.fixture
def cli_project(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An initialized project that is also the working directory."""
    project_path = temp_dir / "engagement"
    project_path.mkdir()
    monkeypatch.chdir(project_path)
    result = runner.invoke(app, ["init"])
    assert result.exit_code == 0, result.output
    return project_path


def _only_scan_id(project_path: Path) -> str:
    store = Store(project_path / ".secscope" / "secscope.db")
    try:
        return store.list_scans()[0].id
    finally:
        store.close()


class TestProjectDiscovery:
    def test_finds_project_from_subdirectory(self, project_dir: Path, monkeypatch):
        nested = project_dir / "reports"
        monkeypatch.chdir(nested)
        assert get_project_dir() == project_dir

    def test_none_outside_project(self, temp_dir: Path, monkeypatch):
        monkeypatch.chdir(temp_dir)
        assert get_project_dir() is None

    def test_require_project_exits(self, temp_dir: Path, monkeypatch):
        import typer

        monkeypatch.chdir(temp_dir)
        with pytest.raises(typer.Exit):
            require_project()


class TestInit:
    def test_creates_storage(self, cli_project: Path):
        assert (cli_project / ".secscope" / "secscope.db").exists()
        assert (cli_project / ".secscope" / ".env").exists()
        assert (cli_project / "reports").is_dir()

    def test_second_init_is_a_no_op(self, cli_project: Path):
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert "already a SecScope project" in result.output


class TestCommandsOutsideProject:
    @pytest.mark.parametrize("args", [["scans"], ["reports"], ["library", "list"]])
    def test_exit_with_error(self, temp_dir: Path, monkeypatch, args):
        monkeypatch.chdir(temp_dir)
        result = runner.invoke(app, args)
        assert result.exit_code == 1
        assert "Not in a secscope project" in result.output

    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "SecScope" in result.output


class TestScanCommands:
    def test_import_and_show(self, cli_project: Path):
        result = runner.invoke(app, ["scan-import", str(SAMPLE)])
        assert result.exit_code == 0, result.output
        assert "Imported scan" in result.output
        assert "3 vulnerabilities" in result.output

        scan_id = _only_scan_id(cli_project)
        shown = runner.invoke(app, ["scan-show", scan_id])
        assert shown.exit_code == 0
        assert "CRITICAL" in shown.output

        listed = runner.invoke(app, ["scans"])
        assert listed.exit_code == 0
        assert "Scans" in listed.output

    def test_import_invalid_file(self, cli_project: Path):
        bad = cli_project / "bad.yml"
        bad.write_text("target: 10.0.0.1\nvulnerabilities:\n  - cve: CVE-1\n")
        result = runner.invoke(app, ["scan-import", str(bad)])
        assert result.exit_code == 1
        assert "Import failed" in result.output

    def test_show_unknown_scan(self, cli_project: Path):
        result = runner.invoke(app, ["scan-show", "missing"])
        assert result.exit_code == 1
        assert "Scan not found" in result.output


class TestReportCommands:
    def test_markdown_report_to_file(self, cli_project: Path):
        runner.invoke(app, ["scan-import", str(SAMPLE)])
        scan_id = _only_scan_id(cli_project)

        result = runner.invoke(
            app,
            ["report", scan_id, "--format", "markdown", "--authorized-by", "Alice", "-o", "reports/demo"],
        )
        assert result.exit_code == 0, result.output
        output = cli_project / "reports" / "demo.md"
        text = output.read_text()
        assert text.startswith("# Vulnerability Assessment Report - 192.168.1.100")
        assert "**Authorized by:** Alice" in text

        listed = runner.invoke(app, ["reports", "--scan", scan_id])
        assert listed.exit_code == 0
        assert "markdown" in listed.output

    def test_json_report_to_stdout(self, cli_project: Path):
        runner.invoke(app, ["scan-import", str(SAMPLE)])
        scan_id = _only_scan_id(cli_project)
        result = runner.invoke(app, ["report", scan_id])
        assert result.exit_code == 0
        assert '"overallRisk": "Critical"' in result.output

    def test_unknown_scan(self, cli_project: Path):
        result = runner.invoke(app, ["report", "missing"])
        assert result.exit_code == 1
        assert "Scan not found" in result.output


class TestPayloadCommands:
    def test_payload_test(self, cli_project: Path):
        result = runner.invoke(
            app,
            ["payload-test", "--target", "http://testsite.local", "--payload", "hello", "--type", "sql-injection"],
        )
        assert result.exit_code == 0, result.output
        assert "FAILED" in result.output
        assert "Test ID" in result.output

        listed = runner.invoke(app, ["payload-tests"])
        assert listed.exit_code == 0, listed.output
        assert "Payload Tests" in listed.output
        assert "sql-injection" in listed.output
        assert "failed" in listed.output

    def test_payload_tests_empty(self, cli_project: Path):
        result = runner.invoke(app, ["payload-tests"])
        assert result.exit_code == 0
        assert "No payload tests recorded." in result.output

    def test_payload_test_unknown_vulnerability(self, cli_project: Path):
        result = runner.invoke(
            app,
            [
                "payload-test", "--target", "http://t", "--payload", "x",
                "--type", "xss", "--vuln-id", "missing",
            ],
        )
        assert result.exit_code == 1
        assert "Vulnerability not found" in result.output

    def test_library_sync_and_search(self, cli_project: Path):
        synced = runner.invoke(app, ["library", "sync"])
        assert synced.exit_code == 0
        assert "Successfully synced 7 new payloads" in synced.output

        again = runner.invoke(app, ["library", "sync"])
        assert "Successfully synced 0 new payloads" in again.output

        found = runner.invoke(app, ["library", "search", "LDAP"])
        assert found.exit_code == 0
        assert "ldap-injection" in found.output

    def test_library_search_requires_query(self, cli_project: Path):
        result = runner.invoke(app, ["library", "search"])
        assert result.exit_code == 1
        assert "Search query is required" in result.output

    def test_library_invalid_action(self, cli_project: Path):
        result = runner.invoke(app, ["library", "purge"])
        assert result.exit_code == 1


class TestConfigCommand:
    def test_show_outside_project(self, temp_dir: Path, monkeypatch):
        monkeypatch.chdir(temp_dir)
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "Not in a project directory" in result.output

    def test_init_global(self, isolated_home: Path):
        result = runner.invoke(app, ["config", "init", "--global"])
        assert result.exit_code == 0
        assert (isolated_home / ".secscope" / "config.yml").exists()

    def test_show_project_settings(self, cli_project: Path):
        env_path = cli_project / ".secscope" / ".env"
        env_path.write_text("SECSCOPE_AUTHORIZED_BY=Red Team\n")
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "SECSCOPE_AUTHORIZED_BY=Red Team" in result.output
