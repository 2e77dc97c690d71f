"""Test configuration and fixtures for SecScope."""

import tempfile
from collections.abc import Callable, Generator
from datetime import UTC, datetime
from pathlib import Path

import pytest

from secscope.context import AppContext
from secscope.db.init import init_db
from secscope.db.models import Scan
from secscope.models import Location, ScanRecord, VulnerabilityRecord
from secscope.modules.payloads import PayloadClassifier
from secscope.modules.store import Store


def fixed_random(value: float) -> Callable[[], float]:
    """Random source that always returns ``value``."""
    return lambda: value


@pytest.fixture(autouse=True)
def isolated_home(monkeypatch, tmp_path: Path) -> Path:
    """Keep ~/.secscope and SECSCOPE_* variables out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in (
        "SECSCOPE_DATA_DIR",
        "SECSCOPE_AUTHORIZED_BY",
        "SECSCOPE_VERBOSE",
        "SECSCOPE_THRESHOLD_SQL_INJECTION",
        "SECSCOPE_THRESHOLD_XSS",
        "SECSCOPE_THRESHOLD_GENERIC",
    ):
        monkeypatch.delenv(key, raising=False)
    return home


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def project_dir(temp_dir: Path) -> Path:
    """Create a project directory with its .secscope storage dir."""
    project_path = temp_dir / "test_project"
    project_path.mkdir()
    (project_path / ".secscope").mkdir()
    (project_path / "reports").mkdir()
    return project_path


@pytest.fixture
def db_path(project_dir: Path) -> Path:
    """Return the database path for a project."""
    return project_dir / ".secscope" / "secscope.db"


@pytest.fixture
def initialized_db(db_path: Path) -> Path:
    """Initialize the database and return its path."""
    init_db(db_path)
    return db_path


@pytest.fixture
def store(initialized_db: Path) -> Generator[Store, None, None]:
    """Create a store over an initialized database."""
    store = Store(initialized_db)
    yield store
    store.close()


@pytest.fixture
def sample_scan(store: Store) -> Scan:
    """A completed scan with one critical and two medium findings."""
    scan = store.create_scan(
        "192.168.1.10",
        scan_type="port",
        created_by="tester",
        started_at=datetime(2024, 1, 1, tzinfo=UTC),
    )
    store.add_vulnerability(
        scan.id,
        cve="CVE-2021-41773",
        title="Apache HTTP Server Path Traversal",
        severity="critical",
        description="Path traversal and file disclosure in Apache 2.4.49",
        service_name="Apache",
        port=80,
        location_url="http://192.168.1.10/cgi-bin/",
        location_path="/cgi-bin/",
    )
    store.add_vulnerability(
        scan.id,
        cve="CVE-2020-14812",
        title="MySQL Server Optimizer DoS",
        severity="medium",
        confidence_score=80,
        service_name="MySQL",
        port=3306,
    )
    store.add_vulnerability(
        scan.id,
        cve="CVE-2018-15473",
        title="OpenSSH Username Enumeration",
        severity="medium",
        service_name="OpenSSH",
        port=22,
    )
    store.complete_scan(scan.id, completed_at=datetime(2024, 1, 1, 0, 1, 40, tzinfo=UTC))
    return scan


@pytest.fixture
def ctx(store: Store) -> AppContext:
    """App context whose classifier always draws 0.99."""
    return AppContext(
        store=store,
        classifier=PayloadClassifier(random_source=fixed_random(0.99)),
    )


def make_scan_record(**overrides) -> ScanRecord:
    values = {
        "id": "scan-1",
        "target": "10.0.0.5",
        "scan_type": "port",
        "status": "completed",
        "started_at": datetime(2024, 1, 1, tzinfo=UTC),
        "completed_at": datetime(2024, 1, 1, 0, 1, 40, tzinfo=UTC),
    }
    values.update(overrides)
    return ScanRecord(**values)


def make_vulnerability(severity: str = "medium", **overrides) -> VulnerabilityRecord:
    values = {
        "id": f"vuln-{severity}",
        "scan_id": "scan-1",
        "cve": "CVE-2024-0001",
        "title": f"Sample {severity} finding",
        "severity": severity,
        "description": "Sample description",
        "confidence_score": 100,
        "exploit_available": False,
        "service_name": "OpenSSH",
        "port": 22,
        "location": Location(url="http://10.0.0.5/"),
    }
    values.update(overrides)
    return VulnerabilityRecord(**values)
