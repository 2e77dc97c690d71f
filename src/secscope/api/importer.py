"""Load a scan and its findings from a YAML or JSON document."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from secscope.db.models import Scan
from secscope.errors import ValidationError
from secscope.modules.store import Store

from .schemas import ScanImport, parse_request

logger = logging.getLogger(__name__)


def load_scan_file(path: Path) -> dict[str, Any]:
    """Read ``path`` as JSON (``.json``) or YAML (anything else)."""
    text = path.read_text(encoding="utf-8")
    try:
        raw = json.loads(text) if path.suffix.lower() == ".json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ValidationError(f"Could not parse {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ValidationError(f"{path} must contain a mapping, got {type(raw).__name__}")
    return raw


def import_scan(store: Store, data: dict[str, Any]) -> Scan:
    """Create a scan with its vulnerabilities; complete it when ``completedAt`` is given."""
    document = parse_request(ScanImport, data)

    scan = store.create_scan(
        target=document.target,
        scan_type=document.scan_type,
        created_by=document.created_by,
        started_at=document.started_at,
    )
    for vuln in document.vulnerabilities:
        store.add_vulnerability(
            scan.id,
            cve=vuln.cve,
            title=vuln.title,
            severity=vuln.severity,
            description=vuln.description,
            confidence_score=vuln.confidence_score,
            exploit_available=vuln.exploit_available,
            service_name=vuln.service_name,
            port=vuln.port,
            location_url=vuln.location.url,
            location_path=vuln.location.path,
            location_parameter=vuln.location.parameter,
            location_method=vuln.location.method,
            affected_versions=vuln.affected_versions,
            exploit_payloads=[p.model_dump() for p in vuln.exploit_payloads],
            evidence=vuln.evidence,
            discovered_at=vuln.discovered_at,
        )

    if document.completed_at is not None:
        store.complete_scan(scan.id, completed_at=document.completed_at)

    logger.info(
        "Imported scan %s for %s with %d vulnerabilities",
        scan.id,
        scan.target,
        len(document.vulnerabilities),
    )
    return scan
