"""Re-export database models used by store mixins."""

from secscope.db.models import (
    PayloadLibraryEntry,
    PayloadTest,
    Scan,
    Vulnerability,
    VulnerabilityReport,
)

__all__ = [
    "PayloadLibraryEntry",
    "PayloadTest",
    "Scan",
    "Vulnerability",
    "VulnerabilityReport",
]
