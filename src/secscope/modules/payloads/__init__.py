"""Payload classification, testing and library management."""

from .classifier import PayloadClassifier, PayloadVerdict
from .library import PayloadLibrary, SyncResult
from .tester import PayloadTester, PayloadTestOutcome

__all__ = [
    "PayloadClassifier",
    "PayloadLibrary",
    "PayloadTestOutcome",
    "PayloadTester",
    "PayloadVerdict",
    "SyncResult",
]
