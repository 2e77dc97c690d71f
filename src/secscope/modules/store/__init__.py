"""Persistence for scans, payload tests, the payload library and reports."""

from .manager import Store

__all__ = ["Store"]
