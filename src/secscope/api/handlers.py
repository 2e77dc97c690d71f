"""Entrypoint handlers: request dict in, status code and JSON body out.

Each handler is isolated: SecScope errors map to their status code and any
other exception becomes a 500 carrying the exception message.
"""

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from secscope.context import AppContext
from secscope.errors import SecScopeError

from .schemas import LibraryRequest, PayloadTestRequest, ReportRequest, parse_request

logger = logging.getLogger(__name__)

# Keys (alias and field name) whose failure is reported with the fixed message
REPORT_REQUIRED = frozenset({"scanId", "scan_id"})
PAYLOAD_TEST_REQUIRED = frozenset({"target", "payload", "payloadType", "payload_type"})


@dataclass(frozen=True, slots=True)
class ApiResponse:
    status_code: int
    body: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status_code < 400


def _isolated(name: str) -> Callable:
    def decorator(func: Callable[..., ApiResponse]) -> Callable[..., ApiResponse]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> ApiResponse:
            try:
                return func(*args, **kwargs)
            except SecScopeError as exc:
                if exc.status_code >= 500:
                    logger.error("Error in %s: %s", name, exc.message)
                return ApiResponse(exc.status_code, {"error": exc.message})
            except Exception as exc:
                logger.exception("Unhandled error in %s", name)
                return ApiResponse(500, {"error": str(exc)})

        return wrapper

    return decorator


@_isolated("generate-report")
def handle_generate_report(ctx: AppContext, body: dict[str, Any] | None) -> ApiResponse:
    """Generate a report for ``body["scanId"]`` in ``body.get("format", "json")``."""
    request = parse_request(ReportRequest, body, "Scan ID is required", REPORT_REQUIRED)
    generated = ctx.reports.generate(
        request.scan_id,
        format=request.format or "json",
        authorized_by=request.authorized_by or ctx.authorized_by,
    )
    return ApiResponse(200, generated.to_dict())


@_isolated("payload-test")
def handle_payload_test(ctx: AppContext, body: dict[str, Any] | None) -> ApiResponse:
    request = parse_request(
        PayloadTestRequest,
        body,
        "Target, payload, and payload type are required",
        PAYLOAD_TEST_REQUIRED,
    )
    outcome = ctx.payload_tester.run(
        request.target,
        request.payload,
        request.payload_type,
        vulnerability_id=request.vulnerability_id,
    )
    return ApiResponse(200, outcome.to_dict())


@_isolated("payload-library")
def handle_payload_library(ctx: AppContext, params: dict[str, Any] | None) -> ApiResponse:
    """Dispatch ``list`` (default), ``sync`` or ``search`` against the payload library."""
    request = parse_request(LibraryRequest, params)
    library = ctx.library

    if request.action == "list":
        payloads = library.list(type=request.type, category=request.category)
        return ApiResponse(200, {"payloads": payloads})
    if request.action == "sync":
        return ApiResponse(200, library.sync().to_dict())
    if request.action == "search":
        payloads = library.search(request.q or "", type=request.type)
        return ApiResponse(200, {"payloads": payloads})

    return ApiResponse(400, {"error": "Invalid action"})
