"""Request-level entrypoints: a request dict in, a status code and JSON body out."""

from .handlers import (
    ApiResponse,
    handle_generate_report,
    handle_payload_library,
    handle_payload_test,
)

__all__ = [
    "ApiResponse",
    "handle_generate_report",
    "handle_payload_library",
    "handle_payload_test",
]
