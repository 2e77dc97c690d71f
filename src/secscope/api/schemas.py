"""Request schemas validated at the entrypoint boundary."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from secscope.errors import ValidationError


class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ReportRequest(_Request):
    scan_id: str = Field(alias="scanId", min_length=1)
    format: str | None = "json"
    authorized_by: str | None = Field(default=None, alias="authorizedBy")


class PayloadTestRequest(_Request):
    target: str = Field(min_length=1)
    payload: str = Field(min_length=1)
    payload_type: str = Field(alias="payloadType", min_length=1)
    vulnerability_id: str | None = Field(default=None, alias="vulnerabilityId")


class LibraryRequest(_Request):
    action: str = "list"
    type: str | None = None
    category: str | None = None
    q: str | None = None


class LocationIn(_Request):
    url: str = ""
    path: str = ""
    parameter: str | None = None
    method: str = "GET"


class ExploitPayloadIn(_Request):
    type: str
    payload: str
    description: str = ""


class VulnerabilityIn(_Request):
    cve: str = Field(min_length=1)
    title: str = Field(min_length=1)
    severity: Literal["critical", "high", "medium", "low"]
    description: str = ""
    confidence_score: float = Field(default=100, ge=0, le=100, alias="confidenceScore")
    exploit_available: bool = Field(default=False, alias="exploitAvailable")
    service_name: str = Field(default="", alias="serviceName")
    port: int = Field(default=0, ge=0, le=65535)
    location: LocationIn = Field(default_factory=LocationIn)
    affected_versions: list[str] = Field(default_factory=list, alias="affectedVersions")
    exploit_payloads: list[ExploitPayloadIn] = Field(
        default_factory=list, alias="exploitPayloads"
    )
    evidence: str | None = None
    discovered_at: datetime | None = Field(default=None, alias="discoveredAt")


class ScanImport(_Request):
    """A scan plus its findings, as read from an import file."""

    target: str = Field(min_length=1)
    scan_type: str = Field(default="port", alias="scanType")
    created_by: str = Field(default="", alias="createdBy")
    started_at: datetime | None = Field(default=None, alias="startedAt")
    completed_at: datetime | None = Field(default=None, alias="completedAt")
    vulnerabilities: list[VulnerabilityIn] = Field(default_factory=list)


def parse_request(
    model: type[_Request],
    body: Any,
    message: str | None = None,
    fields: frozenset[str] = frozenset(),
) -> Any:
    """Validate ``body`` against ``model`` and raise ValidationError on failure.

    ``message`` replaces the pydantic text when a failing field is one of
    ``fields`` (request keys, e.g. ``scanId``); other failures describe the
    first error.
    """
    if body is None:
        body = {}
    try:
        return model.model_validate(body)
    except pydantic.ValidationError as exc:
        errors = exc.errors()
        if message is not None and any(e["loc"] and e["loc"][0] in fields for e in errors):
            raise ValidationError(message) from exc
        first = errors[0]
        location = ".".join(str(part) for part in first["loc"])
        detail = f"Invalid {location}: {first['msg']}" if location else first["msg"]
        raise ValidationError(detail) from exc
