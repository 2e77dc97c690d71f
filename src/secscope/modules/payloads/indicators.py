"""Indicator tables for lexical payload classification."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class IndicatorSet:
    """Lexical indicators and canned responses for one payload type."""

    payload_type: str
    keywords: tuple[str, ...]  # matched case-insensitively
    tokens: tuple[str, ...]  # matched as written
    success_threshold: float
    hit_response: str
    hit_details: str
    normal_response: str
    normal_details: str
    miss_status: str = "blocked"

    def matches(self, payload: str) -> bool:
        lowered = payload.lower()
        if any(keyword.lower() in lowered for keyword in self.keywords):
            return True
        return any(token in payload for token in self.tokens)


INDICATOR_SETS: dict[str, IndicatorSet] = {
    "sql-injection": IndicatorSet(
        payload_type="sql-injection",
        keywords=("error", "mysql", "postgresql", "oracle", "syntax error", "sql"),
        tokens=("'", "--", "UNION"),
        success_threshold=0.7,
        hit_response=(
            "HTTP/1.1 200 OK\nContent-Type: text/html\n\n"
            "<html><body>Database error: You have an error in your SQL syntax</body></html>"
        ),
        hit_details="SQL injection payload triggered database error response",
        normal_response=(
            "HTTP/1.1 200 OK\nContent-Type: text/html\n\n<html><body>Normal response</body></html>"
        ),
        normal_details="No SQL injection indicators detected in response",
    ),
    "xss": IndicatorSet(
        payload_type="xss",
        keywords=("<script", "javascript:", "onerror", "onload", "alert("),
        tokens=(),
        success_threshold=0.6,
        # {payload} is substituted with the reflected payload
        hit_response=(
            "HTTP/1.1 200 OK\nContent-Type: text/html\n\n"
            "<html><body>Search results for: {payload}</body></html>"
        ),
        hit_details="XSS payload reflected in response",
        normal_response=(
            "HTTP/1.1 200 OK\nContent-Type: text/html\n\n"
            "<html><body>Search results for: [filtered]</body></html>"
        ),
        normal_details="XSS payload was filtered or encoded",
    ),
    "command-injection": IndicatorSet(
        payload_type="command-injection",
        keywords=(),
        tokens=(";", "&&", "||", "`", "$", "cat", "ls", "whoami", "id"),
        success_threshold=0.8,
        hit_response=(
            "HTTP/1.1 200 OK\nContent-Type: text/plain\n\n"
            "root:x:0:0:root:/root:/bin/bash\n"
            "daemon:x:1:1:daemon:/usr/sbin:/usr/sbin/nologin"
        ),
        hit_details="Command injection payload executed successfully",
        normal_response="HTTP/1.1 200 OK\nContent-Type: text/plain\n\nInvalid command",
        normal_details="Command injection payload was blocked or failed",
    ),
    "path-traversal": IndicatorSet(
        payload_type="path-traversal",
        keywords=("../", "..\\", "/etc/", "/windows/", "passwd", "boot.ini"),
        tokens=(),
        success_threshold=0.7,
        hit_response=(
            "HTTP/1.1 200 OK\nContent-Type: text/plain\n\n"
            "root:x:0:0:root:/root:/bin/bash\n"
            "www-data:x:33:33:www-data:/var/www:/usr/sbin/nologin"
        ),
        hit_details="Path traversal payload accessed system files",
        normal_response=(
            "HTTP/1.1 404 Not Found\nContent-Type: text/html\n\n"
            "<html><body>File not found</body></html>"
        ),
        normal_details="Path traversal payload was blocked or file not accessible",
    ),
    "ldap-injection": IndicatorSet(
        payload_type="ldap-injection",
        keywords=(),
        tokens=("*)", "(&)", "(|", "password=*", "uid=*"),
        success_threshold=0.6,
        hit_response=(
            "HTTP/1.1 200 OK\nContent-Type: application/json\n\n"
            '{"authenticated": true, "user": "admin", "groups": ["administrators"]}'
        ),
        hit_details="LDAP injection payload bypassed authentication",
        normal_response="HTTP/1.1 401 Unauthorized\nContent-Type: text/plain\n\nAuthentication failed",
        normal_details="LDAP injection payload failed to bypass authentication",
    ),
}

GENERIC_TYPE = "generic"
GENERIC_SUCCESS_THRESHOLD = 0.5

DEFAULT_THRESHOLDS: dict[str, float] = {
    name: indicator.success_threshold for name, indicator in INDICATOR_SETS.items()
}
DEFAULT_THRESHOLDS[GENERIC_TYPE] = GENERIC_SUCCESS_THRESHOLD
