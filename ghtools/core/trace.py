"""Render requests and responses as HTTP messages for verbose tracing."""

from __future__ import annotations

import httpx

REDACTED = "PRIVATE"
SEPARATOR = "--"


def _redact(name: str, value: str) -> str:
    if name.lower() != "authorization":
        return value
    scheme = value.split(" ", 1)[0]
    return f"{scheme} {REDACTED}"


def _render(start_line: str, headers: httpx.Headers, body: bytes, verbose: int, prefix: str) -> str:
    lines = [start_line]
    for raw_name, raw_value in headers.raw:
        name = raw_name.decode("latin-1")
        lines.append(f"{name}: {_redact(name, raw_value.decode('latin-1'))}")

    # Headers only at level 1
    if verbose >= 2 and body:
        lines.append("")
        lines.extend(body.decode("utf-8", errors="replace").rstrip("\n").split("\n"))

    return "\n".join(f"{prefix}{line}" for line in lines)


def format_request(request: httpx.Request, verbose: int, prefix: str = "> ") -> str:
    """Format an outgoing request; the credential is never shown."""
    return _render(
        f"{request.method} {request.url}",
        request.headers,
        request.content,
        verbose,
        prefix,
    )


def format_response(response: httpx.Response, verbose: int, prefix: str = "< ") -> str:
    """Format a received response."""
    status_line = f"{response.http_version} {response.status_code} {response.reason_phrase}"
    return _render(status_line, response.headers, response.content, verbose, prefix)
