"""Minimal HTTP GET client for movie-database APIs.

Every call returns an `HttpResult`; transport errors and non-2xx statuses are reported in the
result instead of being raised.

The client backs the movie-database lookups (TMDB discover, OMDb details) that will answer the
classified intents; the intent router itself performs no I/O.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

DEFAULT_TIMEOUT_S = 8.0

DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "User-Agent": "FilmvennBot/1.0",
}


@dataclass(frozen=True)
class HttpResult:
    """Standardized outcome of an HTTP GET.

    `ok` is true iff the status is in [200, 300). Transport failures have `status == 0`.
    """

    ok: bool
    status: int
    body: Any
    error: str | None


def _is_success(status: int) -> bool:
    return 200 <= status < 300


def http_get(
        url: str,
        headers: dict[str, str] | None = None,
        *,
        timeout_s: float = DEFAULT_TIMEOUT_S,
) -> HttpResult:
    """Perform an HTTP GET; redirects are followed by `urllib`."""

    req = Request(url, method="GET", headers={**DEFAULT_HEADERS, **(headers or {})})

    try:
        with urlopen(req, timeout=timeout_s) as resp:  # noqa: S310 (caller-controlled API URL)
            status = resp.status
            body = resp.read().decode("utf-8", errors="replace")
    except HTTPError as exc:
        # Non-2xx statuses are results, not failures of the transport.
        raw = exc.read() if exc.fp is not None else b""
        return HttpResult(
            ok=False,
            status=exc.code,
            body=raw.decode("utf-8", errors="replace"),
            error=f"HTTP {exc.code}: {exc.reason}",
        )
    except (URLError, TimeoutError, OSError) as exc:
        reason = getattr(exc, "reason", None) or str(exc) or "Unknown transport error"
        return HttpResult(ok=False, status=0, body=None, error=str(reason))

    return HttpResult(
        ok=_is_success(status),
        status=status,
        body=body,
        error=None if _is_success(status) else f"HTTP {status}",
    )


def http_get_json(
        url: str,
        headers: dict[str, str] | None = None,
        *,
        timeout_s: float = DEFAULT_TIMEOUT_S,
) -> HttpResult:
    """Perform an HTTP GET and decode the JSON body.

    Failed or empty responses are returned unchanged. An undecodable body yields `ok=False`,
    `body=None` and an error starting with "JSON decode error".
    """

    res = http_get(url, headers, timeout_s=timeout_s)
    if not res.ok or not res.body:
        return res

    try:
        decoded = json.loads(res.body)
    except json.JSONDecodeError as exc:
        return HttpResult(ok=False, status=res.status, body=None, error=f"JSON decode error: {exc.msg}")

    return replace(res, body=decoded)
