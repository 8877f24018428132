"""
Minimal JSON-over-HTTP transport for the upstream APIs.

Only the Python standard library is used for HTTP requests. Each call
is attempted exactly once: there are no retries and nothing is cached.
Failures are raised as :class:`UpstreamError` (network, timeout or a
body that is not JSON) or :class:`UpstreamStatusError` (a non-2xx
answer) so the callers can decide between a fallback payload and an
error response.
"""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

USER_AGENT = "acn-petstore/1.0"


class UpstreamError(Exception):
    """An upstream call could not be completed or decoded."""


class UpstreamStatusError(UpstreamError):
    """An upstream answered with a non-2xx status."""

    def __init__(self, url: str, status: int, body: Any = None):
        super().__init__(f"{_strip_query(url)} returned status {status}")
        self.url = url
        self.status = status
        self.body = body


def _strip_query(url: str) -> str:
    # query strings may carry API keys
    return url.split("?", 1)[0]


def build_url(base: str, params: Optional[Mapping[str, Any]] = None) -> str:
    if not params:
        return base
    query = urllib.parse.urlencode({k: str(v) for k, v in params.items()})
    return f"{base}?{query}"


def _decode(raw: bytes) -> Any:
    text = raw.decode("utf-8", errors="ignore")
    return json.loads(text) if text.strip() else None


def request_json(
    method: str,
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    payload: Any = None,
    timeout: float = 10.0,
) -> Any:
    """Perform one HTTP request and return the parsed JSON body.

    Parameters
    ----------
    method : str
        HTTP method, e.g. ``"GET"`` or ``"POST"``.
    url : str
        Absolute URL including any query string.
    headers : Optional[Dict[str, str]]
        Extra request headers.
    payload : Any
        Serialised as a JSON request body when not ``None``.
    timeout : float
        Socket timeout in seconds.

    Raises
    ------
    UpstreamStatusError
        The upstream answered with a non-2xx status. The decoded error
        body is kept on the exception when it is JSON.
    UpstreamError
        The request failed or the body could not be decoded.
    """
    all_headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
    all_headers.update(headers or {})
    data = None
    if payload is not None:
        data = json.dumps(payload).encode("utf-8")
        all_headers.setdefault("Content-Type", "application/json")

    request = urllib.request.Request(url, data=data, headers=all_headers, method=method)
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            status = getattr(response, "status", 200)
            raw = response.read()
    except urllib.error.HTTPError as exc:
        try:
            body = _decode(exc.read())
        except (ValueError, OSError):
            body = None
        logger.warning("%s %s returned status %s", method, _strip_query(url), exc.code)
        raise UpstreamStatusError(url, exc.code, body) from exc
    except (urllib.error.URLError, OSError) as exc:
        logger.error("Error fetching %s: %s", _strip_query(url), exc)
        raise UpstreamError(f"{method} {_strip_query(url)} failed: {exc}") from exc

    if not 200 <= status < 300:
        logger.warning("%s %s returned status %s", method, _strip_query(url), status)
        raise UpstreamStatusError(url, status)
    try:
        return _decode(raw)
    except ValueError as exc:
        logger.error("Invalid JSON from %s: %s", _strip_query(url), exc)
        raise UpstreamError(f"{method} {_strip_query(url)} returned invalid JSON") from exc


def get_json(url: str, **kwargs: Any) -> Any:
    return request_json("GET", url, **kwargs)


def post_json(url: str, payload: Any, **kwargs: Any) -> Any:
    return request_json("POST", url, payload=payload, **kwargs)
