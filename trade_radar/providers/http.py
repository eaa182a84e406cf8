# trade_radar/providers/http.py
from __future__ import annotations

"""
Shared HTTP plumbing for the upstream statistics providers.

- One httpx.Client factory with our headers/timeouts (`_client`)
- A FastAPI dependency (`get_http_client`) so routes can be handed a client
  and tests can swap in an httpx.MockTransport
- `fetch(...)`: single GET, no retries, mapped onto the adapter error taxonomy
"""

import logging
from contextlib import nullcontext
import os
from typing import Any, Dict, Iterator, Optional

import httpx

from trade_radar.errors import AdapterError, UpstreamStatusError, UpstreamTransportError
from trade_radar.models import Failure

logger = logging.getLogger("trade-radar")

# ------------------------------------------------------------------------------
# Config
# ------------------------------------------------------------------------------
TIMEOUT = float(os.getenv("HTTP_TIMEOUT_SEC", "5.0"))  # httpx default
USER_AGENT = "trade-radar/1.0 (+providers)"

_HEADERS = {
    "Accept": "application/json, text/csv;q=0.9, */*;q=0.8",
    "User-Agent": USER_AGENT,
}


def _client() -> httpx.Client:
    return httpx.Client(timeout=TIMEOUT, follow_redirects=True, headers=_HEADERS)


def get_http_client() -> Iterator[httpx.Client]:
    """FastAPI dependency: one client per request, closed afterwards."""
    with _client() as client:
        yield client


def fetch(
    client: httpx.Client,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    label: str = "upstream",
) -> httpx.Response:
    """
    GET `url` once. Non-2xx -> UpstreamStatusError("<label> fetch failed (<status>)"),
    transport problems -> UpstreamTransportError(<underlying message>).
    """
    try:
        resp = client.get(url, params=params)
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
        msg = str(e) or type(e).__name__
        logger.warning("[%s] GET %s raised %s: %s", label, url, type(e).__name__, msg)
        raise UpstreamTransportError(msg) from e

    if not resp.is_success:
        logger.warning("[%s] GET %s -> %s", label, resp.request.url, resp.status_code)
        raise UpstreamStatusError(f"{label} fetch failed ({resp.status_code})", resp.status_code)
    return resp


def to_failure(err: AdapterError) -> Failure:
    return Failure(error=err.message, kind=err.kind)  # type: ignore[arg-type]


def borrow_client(client: Optional[httpx.Client]):
    """Use the caller's client if given, otherwise open (and close) our own."""
    return nullcontext(client) if client is not None else _client()


def unexpected_failure(err: Exception, label: str) -> Failure:
    """Last-resort conversion for anything that is not an AdapterError."""
    msg = str(err) or type(err).__name__
    logger.warning("[%s] unexpected %s: %s", label, type(err).__name__, msg)
    return Failure(error=msg, kind="upstream_transport")
