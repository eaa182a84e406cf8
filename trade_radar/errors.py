# trade_radar/errors.py
from __future__ import annotations

"""
Adapter error taxonomy.

Providers raise these internally; every one of them is caught at the adapter
boundary and turned into a `Failure` (see trade_radar.models). Routes never
see them as exceptions.
"""


class AdapterError(Exception):
    kind = "adapter"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InputError(AdapterError):
    """Required parameter missing or malformed; no upstream call was made."""

    kind = "input"


class UpstreamStatusError(AdapterError):
    kind = "upstream_status"

    def __init__(self, message: str, status: int) -> None:
        super().__init__(message)
        self.status = status


class UpstreamTransportError(AdapterError):
    kind = "upstream_transport"


class ParseError(AdapterError):
    """Upstream answered 2xx but the payload had no usable observation."""

    kind = "parse"
