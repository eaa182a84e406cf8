# trade_radar/models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

ErrorKind = Literal["input", "upstream_status", "upstream_transport", "parse"]


@dataclass(frozen=True)
class Observation:
    date: str
    value: float


@dataclass(frozen=True)
class Success:
    observation: Observation
    key: str  # series id or classification
    source_url: str
    ok: Literal[True] = True


@dataclass(frozen=True)
class Failure:
    error: str
    kind: ErrorKind
    ok: Literal[False] = False


AdapterResult = Union[Success, Failure]
