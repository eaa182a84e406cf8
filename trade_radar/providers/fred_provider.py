# trade_radar/providers/fred_provider.py
from __future__ import annotations

"""
FRED latest-observation provider

- Pulls the public fredgraph CSV for one series (no API key needed):
    https://fred.stlouisfed.org/graph/fredgraph.csv?id=<SERIES>
- The CSV is chronologically ascending and has no server-side "latest" filter,
  so we scan backwards for the most recent *valid* row.
- Exposes:
    parse_fred_csv_latest(text) -> Observation      (raises ParseError)
    fred_latest(series_id, client=None) -> AdapterResult
"""

import math
import os
import re
from typing import Optional
from urllib.parse import quote

import httpx

from trade_radar.errors import AdapterError, InputError, ParseError
from trade_radar.models import AdapterResult, Observation, Success
from trade_radar.providers.http import borrow_client, fetch, to_failure, unexpected_failure

FRED_BASE_URL = os.getenv("FRED_BASE_URL", "https://fred.stlouisfed.org").rstrip("/")
SOURCE = "FRED"

# FRED ids are short alphanumerics (TLMFGCONS, W170RC1Q027SBEA, ...)
_SERIES_ID_RE = re.compile(r"^[A-Za-z0-9_.\-]{1,64}$")

# missing-data sentinels; compared lowercased
_MISSING = {".", "nan"}

# ASCII decimal / exponent notation only ("1_000" and non-ASCII digits are rejected)
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


def series_url(series_id: str) -> str:
    return f"{FRED_BASE_URL}/series/{quote(series_id, safe='')}"


def csv_url() -> str:
    return f"{FRED_BASE_URL}/graph/fredgraph.csv"


def parse_fred_csv_latest(csv_text: str) -> Observation:
    """
    Expected format:
        DATE,VALUE
        2024-01-01,123.4
    Returns the latest row with a finite numeric value.
    """
    lines = [ln.strip() for ln in re.split(r"\r?\n", csv_text or "")]
    lines = [ln for ln in lines if ln]
    if len(lines) < 2:
        raise ParseError("Could not parse latest observation: no observations")

    # walk back from the end, stop at the first usable row (index 0 is the header)
    for i in range(len(lines) - 1, 0, -1):
        parts = lines[i].split(",")
        date = parts[0].strip()
        raw_value = parts[1].strip() if len(parts) > 1 else ""
        if not date or not raw_value:
            continue
        if raw_value.lower() in _MISSING:
            continue
        if not _NUMBER_RE.match(raw_value):
            continue
        try:
            value = float(raw_value)
        except ValueError:
            continue
        if not math.isfinite(value):
            continue
        return Observation(date=date, value=value)

    raise ParseError("Could not parse latest observation: no valid rows")


def _normalize_series_id(series_id: Optional[str]) -> str:
    sid = (series_id or "").strip()
    if not sid:
        raise InputError("Missing required query param: id")
    if not _SERIES_ID_RE.match(sid):
        raise InputError(f"Invalid series id: {sid}")
    return sid


def fred_latest(series_id: Optional[str], client: Optional[httpx.Client] = None) -> AdapterResult:
    """Single best-effort attempt; every failure comes back as a Failure."""
    try:
        sid = _normalize_series_id(series_id)
        with borrow_client(client) as c:
            resp = fetch(c, csv_url(), params={"id": sid}, label=SOURCE)
            latest = parse_fred_csv_latest(resp.text)
    except AdapterError as e:
        return to_failure(e)
    except Exception as e:
        return unexpected_failure(e, SOURCE)

    return Success(observation=latest, key=sid, source_url=series_url(sid))
