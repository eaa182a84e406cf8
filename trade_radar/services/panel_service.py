# trade_radar/services/panel_service.py
from __future__ import annotations

import concurrent.futures as _futures
import logging
import os
import time as _time
from typing import Any, Dict, List, Optional

import httpx

from trade_radar.models import AdapterResult, Success
from trade_radar.providers.fred_provider import fred_latest
from trade_radar.providers.treasury_provider import debt_latest, mts_latest
from trade_radar.services.indicator_catalog import Indicator
from trade_radar.utils.formatting import FORMATTERS

logger = logging.getLogger("trade-radar")

PANEL_MAX_WORKERS = int(os.getenv("PANEL_MAX_WORKERS", "8"))


def fetch_indicator(ind: Indicator, client: Optional[httpx.Client] = None) -> AdapterResult:
    if ind.provider == "treasury_mts":
        return mts_latest(classification=ind.key, client=client)
    if ind.provider == "treasury_debt":
        return debt_latest(client=client)
    return fred_latest(ind.key, client=client)


def to_card(ind: Indicator, result: AdapterResult) -> Dict[str, Any]:
    card: Dict[str, Any] = {
        "key": ind.key,
        "label": ind.label,
        "unitHint": ind.unit_hint,
        "status": "ERROR",
        "display": None,
        "value": None,
        "asOf": None,
        "sourceUrl": None,
        "error": None,
    }
    if isinstance(result, Success):
        fmt = FORMATTERS.get(ind.fmt, FORMATTERS["index"])
        card.update(
            status="LIVE",
            display=fmt(result.observation.value),
            value=result.observation.value,
            asOf=result.observation.date,
            sourceUrl=result.source_url,
        )
    else:
        card["error"] = result.error
    return card


def build_panel(indicators: List[Indicator], client: Optional[httpx.Client] = None) -> List[Dict[str, Any]]:
    """
    One adapter call per indicator, in parallel. A failed indicator becomes an
    ERROR card; it never fails the panel. Cards come back in catalog order.
    """
    started = _time.time()
    if not indicators:
        return []

    workers = max(1, min(PANEL_MAX_WORKERS, len(indicators)))
    with _futures.ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [ex.submit(fetch_indicator, ind, client) for ind in indicators]
        results = [f.result() for f in futures]

    cards = [to_card(ind, res) for ind, res in zip(indicators, results)]
    errors = sum(1 for c in cards if c["status"] == "ERROR")
    logger.info("panel built | n=%d | errors=%d | elapsed=%.2fs", len(cards), errors, _time.time() - started)
    return cards
