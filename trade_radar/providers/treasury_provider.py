# trade_radar/providers/treasury_provider.py
from __future__ import annotations

"""
Treasury Fiscal Data provider (no API key required)

- MTS Table 4 (receipts by classification, e.g. "Customs Duties"):
    v1/accounting/mts/mts_table_4
- Debt to the Penny (total public debt outstanding):
    v2/accounting/od/debt_to_penny

Both endpoints support filter/sort/page[size], so we ask the API for exactly
one record sorted by -record_date instead of reducing a full series here.
"""

import math
import os
from typing import Any, Dict, Optional

import httpx

from trade_radar.errors import AdapterError, ParseError
from trade_radar.models import AdapterResult, Observation, Success
from trade_radar.providers.http import borrow_client, fetch, to_failure, unexpected_failure

TREASURY_BASE_URL = os.getenv(
    "TREASURY_BASE_URL",
    "https://api.fiscaldata.treasury.gov/services/api/fiscal_service",
).rstrip("/")

MTS_TABLE_4 = "v1/accounting/mts/mts_table_4"
DEBT_TO_PENNY = "v2/accounting/od/debt_to_penny"

DEFAULT_CLASSIFICATION = "Customs Duties"
DEFAULT_FIELD = "current_month_net_rcpt_amt"
DEBT_FIELD = "tot_pub_debt_out_amt"

MTS_SOURCE = "Treasury Fiscal Data (MTS Table 4)"
MTS_SOURCE_URL = "https://fiscaldata.treasury.gov/datasets/monthly-treasury-statement/receipts"
DEBT_SOURCE = "Treasury Fiscal Data (Debt to the Penny)"
DEBT_SOURCE_URL = "https://fiscaldata.treasury.gov/datasets/debt-to-the-penny/"


def _latest_params(filter_expr: Optional[str] = None) -> Dict[str, str]:
    params = {"sort": "-record_date", "page[size]": "1"}
    if filter_expr:
        params["filter"] = filter_expr
    return params


def parse_latest_record(payload: Any, field: str) -> Observation:
    """
    Pull (record_date, float(row[field])) out of the first element of `data`.
    Error messages name the offending fields.
    """
    rows = payload.get("data") if isinstance(payload, dict) else None
    row = rows[0] if isinstance(rows, list) and rows else None
    if not isinstance(row, dict):
        raise ParseError("No data returned")

    record_date = row.get("record_date")
    raw_value = row.get(field)
    value: Optional[float] = None
    if raw_value not in (None, ""):
        try:
            value = float(raw_value)
        except (TypeError, ValueError):
            value = None

    if not record_date or value is None or not math.isfinite(value):
        raise ParseError(f"Missing/invalid fields. record_date={record_date!s} {field}={raw_value!s}")

    return Observation(date=str(record_date), value=value)


def _fetch_latest(
    client: Optional[httpx.Client],
    endpoint: str,
    params: Dict[str, str],
    field: str,
    label: str,
) -> Observation:
    with borrow_client(client) as c:
        resp = fetch(c, f"{TREASURY_BASE_URL}/{endpoint}", params=params, label=label)
        try:
            payload = resp.json()
        except ValueError as e:
            raise ParseError("No data returned") from e
    return parse_latest_record(payload, field)


def mts_latest(
    classification: Optional[str] = DEFAULT_CLASSIFICATION,
    field: Optional[str] = DEFAULT_FIELD,
    client: Optional[httpx.Client] = None,
) -> AdapterResult:
    classification = (classification or "").strip() or DEFAULT_CLASSIFICATION
    field = (field or "").strip() or DEFAULT_FIELD
    try:
        obs = _fetch_latest(
            client,
            MTS_TABLE_4,
            _latest_params(f"classification_desc:eq:{classification}"),
            field,
            label="Treasury MTS",
        )
    except AdapterError as e:
        return to_failure(e)
    except Exception as e:
        return unexpected_failure(e, "Treasury MTS")
    return Success(observation=obs, key=classification, source_url=MTS_SOURCE_URL)


def debt_latest(client: Optional[httpx.Client] = None) -> AdapterResult:
    try:
        obs = _fetch_latest(client, DEBT_TO_PENNY, _latest_params(), DEBT_FIELD, label="Treasury debt")
    except AdapterError as e:
        return to_failure(e)
    except Exception as e:
        return unexpected_failure(e, "Treasury debt")
    return Success(observation=obs, key=DEBT_FIELD, source_url=DEBT_SOURCE_URL)
