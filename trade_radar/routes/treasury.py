# trade_radar/routes/treasury.py
from __future__ import annotations

from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Query

from trade_radar.models import Failure
from trade_radar.providers.http import get_http_client
from trade_radar.providers.treasury_provider import (
    DEBT_FIELD,
    DEBT_SOURCE,
    DEFAULT_CLASSIFICATION,
    DEFAULT_FIELD,
    MTS_SOURCE,
    debt_latest,
    mts_latest,
)
from trade_radar.routes.common import fail_response, ok_response

router = APIRouter(tags=["treasury"])


@router.get(
    "/api/treasury-mts-latest",
    summary="Latest MTS Table 4 record for a classification",
    operation_id="treasury_mts_latest_get",
)
def treasury_mts_latest_route(
    classification: Optional[str] = Query(DEFAULT_CLASSIFICATION, description="classification_desc, e.g. Customs Duties"),
    field: Optional[str] = Query(DEFAULT_FIELD, description="Numeric column to return"),
    client: httpx.Client = Depends(get_http_client),
):
    classification = (classification or "").strip() or DEFAULT_CLASSIFICATION
    field = (field or "").strip() or DEFAULT_FIELD

    result = mts_latest(classification=classification, field=field, client=client)
    if isinstance(result, Failure):
        return fail_response(result)
    return ok_response(
        {
            "classification": classification,
            "recordDate": result.observation.date,
            "value": result.observation.value,
            "field": field,
            "source": MTS_SOURCE,
            "sourceUrl": result.source_url,
        }
    )


@router.get(
    "/api/treasury-debt-latest",
    summary="Latest total public debt outstanding (Debt to the Penny)",
    operation_id="treasury_debt_latest_get",
)
def treasury_debt_latest_route(client: httpx.Client = Depends(get_http_client)):
    result = debt_latest(client=client)
    if isinstance(result, Failure):
        return fail_response(result)
    return ok_response(
        {
            "recordDate": result.observation.date,
            "value": result.observation.value,
            "field": DEBT_FIELD,
            "source": DEBT_SOURCE,
            "sourceUrl": result.source_url,
        }
    )
