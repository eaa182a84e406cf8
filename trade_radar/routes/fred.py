# trade_radar/routes/fred.py
from __future__ import annotations

from typing import Optional

import httpx
from fastapi import APIRouter, Depends, Query

from trade_radar.models import Failure
from trade_radar.providers.fred_provider import SOURCE, fred_latest
from trade_radar.providers.http import get_http_client
from trade_radar.routes.common import fail_response, ok_response

router = APIRouter(tags=["fred"])


@router.get(
    "/api/fred-latest",
    summary="Latest valid FRED observation",
    operation_id="fred_latest_get",
)
def fred_latest_route(
    id: Optional[str] = Query(None, description="FRED series id, e.g. TLMFGCONS"),
    client: httpx.Client = Depends(get_http_client),
):
    # `id` is optional at the FastAPI level so a missing one gets our 400 body, not a 422
    result = fred_latest(id, client=client)
    if isinstance(result, Failure):
        return fail_response(result)
    return ok_response(
        {
            "id": result.key,
            "date": result.observation.date,
            "value": result.observation.value,
            "source": SOURCE,
            "sourceUrl": result.source_url,
        }
    )
