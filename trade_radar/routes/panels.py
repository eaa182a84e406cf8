# trade_radar/routes/panels.py
from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse

from trade_radar.providers.http import get_http_client
from trade_radar.services.indicator_catalog import PANELS, get_panel
from trade_radar.services.panel_service import build_panel

router = APIRouter(tags=["panels"])


@router.get(
    "/api/panels/{panel}",
    summary="All cards for one dashboard panel",
    operation_id="panel_get",
)
def panel_route(
    panel: str = Path(..., description="scoreboard | tariff-tracker"),
    client: httpx.Client = Depends(get_http_client),
):
    """
    Fans out one latest-observation fetch per indicator. Individual upstream
    failures show up as ERROR cards; the panel itself still returns 200.
    """
    indicators = get_panel(panel)
    if indicators is None:
        return JSONResponse(
            content={"ok": False, "error": f"Unknown panel: {panel}. Known: {', '.join(sorted(PANELS))}"},
            status_code=404,
        )
    cards = build_panel(indicators, client=client)
    return JSONResponse(content={"ok": True, "panel": panel.strip().lower(), "cards": cards})
