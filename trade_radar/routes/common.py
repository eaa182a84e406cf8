# trade_radar/routes/common.py
from __future__ import annotations

import os
from typing import Any, Dict

from fastapi.responses import JSONResponse

from trade_radar.models import Failure

UPSTREAM_CACHE_SEC = int(os.getenv("UPSTREAM_CACHE_SEC", "3600"))  # 1h

# hint for the hosting layer / CDN; we don't cache anything in-process
CACHE_CONTROL = f"public, max-age={UPSTREAM_CACHE_SEC}, s-maxage={UPSTREAM_CACHE_SEC}"


def ok_response(body: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(content={"ok": True, **body}, headers={"Cache-Control": CACHE_CONTROL})


def fail_response(failure: Failure) -> JSONResponse:
    status = 400 if failure.kind == "input" else 502
    return JSONResponse(content={"ok": False, "error": failure.error}, status_code=status)
