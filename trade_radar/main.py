# trade_radar/main.py
from __future__ import annotations

import importlib
import logging
import os
from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from fastapi.openapi.utils import get_openapi

logger = logging.getLogger("trade-radar")
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "").strip()

# --- keep operation_id stable (avoid FastAPI auto-dedupe renaming) ----------
def _fixed_unique_id(route: APIRoute) -> str:
    return route.operation_id or f"{route.name}_{route.path}".strip("/").replace("/", "_")

app = FastAPI(
    title="Trade Radar API",
    description="Latest macro & trade indicators (FRED, Treasury Fiscal Data)",
    version="2026.10.19",
    generate_unique_id_function=_fixed_unique_id,
)

# --- inject a single servers URL in the OpenAPI when deployed ----------------
def custom_openapi():
    if app.openapi_schema:
        return app.openapi_schema
    schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )
    if PUBLIC_BASE_URL:
        schema["servers"] = [{"url": PUBLIC_BASE_URL}]
    app.openapi_schema = schema
    return app.openapi_schema

app.openapi = custom_openapi  # override


def _safe_include(prefix: str, module_path: str) -> bool:
    """Import a router module and include its `router` if present."""
    try:
        mod = importlib.import_module(module_path)
    except Exception as e:
        logger.error("failed to import %s: %s", module_path, e)
        return False

    router = getattr(mod, "router", None)
    if router is None:
        logger.error("module %s has no `router`", module_path)
        return False

    app.include_router(router)
    logger.info("[init] %s router mounted from: %s", prefix, module_path)
    return True


MOUNTED = {
    "fred": _safe_include("fred", "trade_radar.routes.fred"),
    "treasury": _safe_include("treasury", "trade_radar.routes.treasury"),
    "panels": _safe_include("panels", "trade_radar.routes.panels"),
}


@app.get("/")
def root():
    return {
        "ok": True,
        "routers": [name for name, ok in MOUNTED.items() if ok],
        "failed": [name for name, ok in MOUNTED.items() if not ok],
    }


@app.get("/healthz")
def healthz():
    # keep this super fast; a router that failed to mount means the service is degraded
    failed = [name for name, ok in MOUNTED.items() if not ok]
    if failed:
        return JSONResponse(content={"status": "degraded", "failed": failed}, status_code=503)
    return {"status": "ok"}
