# main.py — deploy entrypoint (e.g. `uvicorn main:app` or `python main.py`)
import os

import uvicorn

from trade_radar.main import app  # noqa: F401

if __name__ == "__main__":
    uvicorn.run("trade_radar.main:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
