from __future__ import annotations
from typing import Callable, Dict


def format_percent(v: float, decimals: int = 1) -> str:
    return f"{v:.{decimals}f}%"


def format_billions_usd(v: float) -> str:
    """Input already in billions (most FRED level series here)."""
    if abs(v) >= 1000:
        return f"${v / 1000:.2f}T"
    return f"${v:.1f}B"


def format_dollars(v: float) -> str:
    """Input in plain dollars (Treasury fiscal data)."""
    a = abs(v)
    if a >= 1_000_000_000_000:
        return f"${v / 1_000_000_000_000:.2f}T"
    if a >= 1_000_000_000:
        return f"${v / 1_000_000_000:.1f}B"
    if a >= 1_000_000:
        return f"${v / 1_000_000:.1f}M"
    return f"${v:.0f}"


def format_index(v: float) -> str:
    return f"{v:.1f}"


FORMATTERS: Dict[str, Callable[[float], str]] = {
    "percent": format_percent,
    "billions_usd": format_billions_usd,
    "dollars": format_dollars,
    "index": format_index,
}
