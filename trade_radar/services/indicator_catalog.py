# trade_radar/services/indicator_catalog.py
from __future__ import annotations

"""
Which indicators each dashboard panel shows, in display order.

provider:
  - "fred"           key = FRED series id
  - "treasury_mts"   key = MTS Table 4 classification_desc
  - "treasury_debt"  key unused (Debt to the Penny total)
fmt: name in trade_radar.utils.formatting.FORMATTERS
"""

from dataclasses import dataclass
from typing import Dict, List, Literal, Optional

Provider = Literal["fred", "treasury_mts", "treasury_debt"]


@dataclass(frozen=True)
class Indicator:
    key: str
    label: str
    unit_hint: str
    fmt: str
    provider: Provider = "fred"


FACTORY_CONSTRUCTION = Indicator("TLMFGCONS", "Factory construction spending", "($, SAAR)", "billions_usd")
GOV_INVESTMENT = Indicator("W170RC1Q027SBEA", "Government investment (% of GDP)", "(%)", "percent")
MFG_SHARE = Indicator("VAPGDPMA", "Manufacturing share of GDP", "(%)", "percent")
IMPORT_PRICES = Indicator("IMPCH", "Import price index (all commodities)", "(index)", "index")
TRADE_BALANCE = Indicator("BOPGSTB", "Trade balance (goods & services)", "($, SAAR)", "billions_usd")
CUSTOMS_DUTIES = Indicator(
    "Customs Duties", "Customs duties receipts (monthly)", "($)", "dollars", provider="treasury_mts"
)
PUBLIC_DEBT = Indicator(
    "tot_pub_debt_out_amt", "Total public debt outstanding", "($)", "dollars", provider="treasury_debt"
)

PANELS: Dict[str, List[Indicator]] = {
    "scoreboard": [
        FACTORY_CONSTRUCTION,
        GOV_INVESTMENT,
        MFG_SHARE,
        IMPORT_PRICES,
        TRADE_BALANCE,
        CUSTOMS_DUTIES,
        PUBLIC_DEBT,
    ],
    "tariff-tracker": [
        FACTORY_CONSTRUCTION,
        IMPORT_PRICES,
        CUSTOMS_DUTIES,
    ],
}


def get_panel(name: str) -> Optional[List[Indicator]]:
    return PANELS.get((name or "").strip().lower())
