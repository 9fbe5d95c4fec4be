from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from pricelist.charts import clarity_bar_chart, to_vega_spec
from pricelist.records import CLARITY_GRADES, MatrixRateRecord, PriceRecord


NO_DATA_MESSAGE = "No price data available."
NOTHING_PRICED_MESSAGE = "Price list loaded, but no row carries a rate yet."


def compute_summary(df: pd.DataFrame, filtered: pd.DataFrame) -> Dict[str, Any]:
    rates = pd.to_numeric(filtered.get("rate", pd.Series(dtype=float)), errors="coerce").dropna()
    return {
        "total_inventory": int(len(df)),
        "filtered_count": int(len(filtered)),
        "average_rate": float(rates.mean()) if not rates.empty else 0.0,
        "highest_rate": float(rates.max()) if not rates.empty else 0.0,
    }


def empty_state_message(records: Sequence[PriceRecord], df: pd.DataFrame) -> Optional[str]:
    """Message for the page when there is nothing to tabulate, else None."""
    if not records:
        return NO_DATA_MESSAGE
    if df.empty:
        return NOTHING_PRICED_MESSAGE
    return None


def count_unpriced(records: Sequence[PriceRecord]) -> int:
    """Matrix rows whose every grade is 0 (loaded, but nothing to show)."""
    return sum(
        1 for r in records if isinstance(r, MatrixRateRecord) and not any(r.rates().values())
    )


def rate_by_clarity(filtered: pd.DataFrame) -> pd.DataFrame:
    if filtered.empty or not {"clarity", "rate"}.issubset(filtered.columns):
        return pd.DataFrame(columns=["clarity", "average_rate", "highest_rate", "rows"])
    return (
        filtered.groupby("clarity")["rate"]
        .agg(["mean", "max", "count"])
        .reset_index()
        .rename(columns={"mean": "average_rate", "max": "highest_rate", "count": "rows"})
    )


def clarity_order(clarities: Sequence[str]) -> List[str]:
    grade_order = [g.upper() for g in CLARITY_GRADES]
    present = set(clarities)
    order = [c for c in grade_order if c in present]
    order += sorted(c for c in present if c not in grade_order)
    return order


def compute_rate_chart(filtered: pd.DataFrame) -> Optional[Dict[str, Any]]:
    by_clarity = rate_by_clarity(filtered)
    if by_clarity.empty:
        return None
    chart = clarity_bar_chart(by_clarity, clarity_order(by_clarity["clarity"].tolist()))
    return to_vega_spec(chart)
