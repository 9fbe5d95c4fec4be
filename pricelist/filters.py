from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

import pandas as pd

from pricelist.records import CLARITY_GRADES, FlatRateRecord, MatrixRateRecord, PriceRecord


FRAME_COLUMNS = ["sleeve", "colour", "clarity", "rate"]
SORT_FIELDS = ("sleeve", "colour", "clarity", "rate")
SORT_DIRECTIONS = ("asc", "desc")
ALL_TOKENS = {"all", "all colours", "all clarities"}


@dataclass(frozen=True)
class PriceListFilters:
    search_term: str = ""
    colours: List[str] = field(default_factory=list)
    clarities: List[str] = field(default_factory=list)
    sort_field: str = "rate"
    sort_direction: str = "desc"


def _as_selection(values: Optional[Iterable[object]]) -> List[str]:
    if not values:
        return []
    if isinstance(values, str):
        values = [values]
    out: List[str] = []
    for v in values:
        if v is None:
            continue
        s = str(v).strip().upper()
        if s and s.lower() not in ALL_TOKENS and s not in out:
            out.append(s)
    return out


def normalize_filters(raw: dict) -> PriceListFilters:
    sort_field = str(raw.get("sort_field") or "rate").strip().lower()
    if sort_field not in SORT_FIELDS:
        sort_field = "rate"
    sort_direction = str(raw.get("sort_direction") or "desc").strip().lower()
    if sort_direction not in SORT_DIRECTIONS:
        sort_direction = "desc"
    return PriceListFilters(
        search_term=(raw.get("search_term") or "").strip(),
        colours=_as_selection(raw.get("colours")),
        clarities=_as_selection(raw.get("clarities")),
        sort_field=sort_field,
        sort_direction=sort_direction,
    )


# ---------------- Frames ----------------
def records_to_frame(records: Sequence[PriceRecord]) -> pd.DataFrame:
    """Long-form frame (sleeve, colour, clarity, rate) for either record shape.

    Matrix rows are melted across clarity grades; zero rates mean "not priced"
    there and are dropped.
    """
    flat: List[Dict[str, object]] = [r.to_dict() for r in records if isinstance(r, FlatRateRecord)]
    matrix: List[Dict[str, object]] = [r.to_dict() for r in records if isinstance(r, MatrixRateRecord)]

    frames: List[pd.DataFrame] = []
    if flat:
        frames.append(pd.DataFrame(flat, columns=FRAME_COLUMNS))
    if matrix:
        wide = pd.DataFrame(matrix)
        wide["_row"] = range(len(wide))
        long = wide.melt(
            id_vars=["_row", "sleeve", "colour"],
            value_vars=list(CLARITY_GRADES),
            var_name="clarity",
            value_name="rate",
        )
        long = long[long["rate"] != 0].copy()
        # keep source row order, grades in their canonical order within a row
        long["_grade"] = long["clarity"].map({g: i for i, g in enumerate(CLARITY_GRADES)})
        long = long.sort_values(["_row", "_grade"], kind="mergesort")
        long["clarity"] = long["clarity"].str.upper()
        frames.append(long[FRAME_COLUMNS])
    if not frames:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    df = pd.concat(frames, ignore_index=True)
    df["rate"] = pd.to_numeric(df["rate"], errors="coerce").fillna(0.0).astype(float)
    return df


def filter_options(df: pd.DataFrame) -> Dict[str, List[str]]:
    if df.empty:
        return {"colours": [], "clarities": []}
    return {
        "colours": sorted(df["colour"].dropna().astype(str).unique().tolist()),
        "clarities": sorted(df["clarity"].dropna().astype(str).unique().tolist()),
    }


def apply_filters(df: pd.DataFrame, filters: dict | PriceListFilters) -> pd.DataFrame:
    filt = filters if isinstance(filters, PriceListFilters) else normalize_filters(filters)
    out = df.copy()
    if out.empty:
        return out

    if filt.search_term:
        q = filt.search_term.lower()
        mask = pd.Series(False, index=out.index)
        for col in FRAME_COLUMNS:
            mask |= out[col].map(_search_text).str.lower().str.contains(q, regex=False, na=False)
        out = out[mask]

    if filt.colours:
        out = out[out["colour"].isin(filt.colours)]
    if filt.clarities:
        out = out[out["clarity"].isin(filt.clarities)]

    ascending = filt.sort_direction == "asc"
    if filt.sort_field == "rate":
        out = out.sort_values("rate", ascending=ascending, kind="mergesort")
    else:
        out = out.sort_values(filt.sort_field, ascending=ascending, kind="mergesort", key=lambda s: s.astype(str))
    return out.reset_index(drop=True)


def _search_text(value: object) -> str:
    # 1000.0 should match a search for "1000"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def options_changed(options: Dict[str, List[str]], df: pd.DataFrame) -> bool:
    """True when a refreshed frame offers different colour/clarity choices."""
    return filter_options(df) != options
