from __future__ import annotations

from typing import Any, Dict, List

import altair as alt
import pandas as pd


def clarity_bar_chart(by_clarity: pd.DataFrame, order: List[str]) -> alt.Chart:
    """Average rate per clarity grade, bars in grading order."""
    return (
        alt.Chart(by_clarity)
        .mark_bar()
        .encode(
            x=alt.X("clarity:N", title="Clarity", sort=order, axis=alt.Axis(labelAngle=0)),
            y=alt.Y("average_rate:Q", title="Average Rate", axis=alt.Axis(format=",.0f", gridDash=[4, 4])),
            tooltip=[
                alt.Tooltip("clarity:N", title="Clarity"),
                alt.Tooltip("average_rate:Q", title="Average", format=",.2f"),
                alt.Tooltip("highest_rate:Q", title="Highest", format=",.2f"),
                alt.Tooltip("rows:Q", title="Rows"),
            ],
        )
    )


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    # Plain dict so st.vega_lite_chart and JSON responses take it as-is.
    return chart.to_dict()
