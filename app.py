import streamlit as st
from typing import List

from pricelist.config import FLAT_RATE_SOURCE, REFRESH_INTERVAL_SECONDS
from pricelist.filters import SORT_FIELDS, apply_filters, filter_options, options_changed, records_to_frame
from pricelist.metrics import compute_rate_chart, compute_summary, count_unpriced, empty_state_message
from pricelist.pipeline import load_price_list
from pricelist.records import PriceRecord

SOURCE = FLAT_RATE_SOURCE


# ---------- UI / layout helpers ----------
def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        """
        <style>
        .app-top-bar {padding: 6px 0 4px;border-bottom: 1px solid #e5e7eb;margin-bottom: 10px;}
        .app-top-bar .breadcrumb {color: #6b7280;font-size: 0.9rem;margin-bottom: 2px;}
        .app-top-bar .page-title {font-size: 1.4rem;font-weight: 700;color: #111827;}
        .chip-row {display: flex;flex-wrap: wrap;gap: 6px;margin-top: 6px;}
        .chip {background: #f3f4f6;border: 1px solid #e5e7eb;border-radius: 14px;padding: 4px 10px;font-size: 0.85rem;color: #374151;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


def format_filter_summary(search_term: str, colours: List[str], clarities: List[str]) -> str:
    search_chip = f"Search: {search_term}" if search_term else "Search: none"
    colour_chip = f"Colour: {', '.join(colours)}" if colours else "Colour: All"
    clarity_chip = f"Clarity: {', '.join(clarities)}" if clarities else "Clarity: All"
    return "".join([f"<span class='chip'>{txt}</span>" for txt in [search_chip, colour_chip, clarity_chip]])


def format_rate(value: float) -> str:
    return f"₹{value:,.2f}"


@st.cache_data(ttl=REFRESH_INTERVAL_SECONDS, show_spinner="Loading price list…")
def cached_price_list() -> List[PriceRecord]:
    return load_price_list(SOURCE)


# ---------- UI setup ----------
st.set_page_config(page_title="Diamond Pricing", layout="wide")
inject_base_styles()
st.title("Diamond Pricing")
st.caption("Natural polish rates from the published price sheet. Refreshes every few minutes.")

top = st.container()
c1, c2 = top.columns([8, 2])
with c1:
    st.markdown(
        "<div class='app-top-bar'><div class='breadcrumb'>Price List</div><div class='page-title'>Rates</div></div>",
        unsafe_allow_html=True,
    )
with c2:
    if st.button("Refresh"):
        cached_price_list.clear()
        st.rerun()

# ----- Sidebar: filters -----
with st.sidebar:
    st.markdown("### Filters")
    search_term = st.text_input("Search sleeve, colour, clarity or rate", "")
    options = filter_options(records_to_frame(cached_price_list()))
    colours = st.multiselect("Colour", options=options["colours"], default=[])
    clarities = st.multiselect("Clarity", options=options["clarities"], default=[])
    st.markdown("---")
    sort_field = st.selectbox("Sort by", options=list(SORT_FIELDS), index=list(SORT_FIELDS).index("rate"))
    sort_direction = st.radio("Direction", ["desc", "asc"], index=0, horizontal=True)


@st.fragment(run_every=REFRESH_INTERVAL_SECONDS)
def render_price_list():
    records = cached_price_list()
    frame = records_to_frame(records)
    # sidebar widgets live outside this fragment; rerun the page to rebuild them
    if options_changed(options, frame):
        st.rerun()
    message = empty_state_message(records, frame)
    if message is not None:
        st.info(message)
        return

    filters = {
        "search_term": search_term,
        "colours": colours,
        "clarities": clarities,
        "sort_field": sort_field,
        "sort_direction": sort_direction,
    }
    filtered = apply_filters(frame, filters)
    st.markdown(f"<div class='chip-row'>{format_filter_summary(search_term, colours, clarities)}</div>", unsafe_allow_html=True)

    summary = compute_summary(frame, filtered)
    cols = st.columns(4)
    cols[0].metric("Total Rows", f"{summary['total_inventory']:,}")
    cols[1].metric("Showing", f"{summary['filtered_count']:,}")
    cols[2].metric("Average Rate", format_rate(summary["average_rate"]))
    cols[3].metric("Highest Rate", format_rate(summary["highest_rate"]))

    unpriced = count_unpriced(records)
    if unpriced:
        st.caption(f"{unpriced:,} sleeve rows have no rate for any clarity and are hidden.")

    chart_spec = compute_rate_chart(filtered)
    if chart_spec is not None:
        st.vega_lite_chart(chart_spec, use_container_width=True)

    if filtered.empty:
        st.info("No rows match the current filters.")
        return
    display = filtered.rename(columns={"sleeve": "Sleeve", "colour": "Colour", "clarity": "Clarity", "rate": "Rate"})
    st.dataframe(
        display,
        use_container_width=True,
        hide_index=True,
        column_config={"Rate": st.column_config.NumberColumn("Rate", format="₹%.2f")},
    )
    st.download_button(
        "Export CSV",
        data=display.to_csv(index=False).encode("utf-8"),
        file_name="price_list.csv",
        mime="text/csv",
    )


render_price_list()
