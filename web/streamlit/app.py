"""Vote Summaries Dashboard."""

import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import plotly.graph_objects as go  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import container  # noqa: E402
from etl import validate_snapshot  # noqa: E402
from web.api import summary  # noqa: E402

# Ensure container is initialized
container.init()

st.set_page_config(page_title="Vote Summaries", page_icon="🗳️", layout="wide")

SUPPORT_COLOR = "#7259EF"
OPPOSE_COLOR = "#F44336"


@st.cache_data(show_spinner=False)
def get_summary_data():
    """Get both summaries via views."""
    logger.info("Loading summaries for dashboard")
    return {
        "legislators": [s.model_dump() for s in summary.get_legislator_summaries(container.summary)],
        "bills": [s.model_dump() for s in summary.get_bill_summaries(container.summary)],
    }


def grouped_bar_chart(data: list, label_key: str, series: list[tuple[str, str, str]], title: str = "") -> go.Figure:
    """Side-by-side bars, one trace per (key, name, color)."""
    fig = go.Figure(
        [
            go.Bar(
                x=[d[label_key] for d in data],
                y=[d[key] for d in data],
                name=name,
                marker_color=bar_color,
            )
            for key, name, bar_color in series
        ]
    )
    return fig.update_layout(
        title=title,
        barmode="group",
        yaxis=dict(rangemode="tozero", dtick=1 if len(data) < 30 else None),
        legend=dict(orientation="h", y=1.1),
        margin=dict(t=60, b=40, l=40, r=20),
        height=450,
    )


def legislators_tab(rows: list):
    """Legislator voting activity tab."""
    if not rows:
        st.info("No legislators loaded.")
        return

    st.subheader("👤 Legislators Voting Activity")
    st.plotly_chart(
        grouped_bar_chart(
            rows,
            "legislator",
            [("supported_bills", "Supported Bills", SUPPORT_COLOR), ("opposed_bills", "Opposed Bills", OPPOSE_COLOR)],
        ),
        width="stretch",
    )

    cols = st.columns(3)
    cols[0].metric("Legislators", len(rows))
    cols[1].metric("Yea ballots", sum(r["supported_bills"] for r in rows))
    cols[2].metric("Nay ballots", sum(r["opposed_bills"] for r in rows))

    st.dataframe(rows, width="stretch", hide_index=True)


def bills_tab(rows: list):
    """Bill voting outcome tab."""
    if not rows:
        st.info("No bills have been voted on.")
        return

    st.subheader("📜 Bills Voting Results")
    st.plotly_chart(
        grouped_bar_chart(
            rows,
            "bill",
            [("supporters", "Supporters", SUPPORT_COLOR), ("opposers", "Opposers", OPPOSE_COLOR)],
        ),
        width="stretch",
    )

    st.dataframe(rows, width="stretch", hide_index=True)


def integrity_sidebar():
    result = validate_snapshot(container.records.snapshot)
    st.sidebar.subheader("Data integrity")
    if result["valid"]:
        st.sidebar.success("All references resolve")
    for issue in result["issues"]:
        st.sidebar.warning(issue)


def main():
    st.title("🗳️ Vote Summaries")
    st.markdown("*Legislator voting activity and bill outcomes*")

    if st.sidebar.button("Reload data"):
        container.reload()
        get_summary_data.clear()

    with st.spinner("Loading data..."):
        data = get_summary_data()

    tab1, tab2 = st.tabs(["👤 Legislators", "📜 Bills"])

    with tab1:
        legislators_tab(data["legislators"])

    with tab2:
        bills_tab(data["bills"])

    integrity_sidebar()

    st.sidebar.markdown("---")
    st.sidebar.markdown(f"**Data Source:** `{container.records.data_dir}`")


if __name__ == "__main__":
    main()
