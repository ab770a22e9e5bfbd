import streamlit as st
import plotly.express as px
from job_tracker.services.controller import InteractionController
from job_tracker.services.stats import status_breakdown
from job_tracker.services.export import export_csv, export_filename
from job_tracker.services.projector import format_status
from job_tracker.core.constants import STATUS_COLORS

def render_sidebar(controller: InteractionController, show_chart: bool = True):
    records = controller.store.all()

    with st.sidebar:
        st.header("Overview")

        if not records:
            st.caption("Nothing tracked yet.")
            return

        if show_chart:
            _render_status_chart(records)

        st.divider()
        st.download_button(
            "📥 Download Applications (CSV)",
            data=export_csv(records),
            file_name=export_filename(),
            mime='text/csv',
        )

def _render_status_chart(records):
    counts = {status: n for status, n in status_breakdown(records).items() if n}
    fig = px.pie(
        names=[format_status(s) for s in counts],
        values=list(counts.values()),
        color=[format_status(s) for s in counts],
        color_discrete_map={format_status(s): c for s, c in STATUS_COLORS.items()},
        hole=0.4,
    )
    fig.update_layout(showlegend=True, margin=dict(l=0, r=0, t=0, b=0))
    st.plotly_chart(fig, width='stretch')
