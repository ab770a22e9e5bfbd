import streamlit as st
from job_tracker.services.stats import StatsSummary
from job_tracker.core.constants import STAT_LABELS

def render_stats(stats: StatsSummary):
    c1, c2, c3, c4 = st.columns(4)
    c1.metric(STAT_LABELS["total"], stats.total)
    c2.metric(STAT_LABELS["interview"], stats.interview)
    c3.metric(STAT_LABELS["offer"], stats.offer)
    c4.metric(STAT_LABELS["rejected"], stats.rejected)
