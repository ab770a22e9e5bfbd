import streamlit as st
from job_tracker.services.controller import InteractionController
from job_tracker.services.projector import RecordCard
from job_tracker.ui.components.confirm_dialog import render_delete_dialog

def render_grid(controller: InteractionController, cards_per_row: int = 3):
    grid = controller.view().grid

    if grid.is_empty:
        st.info(f"📝 **{grid.empty.heading}**\n\n{grid.empty.message}")
        return

    cols = st.columns(cards_per_row)
    for i, card in enumerate(grid.cards):
        with cols[i % cards_per_row]:
            _render_card(controller, card)

def _render_card(controller: InteractionController, card: RecordCard):
    with st.container(border=True):
        st.markdown(f"### {card.company}")
        st.markdown(f"**{card.position}**")

        for label, value in card.details:
            st.markdown(f"**{label}:** {value}")
        st.markdown(f"**Status:** :{card.status_color}-background[{card.status_label}]")

        if card.notes:
            st.markdown(f'*"{card.notes}"*')

        if st.button("🗑️ Delete", key=f"delete_{card.record_id}"):
            render_delete_dialog(controller, card.record_id, card.company)
