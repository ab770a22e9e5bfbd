import streamlit as st
from job_tracker.services.controller import InteractionController
from job_tracker.core.constants import CONFIRM_DELETE_MESSAGE

CONFIRMED_KEY = "delete_confirmed"

def confirm_from_dialog(message: str) -> bool:
    """
    Confirmation capability handed to the controller.
    Consumes the answer recorded by the delete dialog, so every answer is used once.
    """
    return bool(st.session_state.pop(CONFIRMED_KEY, False))

@st.dialog("🗑️ Delete Application")
def render_delete_dialog(controller: InteractionController, record_id: int, company: str):
    st.write(CONFIRM_DELETE_MESSAGE)
    st.caption(company)

    c1, c2 = st.columns(2)
    if c1.button("Delete", type="primary", use_container_width=True):
        st.session_state[CONFIRMED_KEY] = True
        if controller.request_delete(record_id):
            st.toast(f"Deleted {company}")
        st.rerun()

    if c2.button("Cancel", use_container_width=True):
        st.session_state[CONFIRMED_KEY] = False
        controller.request_delete(record_id)
        st.rerun()
