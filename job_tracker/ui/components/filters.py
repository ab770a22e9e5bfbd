import streamlit as st
from job_tracker.services.controller import InteractionController

def render_filter_bar(controller: InteractionController):
    buttons = controller.view().filters
    cols = st.columns(len(buttons))

    for col, button in zip(cols, buttons):
        col.button(
            button.label,
            key=f"filter_{button.value}",
            type="primary" if button.active else "secondary",
            use_container_width=True,
            on_click=controller.select_filter,
            args=(button.value,),
        )
