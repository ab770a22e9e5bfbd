import streamlit as st
from job_tracker.core.config import settings
from job_tracker.core.logging import setup_logging
from job_tracker.services.store import RecordStore
from job_tracker.services.controller import InteractionController

# Import UI Components
from job_tracker.ui.components.form import render_application_form
from job_tracker.ui.components.stats import render_stats
from job_tracker.ui.components.filters import render_filter_bar
from job_tracker.ui.components.grid import render_grid
from job_tracker.ui.components.sidebar import render_sidebar
from job_tracker.ui.components.confirm_dialog import confirm_from_dialog

# Setup Logging
logger = setup_logging(settings.log_file, settings.log_level_value)

def notify_toast(message: str):
    st.toast(message)

def get_controller() -> InteractionController:
    """Returns this browser session's controller, creating it on first visit."""
    if "controller" not in st.session_state:
        controller = InteractionController(
            store=RecordStore(),
            confirm=confirm_from_dialog,
            notify=notify_toast,
            date_format=settings.date_format,
        )
        controller.load()
        st.session_state.controller = controller
    return st.session_state.controller

def main():
    st.set_page_config(page_title=settings.page_title, page_icon=settings.page_icon, layout="wide")
    st.title(f"{settings.page_icon} {settings.page_title}")

    controller = get_controller()

    render_application_form(controller)

    st.divider()
    render_stats(controller.view().stats)

    st.subheader("📋 Your Applications")
    render_filter_bar(controller)
    render_grid(controller, cards_per_row=settings.cards_per_row)

    # Sidebar last so the export reflects this run's submission
    render_sidebar(controller, show_chart=settings.show_status_chart)

if __name__ == "__main__":
    main()
