import streamlit as st
from pydantic import ValidationError
from job_tracker.models import ApplicationStatus
from job_tracker.services.controller import InteractionController
from job_tracker.services.projector import format_status
import logging

logger = logging.getLogger(__name__)

FIELD_LABELS = {
    "company": "Company",
    "position": "Position",
    "location": "Location",
    "salary": "Salary",
    "status": "Status",
    "applied_date": "Applied Date",
    "notes": "Notes",
}

def render_application_form(controller: InteractionController):
    st.subheader("➕ Add Job Application")

    with st.form("application_form", clear_on_submit=True):
        c1, c2 = st.columns(2)
        with c1:
            company = st.text_input("Company *", placeholder="e.g. Google")
            location = st.text_input("Location", placeholder="e.g. Remote")
            status = st.selectbox(
                "Status",
                options=list(ApplicationStatus),
                format_func=format_status,
            )
        with c2:
            position = st.text_input("Position *", placeholder="e.g. Software Engineer")
            salary = st.text_input("Salary", placeholder="e.g. $120k")
            applied_date = st.date_input(
                "Applied Date",
                value=controller.view().applied_date_default,
                format="MM/DD/YYYY",
            )

        notes = st.text_area("Notes", placeholder="Recruiter name, next steps, ...")

        if st.form_submit_button("Add Application", type="primary"):
            fields = {
                "company": company,
                "position": position,
                "location": location,
                "salary": salary,
                "status": status,
                "applied_date": applied_date,
                "notes": notes,
            }
            try:
                controller.submit(fields)
            except ValidationError as e:
                logger.warning(f"Rejected application form: {e.error_count()} invalid field(s)")
                _show_errors(e)

def _show_errors(error: ValidationError):
    for err in error.errors():
        field = err["loc"][0] if err["loc"] else ""
        label = FIELD_LABELS.get(field, field)
        if err["type"] in ("string_too_short", "missing"):
            st.error(f"{label} is required.")
        else:
            st.error(f"{label}: {err['msg']}")
