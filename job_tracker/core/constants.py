from typing import Dict, List
from job_tracker.models import ApplicationStatus

# --- Application Status ---
STATUS_LABELS: Dict[ApplicationStatus, str] = {
    ApplicationStatus.APPLIED: "Applied",
    ApplicationStatus.INTERVIEW: "Interview",
    ApplicationStatus.OFFER: "Offer",
    ApplicationStatus.REJECTED: "Rejected",
}

# Badge colours for the status chip on each card
STATUS_COLORS: Dict[ApplicationStatus, str] = {
    ApplicationStatus.APPLIED: "blue",
    ApplicationStatus.INTERVIEW: "orange",
    ApplicationStatus.OFFER: "green",
    ApplicationStatus.REJECTED: "red",
}

# --- Filters ---
FILTER_ALL = "all"

FILTER_OPTIONS: List[str] = [FILTER_ALL] + ApplicationStatus.all_values()

FILTER_LABELS: Dict[str, str] = {
    FILTER_ALL: "All",
    **{status.value: label for status, label in STATUS_LABELS.items()},
}

# --- Stat Counters ---
STAT_LABELS: Dict[str, str] = {
    "total": "Total Applications",
    "interview": "Interviews",
    "offer": "Offers",
    "rejected": "Rejected",
}

# --- UI Messages ---
ADD_SUCCESS_MESSAGE = "Job application added successfully! 🎉"
CONFIRM_DELETE_MESSAGE = "Are you sure you want to delete this job application?"

EMPTY_ALL_HEADING = "No job applications yet!"
EMPTY_ALL_MESSAGE = "Add your first job application above to get started."
EMPTY_FILTER_HEADING = "No {status} applications found!"
EMPTY_FILTER_MESSAGE = "Try a different filter or add more applications."
