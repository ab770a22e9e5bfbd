from typing import Dict, Iterable
from pydantic import BaseModel, ConfigDict
from job_tracker.models import ApplicationRecord, ApplicationStatus


class StatsSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int = 0
    interview: int = 0
    offer: int = 0
    rejected: int = 0


def status_breakdown(records: Iterable[ApplicationRecord]) -> Dict[ApplicationStatus, int]:
    """Counts records per status. Every status is present, zero or not."""
    counts = {status: 0 for status in ApplicationStatus}
    for record in records:
        counts[record.status] = counts.get(record.status, 0) + 1
    return counts


def aggregate(records: Iterable[ApplicationRecord]) -> StatsSummary:
    records = list(records)
    counts = status_breakdown(records)
    return StatsSummary(
        total=len(records),
        interview=counts[ApplicationStatus.INTERVIEW],
        offer=counts[ApplicationStatus.OFFER],
        rejected=counts[ApplicationStatus.REJECTED],
    )
