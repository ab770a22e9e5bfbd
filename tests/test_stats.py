from datetime import date
from job_tracker.models import ApplicationRecord, ApplicationStatus
from job_tracker.services.stats import aggregate, status_breakdown, StatsSummary

def make_records(*statuses):
    return [
        ApplicationRecord(id=i, company="Acme", position="Dev", status=s, date_added=date(2026, 1, 1))
        for i, s in enumerate(statuses, start=1)
    ]

def test_aggregate_empty():
    assert aggregate([]) == StatsSummary(total=0, interview=0, offer=0, rejected=0)

def test_aggregate_counts():
    records = make_records(
        ApplicationStatus.APPLIED,
        ApplicationStatus.INTERVIEW,
        ApplicationStatus.INTERVIEW,
        ApplicationStatus.OFFER,
    )
    assert aggregate(records) == StatsSummary(total=4, interview=2, offer=1, rejected=0)

def test_aggregate_accepts_iterators():
    records = make_records(ApplicationStatus.REJECTED, ApplicationStatus.APPLIED)
    summary = aggregate(iter(records))
    assert summary.total == 2
    assert summary.rejected == 1

def test_status_breakdown_includes_zero_counts():
    counts = status_breakdown(make_records(ApplicationStatus.OFFER))
    assert counts == {
        ApplicationStatus.APPLIED: 0,
        ApplicationStatus.INTERVIEW: 0,
        ApplicationStatus.OFFER: 1,
        ApplicationStatus.REJECTED: 0,
    }
