import pandas as pd
from datetime import datetime
from typing import Iterable, Optional
from job_tracker.models import ApplicationRecord
from job_tracker.services.projector import format_status

EXPORT_COLUMNS = {
    "id": "ID",
    "company": "Company",
    "position": "Position",
    "location": "Location",
    "salary": "Salary",
    "status": "Status",
    "applied_date": "Applied Date",
    "date_added": "Date Added",
    "notes": "Notes",
}

def records_to_dataframe(records: Iterable[ApplicationRecord]) -> pd.DataFrame:
    """
    Flattens records into a DataFrame with human readable column names.
    Row order follows the store's insertion order.
    """
    data = [r.model_dump() for r in records]
    df = pd.DataFrame(data, columns=list(EXPORT_COLUMNS))

    if df.empty:
        return df.rename(columns=EXPORT_COLUMNS)

    df["status"] = df["status"].map(format_status)
    df["applied_date"] = pd.to_datetime(df["applied_date"]).dt.strftime('%Y-%m-%d').fillna("")
    df["date_added"] = pd.to_datetime(df["date_added"]).dt.strftime('%Y-%m-%d')
    return df.rename(columns=EXPORT_COLUMNS)

def export_csv(records: Iterable[ApplicationRecord]) -> bytes:
    return records_to_dataframe(records).to_csv(index=False).encode('utf-8')

def export_filename(now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    return f"job_applications_{now.strftime('%Y%m%d')}.csv"
