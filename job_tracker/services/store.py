from datetime import date
from typing import Callable, Iterator, List, Optional, Tuple
from job_tracker.models import ApplicationForm, ApplicationRecord
import logging

logger = logging.getLogger(__name__)

class RecordStore:
    """
    Ordered, in-memory collection of application records.
    Owns the id counter; ids are handed out once and never reused.
    """

    def __init__(self, today: Callable[[], date] = date.today, start_id: int = 1):
        self._records: List[ApplicationRecord] = []
        self._next_id = start_id
        self._today = today

    @property
    def next_id(self) -> int:
        return self._next_id

    def add(self, form: ApplicationForm) -> int:
        """Appends a new record built from the form and returns its id."""
        record = ApplicationRecord.from_form(self._next_id, form, date_added=self._today())
        self._next_id += 1
        self._records.append(record)
        logger.info(f"Added application {record.id} ({record.company} - {record.position})")
        return record.id

    def remove(self, record_id: int) -> bool:
        """Removes the record with this id. Unknown ids are ignored."""
        remaining = [r for r in self._records if r.id != record_id]
        if len(remaining) == len(self._records):
            logger.debug(f"Remove ignored, no application with id {record_id}")
            return False

        self._records = remaining
        logger.info(f"Removed application {record_id}")
        return True

    def get(self, record_id: int) -> Optional[ApplicationRecord]:
        return next((r for r in self._records if r.id == record_id), None)

    def all(self) -> Tuple[ApplicationRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return any(r.id == record_id for r in self._records)

    def __iter__(self) -> Iterator[ApplicationRecord]:
        return iter(self.all())

    def __repr__(self) -> str:
        return f"<RecordStore(size={len(self._records)}, next_id={self._next_id})>"
