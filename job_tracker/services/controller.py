import logging
from datetime import date
from typing import Any, Callable, List, Mapping, Optional
from pydantic import BaseModel, ConfigDict
from job_tracker.models import ApplicationForm
from job_tracker.services.store import RecordStore
from job_tracker.services.projector import (
    StatusFilter,
    GridView,
    FilterButton,
    DEFAULT_DATE_FORMAT,
    build_grid,
    filter_buttons,
    parse_filter,
    filter_value,
)
from job_tracker.services.stats import StatsSummary, aggregate
from job_tracker.core.constants import FILTER_ALL, ADD_SUCCESS_MESSAGE, CONFIRM_DELETE_MESSAGE

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[str], bool]
NotifyFn = Callable[[str], None]


class TrackerView(BaseModel):
    """Everything the page needs to draw itself after an interaction."""

    model_config = ConfigDict(frozen=True)

    grid: GridView
    stats: StatsSummary
    filters: List[FilterButton]
    active_filter: str
    applied_date_default: date


def _no_notify(message: str) -> None:
    logger.debug(f"Notification dropped: {message}")


class InteractionController:
    """
    Turns user actions into store mutations and returns a fresh view.

    Confirmation and notification are injected so that the page can wire
    them to dialogs and toasts while tests pass plain stubs.
    """

    def __init__(
        self,
        store: RecordStore,
        confirm: ConfirmFn,
        notify: NotifyFn = _no_notify,
        today: Callable[[], date] = date.today,
        date_format: str = DEFAULT_DATE_FORMAT,
    ):
        self.store = store
        self.confirm = confirm
        self.notify = notify
        self.today = today
        self.date_format = date_format
        self.active_filter: StatusFilter = FILTER_ALL
        self.applied_date_default: date = today()
        self._view: Optional[TrackerView] = None

    def load(self) -> TrackerView:
        """Initial page state: today's date in the form, everything shown."""
        self.applied_date_default = self.today()
        self.active_filter = FILTER_ALL
        logger.info("Tracker loaded")
        return self._render()

    def submit(self, fields: Mapping[str, Any]) -> int:
        """Validates the form fields, stores the application and re-renders."""
        form = ApplicationForm.model_validate(dict(fields))
        record_id = self.store.add(form)

        self.applied_date_default = self.today()
        self._render()
        self.notify(ADD_SUCCESS_MESSAGE)
        return record_id

    def request_delete(self, record_id: int) -> bool:
        if not self.confirm(CONFIRM_DELETE_MESSAGE):
            logger.info(f"Delete of application {record_id} cancelled")
            return False

        removed = self.store.remove(record_id)
        self._render()
        return removed

    def select_filter(self, name: StatusFilter) -> TrackerView:
        self.active_filter = parse_filter(name)
        logger.debug(f"Filter set to {filter_value(self.active_filter)}")
        return self._render()

    def view(self) -> TrackerView:
        if self._view is None:
            return self._render()
        return self._view

    def _render(self) -> TrackerView:
        records = self.store.all()
        self._view = TrackerView(
            grid=build_grid(records, self.active_filter, self.date_format),
            stats=aggregate(records),
            filters=filter_buttons(self.active_filter),
            active_filter=filter_value(self.active_filter),
            applied_date_default=self.applied_date_default,
        )
        return self._view
