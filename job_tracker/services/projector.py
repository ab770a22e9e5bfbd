from datetime import date
from typing import Iterable, List, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict
from job_tracker.models import ApplicationRecord, ApplicationStatus
from job_tracker.core.constants import (
    STATUS_LABELS,
    STATUS_COLORS,
    FILTER_ALL,
    FILTER_OPTIONS,
    FILTER_LABELS,
    EMPTY_ALL_HEADING,
    EMPTY_ALL_MESSAGE,
    EMPTY_FILTER_HEADING,
    EMPTY_FILTER_MESSAGE,
)

# Either the literal "all" or a single status
StatusFilter = Union[str, ApplicationStatus]

DEFAULT_DATE_FORMAT = "%m/%d/%Y"


class RecordCard(BaseModel):
    model_config = ConfigDict(frozen=True)

    record_id: int
    company: str
    position: str
    status: str
    status_label: str
    status_color: str
    details: List[Tuple[str, str]] = []
    notes: Optional[str] = None


class EmptyState(BaseModel):
    model_config = ConfigDict(frozen=True)

    heading: str
    message: str


class FilterButton(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    active: bool = False


class GridView(BaseModel):
    model_config = ConfigDict(frozen=True)

    cards: List[RecordCard]
    empty: Optional[EmptyState] = None

    @property
    def is_empty(self) -> bool:
        return not self.cards


def parse_filter(name: StatusFilter) -> StatusFilter:
    """Resolves a filter name to "all" or an ApplicationStatus."""
    if isinstance(name, ApplicationStatus):
        return name

    normalized = str(name).strip().lower()
    if normalized == FILTER_ALL:
        return FILTER_ALL
    if normalized in ApplicationStatus.all_values():
        return ApplicationStatus(normalized)

    raise ValueError(f"Unknown filter '{name}'. Expected one of: {', '.join(FILTER_OPTIONS)}")


def filter_value(status_filter: StatusFilter) -> str:
    if isinstance(status_filter, ApplicationStatus):
        return status_filter.value
    return status_filter


def project(records: Iterable[ApplicationRecord], status_filter: StatusFilter = FILTER_ALL) -> List[ApplicationRecord]:
    """Returns the records visible under the filter, in insertion order."""
    status_filter = parse_filter(status_filter)
    if status_filter == FILTER_ALL:
        return list(records)
    return [r for r in records if r.status == status_filter]


def format_status(status) -> str:
    """Display label for a status; unknown values pass through unchanged."""
    return STATUS_LABELS.get(status, status)


def format_date(value: Optional[date], fmt: str = DEFAULT_DATE_FORMAT) -> str:
    if not value:
        return ""
    return value.strftime(fmt)


def render_card(record: ApplicationRecord, date_format: str = DEFAULT_DATE_FORMAT) -> RecordCard:
    details = []
    if record.location:
        details.append(("Location", record.location))
    if record.salary:
        details.append(("Salary", record.salary))
    if record.applied_date:
        details.append(("Applied", format_date(record.applied_date, date_format)))

    return RecordCard(
        record_id=record.id,
        company=record.company,
        position=record.position,
        status=record.status.value,
        status_label=format_status(record.status),
        status_color=STATUS_COLORS.get(record.status, "gray"),
        details=details,
        notes=record.notes or None,
    )


def empty_state(status_filter: StatusFilter = FILTER_ALL) -> EmptyState:
    value = filter_value(parse_filter(status_filter))
    if value == FILTER_ALL:
        return EmptyState(heading=EMPTY_ALL_HEADING, message=EMPTY_ALL_MESSAGE)
    return EmptyState(heading=EMPTY_FILTER_HEADING.format(status=value), message=EMPTY_FILTER_MESSAGE)


def filter_buttons(active: StatusFilter = FILTER_ALL) -> List[FilterButton]:
    active_value = filter_value(parse_filter(active))
    return [
        FilterButton(value=option, label=FILTER_LABELS[option], active=option == active_value)
        for option in FILTER_OPTIONS
    ]


def build_grid(
    records: Iterable[ApplicationRecord],
    status_filter: StatusFilter = FILTER_ALL,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> GridView:
    visible = project(records, status_filter)
    if not visible:
        return GridView(cards=[], empty=empty_state(status_filter))
    return GridView(cards=[render_card(r, date_format) for r in visible])
