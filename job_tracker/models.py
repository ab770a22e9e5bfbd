from typing import List, Optional
from datetime import date
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ApplicationStatus(str, Enum):
    APPLIED = "applied"
    INTERVIEW = "interview"
    OFFER = "offer"
    REJECTED = "rejected"

    @classmethod
    def all_values(cls) -> List[str]:
        return [s.value for s in cls]


class ApplicationForm(BaseModel):
    """Raw values captured by the add-application form."""

    company: str = Field(min_length=1)
    position: str = Field(min_length=1)
    location: str = ""
    salary: str = ""
    status: ApplicationStatus = ApplicationStatus.APPLIED
    applied_date: Optional[date] = None
    notes: str = ""

    @field_validator("company", "position", "location", "salary", "notes", mode="before")
    @classmethod
    def _strip_text(cls, value):
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("status", mode="before")
    @classmethod
    def _normalize_status(cls, value):
        # The select box hands back raw strings, sometimes as display labels
        if isinstance(value, str) and not isinstance(value, ApplicationStatus):
            return value.strip().lower()
        return value


class ApplicationRecord(BaseModel):
    """A tracked job application. Records are never edited once stored."""

    model_config = ConfigDict(frozen=True)

    id: int
    company: str
    position: str
    location: str = ""
    salary: str = ""
    status: ApplicationStatus
    applied_date: Optional[date] = None
    notes: str = ""
    date_added: date

    @classmethod
    def from_form(cls, record_id: int, form: ApplicationForm, date_added: date) -> "ApplicationRecord":
        return cls(id=record_id, date_added=date_added, **form.model_dump())

    def __repr__(self) -> str:
        return f"<ApplicationRecord(id={self.id}, company={self.company}, status={self.status.value})>"
