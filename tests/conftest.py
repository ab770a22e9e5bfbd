import pytest
import logging
from datetime import date
from job_tracker.models import ApplicationForm, ApplicationStatus
from job_tracker.services.store import RecordStore
from job_tracker.services.controller import InteractionController

logging.basicConfig(level=logging.INFO)

FIXED_TODAY = date(2026, 1, 15)

class StubConfirm:
    """Records prompts and answers with a preset value."""

    def __init__(self, answer: bool = True):
        self.answer = answer
        self.messages = []

    def __call__(self, message: str) -> bool:
        self.messages.append(message)
        return self.answer

@pytest.fixture
def today():
    return lambda: FIXED_TODAY

@pytest.fixture
def store(today):
    return RecordStore(today=today)

@pytest.fixture
def confirm():
    return StubConfirm(answer=True)

@pytest.fixture
def notifications():
    return []

@pytest.fixture
def controller(store, confirm, notifications, today):
    ctrl = InteractionController(store, confirm=confirm, notify=notifications.append, today=today)
    ctrl.load()
    return ctrl

@pytest.fixture
def make_form():
    def _make(company="Acme", position="Engineer", status=ApplicationStatus.APPLIED, **kwargs):
        return ApplicationForm(company=company, position=position, status=status, **kwargs)
    return _make
