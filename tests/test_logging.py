import logging
import pytest
from logging.handlers import RotatingFileHandler
from job_tracker.core.logging import setup_logging

def _file_handlers(root):
    return [h for h in root.handlers if isinstance(h, RotatingFileHandler)]

@pytest.fixture
def clean_root():
    """Detaches any file handler installed by earlier tests and restores it afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = _file_handlers(root), root.level
    for handler in saved_handlers:
        root.removeHandler(handler)

    yield root

    for handler in _file_handlers(root):
        root.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)

def test_setup_logging_creates_file_handler(tmp_path, clean_root):
    log_file = tmp_path / "logs" / "tracker.log"
    setup_logging(log_file, "DEBUG", console=False)

    assert log_file.parent.exists()
    assert clean_root.level == logging.DEBUG
    assert len(_file_handlers(clean_root)) == 1

    logging.getLogger("job_tracker.test").info("hello")
    for handler in _file_handlers(clean_root):
        handler.flush()
    assert "hello" in log_file.read_text()

def test_setup_logging_is_idempotent(tmp_path, clean_root):
    log_file = tmp_path / "tracker.log"
    setup_logging(log_file, console=False)
    count = len(clean_root.handlers)

    setup_logging(log_file, logging.WARNING, console=False)
    assert len(clean_root.handlers) == count
    assert clean_root.level == logging.WARNING
    assert _file_handlers(clean_root)[0].level == logging.WARNING
