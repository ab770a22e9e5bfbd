import pytest
from pathlib import Path
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parent.parent / "job_tracker" / "ui" / "main.py"

@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("JOB_TRACKER_LOG_FILE", str(tmp_path / "ui.log"))
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    return at.run()

def test_page_renders_empty_tracker(app):
    assert not app.exception
    assert [m.value for m in app.metric] == ["0", "0", "0", "0"]
    assert any("No job applications yet!" in i.value for i in app.info)

def test_controller_lives_in_session_state(app):
    controller = app.session_state["controller"]
    assert len(controller.store) == 0
    assert controller.view().active_filter == "all"

def test_filter_button_switches_empty_state(app):
    app.button(key="filter_rejected").click().run()

    assert not app.exception
    assert any("No rejected applications found!" in i.value for i in app.info)
