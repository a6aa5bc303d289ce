from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from config.settings import settings

APP_PATH = str(Path(__file__).resolve().parents[1] / "ui_app.py")

# Nothing listens on the discard port, so every request fails fast.
DEAD_API = "http://127.0.0.1:9/api/"


@pytest.fixture()
def dead_api(monkeypatch):
    monkeypatch.setattr(settings, "CONTACTS_API_BASE_URL", DEAD_API)


def _open(page, user_id):
    at = AppTest.from_file(APP_PATH, default_timeout=15)
    at.session_state["page"] = page
    at.session_state["user_id"] = user_id
    return at.run()


def test_detail_error_stays_dismissed(dead_api):
    at = _open("user_detail", 1)
    assert [e.value for e in at.error] == ["Connection error: All connection attempts failed"]

    at.button(key="dismiss_error").click().run()

    assert not at.error
    assert at.warning[0].value == "Contact could not be loaded."


def test_edit_form_disables_save_when_contact_missing(dead_api):
    at = _open("user_edit", 1)

    assert any(w.value == "Contact could not be loaded." for w in at.warning)
    assert at.button(key="submit_form").disabled
