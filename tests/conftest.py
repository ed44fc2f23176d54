"""Pytest configuration: hermetic settings and fresh app collaborators per test.

Settings are read once when ``tuition_api.main`` is imported, so the
environment is pinned here before anything imports the application. Email and
Sheets are left unconfigured; tests that need them swap in fakes through
``app.state``.
"""

from __future__ import annotations

import os
import tempfile

os.environ.update(
    {
        "EMAIL_USER": "",
        "EMAIL_PASS": "",
        "SPREADSHEET_ID": "",
        "GOOGLE_CLIENT_EMAIL": "",
        "GOOGLE_PRIVATE_KEY": "",
        "GOOGLE_CREDENTIALS_FILE": "",
        "LOG_DIR": tempfile.mkdtemp(prefix="tuition-api-logs-"),
    }
)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from tuition_api.config import Settings  # noqa: E402
from tuition_api.main import app  # noqa: E402
from tuition_api.services.notification_service import DeliveryResult  # noqa: E402
from tuition_api.store import PaymentStore  # noqa: E402


class FakeNotifier:
    """Records every notified payment and returns a fixed outcome."""

    def __init__(self, result: DeliveryResult | None = None):
        self.result = result or DeliveryResult(status="sent", message_id="<test@local>")
        self.notified = []

    def notify(self, record):
        self.notified.append(record)
        return self.result


class FakeSheets:
    """Collects appended records; optionally raises like a failing Sheets API."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.rows = []

    def append_record(self, record):
        if self.error is not None:
            raise self.error
        self.rows.append(record)
        return True


VALID_FORM = {
    "nama": "Siti Aminah",
    "email": "siti@example.ac.id",
    "nim": "2021040123",
    "prodi": "Teknik Informatika",
    "semester": "3",
    "kode_unik": "123",
    "jumlah_pembayaran": "1500000",
}


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, EMAIL_USER="", EMAIL_PASS="", SPREADSHEET_ID="")


@pytest.fixture
def store() -> PaymentStore:
    return PaymentStore()


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def sheets() -> FakeSheets:
    return FakeSheets()


@pytest.fixture
def client(store, notifier, sheets):
    """TestClient over the real app with in-test collaborators.

    Server errors are returned as responses so 500 handling can be asserted.
    """
    saved = (app.state.store, app.state.notifier, app.state.sheets)
    app.state.store, app.state.notifier, app.state.sheets = store, notifier, sheets
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.state.store, app.state.notifier, app.state.sheets = saved


@pytest.fixture
def valid_form() -> dict:
    return dict(VALID_FORM)
