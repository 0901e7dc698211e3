from typing import Dict, List

import pytest
from fastapi.testclient import TestClient

from app.db.seed import initialize_database
from app.db.store import JsonStore, get_store
from app.main import app
from app.services.mailer import email_service


@pytest.fixture
def store(tmp_path) -> JsonStore:
    s = JsonStore(tmp_path / "data")
    initialize_database(s)
    return s


@pytest.fixture
def sent_emails():
    captured: List[Dict[str, str]] = []

    def _capture(to: str, subject: str, html: str) -> bool:
        captured.append({"to": to, "subject": subject, "html": html})
        return True

    previous = email_service.set_sender_override(_capture)
    yield captured
    email_service.set_sender_override(previous)


@pytest.fixture
def client(store, sent_emails):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
