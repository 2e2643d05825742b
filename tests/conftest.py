"""Shared test fixtures.

Provides a ``test_client`` for FastAPI, a mock Supabase client wired with
one chainable mock per career map table, and a valid form payload.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock, patch

# Settings are read at import time
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-key")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402


def chainable_table_mock() -> MagicMock:
    """Return a mock that supports fluent chaining."""
    m = MagicMock()
    for method in ("select", "insert", "upsert", "update", "eq", "limit", "order"):
        getattr(m, method).return_value = m
    return m


SUBMISSION_ROW: dict[str, Any] = {
    "id": 42,
    "username": "山田太郎",
    "age": 30,
    "years_of_experience": 5,
    "annual_salary": 6000000,
    "purpose": "skill_up",
    "created_at": "2025-05-01T09:00:00+00:00",
}


@pytest.fixture()
def valid_payload() -> dict[str, Any]:
    """A career map form payload that passes validation."""
    return {
        "username": "山田太郎",
        "age": 30,
        "yearsOfExperience": 5,
        "skills": [{"name": "Python"}, {"name": "SQL"}],
        "annualSalary": 6000000,
        "purpose": "skill_up",
    }


@pytest.fixture()
def supabase_tables() -> dict[str, MagicMock]:
    """One chainable mock per table; submissions return ``SUBMISSION_ROW``."""
    submissions = chainable_table_mock()
    submissions.execute.return_value = MagicMock(data=[dict(SUBMISSION_ROW)])
    skills = chainable_table_mock()
    skills.execute.return_value = MagicMock(data=[])
    return {"form_submissions": submissions, "skills": skills}


@pytest.fixture()
def mock_supabase(
    supabase_tables: dict[str, MagicMock],
) -> Generator[MagicMock, None, None]:
    """Patch ``get_supabase`` in the submission service with a mock client."""
    mock_client = MagicMock()
    mock_client.table.side_effect = lambda name: supabase_tables[name]
    with patch("app.services.submission.get_supabase", return_value=mock_client):
        yield mock_client


@pytest.fixture()
def mock_supabase_health() -> Generator[MagicMock, None, None]:
    """Patch the Supabase client used by the health router."""
    mock_client = MagicMock()
    mock_table = chainable_table_mock()
    mock_table.execute.return_value = MagicMock()  # non-None result
    mock_client.table.return_value = mock_table
    with patch("app.routers.health.get_supabase", return_value=mock_client):
        yield mock_client


@pytest.fixture()
def mock_supabase_disconnected() -> Generator[MagicMock, None, None]:
    """Patch ``get_supabase`` to simulate a disconnected database."""
    with patch(
        "app.routers.health.get_supabase",
        side_effect=Exception("Connection refused"),
    ):
        yield MagicMock()


@pytest.fixture()
def test_client() -> Generator[TestClient, None, None]:
    """Provide a FastAPI TestClient."""
    from app.main import app

    with TestClient(app) as client:
        yield client
