"""Endpoint tests for /api/v1/career-map."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from app.core.constants import (
    MESSAGE_SKILLS_FAILED,
    MESSAGE_SUBMISSION_FAILED,
    MESSAGE_SUBMIT_SUCCESS,
    MESSAGE_UNEXPECTED_ERROR,
    MESSAGE_VALIDATION_FAILED,
)

BASE = "/api/v1/career-map"


class TestFormDefinitionEndpoint:
    """GET /form"""

    def test_returns_form_metadata(self, test_client: TestClient) -> None:
        response = test_client.get(f"{BASE}/form")

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "guputo_kun"
        assert body["submit_label"] == "キャリアパスマップを作成する"
        assert len(body["fields"]) == 6
        assert len(body["purpose_options"]) == 4
        assert body["defaults"]["skills"] == [{"name": ""}]


class TestValidateEndpoint:
    """POST /validate never writes to the database."""

    def test_valid(
        self,
        test_client: TestClient,
        valid_payload: dict[str, Any],
        mock_supabase: MagicMock,
    ) -> None:
        response = test_client.post(f"{BASE}/validate", json=valid_payload)

        assert response.status_code == 200
        assert response.json() == {"valid": True, "errors": {}}
        mock_supabase.table.assert_not_called()

    def test_invalid(self, test_client: TestClient, valid_payload: dict[str, Any]) -> None:
        payload = dict(valid_payload, age="17", skills=[])

        response = test_client.post(f"{BASE}/validate", json=payload)

        assert response.status_code == 200
        body = response.json()
        assert body["valid"] is False
        assert body["errors"] == {
            "age": "年齢は18歳以上で入力してください",
            "skills": "スキルを1つ以上入力してください",
        }


class TestCreateCareerMap:
    """POST "" validates then performs the two-step write."""

    def test_created(
        self,
        test_client: TestClient,
        valid_payload: dict[str, Any],
        mock_supabase: MagicMock,
        supabase_tables: dict[str, MagicMock],
    ) -> None:
        response = test_client.post(BASE, json=valid_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == MESSAGE_SUBMIT_SUCCESS
        assert body["submission_id"] == 42
        assert body["skill_count"] == 2
        supabase_tables["skills"].insert.assert_called_once()

    def test_numeric_strings_from_text_inputs(
        self,
        test_client: TestClient,
        valid_payload: dict[str, Any],
        mock_supabase: MagicMock,
        supabase_tables: dict[str, MagicMock],
    ) -> None:
        payload = dict(
            valid_payload, age="30", yearsOfExperience="5", annualSalary=""
        )

        response = test_client.post(BASE, json=payload)

        assert response.status_code == 201
        row = supabase_tables["form_submissions"].insert.call_args.args[0][0]
        assert row["age"] == 30
        assert row["annual_salary"] is None

    def test_validation_failure_skips_database(
        self,
        test_client: TestClient,
        mock_supabase: MagicMock,
    ) -> None:
        response = test_client.post(BASE, json={"username": "山田"})

        assert response.status_code == 422
        body = response.json()
        assert body["message"] == MESSAGE_VALIDATION_FAILED
        assert set(body["errors"]) == {"age", "yearsOfExperience", "skills.0.name"}
        mock_supabase.table.assert_not_called()

    def test_submission_failure_returns_502(
        self,
        test_client: TestClient,
        valid_payload: dict[str, Any],
        mock_supabase: MagicMock,
        supabase_tables: dict[str, MagicMock],
    ) -> None:
        supabase_tables["form_submissions"].execute.side_effect = Exception("boom")

        response = test_client.post(BASE, json=valid_payload)

        assert response.status_code == 502
        body = response.json()
        assert body["message"] == MESSAGE_SUBMISSION_FAILED
        assert body["failed_stage"] == "submission"

    def test_skills_failure_returns_502_with_orphan_id(
        self,
        test_client: TestClient,
        valid_payload: dict[str, Any],
        mock_supabase: MagicMock,
        supabase_tables: dict[str, MagicMock],
    ) -> None:
        supabase_tables["skills"].execute.side_effect = Exception("boom")

        response = test_client.post(BASE, json=valid_payload)

        assert response.status_code == 502
        body = response.json()
        assert body["message"] == MESSAGE_SKILLS_FAILED
        assert body["failed_stage"] == "skills"
        assert body["submission_id"] == 42

    def test_unexpected_failure_returns_500(
        self, test_client: TestClient, valid_payload: dict[str, Any]
    ) -> None:
        with patch(
            "app.services.submission.get_supabase",
            side_effect=RuntimeError("no client"),
        ):
            response = test_client.post(BASE, json=valid_payload)

        assert response.status_code == 500
        assert response.json()["message"] == MESSAGE_UNEXPECTED_ERROR

    def test_non_object_body_rejected(
        self, test_client: TestClient, mock_supabase: MagicMock
    ) -> None:
        response = test_client.post(BASE, json=["not", "a", "form"])

        assert response.status_code == 422
        body = response.json()
        assert body["message"] == MESSAGE_VALIDATION_FAILED
        assert body["errors"]
        mock_supabase.table.assert_not_called()

    def test_malformed_json_rejected(
        self, test_client: TestClient, mock_supabase: MagicMock
    ) -> None:
        response = test_client.post(
            BASE,
            content=b"{\"username\": ",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 422
        assert response.json()["message"] == MESSAGE_VALIDATION_FAILED
        mock_supabase.table.assert_not_called()

    def test_validate_endpoint_non_object_body(self, test_client: TestClient) -> None:
        response = test_client.post(f"{BASE}/validate", json=42)

        assert response.status_code == 422
        assert response.json()["message"] == MESSAGE_VALIDATION_FAILED
