"""Career map form endpoints.

GET  /form      -- field labels, constraints, purpose options and defaults.
POST /validate  -- validates form values without writing anything.
POST ""         -- validates, then writes the submission and its skills.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body
from starlette.responses import JSONResponse

from app.core.constants import MESSAGE_VALIDATION_FAILED
from app.models.career_map import FormDefinition, SubmissionOutcome, ValidationResult
from app.models.enums import SubmissionStage
from app.services.form_state import CareerMapFormState, get_form_definition
from app.services.submission import submit_career_map

logger = logging.getLogger(__name__)

router = APIRouter()

# Failed write stage -> HTTP status
_FAILURE_STATUS: dict[SubmissionStage, int] = {
    SubmissionStage.submission: 502,
    SubmissionStage.skills: 502,
    SubmissionStage.unexpected: 500,
}


@router.get("/form", response_model=FormDefinition)
async def form_definition() -> FormDefinition:
    """Return everything needed to render the career map form."""
    return get_form_definition()


@router.post("/validate", response_model=ValidationResult)
async def validate_form(
    payload: dict[str, Any] = Body(...),
) -> ValidationResult:
    """Validate form values and return per-field localized errors."""
    state = CareerMapFormState.from_payload(payload)
    model = state.validate()
    return ValidationResult(valid=model is not None, errors=state.errors)


@router.post("", status_code=201, response_model=SubmissionOutcome)
async def create_career_map(
    payload: dict[str, Any] = Body(...),
) -> Any:
    """Validate the form and persist it.

    Returns 201 with the outcome on success, 422 with field errors when
    validation fails, and 502/500 with the failure message when a write
    fails.
    """
    state = CareerMapFormState.from_payload(payload)
    form = state.validate()
    if form is None:
        return JSONResponse(
            status_code=422,
            content={"message": MESSAGE_VALIDATION_FAILED, "errors": state.errors},
        )

    outcome = submit_career_map(form)
    if not outcome.success:
        stage = outcome.failed_stage or SubmissionStage.unexpected
        logger.warning(
            "create_career_map_failed",
            extra={
                "stage": stage.value,
                "submission_id": str(outcome.submission_id),
            },
        )
        return JSONResponse(
            status_code=_FAILURE_STATUS[stage],
            content=outcome.model_dump(mode="json"),
        )

    return outcome
