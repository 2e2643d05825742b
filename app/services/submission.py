"""Career map persistence service.

Writes a validated career map to Supabase in two sequential steps:

1. Insert the ``form_submissions`` row and read back its generated id.
2. Insert one ``skills`` row per skill, each referencing that id.

The steps are not atomic.  When step 2 fails the parent row stays in
place; its id is logged as orphaned and no compensation is attempted.
"""

from __future__ import annotations

import logging
from typing import Any

from app.core.config import settings
from app.core.constants import (
    MESSAGE_SKILLS_FAILED,
    MESSAGE_SUBMISSION_FAILED,
    MESSAGE_SUBMIT_SUCCESS,
    MESSAGE_UNEXPECTED_ERROR,
)
from app.db.supabase import get_supabase
from app.models.career_map import (
    CareerMapInput,
    FormSubmission,
    FormSubmissionCreate,
    RecordId,
    SkillCreate,
    SubmissionOutcome,
)
from app.models.enums import SubmissionStage

logger = logging.getLogger(__name__)


class SubmissionWriteError(Exception):
    """Raised when one step of the write sequence fails."""

    def __init__(self, stage: SubmissionStage, detail: str) -> None:
        super().__init__(detail)
        self.stage = stage
        self.detail = detail


_FAILURE_MESSAGES: dict[SubmissionStage, str] = {
    SubmissionStage.submission: MESSAGE_SUBMISSION_FAILED,
    SubmissionStage.skills: MESSAGE_SKILLS_FAILED,
    SubmissionStage.unexpected: MESSAGE_UNEXPECTED_ERROR,
}


# ---------------------------------------------------------------------------
# Write steps
# ---------------------------------------------------------------------------

def _insert_submission(client: Any, form: CareerMapInput) -> FormSubmission:
    """Insert the parent row and return it as stored.

    Raises ``SubmissionWriteError`` if the insert fails or returns no rows.
    """
    payload = FormSubmissionCreate.from_input(form)
    try:
        result = (
            client.table(settings.FORM_SUBMISSIONS_TABLE)
            .insert([payload.model_dump(mode="json")])
            .execute()
        )
    except Exception as exc:
        raise SubmissionWriteError(SubmissionStage.submission, str(exc)) from exc

    if not result.data:
        raise SubmissionWriteError(
            SubmissionStage.submission, "Insert returned no rows"
        )
    return FormSubmission(**result.data[0])


def _insert_skills(client: Any, form_id: RecordId, form: CareerMapInput) -> int:
    """Insert one ``skills`` row per skill for *form_id*.

    Returns the number of rows sent.
    """
    rows = [
        SkillCreate(form_id=form_id, name=skill.name).model_dump(mode="json")
        for skill in form.skills
    ]
    try:
        client.table(settings.SKILLS_TABLE).insert(rows).execute()
    except Exception as exc:
        raise SubmissionWriteError(SubmissionStage.skills, str(exc)) from exc
    return len(rows)


def _failure(
    stage: SubmissionStage, submission_id: RecordId | None = None
) -> SubmissionOutcome:
    return SubmissionOutcome(
        success=False,
        message=_FAILURE_MESSAGES[stage],
        failed_stage=stage,
        submission_id=submission_id,
    )


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def submit_career_map(form: CareerMapInput) -> SubmissionOutcome:
    """Persist a validated career map.

    Never raises; every failure is logged and returned as an unsuccessful
    ``SubmissionOutcome`` carrying the user-facing message.
    """
    submission_id: RecordId | None = None

    try:
        client = get_supabase()
        submission = _insert_submission(client, form)
        submission_id = submission.id
        skill_count = _insert_skills(client, submission_id, form)
    except SubmissionWriteError as exc:
        logger.error(
            "career_map_insert_failed",
            extra={
                "stage": exc.stage.value,
                "error_message": exc.detail,
            },
        )
        if exc.stage == SubmissionStage.skills:
            logger.warning(
                "career_map_orphaned_submission",
                extra={"submission_id": str(submission_id)},
            )
        return _failure(exc.stage, submission_id)
    except Exception as exc:
        logger.error(
            "career_map_unexpected_error",
            extra={
                "error_type": type(exc).__name__,
                "error_message": str(exc),
            },
        )
        return _failure(SubmissionStage.unexpected, submission_id)

    logger.info(
        "career_map_submitted",
        extra={
            "submission_id": str(submission_id),
            "skill_count": skill_count,
        },
    )
    return SubmissionOutcome(
        success=True,
        message=MESSAGE_SUBMIT_SUCCESS,
        submission_id=submission_id,
        skill_count=skill_count,
    )
