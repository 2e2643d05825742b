"""Enum types mirroring the career map form's fixed choices."""

from enum import Enum


class Purpose(str, Enum):
    """Why the user wants a career map (``form_submissions.purpose``)."""
    work_life_balance = "work_life_balance"
    earn_more = "earn_more"
    skill_up = "skill_up"
    management_track = "management_track"


class SubmissionStage(str, Enum):
    """Step of the write sequence at which a submission failed."""
    submission = "submission"
    skills = "skills"
    unexpected = "unexpected"


class FieldType(str, Enum):
    """Input widget used to render a form field."""
    text = "text"
    numeric = "numeric"
    list = "list"
    select = "select"
