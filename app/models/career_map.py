"""Pydantic models for the career map form.

Covers the form input schema (camelCase, as posted by the form), the insert
payloads for the ``form_submissions`` and ``skills`` tables, the records
returned from the database, and the outcome of a submission.
"""

from datetime import datetime
from typing import Annotated, Any
from uuid import UUID

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StringConstraints,
    field_validator,
)

from app.core.constants import (
    AGE_MAX,
    AGE_MIN,
    ANNUAL_SALARY_MIN,
    SKILLS_MIN_COUNT,
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
    YEARS_OF_EXPERIENCE_MIN,
)
from app.models.enums import FieldType, Purpose, SubmissionStage

# Supabase tables may use bigint identity or uuid primary keys
RecordId = int | UUID


# --- Form input ---

class SkillInput(BaseModel):
    """A single entry of the dynamic skill list."""
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CareerMapInput(BaseModel):
    """Validated career map form values.

    Accepts both the form's camelCase names and the snake_case names.
    """
    model_config = ConfigDict(populate_by_name=True)

    username: Annotated[
        str,
        StringConstraints(min_length=USERNAME_MIN_LENGTH, max_length=USERNAME_MAX_LENGTH),
    ]
    # Strict: text input is converted by the form state, not coerced here
    age: StrictInt = Field(ge=AGE_MIN, le=AGE_MAX)
    years_of_experience: StrictInt = Field(
        alias="yearsOfExperience", ge=YEARS_OF_EXPERIENCE_MIN
    )
    skills: list[SkillInput] = Field(min_length=SKILLS_MIN_COUNT)
    annual_salary: StrictInt | None = Field(
        default=None, alias="annualSalary", ge=ANNUAL_SALARY_MIN
    )
    purpose: Purpose | None = None

    @field_validator("purpose", mode="before")
    @classmethod
    def _blank_purpose_is_none(cls, value: Any) -> Any:
        # The select starts out empty
        if value == "":
            return None
        return value


# --- Database record models ---

class FormSubmissionCreate(BaseModel):
    """Payload for inserting a ``form_submissions`` row."""
    username: str
    age: int
    years_of_experience: int
    annual_salary: int | None = None
    purpose: Purpose | None = None

    @classmethod
    def from_input(cls, form: CareerMapInput) -> "FormSubmissionCreate":
        return cls(
            username=form.username,
            age=form.age,
            years_of_experience=form.years_of_experience,
            annual_salary=form.annual_salary,
            purpose=form.purpose,
        )


class FormSubmission(BaseModel):
    """Full ``form_submissions`` record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: RecordId
    username: str
    age: int | None = None
    years_of_experience: int | None = None
    annual_salary: int | None = None
    purpose: Purpose | None = None
    created_at: datetime | None = None


class SkillCreate(BaseModel):
    """Payload for inserting a ``skills`` row."""
    form_id: RecordId
    name: str


class Skill(BaseModel):
    """Full ``skills`` record returned from the database."""
    model_config = ConfigDict(from_attributes=True)

    id: RecordId
    form_id: RecordId
    name: str
    created_at: datetime | None = None


# --- API contracts ---

class SubmissionOutcome(BaseModel):
    """Result of the two-step write, shown to the user as-is."""
    success: bool
    message: str
    failed_stage: SubmissionStage | None = None
    submission_id: RecordId | None = None
    skill_count: int = 0


class ValidationResult(BaseModel):
    """Response for POST /api/v1/career-map/validate."""
    valid: bool
    errors: dict[str, str] = {}


class PurposeOption(BaseModel):
    """A selectable purpose with its display label."""
    value: Purpose
    label: str


class FormFieldDefinition(BaseModel):
    """Rendering and constraint metadata for one form field."""
    name: str
    label: str
    type: FieldType
    required: bool = False
    min_length: int | None = None
    max_length: int | None = None
    minimum: int | None = None
    maximum: int | None = None
    min_items: int | None = None


class FormDefinition(BaseModel):
    """Full response for GET /api/v1/career-map/form."""
    title: str
    subtitle: str
    submit_label: str
    fields: list[FormFieldDefinition] = []
    purpose_options: list[PurposeOption] = []
    defaults: dict[str, Any] = {}
