"""Career map form-state container.

Holds the current field values, the dynamic skill list and the per-field
validation errors, and exposes the form's rendering metadata.
"""

from __future__ import annotations

import copy
import re
from typing import Any

from app.core.constants import (
    AGE_MAX,
    AGE_MIN,
    ANNUAL_SALARY_MIN,
    FIELD_LABELS,
    FORM_SUBTITLE,
    FORM_TITLE,
    NUMERIC_INPUT_PATTERN,
    PURPOSE_LABELS,
    SKILLS_MIN_COUNT,
    SUBMIT_LABEL,
    USERNAME_MAX_LENGTH,
    USERNAME_MIN_LENGTH,
    YEARS_OF_EXPERIENCE_MIN,
)
from app.models.career_map import (
    CareerMapInput,
    FormDefinition,
    FormFieldDefinition,
    PurposeOption,
)
from app.models.enums import FieldType, Purpose
from app.services.validation import validate_career_map

_NUMERIC_INPUT_RE = re.compile(NUMERIC_INPUT_PATTERN)

NUMERIC_FIELDS: tuple[str, ...] = ("age", "yearsOfExperience", "annualSalary")
SCALAR_FIELDS: tuple[str, ...] = ("username", "purpose") + NUMERIC_FIELDS

DEFAULT_VALUES: dict[str, Any] = {
    "username": "",
    "age": None,
    "yearsOfExperience": None,
    "skills": [{"name": ""}],
    "annualSalary": None,
    "purpose": "",
}


def parse_numeric_input(raw: str) -> tuple[bool, int | None]:
    """Apply the digits-only input filter to *raw*.

    Returns ``(accepted, value)``.  An empty string is accepted and clears
    the field; anything other than digits is rejected.
    """
    if not _NUMERIC_INPUT_RE.fullmatch(raw):
        return False, None
    if raw == "":
        return True, None
    return True, int(raw)


class CareerMapFormState:
    """Mutable values and errors of one career map form."""

    def __init__(self) -> None:
        self.values: dict[str, Any] = copy.deepcopy(DEFAULT_VALUES)
        self.errors: dict[str, str] = {}

    # -- field bindings -----------------------------------------------------

    def set_value(self, field: str, value: Any) -> None:
        if field not in SCALAR_FIELDS:
            raise KeyError(f"Unknown form field: {field}")
        self.values[field] = value

    def set_numeric(self, field: str, raw: str) -> bool:
        """Set a numeric field from text input.

        Returns False and keeps the previous value when *raw* contains
        anything other than digits.
        """
        if field not in NUMERIC_FIELDS:
            raise KeyError(f"Not a numeric form field: {field}")
        accepted, value = parse_numeric_input(raw)
        if accepted:
            self.values[field] = value
        return accepted

    # -- dynamic skill list -------------------------------------------------

    @property
    def skills(self) -> list[dict[str, Any]]:
        return self.values["skills"]

    def append_skill(self, name: str = "") -> None:
        self.skills.append({"name": name})

    def remove_skill(self, index: int) -> None:
        if not 0 <= index < len(self.skills):
            raise IndexError(f"No skill at index {index}")
        del self.skills[index]

    def set_skill(self, index: int, name: str) -> None:
        if not 0 <= index < len(self.skills):
            raise IndexError(f"No skill at index {index}")
        self.skills[index]["name"] = name

    # -- whole-form operations ----------------------------------------------

    def load(self, payload: dict[str, Any]) -> None:
        """Fill the form from a JSON-like payload.

        Digit strings for numeric fields are converted, empty strings clear
        them.  Other strings are kept as given so validation reports them.
        Keys that are not form fields are ignored.
        """
        for field in SCALAR_FIELDS:
            if field not in payload:
                continue
            value = payload[field]
            if field in NUMERIC_FIELDS and isinstance(value, str):
                accepted, parsed = parse_numeric_input(value)
                if accepted:
                    value = parsed
            self.values[field] = value

        if "skills" in payload:
            raw_skills = payload["skills"]
            if isinstance(raw_skills, list):
                self.values["skills"] = [
                    dict(item) if isinstance(item, dict) else {"name": item}
                    for item in raw_skills
                ]
            else:
                self.values["skills"] = raw_skills

    def validate(self) -> CareerMapInput | None:
        """Run the schema; fill ``errors`` and return None on failure."""
        model, errors = validate_career_map(self.values)
        self.errors = errors
        return model

    def reset(self) -> None:
        self.values = copy.deepcopy(DEFAULT_VALUES)
        self.errors = {}

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> CareerMapFormState:
        state = cls()
        state.load(payload)
        return state


def get_form_definition() -> FormDefinition:
    """Return the rendering metadata for the career map form."""
    fields = [
        FormFieldDefinition(
            name="username",
            label=FIELD_LABELS["username"],
            type=FieldType.text,
            required=True,
            min_length=USERNAME_MIN_LENGTH,
            max_length=USERNAME_MAX_LENGTH,
        ),
        FormFieldDefinition(
            name="age",
            label=FIELD_LABELS["age"],
            type=FieldType.numeric,
            required=True,
            minimum=AGE_MIN,
            maximum=AGE_MAX,
        ),
        FormFieldDefinition(
            name="yearsOfExperience",
            label=FIELD_LABELS["yearsOfExperience"],
            type=FieldType.numeric,
            required=True,
            minimum=YEARS_OF_EXPERIENCE_MIN,
        ),
        FormFieldDefinition(
            name="skills",
            label=FIELD_LABELS["skills"],
            type=FieldType.list,
            required=True,
            min_items=SKILLS_MIN_COUNT,
        ),
        FormFieldDefinition(
            name="annualSalary",
            label=FIELD_LABELS["annualSalary"],
            type=FieldType.numeric,
            minimum=ANNUAL_SALARY_MIN,
        ),
        FormFieldDefinition(
            name="purpose",
            label=FIELD_LABELS["purpose"],
            type=FieldType.select,
        ),
    ]
    options = [
        PurposeOption(value=purpose, label=PURPOSE_LABELS[purpose.value])
        for purpose in Purpose
    ]
    return FormDefinition(
        title=FORM_TITLE,
        subtitle=FORM_SUBTITLE,
        submit_label=SUBMIT_LABEL,
        fields=fields,
        purpose_options=options,
        defaults=copy.deepcopy(DEFAULT_VALUES),
    )
