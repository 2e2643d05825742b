"""Career map schema validation.

Runs the ``CareerMapInput`` schema over raw form values and converts
pydantic errors into one localized (ja-JP) message per field path, the way
the form shows them under each input.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from app.core.constants import DEFAULT_VALIDATION_MESSAGE, VALIDATION_MESSAGES
from app.models.career_map import CareerMapInput

logger = logging.getLogger(__name__)

# pydantic error type -> message kind in VALIDATION_MESSAGES
_ERROR_KINDS: dict[str, str] = {
    "missing": "missing",
    "string_too_short": "too_short",
    "too_short": "too_short",
    "string_too_long": "too_long",
    "too_long": "too_long",
    "greater_than_equal": "too_small",
    "greater_than": "too_small",
    "less_than_equal": "too_large",
    "less_than": "too_large",
}


def _field_key(loc: tuple[int | str, ...]) -> str:
    """Return the message lookup key for *loc* (list indexes dropped)."""
    return ".".join(str(part) for part in loc if not isinstance(part, int))


def _field_path(loc: tuple[int | str, ...]) -> str:
    """Return the dotted form path for *loc*, e.g. ``skills.0.name``."""
    return ".".join(str(part) for part in loc)


def localize_error(error: dict[str, Any]) -> str:
    """Translate a single pydantic error dict into a localized message."""
    kind = _ERROR_KINDS.get(error["type"], "invalid")
    # A cleared required input arrives as None or ""
    if kind == "invalid" and error.get("input") in (None, ""):
        kind = "missing"

    messages = VALIDATION_MESSAGES.get(_field_key(error["loc"]), {})
    return messages.get(kind) or messages.get("invalid") or DEFAULT_VALIDATION_MESSAGE


def collect_errors(exc: ValidationError) -> dict[str, str]:
    """Map each failing field path to its first localized message."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        path = _field_path(error["loc"])
        if path not in errors:
            errors[path] = localize_error(error)
    return errors


def validate_career_map(
    data: dict[str, Any],
) -> tuple[CareerMapInput | None, dict[str, str]]:
    """Validate raw form values.

    Returns
    -------
    ``(model, {})`` on success, or ``(None, errors)`` where *errors* maps a
    dotted field path to a localized message.
    """
    try:
        model = CareerMapInput.model_validate(data)
    except ValidationError as exc:
        errors = collect_errors(exc)
        logger.info(
            "career_map_validation_failed",
            extra={"fields": sorted(errors)},
        )
        return None, errors
    return model, {}
