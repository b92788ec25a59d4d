"""Biodata form domain: state snapshot, validation rules and transitions."""

from .controller import compose_full_name, on_field_change, on_submit
from .models import FormField, FormState
from .validation import (
    MSG_EMAIL_INVALID,
    MSG_FIRST_NAME_REQUIRED,
    MSG_LAST_NAME_REQUIRED,
    ValidationReport,
    is_valid,
    validate_email,
    validate_first_name,
    validate_form,
    validate_last_name,
)

__all__ = [
    "FormField",
    "FormState",
    "on_field_change",
    "on_submit",
    "compose_full_name",
    "validate_form",
    "validate_first_name",
    "validate_last_name",
    "validate_email",
    "is_valid",
    "ValidationReport",
    "MSG_FIRST_NAME_REQUIRED",
    "MSG_LAST_NAME_REQUIRED",
    "MSG_EMAIL_INVALID",
]
