"""Validation rules for the biodata form.

Each rule takes the raw field value and returns an error message, or ``None``
when the value is acceptable. Rules never raise.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from .models import FormField, FormState

MSG_FIRST_NAME_REQUIRED = "Nama depan wajib diisi"
MSG_LAST_NAME_REQUIRED = "Nama belakang wajib diisi"
MSG_EMAIL_INVALID = "Email tidak valid"

ValidationReport = Dict[FormField, Optional[str]]


def _is_blank(value: str) -> bool:
    return not value.strip()


def validate_first_name(value: str) -> Optional[str]:
    return MSG_FIRST_NAME_REQUIRED if _is_blank(value) else None


def validate_last_name(value: str) -> Optional[str]:
    return MSG_LAST_NAME_REQUIRED if _is_blank(value) else None


def validate_email(value: str) -> Optional[str]:
    """Only checks for an ``@``; "@", "x@" and "@y" are all accepted."""
    return None if "@" in value else MSG_EMAIL_INVALID


# Insertion order is the order fields are checked in
VALIDATORS: Dict[FormField, Callable[[str], Optional[str]]] = {
    FormField.FIRST_NAME: validate_first_name,
    FormField.LAST_NAME: validate_last_name,
    FormField.EMAIL: validate_email,
}


def validate_form(state: FormState) -> ValidationReport:
    """Run every rule against ``state``."""
    return {field: rule(state.value_of(field)) for field, rule in VALIDATORS.items()}


def is_valid(report: ValidationReport) -> bool:
    return all(message is None for message in report.values())
