"""Pure state transitions for the biodata form.

Nothing here performs I/O or keeps state; callers pass the current snapshot in
and get the next one back.
"""

from __future__ import annotations

from typing import Union

from .models import FormField, FormState
from .validation import is_valid, validate_form


def compose_full_name(first_name: str, last_name: str) -> str:
    return f"{first_name.strip()} {last_name.strip()}"


def on_field_change(state: FormState, field: Union[FormField, str], value: str) -> FormState:
    """Set one input and clear only that input's error.

    Args:
        state: Current snapshot
        field: Which input was edited
        value: New raw text, kept exactly as typed

    Returns:
        The next snapshot

    Raises:
        ValueError: If ``field`` is not one of the form inputs
    """
    selector = FormField.coerce(field)
    return state.model_copy(update={selector.value_attr: value, selector.error_attr: None})


def on_submit(state: FormState, *, clear_errors_on_success: bool = False) -> FormState:
    """Validate all inputs and either derive the full name or record errors.

    A failing submit writes all three error slots (``None`` for the inputs that
    passed) and leaves ``full_name`` untouched. A passing submit writes only
    ``full_name``; the error slots keep whatever they held unless
    ``clear_errors_on_success`` is set.
    """
    report = validate_form(state)

    if is_valid(report):
        update = {"full_name": compose_full_name(state.first_name, state.last_name)}
        if clear_errors_on_success:
            update.update({field.error_attr: None for field in FormField})
        return state.model_copy(update=update)

    return state.model_copy(update={field.error_attr: message for field, message in report.items()})
