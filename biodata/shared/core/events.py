"""Canonical event definitions for the Biodata form."""

from __future__ import annotations

import time
from typing import Dict, List, Literal, Optional

from .event_bus import EventPayload

# Shell topics
TOPIC_LOGS_EVENT = "logs.event"
TOPIC_STATUS_TEXT = "status.text"

# Form lifecycle topics
TOPIC_FORM_SUBMITTED = "form.submitted"
TOPIC_FORM_VALIDATION_FAILED = "form.validation_failed"
TOPIC_FORM_RESET = "form.reset"


def create_logs_event(
    message: str,
    level: Literal["info", "warning", "error", "success"] = "info",
    topic: str | None = None,
) -> EventPayload:
    """Create a Log event."""
    return {
        "message": message,
        "level": level,
        "topic": topic,
        "ts": time.time(),
    }


def create_status_text_event(text: str) -> EventPayload:
    """Create a status text update event."""
    return {
        "text": text,
    }


def create_form_submitted_event(full_name: str, email: str) -> EventPayload:
    """Create a form submitted event (all fields passed validation)."""
    return {
        "full_name": full_name,
        "email": email,
    }


def create_form_validation_failed_event(errors: Dict[str, Optional[str]]) -> EventPayload:
    """Create a validation failed event.

    Args:
        errors: Mapping of field name to error message; passing fields map to None
    """
    failed: List[str] = [name for name, message in errors.items() if message is not None]
    return {
        "errors": dict(errors),
        "failed_fields": failed,
    }


def create_form_reset_event() -> EventPayload:
    return {"ts": time.time()}
