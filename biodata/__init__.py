"""Biodata form package."""

from .shared.core.event_bus import EventBus
from .shared.domain.form import FormField, FormState, on_field_change, on_submit

__all__ = ["EventBus", "FormField", "FormState", "on_field_change", "on_submit"]
