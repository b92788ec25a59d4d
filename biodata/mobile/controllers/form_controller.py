"""Controller bridging the form view to the session state and event bus."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from biodata.shared.core import events
from biodata.shared.domain.form import FormField, FormState

if TYPE_CHECKING:
    import flet as ft

    from biodata.mobile.state.form_state import FormSessionState

logger = logging.getLogger(__name__)

STATUS_SUBMITTED = "Data berhasil dikirim"
STATUS_REJECTED = "Periksa kembali isian formulir"


class FormScreenController:
    """Forwards keystrokes and the submit trigger into the session.

    Field edits are plain synchronous transitions. Submit and reset also
    announce their outcome on the event bus for the log feed and any other
    listeners.
    """

    def __init__(self, form_state: FormSessionState, page: Optional[ft.Page] = None):
        self.form_state = form_state
        self.page = page
        self.event_bus = form_state.bus

    def on_field_change(self, field: Union[FormField, str], value: str) -> FormState:
        return self.form_state.edit(field, value)

    async def on_submit(self) -> FormState:
        state = self.form_state.submit()

        if state.has_errors:
            errors = {field.value: state.error_of(field) for field in FormField}
            payload = events.create_form_validation_failed_event(errors)
            logger.info(f"Form rejected, failed fields: {payload['failed_fields']}")
            await self.form_state.publish(events.TOPIC_FORM_VALIDATION_FAILED, payload)
            await self.form_state.push_log(
                f"Validation failed: {', '.join(payload['failed_fields'])}",
                "warning",
            )
            await self.form_state.push_status(STATUS_REJECTED)
        else:
            logger.info("Form submitted")
            await self.form_state.publish(
                events.TOPIC_FORM_SUBMITTED,
                events.create_form_submitted_event(state.full_name, state.email),
            )
            await self.form_state.push_log(f"Submitted: {state.full_name}", "success")
            await self.form_state.push_status(STATUS_SUBMITTED)

        return state

    async def on_reset(self) -> FormState:
        state = self.form_state.reset()
        await self.form_state.publish(events.TOPIC_FORM_RESET, events.create_form_reset_event())
        await self.form_state.push_log("Form cleared")
        return state

    def build_view(self, padding: int = 24) -> ft.Control:
        """Build the form column bound to this controller."""
        from biodata.mobile.ui.layouts.form_screen import build_form_view

        if self.page is None:
            raise RuntimeError("FormScreenController needs a page to build its view")
        return build_form_view(self.page, self, padding=padding)
