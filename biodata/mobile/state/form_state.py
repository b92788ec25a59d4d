"""Form Session State Management.

Holds the current ``FormState`` for one form session and exposes it through
FletXr reactive primitives so the view re-renders on every transition.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Union

from fletx.core import RxDict, RxList, RxStr

from biodata.shared.core import events
from biodata.shared.core.configuration import FormConfig
from biodata.shared.core.event_bus import EventBus, EventPayload
from biodata.shared.domain.form import FormField, FormState, on_field_change, on_submit

logger = logging.getLogger(__name__)

STATUS_IDLE = "Isi formulir lalu tekan Submit"


class FormSessionState:
    """Reactive State for a single form session.

    The session is the only writer of the current snapshot. Each transition
    replaces ``snapshot.value`` in one assignment, so listeners are notified
    once per edit or submit and always read a complete ``FormState``.
    """

    def __init__(self, event_bus: EventBus, form_config: Optional[FormConfig] = None) -> None:
        """Initialize session state.

        Args:
            event_bus: The shared event bus for cross-cutting concerns
            form_config: Form behaviour settings; defaults when omitted
        """
        self.bus = event_bus
        self.form_config = form_config or FormConfig()

        self._state = FormState()
        self.snapshot: RxDict = RxDict(self._state.model_dump())

        self.status_text: RxStr = RxStr(STATUS_IDLE)

        # Log entries, shaped by events.create_logs_event
        self.logs: RxList = RxList([])

        self._started = False

    async def initialize(self) -> None:
        """Bind to EventBus events. Safe to call more than once."""
        if self._started:
            return

        await self.bus.subscribe(events.TOPIC_STATUS_TEXT, self._handle_status_text)

        self._started = True

    # --- Snapshot access ---

    @property
    def current(self) -> FormState:
        return self._state

    def subscribe(self, listener: Callable[[], Any]) -> None:
        """Call ``listener`` with no arguments after every transition."""
        self.snapshot.listen(listener)

    def _replace(self, new_state: FormState) -> FormState:
        self._state = new_state
        self.snapshot.value = new_state.model_dump()
        return new_state

    # --- Transitions ---

    def edit(self, field: Union[FormField, str], value: str) -> FormState:
        """Apply a keystroke to one input."""
        return self._replace(on_field_change(self._state, field, value))

    def submit(self) -> FormState:
        """Validate the current inputs and store the outcome."""
        new_state = on_submit(
            self._state,
            clear_errors_on_success=self.form_config.clear_errors_on_success,
        )
        if new_state.has_errors:
            logger.debug("Submit rejected: %s", _error_summary(new_state))
        else:
            logger.debug("Submit accepted")
        return self._replace(new_state)

    def reset(self) -> FormState:
        """Start over with an empty form."""
        self.status_text.value = STATUS_IDLE
        return self._replace(FormState())

    # --- Bus helpers ---

    async def publish(self, topic: str, payload: EventPayload) -> None:
        await self.bus.publish(topic, payload)

    async def push_status(self, text: str) -> None:
        await self.publish(events.TOPIC_STATUS_TEXT, events.create_status_text_event(text))

    async def push_log(self, message: str, level: str = "info") -> None:
        """Add a log message and update the logs list reactively."""
        entry = events.create_logs_event(message, level)
        self.logs.append(entry)
        await self.publish(events.TOPIC_LOGS_EVENT, entry)

    # --- Event Handlers ---

    async def _handle_status_text(self, payload: EventPayload) -> None:
        text = payload.get("text")
        if text:
            self.status_text.value = str(text)


def _error_summary(state: FormState) -> Dict[str, str]:
    return {
        field.value: message
        for field in FormField
        if (message := state.error_of(field)) is not None
    }
