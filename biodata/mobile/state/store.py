"""Global State Store - Service Locator Pattern.

Provides centralized access to the form session state from any UI component.
Each connected page gets its own store, keyed by a session id.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .form_state import FormSessionState
from biodata.shared.core.configuration import SystemConfig
from biodata.shared.core.event_bus import EventBus

DEFAULT_SESSION = "default"


class Store:
    """Global state store for the form application.

    Usage:
        # During app initialization, once per page
        Store.initialize(event_bus, config, session_id=session_id)

        # In any UI component of that page
        store = Store.get(session_id)
        store.form.edit(FormField.EMAIL, "ana@example.com")
    """

    _instances: Dict[str, 'Store'] = {}

    def __init__(
        self,
        event_bus: EventBus,
        config: Optional[SystemConfig] = None,
        session_id: str = DEFAULT_SESSION,
    ) -> None:
        """Initialize store with event bus.

        Note: Do not call directly. Use Store.initialize() instead.
        """
        self.session_id = session_id
        self.config = config or SystemConfig()
        self.bus = event_bus
        self.form = FormSessionState(event_bus, self.config.form)

    @classmethod
    def initialize(
        cls,
        event_bus: EventBus,
        config: Optional[SystemConfig] = None,
        session_id: str = DEFAULT_SESSION,
    ) -> 'Store':
        """Create the store for one session.

        Raises:
            RuntimeError: If a store already exists for ``session_id``
        """
        if session_id in cls._instances:
            raise RuntimeError(f"Store already initialized for session {session_id!r}!")

        instance = cls(event_bus, config, session_id)
        cls._instances[session_id] = instance
        return instance

    @classmethod
    def get(cls, session_id: str = DEFAULT_SESSION) -> 'Store':
        """Get the store for ``session_id``.

        Raises:
            RuntimeError: If that session has not been initialized
        """
        try:
            return cls._instances[session_id]
        except KeyError:
            raise RuntimeError(
                f"Store not initialized for session {session_id!r}! Call Store.initialize() first."
            ) from None

    @classmethod
    def active_sessions(cls) -> List[str]:
        return list(cls._instances)

    @classmethod
    def reset(cls, session_id: Optional[str] = None) -> None:
        """Drop one session's store, or every store when no id is given."""
        if session_id is None:
            cls._instances.clear()
        else:
            cls._instances.pop(session_id, None)
