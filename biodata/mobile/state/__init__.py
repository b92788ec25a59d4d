"""FletXr Reactive State Management for the form screen.

Architecture:
- FormSessionState: Current form snapshot plus status and log feed
- Store: Service locator for accessing state from any component
"""

from .form_state import FormSessionState
from .store import Store

__all__ = ["FormSessionState", "Store"]
