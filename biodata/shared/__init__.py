"""
Biodata Shared Kernel
=====================

UI-independent logic shared by every front end of the form.

Architecture:
- core: EventBus, event definitions, configuration
- domain: Form state, validation rules and transitions
"""

__version__ = "1.0.0"

__all__ = []
