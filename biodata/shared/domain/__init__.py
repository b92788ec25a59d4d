"""
Shared Domain Module
====================

Business logic for the biodata form.
"""

from biodata.shared.domain.form import FormField, FormState, on_field_change, on_submit

__all__ = [
    "FormField",
    "FormState",
    "on_field_change",
    "on_submit",
]
