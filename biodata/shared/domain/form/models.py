"""Form state value types.

``FormState`` is immutable: every transition returns a new instance built with
``model_copy(update=...)``, so a reader holding a snapshot never sees it change.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class FormField(str, Enum):
    """Selector for the three editable inputs."""

    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    EMAIL = "email"

    @property
    def value_attr(self) -> str:
        return self.value

    @property
    def error_attr(self) -> str:
        return f"error_{self.value}"

    @classmethod
    def coerce(cls, field: Union["FormField", str]) -> "FormField":
        """Accept either a selector or its string value.

        Raises:
            ValueError: If ``field`` names none of the form inputs
        """
        if isinstance(field, cls):
            return field
        return cls(field)


class FormState(BaseModel):
    """Snapshot of one form session."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    first_name: str = ""
    last_name: str = ""
    email: str = ""

    # Derived output, written only by a submit that passes validation
    full_name: str = ""

    error_first_name: Optional[str] = Field(default=None)
    error_last_name: Optional[str] = Field(default=None)
    error_email: Optional[str] = Field(default=None)

    def value_of(self, field: Union[FormField, str]) -> str:
        return getattr(self, FormField.coerce(field).value_attr)

    def error_of(self, field: Union[FormField, str]) -> Optional[str]:
        return getattr(self, FormField.coerce(field).error_attr)

    @property
    def has_errors(self) -> bool:
        return any(self.error_of(field) is not None for field in FormField)

    @property
    def has_full_name(self) -> bool:
        return bool(self.full_name.strip())
