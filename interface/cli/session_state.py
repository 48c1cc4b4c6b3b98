"""Form state container for CLI interactions."""
from dataclasses import dataclass, field
from typing import Optional

from domain.prompting import DEFAULT_SCHEMA


@dataclass
class FormState:
    """Holds the form fields a user fills in during a CLI session.

    The API key lives only in memory for the lifetime of the session.
    """

    api_key: str = field(default="", repr=False)
    schema: str = DEFAULT_SCHEMA
    last_question: Optional[str] = None

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key.strip())

    def reset_schema(self) -> None:
        """Restore the example schema."""
        self.schema = DEFAULT_SCHEMA


def create_form_state(api_key: str = "", schema: Optional[str] = None) -> FormState:
    """Factory for initializing a new :class:`FormState`."""
    return FormState(api_key=api_key, schema=schema if schema is not None else DEFAULT_SCHEMA)
