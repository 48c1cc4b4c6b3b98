"""Command-line interface for the Text-to-SQL assistant.

Run ``text-to-sql`` (see :mod:`interface.cli.main`) for an interactive
session, or ``text-to-sql -q "question"`` for a single answer.
"""

from .interface import TextToSQLCLI
from .session_state import FormState, create_form_state

__all__ = ["TextToSQLCLI", "FormState", "create_form_state"]
