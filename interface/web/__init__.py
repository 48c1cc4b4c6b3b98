"""Browser form for the Text-to-SQL assistant."""

from .app import create_app

__all__ = ["create_app"]
