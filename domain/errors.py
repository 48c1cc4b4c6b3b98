"""Error taxonomy for SQL generation.

Every failure a user can hit while generating SQL is a
:class:`GenerationError`. ``user_message`` is what the interfaces display.
"""

from typing import Optional

DEFAULT_REMOTE_MESSAGE = "Failed to generate SQL"
TRANSPORT_MESSAGE = (
    "Could not reach the Gemini API. Check your connection and try again."
)
RAW_PREVIEW_CHARS = 200


class GenerationError(Exception):
    """Base class for all SQL generation failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def user_message(self) -> str:
        return self.message


class ValidationError(GenerationError):
    """A required input was missing; raised before any network activity."""

    _MESSAGES = {
        "api_key": "Please enter your Gemini API key",
        "question": "Please enter a question",
    }

    def __init__(self, field: str) -> None:
        super().__init__(self._MESSAGES.get(field, f"Please enter a value for {field}"))
        self.field = field


class TransportError(GenerationError):
    """The request never produced an HTTP response (connection error, timeout)."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(TRANSPORT_MESSAGE)
        self.detail = detail


class RemoteError(GenerationError):
    """The API answered with a non-success status."""

    def __init__(self, message: Optional[str], status_code: Optional[int] = None) -> None:
        super().__init__(message or DEFAULT_REMOTE_MESSAGE)
        self.status_code = status_code


class DecodeError(GenerationError):
    """The completion could not be turned into a :class:`GenerationResult`.

    ``reason`` is ``"invalid_json"`` when the text is not JSON at all,
    ``"invalid_shape"`` when it is JSON but not an object with string ``sql``
    and ``explanation`` fields, and ``"invalid_envelope"`` when the API
    response itself lacked a candidate text.
    """

    def __init__(self, message: str, raw_text: str = "", reason: str = "invalid_json") -> None:
        super().__init__(message)
        self.raw_text = raw_text
        self.reason = reason

    @property
    def user_message(self) -> str:
        if not self.raw_text:
            return self.message
        preview = self.raw_text[:RAW_PREVIEW_CHARS]
        if len(self.raw_text) > RAW_PREVIEW_CHARS:
            preview += "..."
        return f"{self.message}. Model output: {preview}"


__all__ = [
    "GenerationError",
    "ValidationError",
    "TransportError",
    "RemoteError",
    "DecodeError",
]
