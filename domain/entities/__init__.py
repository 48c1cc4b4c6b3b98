from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from domain.errors import GenerationError


class GenerationStatus(Enum):
    """Lifecycle of a single SQL generation attempt."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class GenerationRequest:
    """One user submission. ``api_key`` is never persisted or logged."""

    api_key: str
    schema: str
    question: str

    def __repr__(self) -> str:
        return (
            f"GenerationRequest(api_key='***', schema_length={len(self.schema)}, "
            f"question={self.question!r})"
        )


@dataclass(frozen=True)
class GenerationResult:
    """SQL statement and explanation decoded from the model completion."""

    sql: str
    explanation: str

    def to_dict(self) -> dict:
        return {"sql": self.sql, "explanation": self.explanation}


@dataclass(frozen=True)
class GenerationOutcome:
    """Either a result or an error, never both."""

    result: Optional[GenerationResult] = None
    error: Optional["GenerationError"] = None

    def __post_init__(self) -> None:
        if (self.result is None) == (self.error is None):
            raise ValueError("GenerationOutcome needs exactly one of result or error")

    @property
    def ok(self) -> bool:
        return self.result is not None

    @classmethod
    def success(cls, result: GenerationResult) -> "GenerationOutcome":
        return cls(result=result)

    @classmethod
    def failure(cls, error: "GenerationError") -> "GenerationOutcome":
        return cls(error=error)


@dataclass
class GenerationState:
    """Observable state owned by the caller of the generation client."""

    status: GenerationStatus = GenerationStatus.IDLE
    result: Optional[GenerationResult] = None
    error: Optional[str] = None
    active_token: int = 0

    @property
    def busy(self) -> bool:
        return self.status is GenerationStatus.LOADING
