"""Controller owning the observable SQL generation state."""
import threading
from dataclasses import replace

from application.use_cases import SQLGenerationUseCase
from domain.entities import GenerationOutcome, GenerationState, GenerationStatus
from domain.errors import GenerationError
from infrastructure.logging import get_logger

logger = get_logger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Failed to generate SQL query"


class GenerationController:
    """Application-level API for SQL generation with single-flight updates.

    Every submission takes a new token. Only the outcome of the most
    recently started submission may update :attr:`state`; outcomes of
    earlier submissions that settle later are discarded (last-started-wins).
    """

    def __init__(self, use_case: SQLGenerationUseCase) -> None:
        self._use_case = use_case
        self._state = GenerationState()
        self._lock = threading.Lock()

    @property
    def state(self) -> GenerationState:
        """Snapshot of the current state."""
        with self._lock:
            return replace(self._state)

    def begin(self) -> int:
        """Enter ``LOADING``, clear the previous result/error and return a token."""
        with self._lock:
            token = self._state.active_token + 1
            self._state = GenerationState(
                status=GenerationStatus.LOADING, active_token=token
            )
        logger.debug(f"Submission {token} started")
        return token

    def settle(self, token: int, outcome: GenerationOutcome) -> bool:
        """Apply ``outcome`` if ``token`` is still the active submission.

        Returns ``False`` when the outcome was stale and discarded.
        """
        with self._lock:
            if token != self._state.active_token:
                logger.debug(
                    f"Discarding stale submission {token} (active: {self._state.active_token})"
                )
                return False
            if outcome.ok:
                self._state = GenerationState(
                    status=GenerationStatus.SUCCESS,
                    result=outcome.result,
                    active_token=token,
                )
            else:
                self._state = GenerationState(
                    status=GenerationStatus.FAILED,
                    error=outcome.error.user_message,
                    active_token=token,
                )
            return True

    def submit(self, api_key: str, schema: str, question: str) -> GenerationOutcome:
        """Run one generation and update state if it is still the latest."""
        token = self.begin()
        try:
            outcome = self._use_case.generate(api_key, schema, question)
        except Exception:
            logger.exception("Unexpected error during SQL generation")
            self.settle(
                token,
                GenerationOutcome.failure(GenerationError(UNEXPECTED_ERROR_MESSAGE)),
            )
            raise
        self.settle(token, outcome)
        return outcome

    def reset(self) -> None:
        """Return to ``IDLE``; any in-flight submission becomes stale."""
        with self._lock:
            self._state = GenerationState(active_token=self._state.active_token + 1)
