"""Use case for generating SQL queries from natural language."""

from domain.decoding import decode_completion
from domain.entities import GenerationOutcome, GenerationRequest
from domain.errors import GenerationError, ValidationError
from domain.prompting import build_prompt
from domain.services import LLMClient
from infrastructure.logging import get_logger

logger = get_logger(__name__)


class SQLGenerationUseCase:
    """Generate SQL using a language model."""

    def __init__(self, llm_client: LLMClient) -> None:
        """Initialize with required service interfaces.

        Args:
            llm_client: Interface for language model operations.
        """
        self._llm_client = llm_client

    def generate(self, api_key: str, schema: str, question: str) -> GenerationOutcome:
        """Generate SQL for ``question`` against ``schema``.

        Never raises a :class:`GenerationError`; failures come back inside
        the returned :class:`GenerationOutcome`.
        """
        request = GenerationRequest(api_key=api_key, schema=schema, question=question)
        try:
            self.validate(request)
            prompt = build_prompt(request.schema, request.question)
            logger.info(
                f"Generating SQL (question_length={len(question)}, prompt_length={len(prompt)})"
            )
            raw_completion = self._llm_client.generate_content(request.api_key, prompt)
            result = decode_completion(raw_completion)
        except GenerationError as e:
            logger.warning(f"SQL generation failed ({type(e).__name__}): {e.message}")
            return GenerationOutcome.failure(e)

        logger.info("SQL generated successfully")
        logger.debug(f"Generated SQL: {result.sql}")
        return GenerationOutcome.success(result)

    @staticmethod
    def validate(request: GenerationRequest) -> None:
        """Raise :class:`ValidationError` for a missing key or question."""
        if not request.api_key.strip():
            raise ValidationError("api_key")
        if not request.question.strip():
            raise ValidationError("question")
