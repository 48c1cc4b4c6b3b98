"""LLM infrastructure bindings."""

from domain.services import LLMClient

from .gemini import GeminiClient, LLMResponse

__all__ = ["LLMClient", "GeminiClient", "LLMResponse"]
