from abc import ABC, abstractmethod


class LLMClient(ABC):
    """Interface for language model clients."""

    @abstractmethod
    def generate_content(self, api_key: str, prompt: str) -> str:
        """Send ``prompt`` to the model and return the raw completion text.

        Implementations raise :class:`domain.errors.TransportError`,
        :class:`domain.errors.RemoteError` or :class:`domain.errors.DecodeError`.
        """
