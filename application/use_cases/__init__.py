"""Application use case implementations."""

from .sql_generation import SQLGenerationUseCase

__all__ = ["SQLGenerationUseCase"]
