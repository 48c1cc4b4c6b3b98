"""Application controllers exposed to the interfaces."""

from .generation_controller import GenerationController

__all__ = ["GenerationController"]
