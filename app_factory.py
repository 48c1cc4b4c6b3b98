"""Application factory for creating fully wired controllers and services."""

from __future__ import annotations

from typing import Optional

import requests

from infrastructure.config import SystemConfig, get_config


def _create_config():
    """Create system configuration instance."""
    return get_config()


def _bind_services(config: SystemConfig, session: Optional[requests.Session] = None):
    """Instantiate and bind service implementations."""
    from application.use_cases import SQLGenerationUseCase
    from infrastructure.llm.gemini import GeminiClient

    llm_client = GeminiClient(config=config.gemini, session=session)
    use_case = SQLGenerationUseCase(llm_client)

    return {
        "llm_client": llm_client,
        "sql_generation": use_case,
    }


def create_sql_generation_use_case(
    config: Optional[SystemConfig] = None,
    session: Optional[requests.Session] = None,
):
    """Create a :class:`SQLGenerationUseCase` backed by the Gemini client."""
    config = config or _create_config()
    return _bind_services(config, session=session)["sql_generation"]


def create_generation_controller(
    config: Optional[SystemConfig] = None,
    session: Optional[requests.Session] = None,
):
    """Create a fully wired :class:`GenerationController`."""
    from application.controllers import GenerationController

    use_case = create_sql_generation_use_case(config, session=session)
    return GenerationController(use_case=use_case)
