from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from application.use_cases import SQLGenerationUseCase
from domain.errors import (
    DecodeError,
    GenerationError,
    RemoteError,
    TransportError,
    ValidationError,
)
from domain.prompting import DEFAULT_SCHEMA, EXAMPLE_QUESTIONS
from infrastructure.config import SystemConfig, get_config
from infrastructure.logging import get_logger

from .schemas import (
    DefaultsResponse,
    ErrorResponse,
    GeneratedSqlResponse,
    GenerateSqlRequest,
)

logger = get_logger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def status_code_for(error: GenerationError) -> int:
    """Map a generation failure onto the HTTP status returned to the browser."""
    if isinstance(error, ValidationError):
        return 400
    if isinstance(error, TransportError):
        return 504
    if isinstance(error, (RemoteError, DecodeError)):
        return 502
    return 500


def create_app(
    use_case: Optional[SQLGenerationUseCase] = None,
    config: Optional[SystemConfig] = None,
) -> FastAPI:
    """Build the FastAPI app serving the form and the generation API."""
    config = config or get_config()
    if use_case is None:
        from app_factory import create_sql_generation_use_case

        use_case = create_sql_generation_use_case(config)

    app = FastAPI(
        title="Text-to-SQL Assistant",
        description="Generate SQL from a database schema and a natural-language question using Gemini.",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.web.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", include_in_schema=False)
    async def index() -> FileResponse:
        return FileResponse(STATIC_DIR / "index.html")

    @app.get("/api/healthz")
    async def healthz() -> Dict[str, str]:
        return {"status": "ok", "model": config.gemini.model}

    @app.get("/api/defaults", response_model=DefaultsResponse)
    async def defaults() -> DefaultsResponse:
        return DefaultsResponse(schema_text=DEFAULT_SCHEMA, examples=EXAMPLE_QUESTIONS)

    @app.post(
        "/api/generate",
        response_model=GeneratedSqlResponse,
        responses={
            400: {"model": ErrorResponse},
            502: {"model": ErrorResponse},
            504: {"model": ErrorResponse},
        },
    )
    def generate(req: GenerateSqlRequest) -> GeneratedSqlResponse:
        # Plain def: runs in the threadpool while the Gemini call blocks
        outcome = use_case.generate(req.api_key, req.db_schema, req.question)
        if not outcome.ok:
            error = outcome.error
            raise HTTPException(status_code=status_code_for(error), detail=error.user_message)
        return GeneratedSqlResponse(**outcome.result.to_dict())

    return app
