"""Configuration management for the Text-to-SQL assistant."""
import os
from typing import Literal, Optional
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Centralized constants
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_GEMINI_MODEL = "gemini-2.5-flash"


class GeminiConfig(BaseModel):
    """Gemini generateContent endpoint settings.

    The API key is deliberately absent: it is supplied per request by the user.
    """
    base_url: str = Field(default=DEFAULT_GEMINI_BASE_URL, description="Gemini REST API base URL")
    model: str = Field(default=DEFAULT_GEMINI_MODEL, description="Gemini model name")
    temperature: float = Field(default=0.2, ge=0.0, le=2.0, description="Sampling temperature")
    max_output_tokens: int = Field(default=1000, gt=0, description="Maximum tokens in the completion")
    request_timeout: float = Field(default=30.0, gt=0, description="HTTP request timeout in seconds")
    credential_location: Literal["query", "header"] = Field(
        default="query", description="Send the API key as the 'key' query parameter or the x-goog-api-key header"
    )


class LoggingConfig(BaseModel):
    """Logging configuration settings."""
    level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string"
    )
    file_path: str = Field(default="logs/text_to_sql.log", description="Main log file path")
    console_output: bool = Field(default=False, description="Enable console output")
    file_output: bool = Field(default=True, description="Enable file output")
    json_format: bool = Field(default=False, description="Emit one JSON object per log line")


class WebConfig(BaseModel):
    """Settings for the browser form server."""
    host: str = Field(default="127.0.0.1", description="Bind address")
    port: int = Field(default=8000, description="Bind port")
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")


class SystemConfig(BaseModel):
    """Main system configuration."""
    gemini: GeminiConfig = Field(default_factory=GeminiConfig)
    logging_settings: LoggingConfig = Field(default_factory=LoggingConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    environment: str = Field(default=os.getenv("APP_ENV", "development"), description="Deployment environment")

    def __init__(self, **kwargs):
        # Load Gemini settings from environment variables
        gemini_config = kwargs.get('gemini', {})
        if not isinstance(gemini_config, dict):
            gemini_config = gemini_config.model_dump()

        _setdefault_env(gemini_config, 'base_url', 'GEMINI_BASE_URL')
        _setdefault_env(gemini_config, 'model', 'GEMINI_MODEL')
        _setdefault_env(gemini_config, 'request_timeout', 'GEMINI_TIMEOUT')
        _setdefault_env(gemini_config, 'credential_location', 'GEMINI_CREDENTIAL_LOCATION')

        logging_config = kwargs.get('logging_settings', {})
        if not isinstance(logging_config, dict):
            logging_config = logging_config.model_dump()
        _setdefault_env(logging_config, 'level', 'LOG_LEVEL')

        web_config = kwargs.get('web', {})
        if not isinstance(web_config, dict):
            web_config = web_config.model_dump()
        _setdefault_env(web_config, 'host', 'WEB_HOST')
        _setdefault_env(web_config, 'port', 'WEB_PORT')
        cors = os.getenv('CORS_ORIGINS')
        if cors:
            web_config.setdefault('cors_origins', [origin.strip() for origin in cors.split(',')])

        kwargs['gemini'] = GeminiConfig(**gemini_config)
        kwargs['logging_settings'] = LoggingConfig(**logging_config)
        kwargs['web'] = WebConfig(**web_config)
        super().__init__(**kwargs)


def _setdefault_env(values: dict, key: str, env_var: str) -> None:
    """Fill ``values[key]`` from ``env_var`` unless set explicitly."""
    value = os.getenv(env_var)
    if value:
        values.setdefault(key, value)


class DevelopmentConfig(SystemConfig):
    """Configuration for development environment."""


class ProductionConfig(SystemConfig):
    """Configuration for production environment."""

    def __init__(self, **kwargs):
        kwargs.setdefault('logging_settings', {})
        if isinstance(kwargs['logging_settings'], dict):
            kwargs['logging_settings'].setdefault('json_format', True)
        super().__init__(**kwargs)


_CONFIG_MAP = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
}


def get_config(environment: Optional[str] = None) -> SystemConfig:
    """Load configuration based on the deployment environment."""
    env = (environment or os.getenv("APP_ENV", "development")).lower()
    config_cls = _CONFIG_MAP.get(env, DevelopmentConfig)
    return config_cls(environment=env)
