"""Entry point for the Text-to-SQL CLI."""

import sys
from typing import Optional

import click
from rich.console import Console

from app_factory import create_generation_controller
from infrastructure.config import get_config
from infrastructure.logging import get_logger, setup_logging
from tracing import setup_otel_tracing

from . import display
from .interface import TextToSQLCLI
from .session_state import create_form_state

logger = get_logger(__name__)


@click.command()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--api-key",
    envvar="GEMINI_API_KEY",
    help="Gemini API key (prompted for when omitted)",
)
@click.option(
    "--schema-file",
    type=click.File("r", encoding="utf-8"),
    help="File with the database schema (DDL)",
)
@click.option("--question", "-q", help="Ask a single question and exit")
def main(
    debug: bool,
    api_key: Optional[str],
    schema_file,
    question: Optional[str],
) -> None:
    """Generate SQL from natural-language questions using Gemini."""
    config = get_config()
    setup_logging(config.logging_settings, debug=debug, force=True)
    setup_otel_tracing()
    logger.info(f"Starting CLI interface (debug={debug}, one_shot={question is not None})")

    schema = schema_file.read() if schema_file else None
    form = create_form_state(api_key=api_key or "", schema=schema)
    controller = create_generation_controller(config)

    if question is not None:
        console = Console()
        outcome = controller.submit(form.api_key, form.schema, question)
        display.display_state(console, controller.state)
        sys.exit(0 if outcome.ok else 1)

    cli = TextToSQLCLI(controller, form=form)
    cli.start_interactive_session()


if __name__ == "__main__":
    main()
