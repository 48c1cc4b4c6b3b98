"""Entry point serving the browser form with uvicorn."""

from typing import Optional

import click
import uvicorn

from infrastructure.config import get_config
from infrastructure.logging import get_logger, setup_logging
from tracing import setup_otel_tracing

from .app import create_app

logger = get_logger(__name__)


@click.command()
@click.option("--host", help="Bind address (default from WEB_HOST)")
@click.option("--port", type=int, help="Bind port (default from WEB_PORT)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(host: Optional[str], port: Optional[int], debug: bool) -> None:
    """Serve the Text-to-SQL form in the browser."""
    config = get_config()
    setup_logging(config.logging_settings, debug=debug, force=True)
    setup_otel_tracing()

    host = host or config.web.host
    port = port or config.web.port
    logger.info(f"Starting web interface on http://{host}:{port}")
    uvicorn.run(create_app(config=config), host=host, port=port, log_level="debug" if debug else "info")


if __name__ == "__main__":
    main()
