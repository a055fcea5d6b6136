"""ASGI entry point for running the server via uvicorn CLI.

    uvicorn portfolio_twin.server.asgi:app --host ... --port ...

The config file is read from $PORTFOLIO_TWIN_CONFIG when set.
"""

from portfolio_twin.config.loader import configure_logging, load_config
from portfolio_twin.server.app import create_app

config = load_config()
configure_logging(config.logging.level)
app = create_app(config)
