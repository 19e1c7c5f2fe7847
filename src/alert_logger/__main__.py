from __future__ import annotations

import logging
import os

import uvicorn

from src.alert_logger.config import DEFAULT_LOG_LEVEL, load_config
from src.alert_logger.main import create_app

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main() -> None:
    """Run the alert logger on HOST:PORT (defaults 0.0.0.0:8080)."""
    # Handlers must exist before load_config() logs the resolved settings.
    level = (os.getenv("LOG_LEVEL") or "").strip().upper() or DEFAULT_LOG_LEVEL
    logging.basicConfig(level=level, format=LOG_FORMAT)

    config = load_config()
    logging.getLogger(__name__).info("Listening on %s:%s", config.host, config.port)
    uvicorn.run(create_app(config), host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
