"""
Process entry point: load configuration, configure logging, and serve the app with uvicorn.

Run:
    python -m src.infrastructure.entrypoints.server
"""

import logging

import uvicorn

from src.infrastructure.config.settings import ServiceConfig
from src.infrastructure.entrypoints.fastapi_app import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    config = ServiceConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    logger.info("Server running at http://%s:%d", config.host, config.port)
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
