"""Run the API server: ``python -m ic_court``."""
import logging

import uvicorn

from ic_court.core.config import settings
from ic_court.main import app

logger = logging.getLogger("ic_court")


def main() -> None:
    logger.info("Starting %s on %s:%s", settings.PROJECT_NAME, settings.SERVER_HOST, settings.SERVER_PORT)
    uvicorn.run(app, host=settings.SERVER_HOST, port=settings.SERVER_PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
