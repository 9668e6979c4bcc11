import logging

import uvicorn

from app.config import HOST, get_settings
from app.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def run():
    configure_logging()
    settings = get_settings()
    logger.info("Servidor rodando na porta %d", settings.port)
    uvicorn.run("app.main:app", host=HOST, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
