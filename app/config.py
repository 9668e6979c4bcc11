import logging
from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

HOST = "0.0.0.0"


class Settings(BaseSettings):
    port: int = Field(default=3000, gt=0, lt=65536)


@lru_cache
def get_settings() -> Settings:
    # PORT is read case-insensitively from the environment
    try:
        return Settings()
    except ValidationError as e:
        logger.error("Invalid PORT configuration: %s", e)
        raise
