"""Runtime configuration — env-driven, read once at process start.

Settings come from ``ELASTICLEAN_*`` environment variables or a ``.env``
file in the working directory.  Host, port and the retention floor have
no defaults: a deployment that forgets one of them must not start.

Examples
--------
::

    export ELASTICLEAN_HOST=es-client-01.example.com
    export ELASTICLEAN_PORT=9200
    export ELASTICLEAN_MIN_DAYS=60
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from elasticlean.errors import ConfigurationMissingError

logger = logging.getLogger(__name__)

ENV_PREFIX = "ELASTICLEAN_"


class ElasticleanConfig(BaseSettings):
    """Connection and retention settings for one elasticlean process."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix=ENV_PREFIX,
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Cluster endpoint
    host: str = Field(min_length=1)
    port: int = Field(gt=0, le=65535)
    scheme: str = "http"
    timeout_seconds: float = Field(default=30.0, gt=0)

    # Retention floor in days; deletes never reach indices younger than this
    min_days: int = Field(ge=0)

    log_level: str = "WARNING"

    @property
    def base_url(self) -> str:
        """Root URL of the cluster, e.g. ``http://host:9200``."""
        return f"{self.scheme}://{self.host}:{self.port}"


def load_config(**overrides: Any) -> ElasticleanConfig:
    """Build the configuration, translating validation failures.

    Keyword arguments override environment values and are passed straight
    to ``ElasticleanConfig`` (``_env_file=None`` disables ``.env`` lookup).

    Raises
    ------
    ConfigurationMissingError
        Naming every required variable that is absent or invalid.
    """
    try:
        config = ElasticleanConfig(**overrides)
    except ValidationError as exc:
        missing = sorted(
            {f"{ENV_PREFIX}{str(err['loc'][0]).upper()}" for err in exc.errors() if err["loc"]}
        )
        logger.error("Configuration rejected: %s", ", ".join(missing))
        raise ConfigurationMissingError(missing, detail=str(exc)) from exc

    logger.debug("Loaded configuration for %s (min_days=%d)", config.base_url, config.min_days)
    return config
