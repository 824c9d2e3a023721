"""Runtime settings."""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class ValueKindSettings(BaseSettings):
    """Settings controlling how failures render values.

    Loads from environment variables automatically:
        VALUEKIND_REPR_MAX_LENGTH, VALUEKIND_SHOW_VALUES

    Attributes
    ----------
    repr_max_length
        Longest value rendering kept in failure messages and report reprs;
        longer renderings are cut and suffixed with ``...``.
    show_values
        Whether failure messages include a rendering of the offending
        value. Disable when values may carry secrets.
    """

    repr_max_length: int = Field(default=50, ge=8, description="Truncation length for rendered values")
    show_values: bool = Field(default=True, description="Include value renderings in failure messages")

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="VALUEKIND_",
    )


@lru_cache(maxsize=1)
def get_settings() -> ValueKindSettings:
    """Return the process-wide settings, loading them on first use."""
    settings = ValueKindSettings()
    logger.debug("Loaded settings: %s", settings.model_dump())
    return settings


def reset_settings() -> None:
    """Forget loaded settings so the next :func:`get_settings` reloads them."""
    get_settings.cache_clear()
