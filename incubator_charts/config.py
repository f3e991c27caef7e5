"""
Configuration module using Pydantic Settings.

Provides validated, type-safe configuration from environment variables
(and an optional .env file) for the CLI and the report generator. The
chart renderers themselves never read settings; callers translate
settings into ChartOptions.
"""

import logging
import sys
from typing import Literal

import structlog
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from incubator_charts.charts.base import CurrencyFormat

# --- Logging Setup (must happen before Settings to capture validation errors) ---
logging.basicConfig(
    format="%(asctime)s [%(levelname)-8s] %(message)s",
    stream=sys.stderr,
    level=logging.INFO,
    force=True,
)

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.KeyValueRenderer(
            key_order=["timestamp", "level", "event"]
        ),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class Settings(BaseSettings):
    """
    Configuration for chart rendering and report export.

    Uses Pydantic Settings for validated configuration from environment
    variables. Invalid values fail at instantiation.
    """

    # --- Currency ---
    # Dashboard amounts are in Rand unless overridden
    currency_symbol: str = Field(
        default="R",
        validation_alias="CHART_CURRENCY_SYMBOL",
        description="Currency symbol used in chart value labels",
    )
    currency_position: Literal["prefix", "suffix"] = Field(
        default="prefix",
        validation_alias="CHART_CURRENCY_POSITION",
        description="Place the currency symbol before or after the amount",
    )
    currency_space: bool = Field(
        default=False,
        validation_alias="CHART_CURRENCY_SPACE",
        description="Separate symbol and amount with a space",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    # --- Environment ---
    environment: str = Field(
        default="dev",
        validation_alias="ENVIRONMENT",
        description="Environment (dev, prod, test)",
    )

    # --- Runtime Flags ---
    quiet_mode: bool = Field(
        default=False,
        validation_alias="QUIET_MODE",
        description="Suppress verbose logging output (set via CLI --quiet)",
    )

    # --- Pydantic Settings Configuration ---
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Ignore extra environment variables (don't fail on unknown vars)
        extra="ignore",
        case_sensitive=False,
        # Allow mutation for CLI arg overrides
        frozen=False,
        populate_by_name=True,
    )

    @model_validator(mode="after")
    def setup_environment(self) -> "Settings":
        """Post-initialization setup: apply the log level."""
        log_level_value = getattr(logging, self.log_level.upper(), logging.INFO)
        logging.getLogger().setLevel(log_level_value)
        for name in logging.root.manager.loggerDict:
            logging.getLogger(name).setLevel(log_level_value)

        return self

    def currency_format(self) -> CurrencyFormat:
        """CurrencyFormat for ChartOptions built from the currency settings."""
        return CurrencyFormat(
            self.currency_symbol, self.currency_position, space=self.currency_space
        )


# --- Module-level Singleton Instance ---
# Instantiated at import time, triggers validation
config = Settings()
