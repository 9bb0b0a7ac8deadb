"""Common configuration classes."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class BaseConfig(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        from_attributes=True,
    )


class RootConfig(BaseConfig):
    """Root configuration."""

    scorer: dict[str, Any] = Field(
        default_factory=dict,
        description="Scorer configuration",
    )
    logging: dict[str, Any] | None = Field(
        default=None,
        description="Logging configuration",
    )

    def __init__(self, **data):
        """Initialize root config."""
        super().__init__(**data)
        if self.logging:
            self.setup_logging(self.logging)

    @classmethod
    def setup_logging(cls, config: dict[str, Any]) -> None:
        """Setup logging based on configuration.

        Keys: ``level``, ``format``, ``filename`` (adds a rotating file
        handler, sized by ``max_bytes`` and ``backup_count``) and ``loggers``,
        a mapping of logger names to levels, e.g. ``postchecker.scoring: DEBUG``
        to trace every analysis.
        """
        level = config.get("level", "INFO")
        fmt = config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        filename = config.get("filename")

        # Configure root logger
        logging.basicConfig(level=level, format=fmt)

        # Add file handler if filename specified
        if filename:
            handler = RotatingFileHandler(
                filename=filename,
                maxBytes=config.get("max_bytes", 10 * 1024 * 1024),  # Default 10MB
                backupCount=config.get("backup_count", 5),
                encoding="utf-8",
            )
            handler.setFormatter(logging.Formatter(fmt))
            logging.getLogger().addHandler(handler)

        for name, logger_level in (config.get("loggers") or {}).items():
            logging.getLogger(name).setLevel(str(logger_level).upper())


TConf = TypeVar("TConf", bound=BaseConfig)
