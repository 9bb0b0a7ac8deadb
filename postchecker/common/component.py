from __future__ import annotations

from typing import Any, Generic

from pydantic import ValidationError

from postchecker.common.config import TConf


class ComponentFactory(Generic[TConf]):
    """Base class for configurable components."""

    # Set by subclasses
    _config_type: type[TConf]
    _instance_config: TConf

    def __init__(self, config: TConf) -> None:
        """Initialize with configuration."""
        self._instance_config = config

    @classmethod
    def from_config(cls, config: dict[str, Any] | None = None) -> ComponentFactory:
        """Create a component from a configuration dictionary."""
        try:
            parsed = cls._config_type(**(config or {}))
        except ValidationError as e:
            raise ValueError(f"Invalid {cls.__name__} configuration: {e}") from e
        return cls(parsed)

    @property
    def config(self) -> TConf:
        """Access the configuration."""
        return self._instance_config
