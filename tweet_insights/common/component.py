from __future__ import annotations

from typing import Any, Generic

from pydantic import ValidationError

from tweet_insights.common.config import TConf
from tweet_insights.common.errors import ConfigurationError


class ComponentFactory(Generic[TConf]):
    """Base class for configurable components."""

    # This is a class variable that will be set by subclasses
    _config_type: type[TConf]
    _instance_config: TConf

    def __init__(self, config: TConf) -> None:
        """Initialize with configuration."""
        self._instance_config = config

    @classmethod
    def build_config(cls, config: dict[str, Any] | TConf) -> TConf:
        """Validate a configuration dictionary."""
        if isinstance(config, cls._config_type):
            return config
        try:
            return cls._config_type(**config)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid {cls._config_type.__name__}: {e}") from e

    @classmethod
    def from_config(cls, config: dict[str, Any], *args: Any, **kwargs: Any) -> ComponentFactory:
        """Create a component from a configuration dictionary."""
        return cls(cls.build_config(config), *args, **kwargs)

    @property
    def config(self) -> TConf:
        """Access the configuration."""
        return self._instance_config
