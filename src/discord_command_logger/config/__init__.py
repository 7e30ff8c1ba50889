"""Plugin configuration."""

from .models import Config, ConfigurationError
from .loader import load_config, validate_config, config_path

__all__ = ["Config", "ConfigurationError", "load_config", "validate_config", "config_path"]
