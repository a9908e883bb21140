"""Configuration for mergetrain."""

from mergetrain.config.config_loader import ConfigError, ConfigLoader, ConfigParsingError
from mergetrain.config.config_schema import AppConfigSchema, ContextSchema, GitSchema

__all__ = [
	"AppConfigSchema",
	"ConfigError",
	"ConfigLoader",
	"ConfigParsingError",
	"ContextSchema",
	"GitSchema",
]
