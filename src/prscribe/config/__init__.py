"""Configuration for prscribe."""

from prscribe.config.config_loader import ConfigError, ConfigFileNotFoundError, ConfigLoader, ConfigParsingError
from prscribe.config.config_schema import AppConfigSchema, LoggingSchema, PRSchema, ServerSchema

__all__ = [
	"AppConfigSchema",
	"ConfigError",
	"ConfigFileNotFoundError",
	"ConfigLoader",
	"ConfigParsingError",
	"LoggingSchema",
	"PRSchema",
	"ServerSchema",
]
