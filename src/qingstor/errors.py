from __future__ import annotations


class ConfigError(ValueError):
    """Raised when a QingStor config cannot be loaded or is invalid."""


class MissingFieldError(ConfigError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f'Config error: field "{field}" cannot be empty')


class ConfigDeserializationError(ConfigError):
    """Raised when config text is not valid YAML or a field has the wrong shape."""


class ConfigIOError(ConfigError, OSError):
    """Raised when a config file cannot be opened or read."""
