"""Configuration error."""


class ConfigError(Exception):
    """Raised when the service config file is missing or invalid."""

    def __init__(self, errors: list[str] | str):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        message = "Service configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(message)
