"""Exceptions raised around the validation report.

The report itself never raises. These cover loading validators and reading
their configuration.
"""


class ValidatorManagerError(Exception):
    """A configured validator could not be loaded or initialized."""

    def __init__(self, name: str, message: str):
        self.name = name
        self.message = message
        super().__init__(f"{name}: {message}")


class ConfigError(ValueError):
    """The validator configuration file is unreadable or malformed."""
