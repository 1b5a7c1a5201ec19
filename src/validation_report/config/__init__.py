"""
Config module for validation-report.

Loads the list of validators to run and their options.
"""

from validation_report.config.manager import (
    DEFAULT_CONFIG_NAME,
    ValidatorConfig,
    ValidatorSpec,
)

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "ValidatorConfig",
    "ValidatorSpec",
]
