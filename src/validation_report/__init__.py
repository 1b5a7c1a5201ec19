"""
validation-report: aggregate the outcome of project validators.

Collects warning and error messages from independent validators into one
PASS/WARN/ERROR verdict plus human-readable explanations.
"""

__version__ = "0.1.0"

from validation_report.validator import (
    ProjectValidator,
    ValidationReport,
    ValidationStatus,
    ValidatorManager,
    merge_reports,
)
from validation_report.config import ValidatorConfig

__all__ = [
    "ValidationReport",
    "ValidationStatus",
    "ProjectValidator",
    "ValidatorManager",
    "ValidatorConfig",
    "merge_reports",
]
