"""
Validation reports and the validators that produce them.

- ValidationReport accumulates warning, error and tagged info messages
  into a single PASS/WARN/ERROR verdict
- ProjectValidator is the contract for checks run against a project
- ValidatorManager loads configured validators and runs them
"""

from validation_report.validator.types import InfoMessage, ValidationStatus, escalate
from validation_report.validator.report import (
    ValidationReport,
    encode_info_msg,
    merge_reports,
)
from validation_report.validator.core import (
    ProjectValidator,
    ValidatorManager,
    format_results,
    load_validator,
    write_report,
)

__all__ = [
    # Report
    "ValidationReport",
    "ValidationStatus",
    "InfoMessage",
    "escalate",
    "encode_info_msg",
    "merge_reports",
    # Validators
    "ProjectValidator",
    "ValidatorManager",
    "load_validator",
    # Output
    "format_results",
    "write_report",
]
