"""
Aggregated result of a project validation.

A ValidationReport holds a ValidationStatus saying whether the validation
passed, produced warnings, or produced errors. Alongside it the report keeps
three sets of messages: those reported at WARN level, those reported at ERROR
level, and informational messages tagged with the level they relate to.
"""

from typing import Any, Iterable

from validation_report.validator.types import InfoMessage, ValidationStatus, escalate


# Info messages carry their level as a plain text prefix, e.g. "WARNcheck logs"
WARN_TAG = ValidationStatus.WARN.value
ERROR_TAG = ValidationStatus.ERROR.value


def encode_info_msg(level: ValidationStatus, msg: str) -> str:
    """Tag an info message with the level it belongs to."""
    if level is ValidationStatus.PASS:
        return msg
    return level.value + msg


def _as_batch(msgs: Iterable[str]) -> set[str]:
    if isinstance(msgs, str):
        return {msgs}
    return set(msgs)


class ValidationReport:
    """
    Accumulates the outcome of one or more validators.

    Status starts at PASS. Error batches always raise it to ERROR; warning
    batches raise it to WARN only while no error has been recorded.
    Message sets only grow.
    """

    def __init__(self) -> None:
        self._status = ValidationStatus.PASS
        self._info_msgs: set[str] = set()
        self._warning_msgs: set[str] = set()
        self._error_msgs: set[str] = set()

    def __repr__(self) -> str:
        return (
            f"ValidationReport(status={self._status.value}, "
            f"info={len(self._info_msgs)}, warnings={len(self._warning_msgs)}, "
            f"errors={len(self._error_msgs)})"
        )

    def add_warn_level_info_msg(self, msg: str | None) -> None:
        """Add an information message associated with warning messages."""
        if msg is not None:
            self._info_msgs.add(encode_info_msg(ValidationStatus.WARN, msg))

    def add_error_level_info_msg(self, msg: str | None) -> None:
        """Add an information message associated with error messages."""
        if msg is not None:
            self._info_msgs.add(encode_info_msg(ValidationStatus.ERROR, msg))

    def add_warning_msgs(self, msgs: Iterable[str] | None) -> None:
        """
        Add messages at WARN level.

        A bare string is one message, not a batch of characters.
        """
        if msgs is None:
            return
        batch = _as_batch(msgs)
        self._warning_msgs |= batch
        if batch:
            self._status = escalate(self._status, ValidationStatus.WARN, bool(self._error_msgs))

    def add_error_msgs(self, msgs: Iterable[str] | None) -> None:
        """
        Add messages at ERROR level.

        A bare string is one message, not a batch of characters.
        """
        if msgs is None:
            return
        batch = _as_batch(msgs)
        errors_recorded = bool(self._error_msgs)
        self._error_msgs |= batch
        if batch:
            self._status = escalate(self._status, ValidationStatus.ERROR, errors_recorded)

    @property
    def status(self) -> ValidationStatus:
        return self._status

    @property
    def info_msgs(self) -> frozenset[str]:
        """Tagged information messages. Decode with get_info_msg_level/get_info_msg."""
        return frozenset(self._info_msgs)

    @property
    def warning_msgs(self) -> frozenset[str]:
        return frozenset(self._warning_msgs)

    @property
    def error_msgs(self) -> frozenset[str]:
        return frozenset(self._error_msgs)

    @property
    def has_errors(self) -> bool:
        return self._status is ValidationStatus.ERROR

    @property
    def has_warnings(self) -> bool:
        return bool(self._warning_msgs)

    def info_entries(self) -> list[InfoMessage]:
        """Info messages decoded into (level, text) records, most severe first."""
        entries = [
            InfoMessage(level=self.get_info_msg_level(m), text=self.get_info_msg(m))
            for m in self._info_msgs
        ]
        return sorted(entries, key=lambda e: (-e.level.rank, e.text))

    def merge(self, other: "ValidationReport") -> None:
        """
        Fold another report into this one.

        The other report's batches go through the same add rules, so a
        merged WARN never downgrades an ERROR.
        """
        self.add_error_msgs(other._error_msgs)
        self.add_warning_msgs(other._warning_msgs)
        self._info_msgs |= other._info_msgs

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self._status.value,
            "info": [{"level": e.level.value, "message": e.text} for e in self.info_entries()],
            "warnings": sorted(self._warning_msgs),
            "errors": sorted(self._error_msgs),
        }

    @staticmethod
    def get_info_msg_level(msg: str) -> ValidationStatus:
        """Return the severity level this information message is associated with."""
        if msg.startswith(ERROR_TAG):
            return ValidationStatus.ERROR
        if msg.startswith(WARN_TAG):
            return ValidationStatus.WARN
        return ValidationStatus.PASS

    @staticmethod
    def get_info_msg(msg: str) -> str:
        """Get the raw information message, without its level tag."""
        if msg.startswith(ERROR_TAG):
            return msg[len(ERROR_TAG):]
        if msg.startswith(WARN_TAG):
            return msg[len(WARN_TAG):]
        return msg


def merge_reports(reports: Iterable[ValidationReport]) -> ValidationReport:
    """Combine several reports into one aggregate report."""
    merged = ValidationReport()
    for report in reports:
        merged.merge(report)
    return merged
