"""Custom exception hierarchy for warnkit."""


class WarnkitError(Exception):
    """Base exception for all warnkit errors."""


class KindError(WarnkitError):
    """Raised when a warning kind is registered inconsistently."""


class UnknownKindError(KindError, KeyError):
    """Raised when a warning kind name is not in the kind table."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ParseError(WarnkitError):
    """Raised when a warning file cannot be read or deserialized."""


class ConfigError(WarnkitError):
    """Raised when a configuration file is missing or invalid."""


class WarningAsError(WarnkitError):
    """Raised when a warning policy escalates a recorded warning."""

    def __init__(self, record) -> None:
        self.record = record
        super().__init__(f"[0x{record.code:x}] {record}")
