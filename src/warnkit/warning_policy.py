"""Warning policy controls for recorded warnings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from warnkit.errors import UnknownKindError
from warnkit.kinds import ancestry, get_kind

if TYPE_CHECKING:
    from warnkit.models import WarningRecord

PolicyAction = Literal["record", "suppress", "error"]


class WarnkitWarning(UserWarning):
    """Python warning carrying a recorded warning's kind and code."""

    def __init__(self, record: WarningRecord) -> None:
        self.kind = record.kind
        self.code = record.code
        super().__init__(f"[0x{record.code:x}] {record}")


@dataclass(frozen=True)
class WarningPolicy:
    """Controls how individual warning kinds are handled.

    Entries match a kind and all of its descendants, so suppressing
    ``OSWarning`` also suppresses ``DiskWarning``.
    """

    warn_as_error: frozenset[str] = frozenset()
    suppress: frozenset[str] = frozenset()

    def action_for(self, kind: str) -> PolicyAction:
        """Return what to do with a warning of *kind*; escalation wins over suppression."""
        chain = ancestry(kind)
        if any(name in self.warn_as_error for name in chain):
            return "error"
        if any(name in self.suppress for name in chain):
            return "suppress"
        return "record"


def parse_kind_list(raw: str) -> frozenset[str]:
    """Parse a comma-separated string of kind names and validate them.

    Raises ``ValueError`` for unknown kinds.
    """
    kinds: set[str] = set()
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            get_kind(token)
        except UnknownKindError as e:
            raise ValueError(str(e)) from e
        kinds.add(token)
    return frozenset(kinds)
