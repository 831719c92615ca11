"""The warning kind table.

Each kind has a name, a fixed numeric code and a parent. "Is this record a
disk warning, or more generally an OS warning?" is answered by walking the
parent chain in this table rather than by isinstance checks, so records
stay plain immutable data.

Kinds are callable and act as record constructors::

    DISK_WARNING("Disk space is low.")
    DEPRECATION_WARNING({"feature_name": "load()", "alternative_feature_name": "read()"})
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from warnkit.errors import KindError, UnknownKindError
from warnkit.messages import (
    DEPRECATION_DEFAULT,
    PENDING_DEPRECATION_DEFAULT,
    STABILITY_DEFAULT,
    FeatureData,
    deprecation_message,
    pending_deprecation_message,
    stability_message,
)

if TYPE_CHECKING:
    from warnkit.models import WarningRecord


@dataclass(frozen=True)
class WarningKind:
    """A named warning category with its code and place in the hierarchy."""

    name: str
    code: int
    parent: WarningKind | None = None
    default_message: str = ""
    synthesize: Callable[[Any], str] | None = field(default=None, compare=False, repr=False)

    def __call__(
        self,
        message_or_data: str | FeatureData | Mapping[str, Any] | None = None,
        data: FeatureData | Mapping[str, Any] | None = None,
    ) -> WarningRecord:
        """Construct a record of this kind from a message, a payload, or both."""
        from warnkit.models import WarningRecord

        if isinstance(message_or_data, str):
            message = message_or_data
        elif message_or_data is None:
            message = ""
        else:
            data = message_or_data
            message = self.synthesize(data) if self.synthesize is not None else ""

        if isinstance(data, FeatureData):
            payload: dict[str, Any] | None = data.model_dump(exclude_none=True)
        else:
            payload = dict(data) if data is not None else None

        return WarningRecord(
            kind=self.name,
            message=message or self.default_message,
            code=self.code,
            data=payload,
        )

    def __str__(self) -> str:
        return self.name


_REGISTRY: dict[str, WarningKind] = {}


def _add(kind: WarningKind) -> WarningKind:
    existing = _REGISTRY.get(kind.name)
    if existing is not None:
        if existing != kind or existing.synthesize is not kind.synthesize:
            raise KindError(
                f"Warning kind {kind.name!r} is already registered with code "
                f"0x{existing.code:x} under {existing.parent}"
            )
        return existing
    if kind.parent is not None and _REGISTRY.get(kind.parent.name) != kind.parent:
        raise KindError(f"Parent kind {kind.parent.name!r} of {kind.name!r} is not registered")
    _REGISTRY[kind.name] = kind
    return kind


WARNING = _add(WarningKind("Warning", 0x48))
OS_WARNING = _add(WarningKind("OSWarning", 0x49, WARNING))
MEMORY_WARNING = _add(WarningKind("MemoryWarning", 0x4A, OS_WARNING))
DISK_WARNING = _add(WarningKind("DiskWarning", 0x4B, OS_WARNING))
PROCESS_WARNING = _add(WarningKind("ProcessWarning", 0x4C, OS_WARNING))
CONNECTION_WARNING = _add(WarningKind("ConnectionWarning", 0x4D, OS_WARNING))
FUTURE_WARNING = _add(WarningKind("FutureWarning", 0x58, WARNING))
STABILITY_WARNING = _add(
    WarningKind(
        "StabilityWarning",
        0x59,
        FUTURE_WARNING,
        default_message=STABILITY_DEFAULT,
        synthesize=stability_message,
    )
)
PENDING_DEPRECATION_WARNING = _add(
    WarningKind(
        "PendingDeprecationWarning",
        0x5A,
        FUTURE_WARNING,
        default_message=PENDING_DEPRECATION_DEFAULT,
        synthesize=pending_deprecation_message,
    )
)
DEPRECATION_WARNING = _add(
    WarningKind(
        "DeprecationWarning",
        0x5B,
        FUTURE_WARNING,
        default_message=DEPRECATION_DEFAULT,
        synthesize=deprecation_message,
    )
)


def register_kind(
    name: str,
    code: int,
    parent: WarningKind = WARNING,
    *,
    default_message: str = "",
    synthesize: Callable[[Any], str] | None = None,
) -> WarningKind:
    """Register an application-specific kind below *parent*.

    Registering the same kind twice returns the existing entry. Registering
    a different kind under an existing name raises ``KindError``.
    """
    if not name:
        raise KindError("Warning kind name must not be empty")
    if code < 0:
        raise KindError(f"Warning kind code must be non-negative, got {code}")
    return _add(
        WarningKind(
            name,
            code,
            parent,
            default_message=default_message,
            synthesize=synthesize,
        )
    )


def get_kind(name: str | WarningKind) -> WarningKind:
    """Look up a registered kind by name."""
    if isinstance(name, WarningKind):
        name = name.name
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnknownKindError(
            f"Unknown warning kind: {name!r} (known: {sorted(_REGISTRY)})"
        ) from None


def known_kinds() -> list[WarningKind]:
    """Return all registered kinds in registration order."""
    return list(_REGISTRY.values())


def ancestry(name: str | WarningKind) -> tuple[str, ...]:
    """Return the kind's name followed by each ancestor's, up to ``Warning``."""
    kind: WarningKind | None = get_kind(name)
    chain: list[str] = []
    while kind is not None:
        chain.append(kind.name)
        kind = kind.parent
    return tuple(chain)


def is_subkind(name: str | WarningKind, ancestor: str | WarningKind) -> bool:
    """Return True if *name* is *ancestor* or descends from it."""
    if isinstance(ancestor, WarningKind):
        ancestor = ancestor.name
    return ancestor in ancestry(name)
