"""Pydantic v2 model for recorded warnings."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

from warnkit.errors import UnknownKindError
from warnkit.kinds import WarningKind, get_kind, is_subkind
from warnkit.messages import FeatureData

__all__ = ["FeatureData", "WarningRecord"]


def _freeze(value: Any) -> Any:
    """Return a read-only copy: mappings become proxies, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


class WarningRecord(BaseModel):
    """An immutable warning: its kind, message, numeric code and payload.

    ``code`` defaults to the code registered for ``kind``; an explicit code
    is stored as given. ``data`` is stored as a read-only copy; ``model_dump``
    returns plain dicts and lists.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: str = "Warning"
    message: str = ""
    code: int = Field(ge=0)
    data: Mapping[str, Any] | None = None

    @model_validator(mode="before")
    @classmethod
    def _default_code(cls, values: Any) -> Any:
        if isinstance(values, dict) and values.get("code") is None:
            kind = values.get("kind", "Warning")
            try:
                code = get_kind(kind).code
            except UnknownKindError as e:
                raise ValueError(str(e)) from e
            values = {**values, "code": code}
        return values

    @field_validator("kind", mode="before")
    @classmethod
    def _known_kind(cls, v: Any) -> Any:
        if isinstance(v, WarningKind):
            v = v.name
        try:
            get_kind(v)
        except UnknownKindError as e:
            raise ValueError(str(e)) from e
        return v

    @field_validator("data")
    @classmethod
    def _freeze_data(cls, v: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
        return _freeze(v) if v is not None else None

    @field_serializer("data")
    def _serialize_data(self, v: Mapping[str, Any] | None) -> dict[str, Any] | None:
        return _thaw(v) if v is not None else None

    @property
    def kind_info(self) -> WarningKind:
        return get_kind(self.kind)

    def is_a(self, kind: str | WarningKind) -> bool:
        """Return True if this record's kind is *kind* or one of its descendants."""
        return is_subkind(self.kind, kind)

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"

    def __int__(self) -> int:
        return self.code
