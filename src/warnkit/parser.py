"""YAML loading for warning files.

A warning file lists warnings to record::

    warnings:
      - kind: DiskWarning
        message: Disk space is low.
      - kind: DeprecationWarning
        data:
          feature_name: load()
          alternative_feature_name: read()
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from warnkit.errors import ParseError, UnknownKindError
from warnkit.kinds import get_kind
from warnkit.models import WarningRecord


class WarningEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: str = "Warning"
    message: str | None = None
    data: dict[str, Any] | None = None

    @field_validator("kind")
    @classmethod
    def _known_kind(cls, v: str) -> str:
        try:
            get_kind(v)
        except UnknownKindError as e:
            raise ValueError(str(e)) from e
        return v

    def to_record(self) -> WarningRecord:
        kind = get_kind(self.kind)
        if self.message is None:
            return kind(self.data)
        return kind(self.message, self.data)


class WarningFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    warnings: list[WarningEntry] = []


def _read_source_text(source: str | Path) -> str:
    """Read YAML content from a path or treat input as raw YAML text."""
    if isinstance(source, Path):
        try:
            return source.read_text(encoding="utf-8")
        except OSError as e:
            raise ParseError(f"Cannot read file: {e}") from e
    return source


def load_warnings(source: str | Path) -> list[WarningRecord]:
    """Parse a warning file into records, in file order.

    Raises:
        ParseError: On read, YAML or schema errors.
    """
    text = _read_source_text(source)
    yml = YAML(typ="safe")
    yml.allow_duplicate_keys = False
    try:
        data = yml.load(text)
    except YAMLError as e:
        raise ParseError(f"Invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ParseError("Top-level YAML value must be a mapping")

    try:
        parsed = WarningFile(**data)
    except PydanticValidationError as e:
        raise ParseError(f"Warning file schema validation failed:\n{e}") from e
    return [entry.to_record() for entry in parsed.warnings]
