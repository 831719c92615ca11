"""YAML configuration for warning managers."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from warnkit.errors import ConfigError, UnknownKindError
from warnkit.kinds import get_kind
from warnkit.manager import WarningManager
from warnkit.observers import ConsoleWarningObserver
from warnkit.warning_policy import WarningPolicy


class WarnkitConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    suppress: list[str] = []
    warn_as_error: list[str] = []
    isolate_observer_errors: bool = True
    console: bool = True

    @field_validator("suppress", "warn_as_error")
    @classmethod
    def _known_kinds(cls, v: list[str]) -> list[str]:
        for name in v:
            try:
                get_kind(name)
            except UnknownKindError as e:
                raise ValueError(str(e)) from e
        return v

    def to_policy(self) -> WarningPolicy | None:
        """Return the configured policy, or None if nothing is suppressed or escalated."""
        if not self.suppress and not self.warn_as_error:
            return None
        return WarningPolicy(
            warn_as_error=frozenset(self.warn_as_error),
            suppress=frozenset(self.suppress),
        )


def load_config(source: str | Path) -> WarnkitConfig:
    """Load a configuration from a YAML file path or raw YAML text.

    An empty document yields the default configuration.

    Raises:
        ConfigError: On read, YAML or schema errors.
    """
    if isinstance(source, Path):
        try:
            text = source.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read config file: {e}") from e
    else:
        text = source

    yml = YAML(typ="safe")
    yml.allow_duplicate_keys = False
    try:
        data = yml.load(text)
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in config: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Config top-level YAML value must be a mapping")

    try:
        return WarnkitConfig(**data)
    except PydanticValidationError as e:
        raise ConfigError(f"Config schema validation failed:\n{e}") from e


def build_manager(config: WarnkitConfig | None = None) -> WarningManager:
    """Create a manager from *config*, subscribing a console observer if enabled."""
    if config is None:
        config = WarnkitConfig()
    manager = WarningManager(
        policy=config.to_policy(),
        isolate_observer_errors=config.isolate_observer_errors,
    )
    if config.console:
        manager.subscribe(ConsoleWarningObserver())
    return manager
