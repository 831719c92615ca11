"""Observers notified by a WarningManager when a warning is recorded."""

from __future__ import annotations

import warnings
from collections.abc import Callable
from typing import Protocol, runtime_checkable

import click

from warnkit.models import WarningRecord
from warnkit.warning_policy import WarnkitWarning


@runtime_checkable
class Observer(Protocol):
    """Anything with ``next`` and ``error`` can subscribe to a manager.

    The manager calls ``next`` once per recorded warning. ``error`` belongs
    to the observer contract but is never called by warning recording.
    """

    def next(self, record: WarningRecord) -> None: ...

    def error(self, err: BaseException) -> None: ...


class ConsoleWarningObserver:
    """Forward warnings to Python's warning machinery and errors to stderr."""

    def __init__(self, stacklevel: int = 2) -> None:
        self.stacklevel = stacklevel

    def next(self, record: WarningRecord) -> None:
        warnings.warn(WarnkitWarning(record), stacklevel=self.stacklevel)

    def error(self, err: BaseException) -> None:
        click.echo(str(err), err=True)


class CallbackObserver:
    """Adapt plain callables to the observer contract."""

    def __init__(
        self,
        on_next: Callable[[WarningRecord], None],
        on_error: Callable[[BaseException], None] | None = None,
    ) -> None:
        self.on_next = on_next
        self.on_error = on_error

    def next(self, record: WarningRecord) -> None:
        self.on_next(record)

    def error(self, err: BaseException) -> None:
        if self.on_error is None:
            raise err
        self.on_error(err)


class CollectingObserver:
    """Keep every delivered warning and error, in delivery order."""

    def __init__(self) -> None:
        self.records: list[WarningRecord] = []
        self.errors: list[BaseException] = []

    def next(self, record: WarningRecord) -> None:
        self.records.append(record)

    def error(self, err: BaseException) -> None:
        self.errors.append(err)
