"""Collect warnings raised during a unit of work and notify observers.

A ``WarningManager`` keeps every warning recorded so far, in order, and
pushes each new one to its subscribed observers before ``record`` returns.
``complete()`` ends the manager's life: stored warnings are dropped and
every observer is detached. The manager can still record and answer
queries afterwards, but nobody is notified any more.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Iterator, Mapping
from typing import Any

from warnkit.errors import WarningAsError
from warnkit.kinds import WARNING, WarningKind, get_kind
from warnkit.models import WarningRecord
from warnkit.observers import Observer
from warnkit.warning_policy import WarningPolicy

logger = logging.getLogger(__name__)


class Subscription:
    """Handle returned by ``WarningManager.subscribe``.

    There is one handle per subscribed observer; subscribing the same
    observer again returns the same handle.
    """

    def __init__(self, manager: WarningManager, observer: Observer) -> None:
        self._manager = manager
        self.observer = observer

    @property
    def active(self) -> bool:
        return self._manager._is_subscribed(self)

    def unsubscribe(self) -> None:
        self._manager.unsubscribe(self.observer)


class WarningManager:
    """Ordered, observable collection of ``WarningRecord`` values.

    Args:
        policy: Optional policy; suppressed kinds are dropped and escalated
            kinds raise ``WarningAsError`` instead of being stored.
        isolate_observer_errors: When True (default) an observer raising from
            ``next`` is logged and skipped so the remaining observers are
            still notified. When False the exception reaches the caller of
            ``record`` after the warning has been stored.
    """

    def __init__(
        self,
        *,
        policy: WarningPolicy | None = None,
        isolate_observer_errors: bool = True,
    ) -> None:
        self.policy = policy
        self.isolate_observer_errors = isolate_observer_errors
        self._warnings: list[WarningRecord] = []
        self._subscriptions: list[Subscription] = []
        self._completed = False
        # records stored but not yet delivered; drained by the outermost record()
        self._pending: deque[WarningRecord] = deque()
        self._delivering = False
        # append + notify and clear + detach each run under this lock
        self._lock = threading.RLock()

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def count(self) -> int:
        """Number of warnings currently stored."""
        return len(self._warnings)

    @property
    def observers(self) -> tuple[Observer, ...]:
        with self._lock:
            return tuple(s.observer for s in self._subscriptions)

    def __len__(self) -> int:
        return self.count

    def __iter__(self) -> Iterator[WarningRecord]:
        return iter(self.query())

    def record(
        self,
        warning: str | WarningRecord,
        kind: WarningKind | str | None = WARNING,
        data: Mapping[str, Any] | None = None,
    ) -> WarningRecord | None:
        """Record a warning and notify every subscribed observer.

        *warning* is either a ready-made record, stored as-is, or a message
        from which a record of *kind* (a kind or its name) is built. A message
        with no kind is ignored.

        An observer may record from inside ``next``; the nested warning is
        stored at once and delivered after the current one has reached every
        observer, so all observers see warnings in recording order.

        Returns:
            The stored record, or None when nothing was stored.

        Raises:
            WarningAsError: If the policy escalates the warning's kind.
        """
        if isinstance(warning, str):
            if not kind:
                logger.debug("Ignoring warning %r recorded without a kind", warning)
                return None
            if isinstance(kind, str):
                kind = get_kind(kind)
            warning = kind(warning, data)
        return self._add(warning)

    def _add(self, record: WarningRecord) -> WarningRecord | None:
        with self._lock:
            if self.policy is not None:
                action = self.policy.action_for(record.kind)
                if action == "suppress":
                    logger.debug("Suppressed %s", record)
                    return None
                if action == "error":
                    raise WarningAsError(record)
            self._warnings.append(record)
            logger.debug("Recorded %s (code 0x%x)", record, record.code)
            self._pending.append(record)
            if not self._delivering:
                self._drain()
        return record

    def _drain(self) -> None:
        self._delivering = True
        try:
            while self._pending:
                self._publish(self._pending.popleft())
        except BaseException:
            self._pending.clear()
            raise
        finally:
            self._delivering = False

    def _publish(self, record: WarningRecord) -> None:
        for subscription in list(self._subscriptions):
            observer = subscription.observer
            try:
                observer.next(record)
            except Exception:
                if not self.isolate_observer_errors:
                    raise
                logger.warning(
                    "Observer %r failed while handling %s", observer, record.kind, exc_info=True
                )

    def query(self, filter: str | WarningKind | None = None) -> list[WarningRecord]:
        """Return a snapshot of stored warnings, optionally filtered.

        A string keeps warnings whose message contains it; a kind keeps
        warnings of that kind or any kind derived from it.
        """
        with self._lock:
            snapshot = list(self._warnings)
        if filter is None:
            return snapshot
        if isinstance(filter, str):
            return [w for w in snapshot if filter in w.message]
        return [w for w in snapshot if w.is_a(filter)]

    def group_by_kind(self) -> dict[str, list[WarningRecord]]:
        """Group stored warnings by their exact kind name, keeping record order."""
        grouped: dict[str, list[WarningRecord]] = {}
        for warning in self.query():
            grouped.setdefault(warning.kind, []).append(warning)
        return grouped

    def clear(self) -> None:
        """Drop every stored warning. Observers stay subscribed."""
        with self._lock:
            self._warnings = []

    def subscribe(self, observer: Observer) -> Subscription:
        """Register *observer* for every warning recorded from now on.

        Subscribing an observer twice returns its existing handle. After
        ``complete()`` the subscription is accepted but never delivered to.
        """
        with self._lock:
            existing = self._find(observer)
            if existing is not None:
                return existing
            subscription = Subscription(self, observer)
            if self._completed:
                logger.debug("Ignoring subscription of %r to a completed manager", observer)
            else:
                self._subscriptions.append(subscription)
            return subscription

    def unsubscribe(self, observer: Observer) -> None:
        with self._lock:
            subscription = self._find(observer)
            if subscription is not None:
                self._subscriptions.remove(subscription)

    def _find(self, observer: Observer) -> Subscription | None:
        for subscription in self._subscriptions:
            if subscription.observer is observer:
                return subscription
        return None

    def _is_subscribed(self, subscription: Subscription) -> bool:
        with self._lock:
            return any(s is subscription for s in self._subscriptions)

    def complete(self) -> None:
        """Clear stored warnings and detach all observers, permanently."""
        with self._lock:
            self._subscriptions = []
            self._warnings = []
            self._pending.clear()
            self._completed = True
        logger.debug("Warning manager completed")
