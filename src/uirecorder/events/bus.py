"""
In-process change notification bus.

Observers subscribe to recorder changes and are called synchronously, in
subscription order, after each mutation completes. A failing observer is
logged and isolated; it never affects other observers or the mutator.
"""

from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from uirecorder.models.event import InteractionEvent

logger = logging.getLogger(__name__)


class ChangeKind(Enum):
    """Recorder mutations that fire a notification."""

    STARTED = "started"
    STOPPED = "stopped"
    EVENT_LOGGED = "event_logged"
    CLEARED = "cleared"
    LOADED = "loaded"
    CONFIG_UPDATED = "config_updated"


@dataclass(frozen=True)
class RecorderChange:
    """
    A completed recorder mutation.

    Attributes:
        kind: What changed.
        event_count: Buffer size after the mutation.
        event: The event appended by this mutation, if any.
    """

    kind: ChangeKind
    event_count: int
    event: InteractionEvent | None = None


ChangeHandler = Callable[[RecorderChange], Any]


@dataclass
class Subscription:
    """A subscription to recorder changes, optionally limited to some kinds."""

    id: str
    handler: ChangeHandler
    kinds: frozenset[ChangeKind] | None = None  # None = all
    enabled: bool = True

    def matches(self, change: RecorderChange) -> bool:
        """Check if this subscription should receive the change."""
        if not self.enabled:
            return False
        return self.kinds is None or change.kind in self.kinds


@dataclass
class ChangeBusStats:
    """Statistics for the change bus."""

    changes_published: int = 0
    changes_delivered: int = 0
    errors: int = 0
    subscriptions_active: int = 0


class ChangeBus:
    """
    Thread-safe synchronous observer registry.

    Supports:
    - Filtering by change kind
    - Enabling/disabling subscriptions without removing them
    - Error isolation (one handler failure doesn't affect others)
    - Statistics tracking
    """

    def __init__(
        self,
        error_handler: Callable[[str, RecorderChange, Exception], None] | None = None,
    ) -> None:
        self._subscriptions: dict[str, Subscription] = {}
        self._lock = threading.RLock()
        self._error_handler = error_handler
        self._stats = ChangeBusStats()

    def subscribe(
        self,
        handler: ChangeHandler,
        subscription_id: str | None = None,
        kinds: set[ChangeKind] | frozenset[ChangeKind] | None = None,
    ) -> str:
        """
        Subscribe to changes.

        Args:
            handler: Callable that receives each RecorderChange.
            subscription_id: Identifier for this subscription; generated if
                omitted. Reusing an ID replaces the earlier subscription.
            kinds: Only receive these change kinds (None = all).

        Returns:
            The subscription ID, for unsubscribe().
        """
        if subscription_id is None:
            subscription_id = uuid.uuid4().hex
        with self._lock:
            self._subscriptions[subscription_id] = Subscription(
                id=subscription_id,
                handler=handler,
                kinds=frozenset(kinds) if kinds is not None else None,
            )
            self._stats.subscriptions_active = len(self._subscriptions)
        return subscription_id

    def unsubscribe(self, subscription_id: str) -> bool:
        """
        Remove a subscription.

        Returns:
            True if subscription was found and removed.
        """
        with self._lock:
            if subscription_id in self._subscriptions:
                del self._subscriptions[subscription_id]
                self._stats.subscriptions_active = len(self._subscriptions)
                return True
            return False

    def enable_subscription(self, subscription_id: str) -> None:
        """Enable a subscription."""
        with self._lock:
            if subscription_id in self._subscriptions:
                self._subscriptions[subscription_id].enabled = True

    def disable_subscription(self, subscription_id: str) -> None:
        """Disable a subscription without removing it."""
        with self._lock:
            if subscription_id in self._subscriptions:
                self._subscriptions[subscription_id].enabled = False

    def publish(self, change: RecorderChange) -> None:
        """Deliver a change to every matching subscription, in order."""
        with self._lock:
            self._stats.changes_published += 1
            subscriptions = list(self._subscriptions.values())

        for subscription in subscriptions:
            if subscription.matches(change):
                self._deliver(subscription, change)

    def _deliver(self, subscription: Subscription, change: RecorderChange) -> None:
        try:
            subscription.handler(change)
            with self._lock:
                self._stats.changes_delivered += 1
        except Exception as e:
            self._handle_error(subscription.id, change, e)

    def _handle_error(self, subscription_id: str, change: RecorderChange, error: Exception) -> None:
        with self._lock:
            self._stats.errors += 1

        logger.exception(
            "Error in change handler %s for %s: %s",
            subscription_id,
            change.kind.value,
            error,
        )

        if self._error_handler:
            try:
                self._error_handler(subscription_id, change, error)
            except Exception as e:
                logger.exception("Error in error handler: %s", e)

    def on_error(
        self, handler: Callable[[str, RecorderChange, Exception], None]
    ) -> Callable[[str, RecorderChange, Exception], None]:
        """
        Set or replace the global error handler.

        Args:
            handler: Callable(subscription_id, change, error)

        Returns:
            The handler (for use as decorator).
        """
        self._error_handler = handler
        return handler

    @property
    def stats(self) -> ChangeBusStats:
        """Get a snapshot of the current statistics."""
        with self._lock:
            return ChangeBusStats(
                changes_published=self._stats.changes_published,
                changes_delivered=self._stats.changes_delivered,
                errors=self._stats.errors,
                subscriptions_active=self._stats.subscriptions_active,
            )

    def get_subscriptions(self) -> list[str]:
        """Get list of subscription IDs."""
        with self._lock:
            return list(self._subscriptions.keys())

    def reset(self) -> None:
        """Clear subscriptions and statistics (for testing)."""
        with self._lock:
            self._subscriptions.clear()
            self._stats = ChangeBusStats()
