"""
Hooks — notify subscribers of engine events.

Subscribers are plain callables receiving the event payload as keyword
arguments. They may be synchronous or return an awaitable.

Example:

    config.hooks.subscribe(HOOK_SUBMIT_FILE, lambda file, **_: enqueue(file))

Hooks are fire-and-forget: each subscriber is awaited in sequence;
exceptions are caught, logged, and execution continues.
"""

from __future__ import annotations

import inspect
import logging
from collections import defaultdict
from collections.abc import Iterable
from typing import Any, Protocol

from pageflow.exceptions import ConfigurationSealedError, InvalidRegistrationError

logger = logging.getLogger(__name__)

# ── Event names ───────────────────────────────────────────────────────────────
HOOK_SUBMIT_FILE = "submit_file"
HOOK_FILE_ENCODED = "file_encoded"
HOOK_FILE_ENCODING_FAILED = "file_encoding_failed"
HOOK_ENTRY_PUBLISHED = "entry_published"

ALL_HOOKS: list[str] = [
    HOOK_SUBMIT_FILE,
    HOOK_FILE_ENCODED,
    HOOK_FILE_ENCODING_FAILED,
    HOOK_ENTRY_PUBLISHED,
]


class HookSubscriber(Protocol):
    def __call__(self, **payload: Any) -> Any: ...


class Hooks:
    def __init__(self, events: Iterable[str] = ALL_HOOKS) -> None:
        self.events = frozenset(events)
        self._subscribers: dict[str, list[HookSubscriber]] = defaultdict(list)
        self._frozen = False

    # ── Subscription ──────────────────────────────────────────────────────────

    def subscribe(self, event: str, subscriber: HookSubscriber) -> None:
        if self._frozen:
            raise ConfigurationSealedError("hooks")
        if event not in self.events:
            raise InvalidRegistrationError(f"Unknown hook event '{event}'", details={"event": event})
        if not callable(subscriber):
            raise InvalidRegistrationError(
                f"Subscriber for '{event}' is not callable", details={"event": event, "subscriber": repr(subscriber)}
            )
        self._subscribers[event].append(subscriber)
        logger.debug("Hook subscriber added: %s -> %r", event, subscriber)

    def subscribers(self, event: str) -> list[HookSubscriber]:
        return list(self._subscribers.get(event, []))

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ── Dispatch ──────────────────────────────────────────────────────────────

    async def fire(self, event: str, **payload: Any) -> list[Any]:
        """
        Call every subscriber of event with payload.

        A failing subscriber never prevents others from running.

        Returns:
            Return values of the subscribers that completed.
        """
        results: list[Any] = []
        for subscriber in self._subscribers.get(event, []):
            try:
                result = subscriber(**payload)
                if inspect.isawaitable(result):
                    result = await result
                results.append(result)
            except Exception as exc:
                logger.warning("Hook subscriber %r for %s raised: %s", subscriber, event, exc, extra={"event": event})
        return results
