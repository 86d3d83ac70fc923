"""
Generic name-to-payload registry

Registry is the building block behind every pluggable extension point of the
configuration (themes, page types, widget types, quotas, help entries,
plugins). Entries are registered while the host application boots and looked
up afterwards; freeze() switches a registry into its read-only phase.

Each registry kind fixes its duplicate policy up front:

    DuplicatePolicy.REPLACE — the last registration wins (logged)
    DuplicatePolicy.REJECT  — a second registration raises
                              DuplicateRegistrationError
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Hashable, Iterable, Iterator
from typing import Generic, TypeVar

from pageflow.exceptions import ConfigurationSealedError, DuplicateRegistrationError, NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DuplicatePolicy(str, enum.Enum):
    REPLACE = "replace"
    REJECT = "reject"


class Registry(Generic[T]):
    """
    Insertion-ordered mapping of unique names to payloads.

    Args:
        kind:   Human-readable registry name used in errors and log lines.
        policy: What to do when a name is registered twice.
    """

    def __init__(self, kind: str, policy: DuplicatePolicy = DuplicatePolicy.REJECT) -> None:
        self.kind = kind
        self.policy = policy
        self._entries: dict[Hashable, T] = {}
        self._frozen = False

    # ── Registration ──────────────────────────────────────────────────────────

    def register(self, name: Hashable, payload: T) -> T:
        """Insert payload under name, applying the duplicate policy."""
        self.ensure_mutable()

        if name in self._entries:
            if self.policy is DuplicatePolicy.REJECT:
                raise DuplicateRegistrationError(self.kind, name)
            # Replacement keeps the original position in the sequence.
            logger.info("Replacing %s registration: %s", self.kind, name, extra={"registry": self.kind})
        else:
            logger.debug("Registered %s: %s", self.kind, name, extra={"registry": self.kind})

        self._entries[name] = payload
        return payload

    def freeze(self) -> None:
        """Make the registry read-only. Cannot be undone."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def ensure_mutable(self) -> None:
        if self._frozen:
            raise ConfigurationSealedError(self.kind)

    # ── Lookup ────────────────────────────────────────────────────────────────

    def lookup(self, name: Hashable) -> T:
        """Return the payload registered under name or raise NotFoundError."""
        try:
            return self._entries[name]
        except KeyError:
            raise NotFoundError(self.kind, name) from None

    def get(self, name: Hashable, default: T | None = None) -> T | None:
        return self._entries.get(name, default)

    def all(self) -> Iterable[T]:
        """Return a restartable view of all payloads in registration order."""
        return _RegistryView(self._entries)

    def names(self) -> list[Hashable]:
        return list(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries.values())

    def __repr__(self) -> str:
        return f"<Registry {self.kind} policy={self.policy.value} size={len(self)} frozen={self._frozen}>"


class _RegistryView(Generic[T]):
    """Lazy iterable over registry payloads; every iteration starts afresh."""

    def __init__(self, entries: dict[Hashable, T]) -> None:
        self._entries = entries

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)
