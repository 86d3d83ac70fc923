"""
Help Entries — sections of the help dialog displayed in the editor.

Entries form a tree: each entry is keyed by its translation key and may name
an already registered parent. Siblings are ordered by descending priority;
equal priorities keep registration order.

Example:

    config.help_entries.register("pageflow.rainbow.help_entries.colors", priority=11)
    config.help_entries.register(
        "pageflow.rainbow.help_entries.colors.blue",
        parent="pageflow.rainbow.help_entries.colors",
    )
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from pageflow.exceptions import NotFoundError
from pageflow.registry import DuplicatePolicy, Registry

DEFAULT_PRIORITY = 10


@dataclass(frozen=True)
class HelpEntry:
    name: str
    priority: int = DEFAULT_PRIORITY
    parent: str | None = None


class HelpEntries(Registry[HelpEntry]):
    def __init__(self) -> None:
        super().__init__("help entry", policy=DuplicatePolicy.REJECT)
        self._children: dict[str | None, list[str]] = {None: []}

    def register(  # type: ignore[override]
        self, name: str, priority: int = DEFAULT_PRIORITY, parent: str | None = None
    ) -> HelpEntry:
        if parent is not None and parent not in self:
            raise NotFoundError("help entry", parent)

        entry = super().register(name, HelpEntry(name=name, priority=priority, parent=parent))
        self._children.setdefault(parent, []).append(name)
        self._children[name] = []
        return entry

    def children_of(self, name: str | None) -> list[HelpEntry]:
        """Direct children of name (top-level entries for None), by priority."""
        if name is not None and name not in self:
            raise NotFoundError("help entry", name)
        entries = [self.lookup(child) for child in self._children[name]]
        return sorted(entries, key=lambda entry: -entry.priority)

    def top_level(self) -> list[HelpEntry]:
        """Top-level entries ordered by priority."""
        return self.children_of(None)

    def flat(self) -> Iterator[HelpEntry]:
        """All entries, depth first, each level ordered by priority."""
        return self._walk(None)

    def _walk(self, name: str | None) -> Iterator[HelpEntry]:
        for entry in self.children_of(name):
            yield entry
            yield from self._walk(entry.name)
