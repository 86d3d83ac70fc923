"""
Admin Tabs — extra tabs plugins add to admin resource pages.

Tabs are keyed by resource name and tab name; tab names are unique per
resource and duplicates are rejected.

Example:

    config.admin_resource_tabs.register("entry", Tab(name="statistics", component=StatisticsTab))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pageflow.exceptions import DuplicateRegistrationError, NotFoundError
from pageflow.registry import DuplicatePolicy, Registry


@dataclass(frozen=True)
class Tab:
    """
    Attributes:
        name:          Unique per resource, used as URL fragment.
        component:     View component rendering the tab contents.
        required_role: Minimum admin role needed to see the tab.
    """

    name: str
    component: Any
    required_role: str | None = None


class Tabs(Registry[Tab]):
    """Tabs of all admin resources, in registration order."""

    def __init__(self) -> None:
        super().__init__("admin tab", policy=DuplicatePolicy.REJECT)

    def register(self, resource_name: str, *tabs: Tab) -> None:  # type: ignore[override]
        """Add tabs to a resource. Either all tabs are added or none."""
        self.ensure_mutable()

        keys = [(resource_name, tab.name) for tab in tabs]
        for index, key in enumerate(keys):
            if key in self or key in keys[:index]:
                raise DuplicateRegistrationError(f"{resource_name} admin tab", key[1])

        for key, tab in zip(keys, tabs):
            super().register(key, tab)

    def lookup(self, resource_name: str, tab_name: str) -> Tab:  # type: ignore[override]
        try:
            return super().lookup((resource_name, tab_name))
        except NotFoundError:
            raise NotFoundError(f"{resource_name} admin tab", tab_name) from None

    def find_by_resource(self, resource_name: str) -> list[Tab]:
        return [tab for (resource, _), tab in self._entries.items() if resource == resource_name]

    def resource_names(self) -> list[str]:
        return list(dict.fromkeys(resource for resource, _ in self._entries))
