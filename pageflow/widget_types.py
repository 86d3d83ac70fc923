"""
Widget Types — elements rendered around pages (navigation bars, players).

Widget names are stored per revision, so duplicate registration is rejected.
A widget type registered with default=True becomes the default widget for
each of its roles; when several defaults claim the same role the last
registration wins.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from pageflow.registry import DuplicatePolicy, Registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WidgetType:
    name: str
    roles: Sequence[str] = ()
    enabled_in_editor: bool = True
    enabled_in_preview: bool = True


class WidgetTypes(Registry[WidgetType]):
    def __init__(self) -> None:
        super().__init__("widget type", policy=DuplicatePolicy.REJECT)
        self._defaults_by_role: dict[str, WidgetType] = {}

    def register(self, widget_type: WidgetType, default: bool = False) -> WidgetType:  # type: ignore[override]
        super().register(widget_type.name, widget_type)

        if default:
            for role in widget_type.roles:
                previous = self._defaults_by_role.get(role)
                if previous is not None:
                    logger.info("Default widget type for role %s changed: %s -> %s", role, previous.name, widget_type.name)
                self._defaults_by_role[role] = widget_type

        return widget_type

    @property
    def defaults_by_role(self) -> dict[str, WidgetType]:
        return dict(self._defaults_by_role)

    def roles(self) -> list[str]:
        """All roles provided by registered widget types, in registration order."""
        roles: list[str] = []
        for widget_type in self:
            roles.extend(role for role in widget_type.roles if role not in roles)
        return roles
