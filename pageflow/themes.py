"""
Themes — named visual styles an entry's theming can select.

Themes replace on re-registration so a host application can re-skin a theme
that a plugin registered earlier.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pageflow.exceptions import NotFoundError
from pageflow.registry import DuplicatePolicy, Registry
from pageflow.utils import deep_freeze


@dataclass(frozen=True)
class Theme:
    """
    A registered theme and its capability options.

    Recognised options:
        no_home_button:           Theme does not render a home button.
        no_overview_button:       Theme does not render an overview button.
        page_change_by_scrolling: Pages change when scrolling past the end.
    """

    name: str
    options: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", deep_freeze(self.options))

    @property
    def has_home_button(self) -> bool:
        return not self.options.get("no_home_button", False)

    @property
    def has_overview_button(self) -> bool:
        return not self.options.get("no_overview_button", False)

    @property
    def page_change_by_scrolling(self) -> bool:
        return bool(self.options.get("page_change_by_scrolling", False))

    @property
    def stylesheet_path(self) -> str:
        return f"pageflow/themes/{self.name}.css"


class Themes(Registry[Theme]):
    def __init__(self) -> None:
        super().__init__("theme", policy=DuplicatePolicy.REPLACE)

    def register(self, name: str, **options: Any) -> Theme:  # type: ignore[override]
        return super().register(name, Theme(name=name, options=dict(options)))

    @property
    def default(self) -> Theme:
        """The first registered theme."""
        for theme in self:
            return theme
        raise NotFoundError(self.kind, "default")
