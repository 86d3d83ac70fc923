"""
Home button of published entries.

Derives whether a home button is displayed and where it links to from a
revision and the theming the entry is published with. Missing records or
blank values never raise; they yield no url and a disabled button.
"""

from __future__ import annotations

from typing import Protocol


class RevisionLike(Protocol):
    home_url: str | None
    home_button_enabled: bool


class ThemeLike(Protocol):
    @property
    def has_home_button(self) -> bool: ...


class ThemingLike(Protocol):
    home_url: str | None
    cname: str | None
    theme: ThemeLike


def _presence(value: str | None) -> str | None:
    if value and value.strip():
        return value
    return None


class HomeButton:
    def __init__(self, revision: RevisionLike | None, theming: ThemingLike | None) -> None:
        self.revision = revision
        self.theming = theming

    @property
    def url(self) -> str | None:
        """Explicit home url of the revision, else the theming's cname url."""
        return _presence(self.url_value) or self._theming_home_button_url()

    @property
    def enabled(self) -> bool:
        theme = getattr(self.theming, "theme", None)
        return bool(self.enabled_value and theme is not None and theme.has_home_button and self.url)

    @property
    def url_value(self) -> str | None:
        return getattr(self.revision, "home_url", None)

    @property
    def enabled_value(self) -> bool:
        return bool(getattr(self.revision, "home_button_enabled", False))

    def _theming_home_button_url(self) -> str | None:
        if self.theming is None or not _presence(self.theming.home_url):
            return None
        cname = _presence(self.theming.cname)
        return f"//{cname}" if cname else None
