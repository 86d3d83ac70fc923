"""
Plugin Base Classes

PluginMeta: declarative metadata for a plugin.
Plugin:     abstract base class all plugins must subclass.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pageflow.configuration import Configuration


@dataclass(frozen=True)
class PluginMeta:
    """
    Declarative metadata describing a plugin.

    Attributes:
        name:        Machine-readable slug, e.g. "rainbow", "linkmap_page".
        version:     Semver string, e.g. "1.0.0".
        description: Human-readable description shown in the admin.
        author:      Plugin author (defaults to "Pageflow Core Team").
    """

    name: str
    version: str
    description: str = ""
    author: str = "Pageflow Core Team"


class Plugin(ABC):
    """
    Abstract base class for Pageflow plugins.

    Subclasses must implement the `meta` property and `configure`, which
    receives the unsealed configuration while the application boots.
    """

    @property
    @abstractmethod
    def meta(self) -> PluginMeta:
        """Return the plugin's metadata."""
        ...

    @abstractmethod
    def configure(self, config: Configuration) -> None:
        """
        Register the plugin's themes, page types, widget types and hooks.

        Called exactly once, before the configuration is sealed.
        """
