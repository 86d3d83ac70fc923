"""
Pageflow Plugin System

Public API:
    PluginMeta          — plugin metadata dataclass
    Plugin              — abstract base class for all plugins
    build_configuration — run plugins and the host's callback, then seal
"""

from .base import Plugin, PluginMeta
from .loader import build_configuration

__all__ = ["Plugin", "PluginMeta", "build_configuration"]
