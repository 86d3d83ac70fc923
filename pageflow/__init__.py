"""
Pageflow engine configuration

Public API:
    Configuration       — settings and extension registries of the engine
    PageflowSettings    — environment backed scalar settings
    build_configuration — run plugins and the host callback, then seal
    Plugin, PluginMeta  — plugin contract
    HomeButton          — home button of published entries
"""

from .configuration import Configuration
from .home_button import HomeButton
from .plugins import Plugin, PluginMeta, build_configuration
from .settings import PageflowSettings

__all__ = ["Configuration", "HomeButton", "PageflowSettings", "Plugin", "PluginMeta", "build_configuration"]
