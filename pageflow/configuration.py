"""
Engine configuration populated by the host application and its plugins.

A Configuration goes through two phases. While the application boots, the
host and every plugin register themes, page types, widget types and so on,
and assign settings. Once boot completes, seal() freezes every registry and
the attribute surface; from then on the configuration is only read, so it can
be shared by concurrent request handlers without locking.

Example:

    config = Configuration()
    config.themes.register("custom", no_home_button=True)
    config.register_page_type(BackgroundImagePageType())
    config.mailer_sender = "stories@example.com"
    config.seal()
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pageflow.admin_tabs import Tabs
from pageflow.exceptions import ConfigurationError, ConfigurationSealedError
from pageflow.file_types import FileTypes
from pageflow.help_entries import HelpEntries
from pageflow.hooks import Hooks
from pageflow.page_types import PageType, PageTypes
from pageflow.quotas import Quotas
from pageflow.request_scopes import (
    CnameThemingRequestScope,
    EditorRoutingConstraint,
    EntryRequestScope,
    PublicEntryUrlOptions,
    ThemingRequestScope,
    all_entries,
    constant_url_options,
    default_public_entry_url_options,
)
from pageflow.settings import PageflowSettings
from pageflow.themes import Themes
from pageflow.utils import deep_freeze
from pageflow.widget_types import WidgetTypes

logger = logging.getLogger(__name__)

SETTING_NAMES = frozenset(PageflowSettings.model_fields)

ASSIGNABLE_NAMES = frozenset(
    {
        "quotas",
        "editor_routing_constraint",
        "editor_route_constraint",
        "theming_request_scope",
        "public_entry_request_scope",
        "public_entry_url_options",
    }
)


class Configuration:
    """
    Settings and extension registries of the engine.

    Attributes:
        hooks:                      Subscribers notified of engine events.
        quotas:                     Quota classes limiting resource usage.
        themes:                     Themes entries can be displayed with.
        file_types:                 File types provided by page types.
        widget_types:               Widgets displayed around pages.
        help_entries:               Sections of the editor help dialog.
        admin_resource_tabs:        Additional tabs of admin resource pages.
        editor_routing_constraint:  Restricts editor endpoints to certain
                                    requests, e.g. one official host.
        theming_request_scope:      Narrows themings to those matching a
                                    request. Defaults to matching the cname.
        public_entry_request_scope: Narrows entries served by public
                                    endpoints for a request.
        public_entry_url_options:   Builds url options for published
                                    entries of a theming. A plain mapping
                                    may be assigned instead of a callable.

    Scalar settings (see PageflowSettings) are read and assigned as plain
    attributes and validated on assignment. Registries other than quotas
    cannot be replaced, and assigning an unknown name raises AttributeError.
    After seal(), settings read back as deeply read-only copies.
    """

    editor_routing_constraint: EditorRoutingConstraint | None
    theming_request_scope: ThemingRequestScope
    public_entry_request_scope: EntryRequestScope
    public_entry_url_options: PublicEntryUrlOptions

    def __init__(self, settings: PageflowSettings | None = None) -> None:
        object.__setattr__(self, "_sealed", False)
        object.__setattr__(self, "_settings", settings or PageflowSettings())
        object.__setattr__(self, "_frozen_settings", {})
        object.__setattr__(self, "_page_types", PageTypes())
        object.__setattr__(self, "_hooks", Hooks())
        object.__setattr__(self, "_themes", Themes())
        object.__setattr__(self, "_file_types", FileTypes(self._page_types.all))
        object.__setattr__(self, "_widget_types", WidgetTypes())
        object.__setattr__(self, "_help_entries", HelpEntries())
        object.__setattr__(self, "_admin_resource_tabs", Tabs())

        self.quotas = Quotas()
        self.editor_routing_constraint = None
        self.theming_request_scope = CnameThemingRequestScope()
        self.public_entry_request_scope = all_entries
        self.public_entry_url_options = default_public_entry_url_options

    # ── Attribute surface ─────────────────────────────────────────────────────

    def __getattr__(self, name: str) -> Any:
        if name in SETTING_NAMES:
            if self._sealed:
                return self._frozen_settings[name]
            return getattr(self._settings, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        if self._sealed:
            raise ConfigurationSealedError(name)

        if name in SETTING_NAMES:
            setattr(self._settings, name, value)
        elif name not in ASSIGNABLE_NAMES:
            raise AttributeError(f"{type(self).__name__!r} object has no assignable attribute {name!r}")
        elif name == "public_entry_url_options" and isinstance(value, Mapping):
            object.__setattr__(self, name, constant_url_options(value))
        else:
            object.__setattr__(self, name, value)

    # ── Registries ────────────────────────────────────────────────────────────

    @property
    def hooks(self) -> Hooks:
        return self._hooks

    @property
    def themes(self) -> Themes:
        return self._themes

    @property
    def file_types(self) -> FileTypes:
        return self._file_types

    @property
    def widget_types(self) -> WidgetTypes:
        return self._widget_types

    @property
    def help_entries(self) -> HelpEntries:
        return self._help_entries

    @property
    def admin_resource_tabs(self) -> Tabs:
        return self._admin_resource_tabs

    @property
    def quotas(self) -> Quotas:
        return self._quotas

    @quotas.setter
    def quotas(self, quotas: Quotas) -> None:
        if not isinstance(quotas, Quotas):
            raise ConfigurationError("quotas must be a Quotas registry", details={"type": type(quotas).__name__})
        object.__setattr__(self, "_quotas", quotas)

    @property
    def editor_route_constraint(self) -> EditorRoutingConstraint | None:
        """Older name of editor_routing_constraint."""
        return self.editor_routing_constraint

    @editor_route_constraint.setter
    def editor_route_constraint(self, constraint: EditorRoutingConstraint | None) -> None:
        self.editor_routing_constraint = constraint

    # ── Page types ────────────────────────────────────────────────────────────

    def register_page_type(self, page_type: PageType) -> None:
        """Make a page type available for use in the system."""
        self._page_types.register(page_type)

    def lookup_page_type(self, name: str) -> PageType:
        return self._page_types.lookup(name)

    @property
    def page_types(self) -> list[PageType]:
        return list(self._page_types)

    @property
    def page_type_names(self) -> list[str]:
        return [page_type.name for page_type in self._page_types]

    @property
    def revision_components(self) -> list[Any]:
        return self._page_types.revision_components()

    # ── Derived values ────────────────────────────────────────────────────────

    def theming_url_options(self, theming: Any) -> dict[str, Any]:
        return self.public_entry_url_options(theming)

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> Configuration:
        """Freeze all registries and settings. Calling it again is a no-op."""
        if self._sealed:
            return self

        for registry in (
            self._page_types,
            self._hooks,
            self._quotas,
            self._themes,
            self._widget_types,
            self._help_entries,
            self._admin_resource_tabs,
        ):
            registry.freeze()

        self._frozen_settings.update((name, deep_freeze(getattr(self._settings, name))) for name in SETTING_NAMES)

        object.__setattr__(self, "_sealed", True)
        logger.info(
            "Pageflow configuration sealed (%d page types, %d themes, %d widget types)",
            len(self._page_types),
            len(self.themes),
            len(self.widget_types),
        )
        return self
