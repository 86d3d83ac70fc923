"""
Request scopes — per-request narrowing of theming and entry queries.

Each extension point is a single callable with one canonical signature:

    ThemingRequestScope(themings, request) -> themings
    EntryRequestScope(entries, request)    -> entries
    PublicEntryUrlOptions(theming)         -> dict of url options
    EditorRoutingConstraint(request)       -> bool

themings and entries are SQLAlchemy Select statements built by the host
application; scopes return a narrowed statement and never execute it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from sqlalchemy import Select
from starlette.requests import Request


class ThemingRequestScope(Protocol):
    def __call__(self, themings: Select, request: Request) -> Select: ...


class EntryRequestScope(Protocol):
    def __call__(self, entries: Select, request: Request) -> Select: ...


class PublicEntryUrlOptions(Protocol):
    def __call__(self, theming: Any) -> dict[str, Any]: ...


class EditorRoutingConstraint(Protocol):
    def __call__(self, request: Request) -> bool: ...


class CnameThemingRequestScope:
    """Find themings whose cname matches the host of the request."""

    def __call__(self, themings: Select, request: Request) -> Select:
        return themings.filter_by(cname=request.url.hostname)


def all_entries(entries: Select, request: Request) -> Select:
    return entries


def default_public_entry_url_options(theming: Any) -> dict[str, Any]:
    """Serve published entries from the theming's cname when it has one."""
    cname = getattr(theming, "cname", None)
    return {"host": cname} if cname else {}


def constant_url_options(options: Mapping[str, Any]) -> PublicEntryUrlOptions:
    """Wrap a fixed mapping into a PublicEntryUrlOptions callable."""
    frozen = dict(options)

    def url_options(theming: Any) -> dict[str, Any]:
        return dict(frozen)

    return url_options
