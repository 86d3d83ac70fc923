"""
Page Types — the building blocks entries are composed of.

A page type is registered once per process. Its name is stored with every
page of every revision, so page type names must be unique and registering
one twice is rejected.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pageflow.file_types import FileType
from pageflow.registry import DuplicatePolicy, Registry


class PageType:
    """
    Base class for page types provided by the engine or by plugins.

    Subclasses must set `name`. Everything else is optional.

    Attributes:
        name:                 Identifier stored in page records.
        file_types:           File types the page type allows to embed.
        revision_components:  Additional models copied when a revision is
                              duplicated (e.g. chapters, storylines).
        thumbnail_candidates: Configuration attributes checked in order
                              when picking the page thumbnail.
    """

    name: str = ""
    file_types: Sequence[FileType] = ()
    revision_components: Sequence[Any] = ()
    thumbnail_candidates: Sequence[dict[str, str]] = ()

    @property
    def translation_key(self) -> str:
        return f"pageflow.{self.name}.page_type_name"

    def __repr__(self) -> str:
        return f"<PageType {self.name}>"


class PageTypes(Registry[PageType]):
    def __init__(self) -> None:
        super().__init__("page type", policy=DuplicatePolicy.REJECT)

    def register(self, page_type: PageType) -> PageType:  # type: ignore[override]
        return super().register(page_type.name, page_type)

    def revision_components(self) -> list[Any]:
        """Revision components of all page types, without duplicates."""
        components: list[Any] = []
        for page_type in self:
            for component in page_type.revision_components:
                if component not in components:
                    components.append(component)
        return components
