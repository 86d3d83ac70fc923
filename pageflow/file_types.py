"""
File Types — kinds of media files that page types make available.

File types are not registered directly. They are collected from the
registered page types every time they are read, so the collection always
reflects the current page type registry.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

from pageflow.exceptions import NotFoundError


def _underscore(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name.split(".")[-1]).lower()


@dataclass(frozen=True)
class FileType:
    """
    Attributes:
        model:             Dotted or plain model name, e.g. "Pageflow.ImageFile".
        collection_name:   Name of the file collection in JSON payloads.
                           Defaults to the pluralised snake case model name.
        editor_partial:    Template rendering the file in the editor.
        nested_file_types: File types that can only exist inside this one
                           (e.g. text tracks of a video file).
        top_level_type:    False for file types only used as nested types.
    """

    model: str
    collection_name: str = ""
    editor_partial: str | None = None
    nested_file_types: tuple[FileType, ...] = field(default_factory=tuple)
    top_level_type: bool = True

    def __post_init__(self) -> None:
        if not self.collection_name:
            object.__setattr__(self, "collection_name", f"{_underscore(self.model)}s")


class FileTypes:
    """Read-only view of the file types provided by a set of page types."""

    def __init__(self, page_types: Callable[[], Iterable]) -> None:
        self._page_types = page_types

    def __iter__(self) -> Iterator[FileType]:
        seen: set[str] = set()
        for page_type in self._page_types():
            for file_type in _with_nested(page_type.file_types):
                if file_type.model not in seen:
                    seen.add(file_type.model)
                    yield file_type

    def all(self) -> Iterable[FileType]:
        return self

    def lookup(self, model: str) -> FileType:
        for file_type in self:
            if file_type.model == model:
                return file_type
        raise NotFoundError("file type", model)

    def find_by_collection_name(self, collection_name: str) -> FileType:
        for file_type in self:
            if file_type.collection_name == collection_name:
                return file_type
        raise NotFoundError("file type", collection_name)

    def top_level(self) -> list[FileType]:
        return [file_type for file_type in self if file_type.top_level_type]

    def __contains__(self, model: object) -> bool:
        return any(file_type.model == model for file_type in self)

    def __len__(self) -> int:
        return sum(1 for _ in self)


def _with_nested(file_types: Iterable[FileType]) -> Iterator[FileType]:
    for file_type in file_types:
        yield file_type
        yield from _with_nested(file_type.nested_file_types)
