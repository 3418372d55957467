"""Searching a tree of files and directories with composable filters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Sequence


class FileType(Enum):
    """Kinds of file the search can tell apart."""

    XML = "xml"
    TXT = "txt"
    JPG = "jpg"
    MP3 = "mp3"
    NONE = "none"


@dataclass(eq=False)
class File:
    """A file or directory; directories hold their entries in ``children``."""

    name: str
    size: int = 0
    file_type: FileType = FileType.NONE
    is_directory: bool = False
    children: list["File"] = field(default_factory=list, repr=False)

    def add_child(self, child: "File") -> None:
        self.children.append(child)


class Filter(ABC):
    """A test that a file must pass to be selected."""

    @abstractmethod
    def apply(self, file: File) -> bool:
        """Return True when ``file`` passes this filter."""


class SizeFilter(Filter):
    """Selects files strictly larger than a given size."""

    def __init__(self, min_size: int) -> None:
        self.min_size = min_size

    def apply(self, file: File) -> bool:
        return file.size > self.min_size


class TypeFilter(Filter):
    """Selects files of one type."""

    def __init__(self, file_type: FileType) -> None:
        self.file_type = file_type

    def apply(self, file: File) -> bool:
        return file.file_type == self.file_type


class AndFilter(Filter):
    """Selects files that pass every one of its filters."""

    def __init__(self, filters: Iterable[Filter]) -> None:
        self.filters = list(filters)

    def apply(self, file: File) -> bool:
        return all(f.apply(file) for f in self.filters)


class OrFilter(Filter):
    """Selects files that pass at least one of its filters."""

    def __init__(self, filters: Iterable[Filter]) -> None:
        self.filters = list(filters)

    def apply(self, file: File) -> bool:
        return any(f.apply(file) for f in self.filters)


class Finder:
    """Walks a directory tree depth first and collects matching files."""

    def find(self, directory: File, filters: Sequence[Filter]) -> list[File]:
        """Return every non-directory file below ``directory`` passing all ``filters``."""
        if not directory.is_directory:
            raise NotADirectoryError(f"{directory.name} is not a directory")
        return list(self._walk(directory, list(filters)))

    def _walk(self, directory: File, filters: list[Filter]) -> Iterator[File]:
        for entry in directory.children:
            if entry.is_directory:
                yield from self._walk(entry, filters)
            elif all(f.apply(entry) for f in filters):
                yield entry


def format_result(files: Iterable[File]) -> str:
    """Describe each file on its own line: name, size and kind."""
    return "".join(
        f"Filename: {file.name}\tSize: {file.size} bytes\t"
        f"{'Directory' if file.is_directory else 'File'}\n"
        for file in files
    )