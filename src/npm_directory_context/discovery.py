"""Manifest lookup and location pattern expansion."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from fnmatch import fnmatchcase
from pathlib import Path

from .host import DirectoryContextHost

logger = logging.getLogger(__name__)

EXCLUDES = ("node_modules", ".git")
_GLOB_CHARS = frozenset("*?[")


def find_file_up(start: Path, file_name: str, host: DirectoryContextHost) -> Path | None:
    """Return the nearest ``file_name`` in ``start`` or one of its ancestors."""
    directory = start
    while True:
        candidate = directory / file_name
        if host.is_file(candidate):
            return candidate
        parent = directory.parent
        if parent == directory:
            return None
        directory = parent


def _split_location(location: str) -> list[str]:
    segments = location.replace("\\", "/").split("/")
    return [segment for segment in segments if segment and segment != "."]


def _is_glob(segment: str) -> bool:
    return any(ch in _GLOB_CHARS for ch in segment)


def _child_directories(
    directory: Path, host: DirectoryContextHost, excludes: Iterable[str]
) -> list[Path]:
    try:
        names = host.list_directory(directory)
    except OSError:
        logger.debug("Cannot list %s, skipping", directory)
        return []
    skipped = set(excludes)
    return [
        directory / name
        for name in names
        if name not in skipped and host.is_directory(directory / name)
    ]


def _descendant_directories(
    directory: Path, host: DirectoryContextHost, excludes: Iterable[str]
) -> list[Path]:
    """Return ``directory`` and every directory below it, depth first."""
    found = [directory]
    for child in _child_directories(directory, host, excludes):
        if child.name.startswith(".") or host.is_symlink(child):
            continue
        found.extend(_descendant_directories(child, host, excludes))
    return found


def _expand_segment(
    directory: Path, segment: str, host: DirectoryContextHost, excludes: Iterable[str]
) -> list[Path]:
    if segment == "**":
        return _descendant_directories(directory, host, excludes)
    if segment == "..":
        return [directory.parent]
    if _is_glob(segment):
        return [
            child
            for child in _child_directories(directory, host, excludes)
            if (segment.startswith(".") or not child.name.startswith("."))
            and fnmatchcase(child.name, segment)
        ]
    candidate = directory / segment
    return [candidate] if host.is_directory(candidate) else []


def expand_location(
    base: Path,
    location: str,
    host: DirectoryContextHost,
    excludes: Iterable[str] = EXCLUDES,
) -> list[Path]:
    """Expand one location pattern into the existing directories it denotes.

    Supports ``*``, ``?`` and ``[...]`` within a segment (immediate
    subdirectories) and ``**`` as a whole segment (any depth, including none).
    """
    excludes = tuple(excludes)
    current = [base]
    for segment in _split_location(location):
        expanded: list[Path] = []
        for directory in current:
            expanded.extend(_expand_segment(directory, segment, host, excludes))
        current = expanded
        if not current:
            break

    unique: list[Path] = []
    seen: set[Path] = set()
    for directory in current:
        if directory not in seen:
            seen.add(directory)
            unique.append(directory)
    return unique


def expand_locations(
    base: Path,
    locations: Iterable[str],
    host: DirectoryContextHost,
    excludes: Iterable[str] = EXCLUDES,
) -> list[Path]:
    """Expand location patterns in order, applying ``!`` negations.

    A pattern starting with ``!`` removes the directories it matches from the
    result, regardless of where it appears in the list.
    """
    excludes = tuple(excludes)
    included: list[Path] = []
    negated: set[Path] = set()
    for location in locations:
        location = location.strip()
        if location.startswith("!"):
            negated.update(expand_location(base, location[1:], host, excludes))
        elif location:
            included.extend(expand_location(base, location, host, excludes))

    result: list[Path] = []
    seen: set[Path] = set()
    for directory in included:
        if directory in negated or directory in seen:
            continue
        seen.add(directory)
        result.append(directory)
    return result
