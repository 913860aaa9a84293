"""Best-effort discovery of locally linked packages.

Packages can be made available to a root package without a workspace
declaration: ``npm link``/``yarn link`` leave symbolic links inside
``node_modules``, and ``link:``/``file:`` dependency specifiers point straight
at a sibling directory. Anything that cannot be loaded is skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from .config import Settings
from .errors import DirectoryContextError
from .host import DirectoryContextHost
from .models.npm_package import NpmPackage
from .parsers.package_json import linked_dependency_paths, load_package

logger = logging.getLogger(__name__)


def _list_entries(directory: Path, host: DirectoryContextHost) -> list[str]:
    try:
        names = host.list_directory(directory)
    except OSError as exc:
        logger.debug("Cannot read %s: %s", directory, exc)
        return []
    return [name for name in names if not name.startswith(".")]


def _iter_link_directory_entries(
    link_directory: Path, host: DirectoryContextHost
) -> Iterator[Path]:
    """Yield package entries of a node_modules-style directory, descending into scopes.

    A directory that cannot be listed contributes no entries.
    """
    for name in _list_entries(link_directory, host):
        entry = link_directory / name
        if name.startswith("@") and not host.is_symlink(entry) and host.is_directory(entry):
            for scoped_name in _list_entries(entry, host):
                yield entry / scoped_name
        else:
            yield entry


def _iter_link_targets(
    root_package: NpmPackage, host: DirectoryContextHost, settings: Settings
) -> Iterator[Path]:
    link_directory = root_package.directory_path / settings.link_directory
    if host.is_directory(link_directory):
        for entry in _iter_link_directory_entries(link_directory, host):
            if host.is_symlink(entry):
                yield host.realpath(entry)

    for name, target in linked_dependency_paths(root_package):
        if host.is_directory(target):
            yield host.realpath(target)
        else:
            logger.debug("Linked dependency %s does not point to a directory: %s", name, target)


def resolve_linked_packages(
    root_package: NpmPackage,
    host: DirectoryContextHost,
    settings: Settings | None = None,
) -> list[NpmPackage]:
    """Return the packages linked into ``root_package``.

    Symbolic links in the link directory come first, in listing order,
    followed by ``link:``/``file:`` dependencies in manifest order. Each real
    directory is loaded once and the root package is never included. Returns
    an empty list when nothing linkable exists.
    """
    settings = settings or Settings()
    seen: set[Path] = {host.realpath(root_package.directory_path)}
    packages: list[NpmPackage] = []

    for target in _iter_link_targets(root_package, host, settings):
        if target in seen:
            continue
        seen.add(target)

        package_json_path = target / settings.manifest_name
        try:
            packages.append(load_package(package_json_path, host))
        except (OSError, DirectoryContextError) as exc:
            logger.debug("Skipping linked package at %s: %s", target, exc)

    return packages
