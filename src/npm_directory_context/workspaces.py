"""Resolve the member packages declared by workspace location patterns."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .config import Settings
from .discovery import expand_locations
from .host import DirectoryContextHost
from .models.npm_package import NpmPackage
from .parsers.package_json import load_package

logger = logging.getLogger(__name__)


def resolve_workspace_packages(
    base: Path,
    locations: Iterable[str],
    host: DirectoryContextHost,
    settings: Settings | None = None,
) -> list[NpmPackage]:
    """Load a package for every matched directory that contains a manifest.

    Params:
        base: workspace root the patterns are relative to
        locations: location patterns, e.g. ``["packages/*", "!packages/legacy"]``
        host: filesystem capability
        settings: file names and ignored directories; defaults when None

    Returns: packages in pattern order, one per real directory. ``base`` itself
    is never part of the result, even when a pattern matches it.

    Matched directories without a manifest are skipped. A manifest that is not
    a JSON object raises ``ManifestParseError``.
    """
    settings = settings or Settings()
    seen: set[Path] = {host.realpath(base)}
    packages: list[NpmPackage] = []

    for directory in expand_locations(base, locations, host, settings.ignored_directories):
        package_json_path = directory / settings.manifest_name
        if not host.is_file(package_json_path):
            logger.debug("No %s in %s, skipping", settings.manifest_name, directory)
            continue

        real_directory = host.realpath(directory)
        if real_directory in seen:
            continue
        seen.add(real_directory)

        packages.append(load_package(package_json_path, host))

    return packages
