"""Directory context resolution entrypoints.

``resolve_directory_context`` finds the package.json governing a directory and
classifies it as a standalone package or a multi-package root. Member
resolution is driven by ``MEMBER_RESOLVERS``, tried in order; the first
resolver that applies decides the members.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeAlias

from .config import Settings, load_settings
from .discovery import find_file_up
from .errors import ManifestNotFoundError
from .host import DirectoryContextHost, LocalFileSystemHost
from .linked import resolve_linked_packages
from .models.directory_context import (
    DirectoryContext,
    MultiPackageContext,
    SinglePackageContext,
)
from .models.npm_package import NpmPackage, sort_packages_by_depth
from .parsers import lerna_json
from .parsers.package_json import extract_package_locations, load_package
from .workspaces import resolve_workspace_packages

logger = logging.getLogger(__name__)

# Returns None when the convention does not apply to the root package.
ResolveFunction: TypeAlias = Callable[
    [NpmPackage, DirectoryContextHost, Settings], list[NpmPackage] | None
]


@dataclass(slots=True, frozen=True)
class MemberResolver:
    """Binding of a workspace convention name to its member resolver."""

    name: str
    resolve: ResolveFunction


def _resolve_from_workspaces(
    root_package: NpmPackage, host: DirectoryContextHost, settings: Settings
) -> list[NpmPackage] | None:
    if "workspaces" not in root_package.package_json:
        return None
    locations = extract_package_locations(root_package.package_json["workspaces"])
    return resolve_workspace_packages(root_package.directory_path, locations, host, settings)


def _resolve_from_lerna(
    root_package: NpmPackage, host: DirectoryContextHost, settings: Settings
) -> list[NpmPackage] | None:
    lerna_json_path = root_package.directory_path / settings.legacy_config_name
    locations = lerna_json.parse(lerna_json_path, host)
    if locations is None:
        return None
    return resolve_workspace_packages(root_package.directory_path, locations, host, settings)


def _resolve_from_links(
    root_package: NpmPackage, host: DirectoryContextHost, settings: Settings
) -> list[NpmPackage] | None:
    return resolve_linked_packages(root_package, host, settings) or None


# Registry of member resolvers in priority order.
MEMBER_RESOLVERS: tuple[MemberResolver, ...] = (
    MemberResolver(name="workspaces", resolve=_resolve_from_workspaces),
    MemberResolver(name="lerna", resolve=_resolve_from_lerna),
    MemberResolver(name="linked", resolve=_resolve_from_links),
)


def resolve_directory_context(
    base_path: Path | str,
    host: DirectoryContextHost | None = None,
    settings: Settings | None = None,
) -> DirectoryContext:
    """Resolve the package context of ``base_path``.

    Params:
        base_path: directory to start the upward manifest search from
        host: filesystem capability; the local filesystem when None
        settings: file names and ignored directories; when None they come
            from ``load_settings()`` (env-named file or built-in defaults)

    Returns: ``MultiPackageContext`` when the nearest package.json is a
    workspace root (native workspaces, lerna.json or linked
    packages), otherwise ``SinglePackageContext``.

    Raises:
        ManifestNotFoundError: no package.json in ``base_path`` or above.
        ManifestParseError: a manifest or workspace config is malformed.
        ConfigError: the settings file named by the environment is invalid.
    """
    host = host or LocalFileSystemHost()
    settings = settings or load_settings()
    base_path = Path(os.path.abspath(base_path))

    package_json_path = find_file_up(base_path, settings.manifest_name, host)
    if package_json_path is None:
        raise ManifestNotFoundError(f"Cannot find {settings.manifest_name} for {base_path}")
    logger.debug("Found %s", package_json_path)

    root_package = load_package(package_json_path, host)

    for resolver in MEMBER_RESOLVERS:
        packages = resolver.resolve(root_package, host, settings)
        if packages is None:
            continue
        logger.debug(
            "Resolved %d member package(s) of %s from %s",
            len(packages),
            root_package.display_name,
            resolver.name,
        )
        return MultiPackageContext(
            root_package=root_package,
            packages=tuple(sort_packages_by_depth(packages)),
            source=resolver.name,
        )

    return SinglePackageContext(npm_package=root_package)


def child_packages_from_context(context: DirectoryContext) -> list[NpmPackage]:
    """Return the member packages, or the single package."""
    if isinstance(context, SinglePackageContext):
        return [context.npm_package]
    if isinstance(context, MultiPackageContext):
        return list(context.packages)
    raise TypeError(f"Unsupported directory context: {context!r}")


def all_packages_from_context(context: DirectoryContext) -> list[NpmPackage]:
    """Return the root package followed by its members, or the single package."""
    if isinstance(context, SinglePackageContext):
        return [context.npm_package]
    if isinstance(context, MultiPackageContext):
        return [context.root_package, *context.packages]
    raise TypeError(f"Unsupported directory context: {context!r}")


def get_root_package(context: DirectoryContext) -> NpmPackage:
    """Return the root package, or the single package."""
    if isinstance(context, SinglePackageContext):
        return context.npm_package
    if isinstance(context, MultiPackageContext):
        return context.root_package
    raise TypeError(f"Unsupported directory context: {context!r}")
