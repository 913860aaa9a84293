"""Parse package.json and extract workspace and dependency information."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import ManifestParseError
from ..host import DirectoryContextHost
from ..models.npm_package import NpmPackage

DEPENDENCY_SECTIONS = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
    "optionalDependencies",
)
LINK_PROTOCOLS = ("link:", "file:")


def parse_json_object(path: Path, content: str) -> dict[str, Any]:
    """Parse ``content`` as a JSON object, naming ``path`` in any error."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(path, f"invalid JSON ({exc.msg})") from exc

    if not isinstance(data, dict):
        raise ManifestParseError(path, "is not a valid json object.")

    return data


def load_package(package_json_path: Path, host: DirectoryContextHost) -> NpmPackage:
    """Read and parse a manifest into a package descriptor.

    Raises ``OSError`` when the file cannot be read and ``ManifestParseError``
    when it is not a JSON object.
    """
    content = host.read_text(package_json_path)
    package_json = parse_json_object(package_json_path, content)
    return NpmPackage.from_manifest(package_json_path, package_json, content)


def extract_package_locations(workspaces: Any) -> list[str]:
    """Return the location patterns of a ``workspaces`` field.

    Accepts both the list form and the ``{"packages": [...]}`` form. Any other
    shape, and non-string entries, are ignored.
    """
    if isinstance(workspaces, dict):
        workspaces = workspaces.get("packages")
    if not isinstance(workspaces, list):
        return []
    return [location for location in workspaces if isinstance(location, str)]


def linked_dependency_paths(package: NpmPackage) -> list[tuple[str, Path]]:
    """Return (package, target directory) for ``link:`` and ``file:`` dependencies.

    Sections: dependencies, devDependencies, peerDependencies, optionalDependencies.
    Targets are resolved relative to the package directory.
    """
    pairs: list[tuple[str, Path]] = []
    for section in DEPENDENCY_SECTIONS:
        deps = package.package_json.get(section) or {}
        if not isinstance(deps, dict):
            continue
        for name, request in deps.items():
            if not isinstance(request, str):
                continue
            for protocol in LINK_PROTOCOLS:
                if request.startswith(protocol):
                    target = request[len(protocol) :]
                    pairs.append((name, package.directory_path / target))
                    break

    return pairs
