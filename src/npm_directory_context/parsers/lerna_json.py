"""Parse lerna.json to capture legacy multi-package locations."""

from __future__ import annotations

from pathlib import Path

from ..host import DirectoryContextHost
from .package_json import extract_package_locations, parse_json_object


def parse(path: Path, host: DirectoryContextHost) -> list[str] | None:
    """Return the ``packages`` location patterns, or None when not declared.

    A missing file or a ``packages`` field that is not a list yields None. Text
    that is not a JSON object raises ``ManifestParseError``.
    """
    if not host.exists(path):
        return None

    data = parse_json_object(path, host.read_text(path))
    packages = data.get("packages")
    if not isinstance(packages, list):
        return None

    return extract_package_locations(packages)
