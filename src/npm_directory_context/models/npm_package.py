"""Package descriptor model."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class NpmPackage:
    """A discovered package and the manifest it was loaded from."""

    display_name: str
    directory_path: Path
    package_json: dict[str, Any]
    package_json_path: Path
    package_json_content: str

    def __post_init__(self) -> None:
        if not self.display_name:
            raise ValueError("display_name must be non-empty")
        if self.directory_path != self.package_json_path.parent:
            raise ValueError(
                f"directory_path {self.directory_path} is not the parent of "
                f"{self.package_json_path}"
            )

    @property
    def name(self) -> str | None:
        """Return the declared package name, if any."""
        name = self.package_json.get("name")
        return name if isinstance(name, str) and name else None

    @classmethod
    def from_manifest(
        cls,
        package_json_path: Path,
        package_json: dict[str, Any],
        package_json_content: str,
    ) -> NpmPackage:
        name = package_json.get("name")
        display_name = name if isinstance(name, str) and name else str(package_json_path)
        return cls(
            display_name=display_name,
            directory_path=package_json_path.parent,
            package_json=package_json,
            package_json_path=package_json_path,
            package_json_content=package_json_content,
        )


def package_depth(package: NpmPackage) -> int:
    """Return the number of path segments in the package directory."""
    return len(package.directory_path.parts)


def sort_packages_by_depth(packages: Iterable[NpmPackage]) -> list[NpmPackage]:
    """Order packages from the shallowest directory to the deepest.

    ``sorted`` is stable, so packages at equal depth keep their input order.
    """
    return sorted(packages, key=package_depth)
