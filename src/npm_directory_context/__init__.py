"""npm-directory-context core package.

Resolves whether a directory belongs to a standalone npm package or to a
multi-package workspace, and lists the member packages of the latter.
"""

from .config import Settings, load_settings
from .core import (
    MEMBER_RESOLVERS,
    MemberResolver,
    all_packages_from_context,
    child_packages_from_context,
    get_root_package,
    resolve_directory_context,
)
from .discovery import expand_locations, find_file_up
from .errors import (
    ConfigError,
    DirectoryContextError,
    ManifestNotFoundError,
    ManifestParseError,
)
from .host import DirectoryContextHost, LocalFileSystemHost
from .linked import resolve_linked_packages
from .models import (
    DirectoryContext,
    MultiPackageContext,
    NpmPackage,
    SinglePackageContext,
    sort_packages_by_depth,
)
from .parsers.package_json import extract_package_locations, load_package
from .workspaces import resolve_workspace_packages

__all__ = [
    # Resolution
    "MEMBER_RESOLVERS",
    "MemberResolver",
    "resolve_directory_context",
    "all_packages_from_context",
    "child_packages_from_context",
    "get_root_package",
    # Building blocks
    "expand_locations",
    "extract_package_locations",
    "find_file_up",
    "load_package",
    "resolve_linked_packages",
    "resolve_workspace_packages",
    "sort_packages_by_depth",
    # Models
    "DirectoryContext",
    "MultiPackageContext",
    "NpmPackage",
    "SinglePackageContext",
    # Host
    "DirectoryContextHost",
    "LocalFileSystemHost",
    # Configuration
    "Settings",
    "load_settings",
    # Errors
    "ConfigError",
    "DirectoryContextError",
    "ManifestNotFoundError",
    "ManifestParseError",
]
