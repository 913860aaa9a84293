"""Settings for directory context resolution.

Defaults follow the npm conventions (``package.json``, ``lerna.json`` and
``node_modules``). A JSON file passed explicitly or named by the
``NPM_DIRECTORY_CONTEXT_CONFIG`` environment variable overrides them.
"""

from __future__ import annotations

import json
import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from .errors import ConfigError

CONFIG_PATH_ENV_VAR = "NPM_DIRECTORY_CONTEXT_CONFIG"

SETTINGS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "manifestName": {"type": "string", "minLength": 1},
        "legacyConfigName": {"type": "string", "minLength": 1},
        "linkDirectory": {"type": "string", "minLength": 1},
        "ignoredDirectories": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
            "uniqueItems": True,
        },
    },
}


@dataclass(slots=True, frozen=True)
class Settings:
    """File names and directories consulted during resolution."""

    manifest_name: str = "package.json"
    legacy_config_name: str = "lerna.json"
    link_directory: str = "node_modules"
    ignored_directories: tuple[str, ...] = ("node_modules", ".git")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from a schema-valid mapping, keeping defaults for missing keys."""
        defaults = cls()
        ignored = data.get("ignoredDirectories")
        return cls(
            manifest_name=data.get("manifestName", defaults.manifest_name),
            legacy_config_name=data.get("legacyConfigName", defaults.legacy_config_name),
            link_directory=data.get("linkDirectory", defaults.link_directory),
            ignored_directories=(
                tuple(ignored) if ignored is not None else defaults.ignored_directories
            ),
        )


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def _settings_file(path: Path | str | None) -> Path | None:
    """Pick the settings file: ``path`` if given, else the env var, else none."""
    if path is None:
        path = os.environ.get(CONFIG_PATH_ENV_VAR) or None
    return Path(path) if path is not None else None


def _read_settings_document(settings_file: Path) -> Any:
    if not settings_file.is_file():
        raise ConfigError(f"{settings_file}: settings file does not exist")
    try:
        return json.loads(settings_file.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"{settings_file}: cannot read settings ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{settings_file}: settings are not valid JSON ({exc.msg})") from exc


def load_settings(path: Path | str | None = None) -> Settings:
    """Return the settings in effect for a resolution.

    Without ``path`` and without ``NPM_DIRECTORY_CONTEXT_CONFIG`` the built-in
    defaults apply. A named file must exist and match ``SETTINGS_SCHEMA``;
    otherwise ``ConfigError`` is raised.
    """
    settings_file = _settings_file(path)
    if settings_file is None:
        return Settings()

    data = _read_settings_document(settings_file)
    validator = Draft202012Validator(SETTINGS_SCHEMA)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise ConfigError(f"{settings_file}: settings rejected\n" + _format_errors(errors))

    return Settings.from_dict(data)
