"""Launcher configuration (base name and binary directory).

Defaults match the published distribution. An optional launcher.yml next to
the package overrides them:

    baseName: pr-size-labeler
    binDir: bin
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from pr_size_labeler._exceptions import LauncherConfigError

LAUNCHER_CONFIG_FILENAME = "launcher.yml"

DEFAULT_BASE_NAME = "pr-size-labeler"
DEFAULT_BIN_DIR = "bin"

_FIELDS = {
    "baseName": "base_name",
    "binDir": "bin_dir",
}


@dataclass(frozen=True)
class LauncherConfig:
    """Naming of the bundled binaries.

    launcher.yml keys use camelCase.
    """

    base_name: str = DEFAULT_BASE_NAME
    bin_dir: str = DEFAULT_BIN_DIR  # Relative to the install directory

    @classmethod
    def from_yaml(cls, text: str) -> LauncherConfig:
        """Parse launcher.yml content. Missing keys keep their defaults."""
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise LauncherConfigError(f"Invalid YAML: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise LauncherConfigError("Expected a mapping at the top level")

        kwargs: dict[str, str] = {}
        for key, value in data.items():
            if key not in _FIELDS:
                raise LauncherConfigError("Unknown key", field=str(key))
            if not isinstance(value, str) or not value:
                raise LauncherConfigError("Must be a non-empty string", field=key)
            kwargs[_FIELDS[key]] = value
        return cls(**kwargs)


def load_launcher_config(install_dir: Path) -> LauncherConfig:
    """Load launcher.yml from install_dir, or the defaults if it is absent."""
    path = install_dir / LAUNCHER_CONFIG_FILENAME
    if not path.is_file():
        return LauncherConfig()
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LauncherConfigError(f"Cannot read {path}: {e}") from e
    return LauncherConfig.from_yaml(text)
