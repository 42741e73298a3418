"""Exception hierarchy for the pr-size-labeler launcher."""

from __future__ import annotations


class LauncherError(Exception):
    """Base for all launcher errors."""


class UnsupportedPlatformError(LauncherError):
    """No binary is shipped for the host platform and architecture."""

    def __init__(self, platform: str, arch: str):
        self.platform = platform
        self.arch = arch
        super().__init__(
            f"Unsupported platform ({platform}) and architecture ({arch})"
        )


class LauncherConfigError(LauncherError):
    """launcher.yml failed to parse or validate."""

    def __init__(self, message: str, *, field: str | None = None):
        self.field = field
        prefix = f"[{field}] " if field else ""
        super().__init__(f"{prefix}{message}")
