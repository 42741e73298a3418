"""Pure Python platform resolution (no process side effects).

Maps the host (operating system, architecture) pair to the name of the
bundled pr-size-labeler binary built for it.
"""

from __future__ import annotations

import platform
from dataclasses import dataclass

from pr_size_labeler._exceptions import UnsupportedPlatformError


@dataclass(frozen=True)
class PlatformTuple:
    """Host operating system and processor architecture, as reported."""

    operating_system: str
    architecture: str


# (os, arch) -> asset suffix
SUPPORTED_PLATFORMS: dict[tuple[str, str], str] = {
    ("linux", "x64"): "linux-amd64",
    ("linux", "arm64"): "linux-arm64",
    ("windows", "x64"): "windows-amd64",
    ("windows", "arm64"): "windows-arm64",
}

# Host-reported spellings that name a supported OS or architecture.
_OS_ALIASES = {
    "win32": "windows",
}

_ARCH_ALIASES = {
    "x86_64": "x64",
    "amd64": "x64",
    "aarch64": "arm64",
}


def host_platform() -> PlatformTuple:
    """Read the live host platform."""
    return PlatformTuple(
        operating_system=platform.system(),
        architecture=platform.machine(),
    )


def _normalize(value: str, aliases: dict[str, str]) -> str:
    lowered = value.lower()
    return aliases.get(lowered, lowered)


def resolve_asset(operating_system: str, architecture: str, *, base_name: str) -> str:
    """Return the asset identifier for a platform.

    Example: resolve_asset("linux", "x64", base_name="pr-size-labeler")
             -> "pr-size-labeler-linux-amd64"

    Raises:
        UnsupportedPlatformError: the pair has no bundled binary. The error
            carries the values exactly as they were passed in.
    """
    key = (
        _normalize(operating_system, _OS_ALIASES),
        _normalize(architecture, _ARCH_ALIASES),
    )
    suffix = SUPPORTED_PLATFORMS.get(key)
    if suffix is None:
        raise UnsupportedPlatformError(operating_system, architecture)
    return f"{base_name}-{suffix}"

