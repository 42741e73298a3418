"""Child process launch and exit status propagation.

Nothing here terminates the interpreter: every path returns the exit code
the caller should exit with.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from pr_size_labeler._exceptions import UnsupportedPlatformError
from pr_size_labeler._launcher_config import LauncherConfig
from pr_size_labeler._platform import resolve_asset

logger = logging.getLogger(__name__)

FALLBACK_EXIT_CODE = 1


@dataclass(frozen=True)
class ChildResult:
    """How the child process ended.

    Neither field is set when the child could not be spawned.
    """

    exit_code: Optional[int] = None
    terminating_signal: Optional[int] = None

    @classmethod
    def from_returncode(cls, returncode: int) -> ChildResult:
        # subprocess reports death by signal N as -N on POSIX
        if returncode < 0:
            return cls(terminating_signal=-returncode)
        return cls(exit_code=returncode)

    def to_exit_code(self) -> int:
        if self.exit_code is not None:
            return self.exit_code
        return FALLBACK_EXIT_CODE


def asset_location(asset: str, *, config: LauncherConfig, install_dir: Path) -> Path:
    """Path of an asset under the install directory.

    Example: asset_location("pr-size-labeler-linux-amd64", ...)
             -> <install_dir>/bin/pr-size-labeler-linux-amd64
    """
    return install_dir / config.bin_dir / asset


def spawn(executable: Path, args: Sequence[str] = ()) -> ChildResult:
    """Run executable with inherited stdio and wait for it, without a timeout."""
    try:
        completed = subprocess.run([str(executable), *args], check=False)
    except OSError as e:
        logger.error("Failed to start %s: %s", executable, e)
        return ChildResult()
    return ChildResult.from_returncode(completed.returncode)


def launch(
    asset: str,
    *,
    config: LauncherConfig,
    install_dir: Path,
    args: Sequence[str] = (),
) -> int:
    """Spawn the asset and return the exit code to propagate."""
    executable = asset_location(asset, config=config, install_dir=install_dir)
    logger.debug("Launching %s", executable)

    result = spawn(executable, args)
    if result.terminating_signal is not None:
        logger.debug("%s terminated by signal %d", asset, result.terminating_signal)

    exit_code = result.to_exit_code()
    logger.debug("%s finished, exiting with %d", asset, exit_code)
    return exit_code


def run(
    *,
    config: LauncherConfig,
    install_dir: Path,
    operating_system: str,
    architecture: str,
    args: Sequence[str] = (),
) -> int:
    """Resolve the binary for a platform, launch it and return the exit code.

    An unsupported platform writes a one-line diagnostic to stderr and
    returns 1 without spawning anything.
    """
    try:
        asset = resolve_asset(
            operating_system, architecture, base_name=config.base_name
        )
    except UnsupportedPlatformError as e:
        print(e, file=sys.stderr)
        return FALLBACK_EXIT_CODE

    return launch(asset, config=config, install_dir=install_dir, args=args)
