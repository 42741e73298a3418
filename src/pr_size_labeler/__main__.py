"""Command-line entry point: dispatch to the binary for this host."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from pr_size_labeler._exceptions import LauncherConfigError
from pr_size_labeler._launcher import run
from pr_size_labeler._launcher_config import (
    LAUNCHER_CONFIG_FILENAME,
    load_launcher_config,
)
from pr_size_labeler._platform import host_platform

logger = logging.getLogger(__name__)

INSTALL_DIR = Path(__file__).resolve().parent


def main() -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    try:
        config = load_launcher_config(INSTALL_DIR)
    except LauncherConfigError as e:
        logger.error("%s: %s", LAUNCHER_CONFIG_FILENAME, e)
        return 1
    host = host_platform()
    return run(
        config=config,
        install_dir=INSTALL_DIR,
        operating_system=host.operating_system,
        architecture=host.architecture,
        args=sys.argv[1:],
    )


if __name__ == "__main__":
    raise SystemExit(main())
