"""Shared fixtures: stand-in binaries laid out like an installed package."""

from __future__ import annotations

import stat
from pathlib import Path
from typing import Callable

import pytest

from pr_size_labeler._launcher_config import LauncherConfig


@pytest.fixture
def config() -> LauncherConfig:
    return LauncherConfig()


@pytest.fixture
def install_dir(tmp_path: Path) -> Path:
    root = tmp_path / "site-packages" / "pr_size_labeler"
    (root / "bin").mkdir(parents=True)
    return root


@pytest.fixture
def make_binary(install_dir: Path, config: LauncherConfig) -> Callable[..., Path]:
    """Write a shell script at the location of the given asset."""

    def _make(asset: str, body: str, executable: bool = True) -> Path:
        path = install_dir / config.bin_dir / asset
        path.write_text(f"#!/bin/sh\n{body}\n")
        if executable:
            path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return _make
