"""Shared test fixtures for shell-utils tests."""

import os
from dataclasses import dataclass
from pathlib import Path

import pytest
from rich.console import Console

from shell_utils.cli import CLIContext


@dataclass(frozen=True, slots=True)
class PathTree:
    """Directories for PATH cleaning tests.

    Attributes:
        root: Temporary root directory.
        home: Directory used as the home directory.
        work: Directory used as the current working directory.
        x: Existing directory ``root/x``.
        y: Existing directory ``root/y``.
        missing: Path under ``root`` that does not exist.
    """

    root: Path
    home: Path
    work: Path
    x: Path
    y: Path
    missing: Path


@pytest.fixture
def path_tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> PathTree:
    """Create directories and point HOME and the working directory into them.

    Structure:
        tmp_path/
            home/
                bin/
            work/
                bin/
            x/
            y/
    """
    home = tmp_path / "home"
    (home / "bin").mkdir(parents=True)
    work = tmp_path / "work"
    (work / "bin").mkdir(parents=True)
    x = tmp_path / "x"
    x.mkdir()
    y = tmp_path / "y"
    y.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.chdir(work)

    return PathTree(
        root=tmp_path,
        home=home,
        work=work,
        x=x,
        y=y,
        missing=tmp_path / "does-not-exist",
    )


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )


@pytest.fixture
def user_config_file(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Location of the user configuration file during a test (not created)."""
    return tmp_path_factory.mktemp("config_home") / "shell-utils" / "config.toml"


@pytest.fixture(autouse=True)
def _isolated_environment(
    user_config_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Keep user configuration and SHELL_UTILS_* variables out of tests."""
    monkeypatch.setattr(
        "shell_utils.config._sources.user_config_path",
        lambda: user_config_file,
    )
    for name in list(os.environ):
        if name.startswith("SHELL_UTILS_"):
            monkeypatch.delenv(name)
    CLIContext.reset()
