"""Shared pytest fixtures for nidctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from nidctl.config.settings import NidSettings
from nidctl.services.nid import NidService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory with no config discoverable from env."""
    monkeypatch.delenv("NIDCTL_CONFIG", raising=False)
    for key in ("NIDCTL_FORMAT__DELIMITER", "NIDCTL_INSPECT__STRICT"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(isolated_dir: Path) -> NidSettings:
    """Default settings (no TOML, no env overrides)."""
    return NidSettings.from_cli(start=isolated_dir)


@pytest.fixture
def service(settings: NidSettings) -> NidService:
    return NidService(settings)


@pytest.fixture
def strict_service(isolated_dir: Path) -> NidService:
    """Service with ``[inspect] strict = true``."""
    (isolated_dir / "nidctl.toml").write_text("[inspect]\nstrict = true\n")
    return NidService(NidSettings.from_cli(start=isolated_dir))


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI invocations reconfigure logging; restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    nid = logging.getLogger("nidctl")
    nid_level = nid.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    nid.setLevel(nid_level)
