# conftest.py - Shared pytest fixtures for all tests
"""Shared pytest fixtures for the supervisor test suite.

- CLI runner
- Build identity cache reset
- Throwaway packages carrying a _build_info.json resource
"""

from __future__ import annotations

import importlib
import logging
import sys
import uuid
from pathlib import Path
from typing import Callable, Generator

import pytest
from click.testing import CliRunner

from supervisor.core.build_info import BUILD_INFO_RESOURCE, get_build_identity
from supervisor.core.utils import LOGGER_NAME


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_build_identity() -> Generator[None, None, None]:
    """Drop the cached build identity around each test."""
    get_build_identity.cache_clear()
    yield
    get_build_identity.cache_clear()


@pytest.fixture
def make_package(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Callable[[str | bytes | None], str], None, None]:
    """Create an importable package, optionally with a build info resource.

    Returns:
        Factory taking the resource text or raw bytes (None for no resource) and returning
        the package name.

    Example:
        def test_something(make_package):
            name = make_package('{"version": "v1", "commit": "abc"}')
            identity = load_build_identity(name)
    """
    monkeypatch.syspath_prepend(str(tmp_path))
    created: list[str] = []

    def _make(content: str | bytes | None) -> str:
        name = f"stamped_{uuid.uuid4().hex[:8]}"
        package_dir = tmp_path / name
        package_dir.mkdir()
        (package_dir / "__init__.py").write_text("")
        resource = package_dir / BUILD_INFO_RESOURCE
        if isinstance(content, bytes):
            resource.write_bytes(content)
        elif content is not None:
            resource.write_text(content, encoding="utf-8")
        importlib.invalidate_caches()
        created.append(name)
        return name

    yield _make

    for name in created:
        sys.modules.pop(name, None)


@pytest.fixture(autouse=True)
def restore_supervisor_logger() -> Generator[None, None, None]:
    """Undo logging configuration done by the CLI group."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = logger.handlers[:]
    level = logger.level
    yield
    for handler in logger.handlers[:]:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
