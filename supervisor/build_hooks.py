"""Build hooks for packaging.

Stamps the build identity (release version and commit hash) into the package
as ``supervisor/_build_info.json``. This runs during PEP 517 builds
(e.g., pip install, python -m build) and is the only way to change what
``supervisor version`` reports.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from hatchling.builders.hooks.plugin.interface import BuildHookInterface

BUILD_INFO_FILENAME = "_build_info.json"

VERSION_ENV = "SUPERVISOR_VERSION"
COMMIT_ENV = "SUPERVISOR_COMMIT"
SKIP_ENV = "SUPERVISOR_SKIP_BUILD_INFO"
REQUIRE_ENV = "SUPERVISOR_REQUIRE_BUILD_INFO"

# Kept in sync with BuildIdentity defaults; the hook cannot import the package
# it is building.
DEFAULT_VERSION = "dev"
DEFAULT_COMMIT = "unknown"


def resolve_build_identity(environ: Mapping[str, str]) -> dict[str, str]:
    """Resolve version/commit from the build environment.

    Unset variables fall back to the defaults. A variable set to an empty
    string is injected as-is.

    Raises:
        RuntimeError: If SUPERVISOR_REQUIRE_BUILD_INFO=1 and either variable is unset
    """
    missing = [name for name in (VERSION_ENV, COMMIT_ENV) if name not in environ]
    if missing and environ.get(REQUIRE_ENV) == "1":
        raise RuntimeError(
            f"Build identity required but {', '.join(missing)} not set. "
            f"Export them or unset {REQUIRE_ENV}."
        )

    return {
        "version": environ.get(VERSION_ENV, DEFAULT_VERSION),
        "commit": environ.get(COMMIT_ENV, DEFAULT_COMMIT),
    }


def write_build_info(root: Path, environ: Mapping[str, str]) -> Path | None:
    """Write supervisor/_build_info.json under ``root``.

    Returns:
        Path of the written file, or None when SUPERVISOR_SKIP_BUILD_INFO=1
    """
    if environ.get(SKIP_ENV) == "1":
        return None

    identity = resolve_build_identity(environ)
    target = root / "supervisor" / BUILD_INFO_FILENAME
    target.write_text(json.dumps(identity, indent=2) + "\n", encoding="utf-8")
    return target


class BuildHook(BuildHookInterface):
    """Stamp the build identity before packaging.

    Behavior:
    - If SUPERVISOR_SKIP_BUILD_INFO=1, skip.
    - SUPERVISOR_VERSION / SUPERVISOR_COMMIT override "dev" / "unknown".
    - If SUPERVISOR_REQUIRE_BUILD_INFO=1, fail when either is missing.
    """

    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        target = write_build_info(Path(self.root), os.environ)
        if target is None:
            return

        identity = json.loads(target.read_text(encoding="utf-8"))
        print(
            f"[supervisor] Build identity: version={identity['version']!r} "
            f"commit={identity['commit']!r}"
        )
