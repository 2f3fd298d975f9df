"""Build identity of the running supervisor.

The identity is stamped into ``supervisor/_build_info.json`` by the build hook
(see supervisor/build_hooks.py). When the package runs from a source checkout,
or was built without SUPERVISOR_VERSION/SUPERVISOR_COMMIT, the defaults apply.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib import resources

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)

BUILD_INFO_RESOURCE = "_build_info.json"

DEFAULT_VERSION = "dev"
DEFAULT_COMMIT = "unknown"


class BuildIdentity(BaseModel):
    """Release version and commit hash fixed at build time."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    version: str = DEFAULT_VERSION
    commit: str = DEFAULT_COMMIT


def load_build_identity(package: str = "supervisor") -> BuildIdentity:
    """Read the stamped identity from package data.

    Never raises: a missing artifact means an unstamped build, and an unreadable
    or malformed one is logged and replaced by the defaults.
    """
    try:
        raw = resources.files(package).joinpath(BUILD_INFO_RESOURCE).read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug(f"No {BUILD_INFO_RESOURCE} in {package}, using default build identity")
        return BuildIdentity()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read build identity: {e}")
        return BuildIdentity()

    try:
        return BuildIdentity.model_validate_json(raw)
    except ValidationError as e:
        logger.warning(f"Invalid build identity in {BUILD_INFO_RESOURCE}: {e}")
        return BuildIdentity()


@lru_cache(maxsize=1)
def get_build_identity() -> BuildIdentity:
    """Process-wide build identity, loaded once."""
    return load_build_identity()
