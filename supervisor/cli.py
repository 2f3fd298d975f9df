"""CLI entry point for supervisor.

Commands:
- supervisor version: Show the build version and commit
"""

from __future__ import annotations

import click

from supervisor.core.build_info import get_build_identity
from supervisor.core.utils import LOG_LEVELS, configure_logging
from supervisor.version import register_version


@click.group()
@click.version_option(
    version=get_build_identity().version,
    prog_name="supervisor",
    message="Version: %(version)s",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="SUPERVISOR_LOG_LEVEL",
    help="Logging level (logs go to stderr)",
)
def main(log_level: str) -> None:
    """Supervisor command-line interface."""
    configure_logging(log_level)


register_version(main)


if __name__ == "__main__":
    main()
