"""The ``supervisor version`` command."""

from __future__ import annotations

import click

from supervisor.core.build_info import get_build_identity
from supervisor.core.commands import add_command


class VersionCommand:
    """Print the build identity.

    Values go through click.echo unmodified, so brackets or percent signs in a
    stamped version are printed as-is.
    """

    def execute(self, args: list[str]) -> None:
        identity = get_build_identity()
        click.echo(f"Version: {identity.version}")
        click.echo(f" Commit: {identity.commit}")


def register_version(group: click.Group) -> click.Command:
    """Register the version command with the CLI group."""
    return add_command(
        group,
        "version",
        "show the version of supervisor",
        "display the supervisor version",
        VersionCommand(),
    )
