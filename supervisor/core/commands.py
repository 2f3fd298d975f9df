"""Subcommand registration for the supervisor CLI.

Lets a module contribute a subcommand as a plain handler object instead of a
decorated click function:

    add_command(main, "version", "show the version", "display the version", handler)

The handler only needs an ``execute(args)`` method. Returning normally is
success; raising reports the error and exits with status 1.
"""

from __future__ import annotations

import logging
import sys
from typing import Protocol

import click
from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)

err_console = Console(stderr=True)


class Commander(Protocol):
    """Handler dispatched by a registered subcommand."""

    def execute(self, args: list[str]) -> None: ...


class CommandRegistrationError(Exception):
    """Subcommand name is empty or already taken."""

    pass


def add_command(
    group: click.Group,
    name: str,
    short_help: str,
    long_help: str,
    commander: Commander,
) -> click.Command:
    """Register ``commander`` on ``group`` under ``name``.

    The command accepts any number of positional arguments (unknown options
    included) and forwards them to ``commander.execute``.

    Args:
        group: Click group to mount the command on
        name: Subcommand name (case-sensitive)
        short_help: One-line summary shown in the group's command list
        long_help: Text shown by ``<name> --help``
        commander: Handler object

    Returns:
        The registered click command

    Raises:
        CommandRegistrationError: If name is empty or already registered
    """
    if not name:
        raise CommandRegistrationError("Command name must not be empty")
    if name in group.commands:
        raise CommandRegistrationError(
            f"Command '{name}' is already registered on '{group.name}'"
        )

    def callback(args: tuple[str, ...]) -> None:
        try:
            commander.execute(list(args))
        except Exception as e:
            logger.debug(f"Command '{name}' failed", exc_info=True)
            err_console.print(f"[red]Error:[/red] {escape(str(e))}")
            sys.exit(1)

    command = click.Command(
        name,
        callback=callback,
        params=[click.Argument(["args"], nargs=-1, type=click.UNPROCESSED)],
        help=long_help,
        short_help=short_help,
        context_settings={"ignore_unknown_options": True},
    )
    group.add_command(command)
    logger.debug(f"Registered command '{name}' ({type(commander).__name__})")
    return command
