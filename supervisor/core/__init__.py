"""Core modules for the supervisor CLI."""

from supervisor.core.build_info import BuildIdentity, get_build_identity
from supervisor.core.commands import Commander, CommandRegistrationError, add_command

__all__ = [
    "BuildIdentity",
    "get_build_identity",
    "Commander",
    "CommandRegistrationError",
    "add_command",
]
