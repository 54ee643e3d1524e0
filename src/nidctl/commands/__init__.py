"""Subcommand modules for nidctl.

Provides register_commands() which uses deferred imports to keep
``nidctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from nidctl.commands.age import age
    from nidctl.commands.birthday import birthday
    from nidctl.commands.format_cmd import format_cmd
    from nidctl.commands.inspect import inspect
    from nidctl.commands.normalize import normalize
    from nidctl.commands.validate import validate

    cli.add_command(normalize)
    cli.add_command(validate)
    cli.add_command(format_cmd)
    cli.add_command(inspect)
    cli.add_command(age)
    cli.add_command(birthday)
