"""Command: everything derivable from a NID."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from nidctl.commands._base import NidCommand, on_option

if TYPE_CHECKING:
    from nidctl.commands._context import AppContext


@click.command(
    cls=NidCommand,
    examples="""\
  nidctl inspect 0911794829
  nidctl inspect 570300-3340
  nidctl inspect 0911794829 --on 2011-01-01
  nidctl --json inspect 0911794829""",
)
@click.argument("nid")
@on_option
@click.pass_obj
def inspect(app: AppContext, nid: str, on: datetime | None) -> None:
    """Show category, validity, birthdate and age for NID."""
    app.emit(app.service.inspect(nid, on=on.date() if on else None))
