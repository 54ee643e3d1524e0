"""Command: next birthday of an individual."""

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
  nidctl birthday 0911794829
  nidctl birthday 1401833029 --on 2012-05-01""",
)
@click.argument("nid")
@on_option
@click.pass_obj
def birthday(app: AppContext, nid: str, on: datetime | None) -> None:
    """Next birthday (today included) of the individual identified by NID."""
    app.emit(app.service.next_birthday(nid, on=on.date() if on else None))
