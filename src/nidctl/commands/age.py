"""Command: age of an individual."""

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
  nidctl age 0911794829
  nidctl age 0911794829 --on 2011-01-01
  nidctl -q age 091179-4829""",
)
@click.argument("nid")
@on_option
@click.pass_obj
def age(app: AppContext, nid: str, on: datetime | None) -> None:
    """Age in whole years of the individual identified by NID."""
    app.emit(app.service.age(nid, on=on.date() if on else None))
