"""Command: strip formatting characters from a NID."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nidctl.commands._base import NidCommand

if TYPE_CHECKING:
    from nidctl.commands._context import AppContext


@click.command(
    cls=NidCommand,
    examples="""\
  nidctl normalize "091179 4829"
  nidctl -q normalize 091179-4829""",
)
@click.argument("nid")
@click.pass_obj
def normalize(app: AppContext, nid: str) -> None:
    """Remove dashes and spaces from NID."""
    app.emit(app.service.normalize(nid))
