"""Command: canonical display format."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nidctl.commands._base import NidCommand

if TYPE_CHECKING:
    from nidctl.commands._context import AppContext


@click.command(
    "format",
    cls=NidCommand,
    examples="""\
  nidctl format 0911794829
  nidctl format "091179 4829" --delimiter " "
  nidctl -q format 0911794829""",
)
@click.argument("nid")
@click.option(
    "-d",
    "--delimiter",
    default=None,
    help="Separator between birthdate and serial (default: [format] delimiter).",
)
@click.pass_obj
def format_cmd(app: AppContext, nid: str, delimiter: str | None) -> None:
    """Format NID as DDMMYY-SSCC."""
    app.emit(app.service.format(nid, delimiter=delimiter))
