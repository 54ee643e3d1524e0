"""Command: structural and check-digit validation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nidctl.commands._base import NidCommand

if TYPE_CHECKING:
    from nidctl.commands._context import AppContext


@click.command(
    cls=NidCommand,
    examples="""\
  nidctl validate 0911794829
  nidctl validate 091179-4829 570300-3340 BBBBBBBBBB
  nidctl -q validate 0911794829 1111111112
  nidctl --json validate 0911794829""",
)
@click.argument("nids", nargs=-1, required=True)
@click.pass_obj
def validate(app: AppContext, nids: tuple[str, ...]) -> None:
    """Validate one or more NIDs against the check digit."""
    app.emit(app.service.validate(nids))
