"""Command: reduce a shop network to its contested hub count."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from shopnet.commands._base import shop_command

if TYPE_CHECKING:
    from shopnet.commands._context import AppContext


@shop_command(
    examples="""\
  shopnet reduce roads.txt
  shopnet reduce roads.txt --strict-road-to
  shopnet -v reduce roads.txt
  shopnet --json reduce roads.txt"""
)
@click.pass_obj
def reduce(app: AppContext, input_file: Path, strict_road_to: bool) -> None:
    """Print how many top hubs tie for the highest external impact (0 if fewer than 2)."""
    app.emit(app.network_service.reduce(input_file, strict_road_to=strict_road_to or None))
