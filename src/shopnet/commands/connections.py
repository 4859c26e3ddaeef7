"""Command: dump every directed link of a shop network."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from shopnet.commands._base import shop_command

if TYPE_CHECKING:
    from shopnet.commands._context import AppContext


@shop_command(
    examples="""\
  shopnet connections roads.txt
  shopnet -q connections roads.txt
  shopnet --json connections roads.txt"""
)
@click.pass_obj
def connections(app: AppContext, input_file: Path, strict_road_to: bool) -> None:
    """List each shop's connections and the network size."""
    app.emit(app.network_service.connections(input_file, strict_road_to=strict_road_to or None))
