"""Command: structural statistics of a shop network."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from shopnet.commands._base import shop_command

if TYPE_CHECKING:
    from shopnet.commands._context import AppContext


@shop_command(
    examples="""\
  shopnet stats roads.txt
  shopnet stats roads.txt --strict-road-to
  shopnet --json stats roads.txt"""
)
@click.pass_obj
def stats(app: AppContext, input_file: Path, strict_road_to: bool) -> None:
    """Summarize shops, roads, components, and the degree distribution."""
    app.emit(app.network_service.stats(input_file, strict_road_to=strict_road_to or None))
