"""shopnet subcommands, imported on registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    from shopnet.commands.connections import connections
    from shopnet.commands.reduce import reduce
    from shopnet.commands.stats import stats

    for command in (reduce, connections, stats):
        cli.add_command(command)
