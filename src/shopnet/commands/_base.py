"""Pieces shared by every shopnet subcommand."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

input_file_argument = click.argument(
    "input_file", type=click.Path(dir_okay=False, path_type=Path)
)

strict_road_to_option = click.option(
    "--strict-road-to",
    is_flag=True,
    help="Also range-check road destinations, whatever the config says.",
)


class ShopCommand(click.Command):
    """A subcommand whose eager ``--examples`` flag prints sample invocations."""

    def __init__(self, *args: Any, examples: str, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.params.append(
            click.Option(
                ["--examples"],
                is_flag=True,
                expose_value=False,
                is_eager=True,
                callback=self._print_examples,
                help="Show sample invocations and exit.",
            )
        )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(self.examples)
            ctx.exit(0)


def shop_command(examples: str) -> Callable[[Callable[..., Any]], click.Command]:
    """``@click.command`` for a subcommand that reads one road-list file."""

    def decorator(func: Callable[..., Any]) -> click.Command:
        func = strict_road_to_option(func)
        func = input_file_argument(func)
        return click.command(cls=ShopCommand, examples=examples)(func)

    return decorator
