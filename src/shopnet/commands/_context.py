"""AppContext: the object every subcommand receives via ``@click.pass_obj``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from shopnet.config.logging import configure_logging
from shopnet.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from shopnet.config.settings import ShopnetSettings
    from shopnet.services.network import NetworkService
    from shopnet.services.result import ServiceResult


class AppContext:
    """Settings for the run, the network service, and result printing."""

    def __init__(self, settings: ShopnetSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def network_service(self) -> NetworkService:
        from shopnet.services.network import NetworkService

        return NetworkService(self.settings.input)

    def emit(self, result: ServiceResult) -> None:
        """Print *result*, then any skipped-line warnings on stderr.

        A failed result is printed on stderr instead and exits with status 1,
        so stdout never holds a partial answer.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)

        click.echo(text)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
