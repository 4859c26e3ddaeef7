from shopnet.cli import cli

cli()
