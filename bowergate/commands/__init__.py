"""CLI command definitions for bowergate."""

import click

from bowergate.commands.reset import reset
from bowergate.commands.run import run
from bowergate.commands.status import fingerprint, status


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug output for troubleshooting")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="Config file (default: $BOWERGATE_CONFIG or ./bowergate.yaml)",
)
@click.option(
    "--public-path",
    type=click.Path(file_okay=False),
    help="Public assets root (default: $BOWERGATE_PUBLIC_PATH or ./public)",
)
@click.option(
    "--cache-path",
    type=click.Path(file_okay=False),
    help="Cache root (default: $BOWERGATE_CACHE_PATH or ./cache)",
)
@click.pass_context
def cli(ctx, debug, config_path, public_path, cache_path):
    """Install Bower dependencies when they change."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = config_path
    ctx.obj["public_path"] = public_path
    ctx.obj["cache_path"] = cache_path


cli.add_command(run)
cli.add_command(status)
cli.add_command(fingerprint)
cli.add_command(reset)

__all__ = ["cli"]


if __name__ == "__main__":
    cli()
