"""Run command implementation."""

import asyncio
import logging
import sys
from dataclasses import replace

import click

from bowergate import setup_logging
from bowergate.commands.utils import load_context
from bowergate.errors import FatalBootError, InstallFailedError, format_error, format_suggestion
from bowergate.gate import BootEvent, GateServices, InstallGate


_logging = logging.getLogger(__name__)


@click.command()
@click.option(
    "--fail-on-error",
    is_flag=True,
    help="Exit non-zero when bower fails, overriding onFailure",
)
@click.pass_context
def run(ctx, fail_on_error: bool):
    """Install dependencies if they changed since the last run."""
    debug = ctx.obj.get("debug", False)
    setup_logging(debug)
    config, paths = load_context(ctx)
    if fail_on_error:
        config = replace(config, on_failure="fail")

    if debug:
        _logging.debug(f"Public path: {paths.public_path}")
        _logging.debug(f"Cache path: {paths.cache_path}")

    gate = InstallGate(GateServices.from_config(config, paths))
    try:
        result = asyncio.run(gate.on_server_boot(BootEvent()))
    except FatalBootError as e:
        click.echo(format_error(f"{e}"), err=True)
        sys.exit(1)
    except InstallFailedError as e:
        click.echo(format_suggestion(str(e), "run with --debug for details"), err=True)
        for line in e.outcome.stderr_tail:
            click.echo(f"  {line}", err=True)
        sys.exit(1)

    if result.outcome is not None and not result.outcome.ok:
        click.echo(f"Install failed (exit code {result.outcome.returncode}), continuing")
    elif result.installed:
        click.echo(f"Installed {len(config.dependencies)} dependencies")
    else:
        click.echo("Dependencies up to date")
