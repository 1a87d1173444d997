"""Reset command implementation."""

import click

from bowergate.commands.utils import load_context
from bowergate.fingerprint import FingerprintStore


@click.command()
@click.pass_context
def reset(ctx):
    """Forget the stored fingerprint so the next run reinstalls."""
    _, paths = load_context(ctx)
    if FingerprintStore(paths.checksum_path).clear():
        click.echo(f"Removed {paths.checksum_path}")
    else:
        click.echo("No stored fingerprint")
