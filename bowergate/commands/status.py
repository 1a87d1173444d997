"""Status and fingerprint commands."""

import click

from bowergate.commands.utils import load_context
from bowergate.fingerprint import FingerprintStore, compute_fingerprint, should_install


@click.command()
@click.pass_context
def status(ctx):
    """Show whether the next run would install anything."""
    config, paths = load_context(ctx)
    computed = compute_fingerprint(config)
    stored = FingerprintStore(paths.checksum_path).read()

    click.echo(f"Computed fingerprint: {computed}")
    click.echo(f"Stored fingerprint:   {stored or '(none)'}")
    if should_install(stored, computed):
        click.echo("Install needed")
    else:
        click.echo("Up to date")


@click.command()
@click.pass_context
def fingerprint(ctx):
    """Print the fingerprint of the current config."""
    config, _ = load_context(ctx)
    click.echo(compute_fingerprint(config))
