"""Shared helpers for commands."""

import sys

import click

from bowergate.config import ConfigError, InstallConfig, get_config_path, load_config
from bowergate.errors import format_error
from bowergate.paths import GatePaths


def load_context(ctx: click.Context) -> tuple[InstallConfig, GatePaths]:
    """Load config and paths from the CLI options, exiting on config errors."""
    config_path = get_config_path(ctx.obj.get("config_path"))
    try:
        config = load_config(config_path)
    except ConfigError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)

    paths = GatePaths.from_env(ctx.obj.get("public_path"), ctx.obj.get("cache_path"))
    return config, paths
