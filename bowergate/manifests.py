"""Transient bower.json and .bowerrc files consumed by the installer."""

import json
import logging

from bowergate.config import InstallConfig
from bowergate.paths import MANIFEST_NAME, GatePaths

_logging = logging.getLogger(__name__)

MANIFEST_VERSION = "0.0.0"


def ensure_target_directory(paths: GatePaths, config: InstallConfig) -> None:
    """Create the configured install directory if it doesn't exist."""
    if not config.has_directory:
        return

    target = paths.target_directory(config.directory)
    if not target.is_dir():
        _logging.debug(f"Creating {target}")
        target.mkdir(parents=True, exist_ok=True)


def write_manifests(paths: GatePaths, config: InstallConfig) -> None:
    """Write bower.json and .bowerrc into the public root."""
    paths.public_path.mkdir(parents=True, exist_ok=True)

    manifest = {
        "name": config.package_name,
        "version": MANIFEST_VERSION,
        "dependencies": config.dependencies,
    }
    paths.manifest_path.write_text(json.dumps(manifest, indent=4), encoding="utf-8")

    bowerrc = {}
    if config.directory is not None:
        bowerrc["directory"] = config.directory
    bowerrc["json"] = MANIFEST_NAME
    paths.bowerrc_path.write_text(json.dumps(bowerrc, indent=4), encoding="utf-8")


def cleanup_manifests(paths: GatePaths) -> None:
    for path in (paths.bowerrc_path, paths.manifest_path):
        path.unlink(missing_ok=True)


__all__ = [
    "ensure_target_directory",
    "write_manifests",
    "cleanup_manifests",
]
