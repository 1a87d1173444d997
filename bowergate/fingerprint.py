"""Change detection for the configured dependency set.

The fingerprint is an MD5 digest over the sorted ``name-version`` entries and
the target directory. It is only used to notice that something changed since
the last boot, so collision resistance does not matter here.

The stored value is overwritten as soon as a change is detected, before the
installer runs. A crash mid-install therefore does not trigger another install
on the next boot.
"""

import hashlib
import json
import logging
from dataclasses import dataclass
from pathlib import Path

from bowergate.config import InstallConfig

_logging = logging.getLogger(__name__)


def compute_fingerprint(config: InstallConfig) -> str:
    deps = sorted(f"{name}-{version}" for name, version in config.dependencies.items())
    data = {"directory": config.directory, "deps": deps}
    serialized = json.dumps(data, separators=(",", ":"))
    return hashlib.md5(serialized.encode("utf-8")).hexdigest()


def should_install(stored: str | None, computed: str) -> bool:
    """Return False only when a stored fingerprint exists and matches."""
    return stored is None or stored != computed


class FingerprintStore:
    """The single persisted fingerprint for an application."""

    def __init__(self, path: Path):
        self.path = path

    def read(self) -> str | None:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")

    def write(self, fingerprint: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(fingerprint, encoding="utf-8")
        _logging.debug(f"Stored fingerprint {fingerprint} in {self.path}")

    def clear(self) -> bool:
        """Remove the stored fingerprint. Returns True if one existed."""
        try:
            self.path.unlink()
        except FileNotFoundError:
            return False
        return True


@dataclass
class GateDecision:
    computed: str
    stored: str | None
    install: bool


def check_fingerprint(store: FingerprintStore, config: InstallConfig) -> GateDecision:
    """Compare the config against the store, recording it when it changed."""
    computed = compute_fingerprint(config)
    stored = store.read()
    install = should_install(stored, computed)
    if install:
        store.write(computed)
    return GateDecision(computed=computed, stored=stored, install=install)


__all__ = [
    "compute_fingerprint",
    "should_install",
    "FingerprintStore",
    "GateDecision",
    "check_fingerprint",
]
