"""Pytest fixtures and utilities for bowergate tests."""

import logging
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from bowergate.config import InstallConfig
from bowergate.execution import InstallOutcome
from bowergate.gate import GateServices, InstallGate
from bowergate.paths import GatePaths


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def gate_paths(temp_dir: Path) -> GatePaths:
    """Public and cache roots inside the temp dir."""
    public = temp_dir / "public"
    cache = temp_dir / "cache"
    public.mkdir()
    cache.mkdir()
    return GatePaths(public_path=public, cache_path=cache)


class FakeRunner:
    """Stands in for InstallerRunner and records what it was asked to run."""

    def __init__(self, outcome: InstallOutcome | None = None, paths: GatePaths | None = None):
        self.outcome = outcome or InstallOutcome(status="success", returncode=0)
        self.paths = paths
        self.calls: list[dict] = []

    async def run(self, args, cwd, timeout=None):
        call = {"args": list(args), "cwd": cwd, "timeout": timeout}
        if self.paths is not None:
            call["manifest_present"] = self.paths.manifest_path.exists()
            call["bowerrc_present"] = self.paths.bowerrc_path.exists()
            call["checksum"] = (
                self.paths.checksum_path.read_text()
                if self.paths.checksum_path.exists()
                else None
            )
        self.calls.append(call)
        return self.outcome


@pytest.fixture
def make_gate(gate_paths: GatePaths):
    """Factory building an InstallGate around a FakeRunner."""

    def _create(config: InstallConfig, outcome: InstallOutcome | None = None):
        runner = FakeRunner(outcome=outcome, paths=gate_paths)
        services = GateServices(
            config=config,
            paths=gate_paths,
            runner=runner,
            logger=logging.getLogger("bowergate.bower"),
        )
        return InstallGate(services), runner

    return _create
