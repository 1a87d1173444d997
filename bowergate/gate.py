"""Boot-time install gate.

Runs Bower during application startup when the configured dependencies have
changed since the last boot. Steps run in strict order:

1. create the install directory
2. write bower.json and .bowerrc
3. compare the config fingerprint against the stored one
4. skip, or run ``bower update`` and stream its output
5. delete the manifests

Failures in steps 1-3 raise FatalBootError. Installer failures are handled
according to the ``on_failure`` setting.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable

from bowergate.config import InstallConfig
from bowergate.errors import FatalBootError, InstallFailedError
from bowergate.execution import InstallerRunner, InstallOutcome
from bowergate.fingerprint import FingerprintStore, GateDecision, check_fingerprint
from bowergate.manifests import cleanup_manifests, ensure_target_directory, write_manifests
from bowergate.paths import GatePaths

_logging = logging.getLogger(__name__)


@dataclass
class GateServices:
    """Collaborators handed to the gate."""
    config: InstallConfig
    paths: GatePaths
    runner: InstallerRunner
    logger: logging.Logger

    @classmethod
    def from_config(
        cls,
        config: InstallConfig,
        paths: GatePaths,
        logger: logging.Logger | None = None,
    ) -> GateServices:
        logger = logger or logging.getLogger("bowergate.bower")
        return cls(
            config=config,
            paths=paths,
            runner=InstallerRunner(logger),
            logger=logger,
        )


@dataclass
class GateResult:
    decision: GateDecision
    outcome: InstallOutcome | None = None

    @property
    def installed(self) -> bool:
        return self.decision.install


@dataclass
class BootEvent:
    """Execution context passed to boot hooks."""
    environment: str = "production"
    results: dict[str, Any] = field(default_factory=dict)


Continuation = Callable[[], Awaitable[None] | None]


class InstallGate:
    def __init__(self, services: GateServices):
        self.services = services
        self.store = FingerprintStore(services.paths.checksum_path)

    def build_args(self) -> list[str]:
        args = [self.services.config.bower_bin, "update"]
        if self.services.config.allow_root:
            args.append("--allow-root")
        return args

    def _prepare(self) -> GateDecision:
        config = self.services.config
        paths = self.services.paths
        try:
            ensure_target_directory(paths, config)
            write_manifests(paths, config)
            return check_fingerprint(self.store, config)
        except Exception as e:
            _logging.error(f"Bower setup failed: {type(e).__name__}: {e}")
            cleanup_manifests(paths)
            raise FatalBootError(f"bower setup failed: {e}") from e

    async def run(self) -> GateResult:
        """Run the gate once.

        Raises:
            FatalBootError: If directory creation, manifest writes or
                fingerprinting fail
            InstallFailedError: If the installer fails and on_failure is 'fail'
        """
        logger = self.services.logger
        decision = self._prepare()

        if not decision.install:
            cleanup_manifests(self.services.paths)
            logger.info("Bower: nothing to install")
            return GateResult(decision=decision)

        logger.info("Bower: Installing dependencies")
        try:
            outcome = await self.services.runner.run(
                self.build_args(),
                cwd=self.services.paths.public_path,
                timeout=self.services.config.timeout,
            )
        finally:
            cleanup_manifests(self.services.paths)

        if outcome.ok:
            logger.info("Bower: Done installing dependencies")
            return GateResult(decision=decision, outcome=outcome)

        if self.services.config.on_failure == "fail":
            raise InstallFailedError(outcome)

        logger.warning(
            f"Bower: install failed (exit code {outcome.returncode}), continuing boot"
        )
        for line in outcome.stderr_tail:
            logger.warning(f"  {line}")
        return GateResult(decision=decision, outcome=outcome)

    async def on_server_boot(
        self, event: BootEvent, next_step: Continuation | None = None
    ) -> GateResult:
        """Boot hook entry point.

        Runs the gate, records the result on the event and then calls
        ``next_step`` exactly once. On FatalBootError or InstallFailedError
        the exception propagates and ``next_step`` is not called.
        """
        result = await self.run()
        event.results["bower"] = result
        if next_step is not None:
            ret = next_step()
            if inspect.isawaitable(ret):
                await ret
        return result


__all__ = [
    "GateServices",
    "GateResult",
    "BootEvent",
    "InstallGate",
]
