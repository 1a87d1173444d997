"""Boot-time Bower install gate."""

import logging

from bowergate.config import ConfigError, InstallConfig, get_config_path, load_config
from bowergate.errors import (
    BowerGateError,
    FatalBootError,
    InstallFailedError,
    format_error,
    format_suggestion,
)
from bowergate.execution import InstallerRunner, InstallOutcome
from bowergate.fingerprint import (
    FingerprintStore,
    GateDecision,
    check_fingerprint,
    compute_fingerprint,
    should_install,
)
from bowergate.gate import BootEvent, GateResult, GateServices, InstallGate
from bowergate.paths import GatePaths

__version__ = "0.3.0"

_logging_configured = False


def setup_logging(debug: bool = False) -> None:
    """Configure root logging once; later calls only adjust the level."""
    global _logging_configured
    level = logging.DEBUG if debug else logging.INFO
    if not _logging_configured:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        _logging_configured = True
    else:
        logging.getLogger().setLevel(level)


__all__ = [
    "__version__",
    "setup_logging",
    "BowerGateError",
    "ConfigError",
    "FatalBootError",
    "InstallFailedError",
    "format_error",
    "format_suggestion",
    "InstallConfig",
    "get_config_path",
    "load_config",
    "GatePaths",
    "FingerprintStore",
    "GateDecision",
    "check_fingerprint",
    "compute_fingerprint",
    "should_install",
    "InstallerRunner",
    "InstallOutcome",
    "BootEvent",
    "GateResult",
    "GateServices",
    "InstallGate",
]
