"""Exception types and error formatting helpers.

Error Style Guide:
- User-facing errors use 'Error: ' prefix
- Use present tense: 'must be', 'is required'
- Include actionable hints where helpful
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bowergate.execution import InstallOutcome


class BowerGateError(Exception):
    """Base class for all bowergate errors."""


class FatalBootError(BowerGateError):
    """Raised when the setup phase of the gate fails.

    Covers directory creation, manifest writes and fingerprinting. The
    original exception is chained as ``__cause__``. Callers are expected to
    abort startup; the gate never exits the process itself.
    """


class InstallFailedError(BowerGateError):
    """Raised when the installer fails and the failure policy is 'fail'."""

    def __init__(self, outcome: InstallOutcome):
        self.outcome = outcome
        if outcome.returncode is None:
            detail = "could not be started"
        else:
            detail = f"exited with code {outcome.returncode}"
        super().__init__(f"bower {detail}")


def format_error(message: str) -> str:
    """Format an error message with consistent prefix.

    Examples:
        >>> format_error("config file not found")
        'Error: config file not found'
    """
    return f"Error: {message}"


def format_suggestion(message: str, suggestion: str) -> str:
    """Format an error message with a helpful suggestion.

    Examples:
        >>> format_suggestion("bower failed", "run with --debug for details")
        'Error: bower failed. Hint: run with --debug for details'
    """
    return f"{format_error(message)}. Hint: {suggestion}"


__all__ = [
    "BowerGateError",
    "FatalBootError",
    "InstallFailedError",
    "format_error",
    "format_suggestion",
]
