"""Async installer execution with line-by-line output streaming."""

import asyncio
import logging
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path

STDERR_TAIL_LINES = 20
STREAM_LIMIT = 1024 * 1024

_logging = logging.getLogger(__name__)


@dataclass
class InstallOutcome:
    status: str
    returncode: int | None
    stderr_tail: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @classmethod
    def from_returncode(cls, returncode: int, stderr_tail: list[str]) -> "InstallOutcome":
        status = "success" if returncode == 0 else "failed"
        return cls(status=status, returncode=returncode, stderr_tail=stderr_tail)


async def _forward_lines(
    stream: asyncio.StreamReader,
    logger: logging.Logger,
    tail: deque | None = None,
) -> None:
    while True:
        try:
            raw = await stream.readline()
        except ValueError:
            # line exceeded STREAM_LIMIT; the buffered part was discarded
            logger.info(f"[output line longer than {STREAM_LIMIT} bytes truncated]")
            continue
        if not raw:
            break
        line = raw.decode(errors="replace").rstrip("\r\n")
        if not line:
            continue
        logger.info(line)
        if tail is not None:
            tail.append(line)


class InstallerRunner:
    """Spawns the installer and forwards its output to a logger.

    Stdout and stderr are both logged at INFO as they arrive. The exit code
    is kept on the returned InstallOutcome; deciding what a failure means is
    left to the caller.
    """

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or _logging

    async def run(
        self, args: list[str], cwd: Path, timeout: float | None = None
    ) -> InstallOutcome:
        _logging.debug(f"Running command: {' '.join(args)} (cwd={cwd})")
        tail: deque[str] = deque(maxlen=STDERR_TAIL_LINES)

        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                cwd=str(cwd),
                limit=STREAM_LIMIT,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            _logging.error(f"Could not start {args[0]}: {type(e).__name__}: {e}")
            return InstallOutcome(
                status="failed", returncode=None, stderr_tail=[str(e)]
            )

        assert process.stdout is not None and process.stderr is not None
        readers = asyncio.gather(
            _forward_lines(process.stdout, self.logger),
            _forward_lines(process.stderr, self.logger, tail),
        )
        try:
            await asyncio.wait_for(readers, timeout=timeout)
            returncode = await process.wait()
        except asyncio.TimeoutError:
            process.kill()
            _ = await process.wait()
            message = f"Command timed out after {timeout} seconds"
            _logging.error(f"{message}: {' '.join(args)}")
            tail.append(message)
            return InstallOutcome(
                status="failed", returncode=process.returncode, stderr_tail=list(tail)
            )
        except Exception as e:
            readers.cancel()
            if process.returncode is None:
                process.kill()
            _ = await process.wait()
            _logging.error(f"Reading output of {args[0]} failed: {type(e).__name__}: {e}")
            tail.append(str(e))
            return InstallOutcome(
                status="failed", returncode=process.returncode, stderr_tail=list(tail)
            )

        return InstallOutcome.from_returncode(returncode, list(tail))


__all__ = [
    "STDERR_TAIL_LINES",
    "STREAM_LIMIT",
    "InstallOutcome",
    "InstallerRunner",
]
