"""Subprocess execution for the external converter."""

import asyncio
import os
import signal
from typing import Optional, Sequence

from utils import get_logger

from .errors import ExecutionFailedError

logger = get_logger(__name__)

# Seconds allowed for the pipes to close after the process group is killed
KILL_GRACE = 1.0

_CHUNK_SIZE = 64 * 1024


def _decode(data: bytes) -> str:
    return data.decode(errors="replace") if data else ""


async def _drain(stream: Optional[asyncio.StreamReader], sink: bytearray) -> None:
    if stream is None:
        return
    while True:
        chunk = await stream.read(_CHUNK_SIZE)
        if not chunk:
            return
        sink.extend(chunk)


def _kill(process: asyncio.subprocess.Process) -> None:
    """Kill the converter and anything it started in its session."""
    try:
        os.killpg(process.pid, signal.SIGKILL)
    except ProcessLookupError:
        return
    except PermissionError:
        process.kill()


async def _settle(tasks: Sequence[asyncio.Task]) -> None:
    """Give ``tasks`` KILL_GRACE seconds to finish, then cancel the rest."""
    _, pending = await asyncio.wait(tasks, timeout=KILL_GRACE)
    for task in pending:
        task.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)


async def execute_command(
    command: str,
    args: Sequence[str],
    timeout: Optional[float] = None,
) -> str:
    """Run ``command`` with ``args`` and return its stdout.

    Exactly one process is spawned and nothing is retried. Stdout and stderr
    are read into separate buffers while the process runs, so whatever was
    written before a timeout is still attached to the error. The process
    runs in its own session; on timeout or cancellation the whole group is
    killed, and the call returns within ``timeout + KILL_GRACE`` even if a
    leftover child keeps the pipes open.

    Args:
        command: Executable name or path
        args: Arguments passed to the executable
        timeout: Seconds before the process is killed (None waits forever)

    Returns:
        Captured stdout

    Raises:
        ExecutionFailedError: If the process cannot be spawned, exits non-zero,
            or exceeds ``timeout``. Captured stdout/stderr are attached.
    """
    logger.debug(f"Executing: {command} {' '.join(args)}")
    try:
        process = await asyncio.create_subprocess_exec(
            command,
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=True,
        )
    except OSError as e:
        raise ExecutionFailedError(e) from e

    stdout = bytearray()
    stderr = bytearray()
    tasks = [
        asyncio.create_task(process.wait()),
        asyncio.create_task(_drain(process.stdout, stdout)),
        asyncio.create_task(_drain(process.stderr, stderr)),
    ]

    try:
        _, pending = await asyncio.wait(tasks, timeout=timeout)
    except asyncio.CancelledError:
        _kill(process)
        await _settle(tasks)
        raise

    if pending:
        logger.warning(f"{command} timed out after {timeout}s, killing it")
        _kill(process)
        await _settle(tasks)
        raise ExecutionFailedError(
            f"timed out after {timeout}s", stdout=_decode(stdout), stderr=_decode(stderr)
        )

    stdout_text = _decode(stdout)
    stderr_text = _decode(stderr)

    if process.returncode != 0:
        raise ExecutionFailedError(
            f"exit status {process.returncode}", stdout=stdout_text, stderr=stderr_text
        )

    return stdout_text
