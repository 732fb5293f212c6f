"""Core wezterm operations - shared utilities for all wezterm modules.

PUBLIC API:
  - build_command: Quote argument tokens into one shell command string
  - run_wezterm: Execute a wezterm cli command with timeout and output limits
"""

import logging
import os
import shlex
import signal
import subprocess
import threading
import time
from functools import partial
from typing import IO, Sequence

from ..config import WeztapConfig
from ..types import ExecResult
from .exceptions import CommandFailedError, CommandTimeoutError, OutputLimitError

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024
_KILL_GRACE = 1.0


def build_command(tokens: Sequence[str]) -> str:
    """Quote tokens into a single shell command string.

    The shell splits the result back into exactly these tokens, whatever
    whitespace, quotes, newlines or metacharacters they contain.

    Args:
        tokens: Program followed by its arguments

    Returns:
        Command string safe to pass to /bin/sh

    Examples:
        build_command(["wezterm", "cli", "send-text", "echo hi; ls"])
        # "wezterm cli send-text 'echo hi; ls'"
    """
    return shlex.join(tokens)


class _OutputBudget:
    """Byte allowance shared by the stdout and stderr readers of one process."""

    def __init__(self, limit: int):
        self.limit = limit
        self.used = 0
        self.exceeded = False
        self._lock = threading.Lock()

    def consume(self, size: int) -> bool:
        """Charge size bytes, returning False once the limit is crossed."""
        with self._lock:
            self.used += size
            if self.used > self.limit:
                self.exceeded = True
            return not self.exceeded


def _kill(proc: subprocess.Popen) -> None:
    """Kill the process group started for proc."""
    try:
        os.killpg(proc.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass


def _drain(stream: IO[bytes], sink: bytearray, budget: _OutputBudget, proc: subprocess.Popen) -> None:
    """Read stream into sink until EOF or until the budget runs out."""
    for chunk in iter(partial(stream.read1, _CHUNK_SIZE), b""):  # pyright: ignore[reportAttributeAccessIssue]
        if not budget.consume(len(chunk)):
            _kill(proc)
            return
        sink.extend(chunk)


def run_wezterm(args: Sequence[str], config: WeztapConfig) -> ExecResult:
    """Run a wezterm cli command and return its output.

    The command is the configured CLI prefix followed by args. It runs through
    the shell in its own process group so that a timeout or an oversized output
    can kill everything it started.

    Args:
        args: Verb and arguments, e.g. ["activate-pane", "--pane-id", "3"]
        config: CLI prefix, timeout and output ceiling

    Returns:
        ExecResult with decoded stdout and stderr

    Raises:
        CommandTimeoutError: If the process outlives config.timeout
        OutputLimitError: If stdout + stderr exceed config.max_output bytes
        CommandFailedError: If the process cannot start or exits non-zero
    """
    command = build_command([*config.cli, *args])
    logger.debug(f"Running: {command}")

    try:
        proc = subprocess.Popen(
            command,
            shell=True,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            start_new_session=True,
        )
    except OSError as e:
        raise CommandFailedError(f"Failed to start command: {command}: {e}", command=command) from e

    budget = _OutputBudget(config.max_output)
    stdout, stderr = bytearray(), bytearray()
    readers = [
        threading.Thread(target=_drain, args=(proc.stdout, stdout, budget, proc), daemon=True),
        threading.Thread(target=_drain, args=(proc.stderr, stderr, budget, proc), daemon=True),
    ]
    for reader in readers:
        reader.start()

    deadline = time.monotonic() + config.timeout
    timed_out = False
    try:
        returncode = proc.wait(timeout=config.timeout)
    except subprocess.TimeoutExpired:
        timed_out = True
        _kill(proc)
        returncode = proc.wait()

    # A background child can keep the pipes open after the shell exits
    for reader in readers:
        reader.join(max(0.0, deadline - time.monotonic()))
    if any(reader.is_alive() for reader in readers):
        timed_out = True
        _kill(proc)
        for reader in readers:
            reader.join(_KILL_GRACE)

    if not any(reader.is_alive() for reader in readers):
        proc.stdout.close()  # pyright: ignore[reportOptionalMemberAccess]
        proc.stderr.close()  # pyright: ignore[reportOptionalMemberAccess]

    out = stdout.decode("utf-8", errors="replace")
    err = stderr.decode("utf-8", errors="replace").strip()

    if timed_out:
        logger.warning(f"Timed out after {config.timeout}s: {command}")
        raise CommandTimeoutError(
            f"Command timed out after {config.timeout:g}s: {command}", command=command, stderr=err
        )

    if budget.exceeded:
        logger.warning(f"Output exceeded {config.max_output} bytes: {command}")
        raise OutputLimitError(
            f"Command output exceeded maximum size of {config.max_output} bytes: {command}",
            command=command,
            stderr=err,
        )

    if returncode != 0:
        logger.warning(f"Exit code {returncode}: {command}")
        message = f"Command failed with exit code {returncode}: {command}"
        if err:
            message += f"\n{err}"
        raise CommandFailedError(message, command=command, returncode=returncode, stderr=err)

    return ExecResult(stdout=out, stderr=err)
