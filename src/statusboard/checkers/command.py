"""Local process presence checker backed by a shell pipeline."""

from __future__ import annotations

import asyncio
import logging
import os
import shlex
import signal
import time
from typing import Optional

from statusboard.checkers.base import StatusChecker
from statusboard.checkers.errors import (
    CheckTimeoutError,
    EmptyProcessNameError,
    ProcessNotRunningError,
)
from statusboard.registry.models import CheckResult

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 5.0
DEFAULT_LIST_COMMAND = "ps ax"


class CommandChecker(StatusChecker):
    """Online when the process listing contains a line matching *process_name*.

    Runs ``<list_command> | grep -e <name> | grep -v grep`` through the shell.
    The pipeline runs in its own session so that, on timeout, the whole process
    group can be killed and nothing is left behind.
    """

    checker_type = "command"

    def __init__(
        self,
        process_name: str,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        list_command: str = DEFAULT_LIST_COMMAND,
    ) -> None:
        self.process_name = process_name
        self.timeout = timeout if timeout else DEFAULT_TIMEOUT
        self.list_command = list_command or DEFAULT_LIST_COMMAND

    def describe(self) -> str:
        return f"process {self.process_name}"

    def build_command(self) -> str:
        return f"{self.list_command} | grep -e {shlex.quote(self.process_name)} | grep -v grep"

    async def check_status(self) -> CheckResult:
        if not self.process_name:
            return CheckResult.failed(EmptyProcessNameError())

        start = time.monotonic()
        try:
            proc = await asyncio.create_subprocess_shell(
                self.build_command(),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            return CheckResult.failed(ProcessNotRunningError(self.process_name, str(exc)))

        try:
            await asyncio.wait_for(proc.communicate(), timeout=self.timeout)
        except TimeoutError:
            await _kill_process_group(proc)
            latency = (time.monotonic() - start) * 1000
            return CheckResult.failed(
                CheckTimeoutError(f"Checking process '{self.process_name}' timed out after {self.timeout}s"),
                latency_ms=round(latency, 1),
            )
        except asyncio.CancelledError:
            await _kill_process_group(proc)
            raise

        latency = round((time.monotonic() - start) * 1000, 1)
        if proc.returncode == 0:
            return CheckResult.ok(latency_ms=latency)
        return CheckResult.failed(
            ProcessNotRunningError(self.process_name, f"exit status {proc.returncode}"),
            latency_ms=latency,
        )


async def _kill_process_group(proc: asyncio.subprocess.Process) -> None:
    """Kill the pipeline's process group and reap the shell."""
    if proc.returncode is None:
        try:
            os.killpg(proc.pid, signal.SIGKILL)
        except ProcessLookupError:
            pass
        except PermissionError:
            logger.warning("Could not kill process group %d, killing shell only", proc.pid)
            proc.kill()
    await proc.wait()
