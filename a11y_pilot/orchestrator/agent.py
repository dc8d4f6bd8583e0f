"""
Agent - Locate and run the external repair agent (Copilot CLI by default).

AgentLocator finds the executable; AgentRunner spawns it with an
instruction and enforces a hard wall-clock timeout.

Timeout handling:
    The process's completion and a loop.call_later timer race to resolve a
    single future. Whichever fires first wins; the loser is ignored via a
    `resolved` flag. On timeout the process gets SIGTERM, then SIGKILL if
    it is still alive after the grace period.

Usage:
    runner = AgentRunner()
    if await runner.probe():
        result = await runner.invoke("In file src/Hero.jsx at line 4, ...")
"""

import asyncio
import logging
import os
import shutil
import time
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from ..core.config import settings
from ..monitoring.logger import FixLogger
from .contracts import InvocationResult


logger = logging.getLogger(__name__)

# Install locations used by the VS Code Copilot Chat extension, relative to home
WELL_KNOWN_AGENT_PATHS = (
    "Library/Application Support/Code/User/globalStorage/github.copilot-chat/copilotCli/copilot",
    ".local/share/Code/User/globalStorage/github.copilot-chat/copilotCli/copilot",
    "AppData/Roaming/Code/User/globalStorage/github.copilot-chat/copilotCli/copilot.exe",
)

_UNRESOLVED = object()


class AgentLocator:
    """
    Resolves the agent executable path.

    Order:
    1. AGENT_BINARY itself, when it is a path to an existing file
    2. Well-known VS Code global-storage locations
    3. PATH lookup via shutil.which

    The result (including "not found") is cached per instance.
    """

    def __init__(self, binary: Optional[str] = None, home: Optional[Path] = None):
        self._binary = binary or settings.AGENT_BINARY
        self._home = home if home is not None else Path.home()
        self._cached = _UNRESOLVED

    def candidates(self) -> List[Path]:
        """Well-known install locations, in lookup order."""
        return [self._home / relative for relative in WELL_KNOWN_AGENT_PATHS]

    def resolve(self) -> Optional[str]:
        """
        Find the agent executable.

        Returns:
            Absolute path, or None if the agent is not installed
        """
        if self._cached is _UNRESOLVED:
            self._cached = self._find()
            logger.debug(f"Agent executable: {self._cached or 'not found'}")
        return self._cached

    def _find(self) -> Optional[str]:
        if os.path.sep in self._binary or (os.path.altsep and os.path.altsep in self._binary):
            return self._binary if os.path.isfile(self._binary) else None

        for candidate in self.candidates():
            if candidate.is_file():
                return str(candidate)

        return shutil.which(self._binary)


class AgentRunner:
    """
    Spawns the agent as a subprocess and captures its output.

    Args are built as: <executable> <prompt_flag> <instruction> <extra_args...>
    which for Copilot CLI is `copilot --prompt "..." --allow-all-tools`.
    """

    def __init__(
        self,
        executable: Optional[str] = None,
        locator: Optional[AgentLocator] = None,
        prompt_flag: Optional[str] = None,
        extra_args: Optional[List[str]] = None,
        timeout_seconds: Optional[float] = None,
        probe_timeout_seconds: Optional[float] = None,
        kill_grace_seconds: Optional[float] = None,
        cwd: Optional[str] = None,
        fix_logger: Optional[FixLogger] = None,
    ):
        """
        Initialize the runner.

        Args:
            executable: Explicit agent path (skips the locator)
            locator: AgentLocator used when executable is not given
            prompt_flag: Flag preceding the instruction
            extra_args: Arguments appended after the instruction
            timeout_seconds: Default budget per invocation
            probe_timeout_seconds: Budget for the --version probe
            kill_grace_seconds: Delay between SIGTERM and SIGKILL
            cwd: Working directory for the agent (defaults to current)
            fix_logger: Structured invocation logger
        """
        self._executable = executable
        self._locator = locator or AgentLocator()
        self._prompt_flag = prompt_flag if prompt_flag is not None else settings.AGENT_PROMPT_FLAG
        self._extra_args = list(extra_args) if extra_args is not None else list(settings.AGENT_EXTRA_ARGS)
        self._timeout = timeout_seconds if timeout_seconds is not None else settings.AGENT_TIMEOUT_SECONDS
        self._probe_timeout = (
            probe_timeout_seconds
            if probe_timeout_seconds is not None
            else settings.AGENT_PROBE_TIMEOUT_SECONDS
        )
        self._kill_grace = (
            kill_grace_seconds if kill_grace_seconds is not None else settings.AGENT_KILL_GRACE_SECONDS
        )
        self._cwd = cwd
        self._fix_logger = fix_logger or FixLogger()

    @property
    def executable(self) -> Optional[str]:
        """Agent path, resolved lazily."""
        if self._executable is None:
            self._executable = self._locator.resolve()
        return self._executable

    @property
    def timeout_seconds(self) -> float:
        return self._timeout

    def build_args(self, instruction: str) -> List[str]:
        """
        Command line for one instruction, without the executable.

        Args:
            instruction: Natural-language instruction

        Returns:
            Argument list
        """
        args = [self._prompt_flag, instruction] if self._prompt_flag else [instruction]
        return args + self._extra_args

    # =========================================================================
    # PUBLIC API
    # =========================================================================

    async def probe(self) -> bool:
        """
        Check that the agent exists and answers `--version`.

        Returns:
            True if the probe exited with status 0 within the probe timeout
        """
        executable = self.executable
        if executable is None:
            logger.info("Agent executable not found")
            return False

        result = await self._run([executable, "--version"], self._probe_timeout)
        if not result.success:
            logger.info(f"Agent probe failed: {result.error}")
        return result.success

    async def invoke(
        self,
        instruction: str,
        timeout: Optional[float] = None,
        file_path: str = "",
        issue_count: int = 1,
    ) -> InvocationResult:
        """
        Run the agent with one instruction.

        Never raises for agent failures; they are reported in the result.

        Args:
            instruction: Natural-language instruction
            timeout: Budget in seconds (defaults to AGENT_TIMEOUT_SECONDS)
            file_path: File the instruction targets, for logging
            issue_count: Issues covered by the instruction, for logging

        Returns:
            InvocationResult
        """
        timeout = timeout if timeout is not None else self._timeout
        executable = self.executable
        if executable is None:
            return InvocationResult(success=False, error="Agent executable not found")

        self._fix_logger.log_invocation(
            file_path=file_path,
            issue_count=issue_count,
            instruction=instruction,
            mode="batch" if issue_count > 1 else "single",
        )

        result = await self._run([executable] + self.build_args(instruction), timeout)

        self._fix_logger.log_result(
            file_path=file_path,
            success=result.success,
            exit_code=result.exit_code,
            duration_ms=result.duration_ms,
            timed_out=result.timed_out,
            error=result.error,
        )
        return result

    # =========================================================================
    # SUBPROCESS HANDLING
    # =========================================================================

    async def _run(self, argv: List[str], timeout: float) -> InvocationResult:
        """Spawn argv and race its completion against the timeout."""
        start_time = time.time()

        env = dict(os.environ)
        env.setdefault("TERM", "xterm-256color")

        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=self._cwd,
                env=env,
            )
        except (OSError, ValueError) as e:
            return InvocationResult(
                success=False,
                error=f"Failed to spawn agent: {e}",
                duration_ms=(time.time() - start_time) * 1000,
            )

        loop = asyncio.get_running_loop()
        outcome: asyncio.Future = loop.create_future()
        resolved = False

        def resolve(result: InvocationResult) -> None:
            nonlocal resolved
            if resolved:
                return
            resolved = True
            outcome.set_result(result)

        def on_exit(task: asyncio.Future) -> None:
            if task.cancelled():
                return
            duration_ms = (time.time() - start_time) * 1000
            error = task.exception()
            if error is not None:
                resolve(InvocationResult(
                    success=False,
                    exit_code=process.returncode,
                    error=f"Agent I/O failed: {error}",
                    duration_ms=duration_ms,
                    pid=process.pid,
                ))
                return
            stdout, stderr = task.result()
            resolve(self._completed(process.returncode, stdout, stderr, duration_ms, process.pid))

        def on_timeout() -> None:
            resolve(InvocationResult(
                success=False,
                error=f"Agent timed out ({timeout:g}s)",
                timed_out=True,
                duration_ms=(time.time() - start_time) * 1000,
                pid=process.pid,
            ))

        communicate = asyncio.ensure_future(process.communicate())
        communicate.add_done_callback(on_exit)
        timer = loop.call_later(timeout, on_timeout)

        try:
            result = await outcome
        finally:
            timer.cancel()

        if result.timed_out:
            await self._terminate(process, communicate)
            result = replace(result, exit_code=process.returncode)

        return result

    async def _terminate(self, process: asyncio.subprocess.Process, communicate: asyncio.Future) -> None:
        """SIGTERM, wait for the grace period, then SIGKILL."""
        try:
            process.terminate()
        except ProcessLookupError:
            pass

        try:
            await asyncio.wait_for(process.wait(), self._kill_grace)
        except asyncio.TimeoutError:
            logger.warning(f"Agent pid {process.pid} ignored SIGTERM, killing")
            try:
                process.kill()
            except ProcessLookupError:
                pass
            await process.wait()

        # Pipes may stay open if the agent left children behind
        try:
            await asyncio.wait_for(communicate, self._kill_grace)
        except asyncio.TimeoutError:
            communicate.cancel()
        except Exception as e:
            logger.debug(f"Agent output after termination dropped: {e}")

    @staticmethod
    def _completed(
        exit_code: Optional[int],
        stdout: bytes,
        stderr: bytes,
        duration_ms: float,
        pid: Optional[int],
    ) -> InvocationResult:
        out = (stdout or b"").decode("utf-8", errors="replace")
        err = (stderr or b"").decode("utf-8", errors="replace")

        if exit_code == 0:
            return InvocationResult(
                success=True, exit_code=0, output=out, duration_ms=duration_ms, pid=pid,
            )

        return InvocationResult(
            success=False,
            exit_code=exit_code,
            output=out,
            error=err.strip() or out.strip() or f"Agent exited with code {exit_code}",
            duration_ms=duration_ms,
            pid=pid,
        )
