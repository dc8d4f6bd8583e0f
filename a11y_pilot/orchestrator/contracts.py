"""
Orchestrator Contracts - Data structures for the fix pipeline.

Defines FixStatus, FixStrategy, FixEvent, InvocationResult, FileFixResult,
FixMetrics, and FixRunResult.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from ..contracts.issue import Issue


class FixStatus(Enum):
    """
    Lifecycle states of a single issue during a fix run.

    Every issue gets exactly one START followed by exactly one terminal
    status (SUCCESS, ERROR, or DRY_RUN).
    """

    START = "start"
    """Issue is about to be sent to the agent."""

    SUCCESS = "success"
    """Agent exited cleanly for an instruction covering this issue."""

    ERROR = "error"
    """Every attempt for this issue failed."""

    DRY_RUN = "dry_run"
    """Would have been sent; nothing was executed."""

    @property
    def is_terminal(self) -> bool:
        return self is not FixStatus.START


class FixStrategy(Enum):
    """How the issues of one file were sent to the agent."""

    BATCH = "batch"
    """One instruction for every issue in the file."""

    BATCH_FALLBACK = "batch_fallback"
    """Batch failed; each issue was retried on its own."""

    SINGLE = "single"
    """One instruction per issue."""

    DRY_RUN = "dry_run"
    """Nothing executed."""


@dataclass(frozen=True)
class FixEvent:
    """Progress notification sent to the fix listener."""

    file_path: str
    """File the issue belongs to."""

    issue: Issue
    """Issue the event is about."""

    status: FixStatus
    """Lifecycle state reached."""

    message: Optional[str] = None
    """Failure explanation for ERROR, informational otherwise."""


FixListener = Callable[[FixEvent], None]


@dataclass
class InvocationResult:
    """Outcome of one agent subprocess."""

    success: bool
    """True iff the process exited with status 0."""

    exit_code: Optional[int] = None
    """Process return code (None if it never started)."""

    output: str = ""
    """Captured stdout."""

    error: Optional[str] = None
    """Failure explanation: stderr, stdout, exit code, spawn error, or timeout."""

    timed_out: bool = False
    """True if the hard timeout fired and the process was terminated."""

    duration_ms: float = 0.0
    """Wall-clock duration."""

    pid: Optional[int] = None
    """Process id of the agent, if it was spawned."""

    def describe(self) -> str:
        """Generate human-readable description."""
        if self.success:
            return f"ok in {self.duration_ms:.0f}ms"
        return f"failed ({self.error}) in {self.duration_ms:.0f}ms"


@dataclass
class FileFixResult:
    """Fix outcome for one file."""

    file_path: str
    """Absolute path of the file."""

    strategy: FixStrategy
    """How the file's issues were sent."""

    fixed: int = 0
    """Issues whose instruction succeeded."""

    failed: int = 0
    """Issues whose every attempt failed."""

    invocations: int = 0
    """Agent processes spawned for this file."""

    @property
    def total(self) -> int:
        return self.fixed + self.failed


@dataclass
class FixMetrics:
    """
    Metrics from a fix run.

    Tracks timing and invocation statistics for logging.
    """

    total_duration_ms: float = 0.0
    """Total time for the run, including the availability probe."""

    probe_duration_ms: float = 0.0
    """Time spent on the availability probe."""

    batch_invocations: int = 0
    """Batched agent calls."""

    single_invocations: int = 0
    """Per-issue agent calls (including batch fallbacks)."""

    batch_fallbacks: int = 0
    """Batches that failed and fell back to per-issue calls."""

    timeouts: int = 0
    """Invocations killed by the hard timeout."""

    @property
    def invocations(self) -> int:
        return self.batch_invocations + self.single_invocations

    def describe(self) -> str:
        """Generate human-readable summary."""
        lines = [
            f"Duration: {self.total_duration_ms:.0f}ms",
            f"  - Probe: {self.probe_duration_ms:.0f}ms",
            f"Invocations: {self.invocations} "
            f"({self.batch_invocations} batch, {self.single_invocations} single)",
        ]

        if self.batch_fallbacks > 0:
            lines.append(f"Batch fallbacks: {self.batch_fallbacks}")

        if self.timeouts > 0:
            lines.append(f"Timeouts: {self.timeouts}")

        return "\n".join(lines)


@dataclass
class FixRunResult:
    """
    Result of a fix run across all files.

    `fixed` and `failed` are summed across files; every issue handed to the
    orchestrator is counted in exactly one of them, unless the agent was
    unavailable, in which case nothing was attempted.
    """

    fixed: int = 0
    """Issues fixed (or would-be fixed in dry run)."""

    failed: int = 0
    """Issues whose every attempt failed."""

    agent_available: bool = True
    """False if the availability gate stopped the run."""

    dry_run: bool = False
    """True if nothing was executed."""

    error_message: Optional[str] = None
    """Diagnostic when the run could not start."""

    files: List[FileFixResult] = field(default_factory=list)
    """Per-file outcomes in processing order."""

    metrics: FixMetrics = field(default_factory=FixMetrics)
    """Timing and invocation statistics."""

    @property
    def success(self) -> bool:
        return self.failed == 0

    @property
    def total(self) -> int:
        return self.fixed + self.failed

    def describe(self) -> str:
        """Generate human-readable summary."""
        if not self.agent_available:
            return f"Agent unavailable: {self.error_message}"

        prefix = "[dry-run] " if self.dry_run else ""
        status = "OK" if self.success else "FAILED"
        return f"{prefix}{status}: {self.fixed}/{self.total} fixed, {self.failed} failed"
