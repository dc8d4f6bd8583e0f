"""
FixOrchestrator - Drives the repair agent across files and issues.

Coordinates:
1. Availability gate (agent probe)
2. Per-file strategy: one batched call, falling back to per-issue calls
3. Progress events to a listener
4. Fixed/failed accounting

Files are processed one at a time and each file's calls run sequentially;
the agent edits files in place, so two calls must never overlap.
"""

import logging
import time
from typing import List, Mapping, Optional

from ..contracts.issue import Issue
from .agent import AgentRunner
from .contracts import (
    FileFixResult,
    FixEvent,
    FixListener,
    FixMetrics,
    FixRunResult,
    FixStatus,
    FixStrategy,
)
from .prompt_builder import RepairPromptBuilder


logger = logging.getLogger(__name__)

AGENT_UNAVAILABLE_MESSAGE = (
    "GitHub Copilot CLI is not installed or not in PATH.\n"
    "  Install it: https://github.com/github/copilot-cli\n"
    "  Then run: copilot auth login"
)


class FixOrchestrator:
    """
    Sends issues to the repair agent and tallies the outcome.

    Usage:
        orchestrator = FixOrchestrator(listener=reporter.print_fix_event)
        result = await orchestrator.fix_all({"/abs/src/Hero.jsx": issues})

        if not result.agent_available:
            print(result.error_message)
        elif result.success:
            print(f"Fixed {result.fixed} issues")
    """

    def __init__(
        self,
        runner: Optional[AgentRunner] = None,
        prompt_builder: Optional[RepairPromptBuilder] = None,
        batch: bool = True,
        dry_run: bool = False,
        timeout_seconds: Optional[float] = None,
        listener: Optional[FixListener] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            runner: AgentRunner (default: Copilot CLI from settings)
            prompt_builder: RepairPromptBuilder for instructions
            batch: Send all issues of a file in one call first
            dry_run: Report what would be sent without running anything
            timeout_seconds: Budget per invocation (default: runner's)
            listener: Callback receiving FixEvents
        """
        self._runner = runner
        self._prompts = prompt_builder or RepairPromptBuilder()
        self._batch = batch
        self._dry_run = dry_run
        self._timeout = timeout_seconds
        self._listener = listener

    def _get_runner(self) -> AgentRunner:
        """Get or create runner."""
        if self._runner is None:
            self._runner = AgentRunner()
        return self._runner

    async def fix_all(self, issues_by_file: Mapping[str, List[Issue]]) -> FixRunResult:
        """
        Fix every issue in every file.

        Args:
            issues_by_file: File path -> issues, processed in mapping order

        Returns:
            FixRunResult with fixed/failed summed across files
        """
        start_time = time.time()
        metrics = FixMetrics()
        result = FixRunResult(dry_run=self._dry_run, metrics=metrics)

        pending = {path: issues for path, issues in issues_by_file.items() if issues}
        if not pending:
            return result

        # ---------------------------------------------------------------------
        # AVAILABILITY GATE
        # ---------------------------------------------------------------------
        if not self._dry_run:
            probe_start = time.time()
            available = await self._get_runner().probe()
            metrics.probe_duration_ms = (time.time() - probe_start) * 1000

            if not available:
                logger.warning("Repair agent unavailable, no fixes attempted")
                result.agent_available = False
                result.error_message = AGENT_UNAVAILABLE_MESSAGE
                metrics.total_duration_ms = (time.time() - start_time) * 1000
                return result

        # ---------------------------------------------------------------------
        # FILES
        # ---------------------------------------------------------------------
        for file_path, issues in pending.items():
            file_result = await self.fix_file(file_path, issues, metrics)
            result.files.append(file_result)
            result.fixed += file_result.fixed
            result.failed += file_result.failed

        metrics.total_duration_ms = (time.time() - start_time) * 1000
        logger.info(f"Fix run finished: {result.describe()}")
        logger.debug(metrics.describe())
        return result

    async def fix_file(
        self,
        file_path: str,
        issues: List[Issue],
        metrics: Optional[FixMetrics] = None,
    ) -> FileFixResult:
        """
        Fix the issues of one file.

        Does not run the availability gate; fix_all does.

        Args:
            file_path: File containing the issues
            issues: Issues to fix
            metrics: Run metrics to update

        Returns:
            FileFixResult
        """
        metrics = metrics if metrics is not None else FixMetrics()

        if self._dry_run:
            for issue in issues:
                self._emit(file_path, issue, FixStatus.START)
                self._emit(file_path, issue, FixStatus.DRY_RUN, "Would send to repair agent")
            return FileFixResult(file_path=file_path, strategy=FixStrategy.DRY_RUN, fixed=len(issues))

        if self._batch and len(issues) > 1:
            return await self._fix_batch(file_path, issues, metrics)

        for issue in issues:
            self._emit(file_path, issue, FixStatus.START)
        file_result = FileFixResult(file_path=file_path, strategy=FixStrategy.SINGLE)
        await self._fix_each(file_path, issues, file_result, metrics)
        return file_result

    # =========================================================================
    # STRATEGIES
    # =========================================================================

    async def _fix_batch(
        self,
        file_path: str,
        issues: List[Issue],
        metrics: FixMetrics,
    ) -> FileFixResult:
        """One call for every issue; per-issue calls if it fails."""
        for issue in issues:
            self._emit(file_path, issue, FixStatus.START)

        file_result = FileFixResult(file_path=file_path, strategy=FixStrategy.BATCH)
        instruction = self._prompts.build_batch(file_path, issues)

        invocation = await self._get_runner().invoke(
            instruction,
            timeout=self._timeout,
            file_path=file_path,
            issue_count=len(issues),
        )
        metrics.batch_invocations += 1
        file_result.invocations += 1
        if invocation.timed_out:
            metrics.timeouts += 1

        if invocation.success:
            for issue in issues:
                self._emit(file_path, issue, FixStatus.SUCCESS)
            file_result.fixed = len(issues)
            return file_result

        logger.warning(
            f"Batch fix failed for {self._prompts.display_path(file_path)} "
            f"({invocation.error}), trying individual fixes"
        )
        metrics.batch_fallbacks += 1
        file_result.strategy = FixStrategy.BATCH_FALLBACK
        await self._fix_each(file_path, issues, file_result, metrics)
        return file_result

    async def _fix_each(
        self,
        file_path: str,
        issues: List[Issue],
        file_result: FileFixResult,
        metrics: FixMetrics,
    ) -> None:
        """One call per issue, in order. START events are already emitted."""
        for issue in issues:
            instruction = self._prompts.build_single(file_path, issue)
            invocation = await self._get_runner().invoke(
                instruction,
                timeout=self._timeout,
                file_path=file_path,
                issue_count=1,
            )
            metrics.single_invocations += 1
            file_result.invocations += 1
            if invocation.timed_out:
                metrics.timeouts += 1

            if invocation.success:
                self._emit(file_path, issue, FixStatus.SUCCESS)
                file_result.fixed += 1
            else:
                self._emit(file_path, issue, FixStatus.ERROR, invocation.error)
                file_result.failed += 1

    def _emit(
        self,
        file_path: str,
        issue: Issue,
        status: FixStatus,
        message: Optional[str] = None,
    ) -> None:
        if self._listener is None:
            return
        try:
            self._listener(FixEvent(file_path=file_path, issue=issue, status=status, message=message))
        except Exception as e:
            logger.error(f"Fix listener failed on {status.value} event: {e}")
