"""
Fix Logger - Structured logging for repair agent invocations.

Captures:
- Invocation details (file, issue count, instruction preview)
- Results (exit code, duration, timeout)

Log Format:
==========
Each structured entry is a single line of JSON prefixed with the event
label, so the stream can be grepped by event and parsed by line.

Reporter output (issue listings, summaries) goes to stdout; log records
go to stderr so the two never interleave in piped JSON output.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

LOGGER_NAME = "a11y_pilot"

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(level: Union[str, int] = "WARNING") -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Safe to call more than once: the handler is only added the first time,
    later calls just adjust the level.

    Args:
        level: Logging level name or number

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            '[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger


class FixLogger:
    """
    Structured logger for repair agent invocations.

    Usage:
        fix_logger = FixLogger()

        fix_logger.log_invocation(
            file_path="src/Hero.jsx",
            issue_count=3,
            instruction=prompt,
            mode="batch",
        )

        fix_logger.log_result(
            file_path="src/Hero.jsx",
            success=False,
            exit_code=1,
            duration_ms=5230.4,
            error="rate limited",
        )
    """

    def __init__(self, name: str = f"{LOGGER_NAME}.agent"):
        self._logger = logging.getLogger(name)

    def log_invocation(
        self,
        file_path: str,
        issue_count: int,
        instruction: str,
        mode: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Log an agent invocation before the process is spawned.

        Args:
            file_path: File the instruction targets
            issue_count: Number of issues covered by the instruction
            instruction: Full instruction text (only a preview is logged)
            mode: "batch" or "single"
            metadata: Additional metadata
        """
        log_data = {
            "event": "agent_invocation",
            "file": file_path,
            "mode": mode,
            "issue_count": issue_count,
            "instruction_length": len(instruction),
            "instruction_preview": instruction[:100] + "..." if len(instruction) > 100 else instruction,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        if metadata:
            log_data["metadata"] = metadata

        self._logger.info(f"Agent Invocation: {json.dumps(log_data)}")

    def log_result(
        self,
        file_path: str,
        success: bool,
        exit_code: Optional[int] = None,
        duration_ms: float = 0.0,
        timed_out: bool = False,
        error: Optional[str] = None,
    ) -> None:
        """
        Log the outcome of an agent invocation.

        Args:
            file_path: File the instruction targeted
            success: Whether the agent exited with status 0
            exit_code: Process exit code (None on spawn error)
            duration_ms: Wall-clock duration
            timed_out: Whether the hard timeout fired
            error: Failure explanation
        """
        log_data = {
            "event": "agent_result",
            "file": file_path,
            "success": success,
            "exit_code": exit_code,
            "timed_out": timed_out,
            "duration_ms": round(duration_ms, 2),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        if error:
            log_data["error"] = error[:200]

        level = logging.INFO if success else logging.WARNING
        self._logger.log(level, f"Agent Result: {json.dumps(log_data)}")
