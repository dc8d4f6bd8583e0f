"""
Monitoring Module - logging setup and structured agent-invocation events.

Usage:
    from a11y_pilot.monitoring import configure_logging, FixLogger

    configure_logging("INFO")
    FixLogger().log_invocation(file_path, 2, prompt, mode="batch")
"""

from .logger import FixLogger, configure_logging, LOGGER_NAME

__all__ = [
    "FixLogger",
    "configure_logging",
    "LOGGER_NAME",
]
