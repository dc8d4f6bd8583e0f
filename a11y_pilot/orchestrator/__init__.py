"""
Orchestrator module - Drives the external repair agent.

Provides the FixOrchestrator along with the agent locator/runner and the
prompt builder it uses.

Usage:
    from a11y_pilot.orchestrator import FixOrchestrator

    orchestrator = FixOrchestrator(batch=True, dry_run=False)
    result = await orchestrator.fix_all(report.issues_by_file())

    if result.success:
        print(f"Fixed {result.fixed} issues")
"""

from .contracts import (
    FileFixResult,
    FixEvent,
    FixListener,
    FixMetrics,
    FixRunResult,
    FixStatus,
    FixStrategy,
    InvocationResult,
)
from .agent import AgentLocator, AgentRunner, WELL_KNOWN_AGENT_PATHS
from .prompt_builder import RepairPromptBuilder, quote_for_shell
from .orchestrator import AGENT_UNAVAILABLE_MESSAGE, FixOrchestrator


__all__ = [
    # Contracts
    "FileFixResult",
    "FixEvent",
    "FixListener",
    "FixMetrics",
    "FixRunResult",
    "FixStatus",
    "FixStrategy",
    "InvocationResult",
    # Components
    "AgentLocator",
    "AgentRunner",
    "WELL_KNOWN_AGENT_PATHS",
    "RepairPromptBuilder",
    "quote_for_shell",
    # Main
    "AGENT_UNAVAILABLE_MESSAGE",
    "FixOrchestrator",
]
