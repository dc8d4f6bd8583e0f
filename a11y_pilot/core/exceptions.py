"""
Exceptions raised by the scanner core.

Agent failures are never raised: the fix orchestrator reports them as
per-issue results. Only caller mistakes surface as exceptions.
"""

from typing import Iterable, List


class A11yPilotError(Exception):
    """Base class for all a11y-pilot errors."""


class EmptyRuleSelectionError(A11yPilotError, ValueError):
    """A rule filter matched no registered rule."""

    def __init__(self, requested: Iterable[str], available: Iterable[str]):
        self.requested: List[str] = list(requested)
        self.available: List[str] = list(available)
        super().__init__(
            f"No matching rules found for: {', '.join(self.requested) or '(none)'}"
        )


class UnknownFileKindError(A11yPilotError, ValueError):
    """No markup backend exists for the requested file kind."""
