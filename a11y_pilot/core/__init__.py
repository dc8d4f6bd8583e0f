"""
Core - settings and exceptions shared by every subsystem.
"""

from .config import Settings, settings
from .exceptions import (
    A11yPilotError,
    EmptyRuleSelectionError,
    UnknownFileKindError,
)

__all__ = [
    "Settings",
    "settings",
    "A11yPilotError",
    "EmptyRuleSelectionError",
    "UnknownFileKindError",
]
