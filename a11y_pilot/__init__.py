"""
a11y-pilot - Static accessibility scanner for HTML, JSX/TSX, and template components.

Finds accessibility defects in markup source files and can drive GitHub
Copilot CLI to repair them.
"""

__version__ = "1.0.0"
