"""Allow `python -m a11y_pilot`."""

from .cli import main

raise SystemExit(main())
