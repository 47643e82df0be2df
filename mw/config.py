# mw/config.py
"""Environment-driven configuration for mw."""

import os
import sys

from .constants import DISABLE_LAUNCH_ENV


def _is_truthy(value: str | None) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes")


def is_launch_disabled() -> bool:
    """Check if the import-time launch is disabled via environment variable."""
    return _is_truthy(os.environ.get(DISABLE_LAUNCH_ENV))


def is_module_invocation() -> bool:
    """Check if ``python -m`` is still importing packages to locate its target.

    The interpreter keeps ``sys.argv[0]`` set to ``"-m"`` until the target
    module starts running.
    """
    return getattr(sys, "argv", [])[:1] == ["-m"]
