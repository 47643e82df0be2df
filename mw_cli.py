"""Console script entry point for mw.

Marks the import-time launch as disabled before the ``mw`` package is
loaded, so only ``mw open`` spawns the URL handler.
"""

import os

os.environ["MW_DISABLE_LAUNCH"] = "1"

from mw.cli import main  # noqa: E402

__all__ = ["main"]
