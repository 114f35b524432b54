"""Command groups for the `sct` CLI.

This package provides the commands and sub-apps mounted by srctracker.cli.
"""

from . import config as config  # noqa: F401
from . import declare as declare  # noqa: F401
from . import stats as stats  # noqa: F401

__all__ = [
    "config",
    "declare",
    "stats",
]
