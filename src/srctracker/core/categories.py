"""
Classification vocabulary for declared code provenance.

A block of code is declared as self-written, copied, or AI-generated. The
interactive prompt additionally offers `cancel`, which `parse_choice` maps to
None so callers can skip any statistics update.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .errors import UnknownCategoryError

CANCEL = "cancel"


class Category(str, Enum):
    MANUAL = "self-written"
    COPIED = "copied"
    AI = "ai-generated"

    @property
    def label(self) -> str:
        """Title used when confirming a declaration."""
        return _LABELS[self]

    @property
    def summary_label(self) -> str:
        """Title used for the category's line in the statistics summary."""
        return _SUMMARY_LABELS[self]


_LABELS = {
    Category.MANUAL: "Self-Written",
    Category.COPIED: "Copied",
    Category.AI: "AI-Generated",
}

_SUMMARY_LABELS = {
    Category.MANUAL: "Manually Written",
    Category.COPIED: "Copied",
    Category.AI: "AI-Generated",
}

_ALIASES = {
    "self-written": Category.MANUAL,
    "self_written": Category.MANUAL,
    "selfwritten": Category.MANUAL,
    "self": Category.MANUAL,
    "manual": Category.MANUAL,
    "manually-written": Category.MANUAL,
    "s": Category.MANUAL,
    "m": Category.MANUAL,
    "copied": Category.COPIED,
    "copy": Category.COPIED,
    "pasted": Category.COPIED,
    "ai-generated": Category.AI,
    "ai_generated": Category.AI,
    "aigenerated": Category.AI,
    "ai": Category.AI,
    "a": Category.AI,
}

_CANCEL_WORDS = {CANCEL, "q", "quit", "none", "skip"}

# Choices offered by the interactive prompt, in dialog order.
PROMPT_CHOICES = [c.value for c in Category] + [CANCEL]


def parse_category(text: str) -> Category:
    """Parse a category name or alias; `cancel` is not accepted here."""
    key = (text or "").strip().lower().replace(" ", "-")
    try:
        return _ALIASES[key]
    except KeyError:
        raise UnknownCategoryError(
            f"Unknown source '{text}'. Expected one of: {', '.join(c.value for c in Category)}."
        ) from None


def parse_choice(text: str) -> Optional[Category]:
    """Parse a prompt answer. Returns None when the user cancelled."""
    key = (text or "").strip().lower()
    if key in _CANCEL_WORDS:
        return None
    return parse_category(key)
