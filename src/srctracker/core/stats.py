"""
Running character statistics per declared code source.

`StatsAggregator` owns the three counters, derives totals and percentages,
and persists after every mutation. Persistence is best-effort: load and save
failures are logged and the aggregator keeps working in memory.
"""

import logging
from pathlib import Path
from typing import Any, Dict

from .categories import Category
from .storage import LoadResult, LoadStatus, SaveResult, StatsRecord, load_record, save_record

logger = logging.getLogger(__name__)

_FIELDS = {
    Category.MANUAL: "manual_chars",
    Category.COPIED: "copied_chars",
    Category.AI: "ai_chars",
}

# Summary line order
_SUMMARY_ORDER = (Category.AI, Category.COPIED, Category.MANUAL)


class StatsAggregator:
    """Accumulates declared character counts and keeps them on disk."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self.record = StatsRecord()
        self.load()

    # --- Counters ---

    @property
    def manual_chars(self) -> int:
        return self.record.manual_chars

    @property
    def copied_chars(self) -> int:
        return self.record.copied_chars

    @property
    def ai_chars(self) -> int:
        return self.record.ai_chars

    def count(self, category: Category) -> int:
        return getattr(self.record, _FIELDS[Category(category)])

    def total(self) -> int:
        r = self.record
        return r.manual_chars + r.copied_chars + r.ai_chars

    # --- Mutations ---

    def add(self, category: Category, count: int) -> SaveResult:
        """Add `count` characters to `category` and save immediately."""
        if count < 0:
            raise ValueError(f"character count must be non-negative, got {count}")
        name = _FIELDS[Category(category)]
        setattr(self.record, name, getattr(self.record, name) + count)
        logger.debug("Added %d chars to %s", count, name)
        return self.save()

    def add_manual(self, count: int) -> SaveResult:
        return self.add(Category.MANUAL, count)

    def add_copied(self, count: int) -> SaveResult:
        return self.add(Category.COPIED, count)

    def add_ai(self, count: int) -> SaveResult:
        return self.add(Category.AI, count)

    # --- Derived values ---

    def percent(self, category: Category) -> float:
        """Share of `category` in the total, 0 when nothing was declared yet."""
        total = self.total()
        if total <= 0:
            return 0.0
        return self.count(category) * 100.0 / total

    @property
    def manual_percent(self) -> float:
        return self.percent(Category.MANUAL)

    @property
    def copied_percent(self) -> float:
        return self.percent(Category.COPIED)

    @property
    def ai_percent(self) -> float:
        return self.percent(Category.AI)

    def summary(self) -> str:
        lines = [
            "Code Statistics",
            "",
            f"Total Characters: {self.total():,}",
            "",
        ]
        for category in _SUMMARY_ORDER:
            lines.append(
                f"{category.summary_label}: {self.count(category):,} chars "
                f"({self.percent(category):.1f}%)"
            )
        return "\n".join(lines) + "\n"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = self.record.model_dump()
        data["total_chars"] = self.total()
        data["percent"] = {c.value: round(self.percent(c), 1) for c in Category}
        return data

    # --- Persistence ---

    def load(self) -> LoadResult:
        """Hydrate counters from disk. Never raises and never creates the file.

        A corrupt or unreadable file resets all counters to zero.
        """
        result = load_record(self.path)
        if result.status is LoadStatus.MISSING:
            logger.debug("No stats file at %s; starting from zero", self.path)
        elif not result.ok:
            logger.warning(
                "Error loading stats from %s (%s): %s; counters reset to zero",
                self.path,
                result.status.value,
                result.error,
            )
        else:
            logger.debug("Loaded stats from %s", self.path)
        self.record = result.record
        return result

    def save(self) -> SaveResult:
        """Write counters to disk. Failures are logged, never raised."""
        result = save_record(self.path, self.record)
        if not result.ok:
            logger.warning("Error saving stats to %s: %s", self.path, result.error)
        return result
