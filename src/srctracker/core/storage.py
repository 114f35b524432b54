"""
JSON persistence for the statistics record.

`load_record` and `save_record` never raise and never log. They report what
happened as `LoadResult` / `SaveResult` values and leave the decision about
logging or ignoring a failure to the caller (see `StatsAggregator`).

The record is a Pydantic model so that a file holding negative or
non-integer counters is rejected as corrupt rather than partially applied.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, NonNegativeInt, ValidationError


class StatsRecord(BaseModel):
    """The three cumulative character counters."""

    # Files written by the Visual Studio extension use PascalCase keys and also
    # carry derived totals/percentages, which are ignored.
    manual_chars: NonNegativeInt = Field(
        default=0, validation_alias=AliasChoices("manual_chars", "ManualChars")
    )
    copied_chars: NonNegativeInt = Field(
        default=0, validation_alias=AliasChoices("copied_chars", "CopyChars")
    )
    ai_chars: NonNegativeInt = Field(default=0, validation_alias=AliasChoices("ai_chars", "AiChars"))

    model_config = ConfigDict(extra="ignore", validate_assignment=True)


class LoadStatus(str, Enum):
    LOADED = "loaded"
    MISSING = "missing"
    CORRUPT = "corrupt"
    UNREADABLE = "unreadable"


@dataclass
class LoadResult:
    status: LoadStatus
    path: Path
    record: StatsRecord = field(default_factory=StatsRecord)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status in (LoadStatus.LOADED, LoadStatus.MISSING)


@dataclass
class SaveResult:
    ok: bool
    path: Path
    error: Optional[str] = None


def load_record(path: Path) -> LoadResult:
    """Read a record from `path` without creating anything on disk.

    A missing file and a file containing JSON `null` both yield zeroed
    counters; anything unparsable yields a zeroed record with status CORRUPT.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (FileNotFoundError, NotADirectoryError):
        return LoadResult(LoadStatus.MISSING, path)
    except UnicodeDecodeError as e:
        return LoadResult(LoadStatus.CORRUPT, path, error=str(e))
    except OSError as e:
        return LoadResult(LoadStatus.UNREADABLE, path, error=str(e))

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return LoadResult(LoadStatus.CORRUPT, path, error=f"invalid JSON: {e}")

    if data is None:
        return LoadResult(LoadStatus.LOADED, path)
    if not isinstance(data, dict):
        return LoadResult(
            LoadStatus.CORRUPT, path, error=f"expected a JSON object, got {type(data).__name__}"
        )
    try:
        record = StatsRecord.model_validate(data)
    except ValidationError as e:
        return LoadResult(LoadStatus.CORRUPT, path, error=str(e))
    return LoadResult(LoadStatus.LOADED, path, record=record)


def save_record(path: Path, record: StatsRecord) -> SaveResult:
    """Write `record` as indented JSON, creating parent directories."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(record.model_dump(), indent=2)
        path.write_text(payload + "\n", encoding="utf-8")
    except OSError as e:
        return SaveResult(False, path, error=str(e))
    return SaveResult(True, path)
