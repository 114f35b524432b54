import json as _json
import logging
import sys
from typing import Any, Dict

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonLinesFormatter(logging.Formatter):
    """One JSON object per record, for piping `sct` logs into other tools."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return _json.dumps(payload, ensure_ascii=False)


def resolve_level(verbose: bool | None = None, quiet: bool | None = None) -> int:
    """WARNING by default, DEBUG with verbose, ERROR with quiet (quiet wins)."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def setup_logging(
    *, json_logs: bool = False, verbose: bool | None = None, quiet: bool | None = None
) -> None:
    """Configure root logging on stderr.

    Command output (summaries, JSON) goes to stdout, so logs never mix into
    it. Load/save problems show up at the default level; --verbose adds the
    per-declaration and load/save trail.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(resolve_level(verbose, quiet))

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(JsonLinesFormatter() if json_logs else logging.Formatter(PLAIN_FORMAT))
    root.addHandler(handler)
