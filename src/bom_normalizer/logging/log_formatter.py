"""
Log formatters that surface normalization context.

The normalizers attach context to their records through ``extra``, e.g.
the target spec version or the number of dependency edges dropped from
the graph. Both formatters here render those fields next to the message.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Tuple

# Record attributes set by the normalizers and serializers via ``extra``
CONTEXT_FIELDS: Tuple[str, ...] = ("spec_version", "output_format", "component", "dropped_edges")


def record_context(record: logging.LogRecord, fields: Iterable[str] = CONTEXT_FIELDS) -> Dict[str, Any]:
    """Collect the context fields present on a record, in field order."""
    context = {}
    for name in fields:
        value = getattr(record, name, None)
        if value is not None:
            context[name] = value
    return context


class StructuredFormatter(logging.Formatter):
    """
    Formatter writing one JSON object per record.

    Context fields become top-level keys, so a log pipeline can filter
    e.g. on ``spec_version`` or sum ``dropped_edges`` without parsing
    the message text.
    """

    def __init__(self, fields: Iterable[str] = CONTEXT_FIELDS):
        super().__init__()
        self.fields = tuple(fields)

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: Dict[str, Any] = {
            "time": created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(record_context(record, self.fields))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


class ContextFormatter(logging.Formatter):
    """
    Plain-text formatter that appends context fields as ``key=value``.

    Example:
        ``... - DEBUG - Dropped 2 dependency edges [spec_version=1.4 dropped_edges=2]``
    """

    def __init__(self, fmt: str, fields: Iterable[str] = CONTEXT_FIELDS):
        super().__init__(fmt)
        self.fields = tuple(fields)

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        context = record_context(record, self.fields)
        if not context:
            return formatted
        rendered = " ".join(f"{key}={value}" for key, value in context.items())
        return f"{formatted} [{rendered}]"
