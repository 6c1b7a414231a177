"""
Kernel Logging — structured records for accepted and rejected calls.

Behavioral Contract:
- Kernel modules log through logging.getLogger(__name__) and attach their
  structured fields with call_fields(); only the host calls setup_logging()
- CALL_FIELDS is the closed set of structured keys a kernel record may carry
- JSON lines carry the record's own creation time
"""

import json
import logging
from datetime import datetime, timezone

KERNEL_LOGGER = "vibe_kernel"

CALL_FIELDS = ("caller", "operation", "vibe_id", "amount", "error_code")


def call_fields(**fields) -> dict:
    """The `extra=` mapping for a kernel log call. None values are dropped."""
    unknown = set(fields) - set(CALL_FIELDS)
    if unknown:
        raise ValueError(f"Unknown log fields: {sorted(unknown)}")
    return {k: v for k, v in fields.items() if v is not None}


def _fields_of(record: logging.LogRecord) -> dict:
    return {
        key: getattr(record, key)
        for key in CALL_FIELDS
        if getattr(record, key, None) is not None
    }


class CallJSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(_fields_of(record))
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class CallTextFormatter(logging.Formatter):
    """Plain line with the call fields appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        pairs = " ".join(f"{k}={v}" for k, v in _fields_of(record).items())
        return f"{line} [{pairs}]" if pairs else line


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Attach a stream handler to the kernel's logger tree and return it."""
    handler = logging.StreamHandler()
    handler.setFormatter(CallJSONFormatter() if fmt == "json" else CallTextFormatter())
    kernel_logger = logging.getLogger(KERNEL_LOGGER)
    kernel_logger.addHandler(handler)
    kernel_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
