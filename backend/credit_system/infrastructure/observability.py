"""Credit API logging — one line per event, keyed by customer and credit.

Invariants:
    - Every line carries ts, level, logger and event
    - Context passed through `extra=` (customer_id, credit_code, error_code, path,
      service) is copied onto the line when set; everything else in `extra` is ignored
    - "text" format appends the same context as key=value pairs
"""

import json
import logging
from datetime import datetime, timezone


CONTEXT_KEYS = ("service", "customer_id", "credit_code", "error_code", "path")


def log_context(record: logging.LogRecord) -> dict:
    """Known context attached to a record, JSON-safe."""
    context = {}
    for key in CONTEXT_KEYS:
        value = getattr(record, key, None)
        if value is None:
            continue
        context[key] = value if isinstance(value, (bool, int, float)) else str(value)
    return context


class CreditJSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        line = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
            **log_context(record),
        }
        if record.exc_info:
            line["exc"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False)


class CreditTextFormatter(logging.Formatter):
    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        pairs = " ".join(f"{k}={v}" for k, v in log_context(record).items())
        return f"{text} [{pairs}]" if pairs else text


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Route every logger through a single stderr handler in the chosen format."""
    handler = logging.StreamHandler()
    handler.setFormatter(CreditJSONFormatter() if fmt == "json" else CreditTextFormatter())
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.getLevelNamesMapping().get(level.upper(), logging.INFO))
