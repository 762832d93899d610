from __future__ import annotations

import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


class ContextFormatter(logging.Formatter):
    """Plain-text formatter that appends ``extra={...}`` fields as key=value pairs."""

    # Attributes populated by logging.LogRecord itself
    _RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self._RESERVED and not key.startswith("_")
        }
        if not extra:
            return line
        return line + " " + " ".join(f"{key}={value}" for key, value in extra.items())


def configure_logging(level: str = "INFO") -> None:
    """Install one stdout handler on the root logger (idempotent)."""

    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(ContextFormatter(_FORMAT))

    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    root.addHandler(handler)
    logging.captureWarnings(True)

    _configured = True
