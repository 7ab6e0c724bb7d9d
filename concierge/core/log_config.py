import logging

# Structured fields passed through `extra=` by the application and adapters.
CONTEXT_KEYS = ("session_id", "step", "slot", "reason", "first_date", "days")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ContextFormatter(logging.Formatter):
    """Appends the known context fields of a record as `key=value` pairs."""

    def __init__(self, fmt: str | None = LOG_FORMAT, keys: tuple[str, ...] = CONTEXT_KEYS) -> None:
        super().__init__(fmt)
        self._keys = keys

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        context = " ".join(
            f"{key}={getattr(record, key)}" for key in self._keys if getattr(record, key, None) not in (None, "")
        )
        return f"{base} | {context}" if context else base


def configure_logging(level: str = "INFO") -> logging.Handler:
    """Route the root logger through one ContextFormatter handler, replacing earlier ones."""
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)
    return handler
