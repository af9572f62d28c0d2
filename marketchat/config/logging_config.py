import logging
import sys
from contextvars import ContextVar
from logging.handlers import RotatingFileHandler
from pathlib import Path
from marketchat.config.settings import Config

NO_CORRELATION_ID = "NO Correlation ID"

# Set per request by CorrelationIdMiddleware; asyncio tasks inherit a copy
correlation_id_var: ContextVar[str] = ContextVar(
    "correlation_id", default=NO_CORRELATION_ID
)

NOISY_LOGGERS = ("prisma", "prisma.engine", "httpx", "httpcore", "asyncio", "uvicorn.access")


class CorrelationIdFilter(logging.Filter):
    """Stamps every record with the current request's correlation ID."""

    def filter(self, record):
        record.correlation_id = correlation_id_var.get()
        return True


class SafeFormatter(logging.Formatter):
    """Records emitted through handlers without the filter still format."""

    def format(self, record):
        if not hasattr(record, "correlation_id"):
            record.correlation_id = NO_CORRELATION_ID
        return super().format(record)


def _attach(root: logging.Logger, handler: logging.Handler, formatter: logging.Formatter):
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())
    root.addHandler(handler)


_configured = False


def setup_logging(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """
    Configure process-wide logging once; later calls are no-ops.

    The root logger stays at WARNING so third-party chatter is dropped, and
    only the `marketchat` tree logs at `level`.
    """
    global _configured
    root = logging.getLogger()
    if _configured:
        return root

    root.setLevel(logging.WARNING)
    formatter = SafeFormatter(Config.LOG_FORMAT)
    _attach(root, logging.StreamHandler(sys.stdout), formatter)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        _attach(
            root,
            RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5),
            formatter,
        )

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.getLogger("marketchat").setLevel(
        getattr(logging, level.upper(), logging.INFO)
    )
    _configured = True
    logging.getLogger(__name__).info(f"Logging is set up: level={level}, log_file={log_file}")

    return root
