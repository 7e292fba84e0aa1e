import logging
import sys
from contextvars import ContextVar
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s"

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class RequestIDFilter(logging.Filter):
    """Stamps each record with the id of the request being served."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "N/A"
        return True


def _gateway_handler(root_logger: logging.Logger) -> Optional[logging.Handler]:
    for handler in root_logger.handlers:
        if any(isinstance(f, RequestIDFilter) for f in handler.filters):
            return handler
    return None


def setup_logging(log_level: str = "INFO") -> None:
    """Install the stdout handler once; later calls only change the level."""
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper())
    if _gateway_handler(root_logger) is not None:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler.addFilter(RequestIDFilter())
    root_logger.addHandler(handler)
