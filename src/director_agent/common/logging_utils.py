from __future__ import annotations

import contextvars
import logging
import os
import sys
import uuid
from typing import Optional, Union

REQUEST_ID_CTX: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="-")


class RequestIdFilter(logging.Filter):
    """Injects request_id into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = REQUEST_ID_CTX.get()
        return True


# chatty client libraries used by the inference backend
QUIET_LOGGERS = ("httpx", "httpcore", "openai")


def setup_logging(level: Union[int, str, None] = None) -> None:
    """Configure application-wide logging with request_id support.

    Level defaults to the LOG_LEVEL environment variable (INFO if unset).
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()

    root = logging.getLogger()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(RequestIdFilter())

    fmt = "%(asctime)s | %(levelname)s | request_id=%(request_id)s | %(name)s | %(message)s"
    handler.setFormatter(logging.Formatter(fmt))

    # Avoid duplicate handlers on reload
    root.handlers = [handler]

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def bind_request_id(incoming: Optional[str]) -> str:
    """Use the caller's X-Request-ID (or a fresh uuid4) for all logs of this request."""
    rid = (incoming or "").strip() or str(uuid.uuid4())
    REQUEST_ID_CTX.set(rid)
    return rid
