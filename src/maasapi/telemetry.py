"""
Structured logging setup and request correlation.

All logging via structlog. Readers only emit events; applications call
setup_logging once to decide where those events go.
"""

import itertools
import logging
import sys
import threading
from typing import Any, List, Optional

import structlog

from maasapi.config import MAASSettings

_request_ids = itertools.count(1)
_request_lock = threading.Lock()


def next_request_id() -> int:
    """Return the next request number, for correlating transport log lines."""
    with _request_lock:
        return next(_request_ids)


def setup_logging(settings: Optional[MAASSettings] = None) -> None:
    """
    Configure structlog on top of stdlib logging.
    """
    if settings is None:
        settings = MAASSettings()

    shared_processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: Any
    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    package_logger = logging.getLogger("maasapi")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))
