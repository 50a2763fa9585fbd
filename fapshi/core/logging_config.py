"""
Structlog logging configuration.

Nothing here runs on import: the host application decides whether the
library's output goes through this setup by calling ``configure_logging``.
"""
import json
import logging
from typing import Any, List, Optional

import structlog
from structlog.contextvars import merge_contextvars
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, add_log_level
from structlog.stdlib import ProcessorFormatter

from fapshi.core.config import FapshiSettings, get_settings


def get_renderer(settings: FapshiSettings) -> Any:
    """Console renderer by default, JSON when ``log_json`` is set.

    structlog passes ``default``/``sort_keys`` through to the serializer.
    """
    if not settings.log_json:
        return ConsoleRenderer(colors=False)

    def _dumps(obj, default=None, **kwargs):
        return json.dumps(obj, ensure_ascii=False, default=default, **kwargs)
    return JSONRenderer(serializer=_dumps)


LIBRARY_LOGGER = "fapshi"


def configure_logging(settings: Optional[FapshiSettings] = None, logger_name: str = LIBRARY_LOGGER) -> None:
    """Configure structlog and attach a rendering handler to ``logger_name``.

    Only that logger is touched (``propagate`` is switched off so records are
    not rendered twice); the host application's root handlers are left alone.
    Pass ``logger_name=""`` to route the root logger through the same chain.
    """
    settings = settings or get_settings()
    timestamper = TimeStamper(fmt="iso")

    shared_pre_chain: List[Any] = [
        merge_contextvars,
        add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            *shared_pre_chain,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    formatter = ProcessorFormatter(
        foreign_pre_chain=shared_pre_chain,
        processors=[
            ProcessorFormatter.remove_processors_meta,
            get_renderer(settings),
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    target = logging.getLogger(logger_name or None)
    target.handlers.clear()
    target.addHandler(handler)
    target.setLevel(logging.DEBUG if settings.debug else settings.log_level)
    if logger_name:
        target.propagate = False


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger."""
    return structlog.get_logger(name)
