"""Structured logging for the service layer (structlog over stdlib logging).

Services log key/value events such as ``logger.info("Project created",
project_id=...)``. Context bound with the helpers below (request id, acting
CRM principal and segment) is merged into every event of the current task.
"""

import logging
import sys

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars

# Third-party loggers that are chatty at INFO
_QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg")


def _shared_processors() -> list[structlog.typing.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def setup_logging(debug: bool = False) -> None:
    """Configure structlog for structured logging.

    Args:
        debug: Colored console output at DEBUG level if True; JSON lines at
            INFO level otherwise, with tracebacks rendered into the event.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if debug else logging.INFO,
    )

    processors = _shared_processors()
    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger, usually with ``__name__``."""
    return structlog.get_logger(name)


def bind_request_context(request_id: str | None) -> None:
    """Bind the caller's correlation id; None leaves the context unchanged."""
    if request_id:
        bind_contextvars(request_id=request_id)


def bind_gateway_context(principal: str, segment: str) -> None:
    """Bind the acting CRM principal and segment to subsequent log calls."""
    bind_contextvars(principal=principal, segment=segment)


def clear_request_context() -> None:
    """Clear all request-scoped context."""
    clear_contextvars()
