"""structlog setup for the quote server.

Every record, whether it comes from structlog or a stdlib logger (uvicorn,
httpx, asyncio), goes through one stdout handler and one renderer.
"""

import logging
import sys

import structlog

SERVICE_NAME = "quote_server"

# Third-party loggers capped at WARNING. uvicorn.access duplicates the
# pipeline's request_completed event; httpx logs every TestClient call.
QUIET_LOGGERS = ("uvicorn.access", "httpx")


def _tag_event(logger: logging.Logger, method_name: str, event_dict: dict) -> dict:
    event_dict.setdefault("service", SERVICE_NAME)
    if "logger" in event_dict:
        event_dict["module"] = event_dict.pop("logger")
    return event_dict


def _pre_chain() -> list[structlog.types.Processor]:
    """Processors shared by structlog events and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _tag_event,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def _stdout_handler(json_format: bool) -> logging.Handler:
    renderer: structlog.types.Processor
    if json_format:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def setup_logging(log_level: str = "info", json_format: bool = True) -> None:
    """Configure structlog and the root logger.

    JSON lines when ``json_format`` is set, colored console output otherwise.
    Safe to call more than once; the root handler is replaced each time.
    """
    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    root.handlers[:] = [_stdout_handler(json_format)]
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
