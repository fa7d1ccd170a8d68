# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
YardSort — Structured Logging
structlog setup shared by the API and the example driver, plus the
request context every sort runs inside. Events logged during a sort
carry request_id (and car_count once the stream is validated) without
each module passing them around.
"""

import logging
import sys
import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog
from structlog.types import EventDict, Processor

from yardsort.config import get_settings


def _add_service(
    logger: Any, method: str, event_dict: EventDict
) -> EventDict:
    event_dict["service"] = "yardsort"
    return event_dict


def configure_logging(
    log_level: Optional[str] = None,
    json_output: Optional[bool] = None,
) -> None:
    """
    Configure structlog.

    Args:
        log_level:   DEBUG / INFO / WARNING / ERROR. Defaults to Settings.log_level.
        json_output: JSON lines when True, console rendering when False.
                     Defaults to console at DEBUG and JSON otherwise.
    """
    level_name = (log_level or get_settings().log_level).upper()
    level = getattr(logging, level_name, logging.INFO)
    if json_output is None:
        json_output = level_name != "DEBUG"

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        _add_service,
    ]
    if json_output:
        processors += [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str = "yardsort") -> structlog.BoundLogger:
    """
    Return a structlog bound logger.

    Usage:
        log = get_logger(__name__)
        log.info("search_complete", longest_train=7, nodes_visited=812)
    """
    return structlog.get_logger(name)


@contextmanager
def request_context(**fields: Any) -> Iterator[str]:
    """
    Bind a fresh request_id (plus any extra fields) for one sort and
    restore the previous context on exit. Yields the request_id.

    Usage:
        with request_context() as request_id:
            ...
            with structlog.contextvars.bound_contextvars(car_count=n):
                sequencer.search(stream)
    """
    request_id = uuid.uuid4().hex[:12]
    with structlog.contextvars.bound_contextvars(request_id=request_id, **fields):
        yield request_id
