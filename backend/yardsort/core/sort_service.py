# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
YardSort — Sort Service
Runs one sequencing request end to end: opens a request log context,
validates the stream, searches it with a Sequencer and packages the
outcome as a SortResult.

Validation and deadline errors propagate to the caller; the API layer
maps them to HTTP responses.
"""

from __future__ import annotations

import time
from typing import Any, Callable, Optional, Sequence

import structlog

from yardsort.models.train import CarStream, SortResult
from yardsort.modules.sequencing import Sequencer, parse_framed, validate_stream
from yardsort.utils.logger import get_logger, request_context

log = get_logger(__name__)


def run_sort(
    cars: Sequence[Any],
    declared_count: Optional[int] = None,
    sequencer: Optional[Sequencer] = None,
) -> SortResult:
    """Validate unframed cars and search them."""
    return _run(lambda: validate_stream(cars, declared_count), sequencer)


def run_framed_sort(
    raw: Sequence[Any],
    sequencer: Optional[Sequencer] = None,
) -> SortResult:
    """Validate framed input (count header first) and search it."""
    return _run(lambda: parse_framed(raw), sequencer)


def _run(
    load_stream: Callable[[], CarStream],
    sequencer: Optional[Sequencer],
) -> SortResult:
    with request_context():
        stream = load_stream()
        seq = sequencer or Sequencer.from_settings()

        with structlog.contextvars.bound_contextvars(car_count=len(stream)):
            log.info("sort_start", deadline_s=seq.deadline_seconds)
            t0 = time.perf_counter()
            length = seq.search(stream)
            elapsed_ms = (time.perf_counter() - t0) * 1000.0

            state = seq.state
            result = SortResult(
                car_count=len(stream),
                longest_train=length,
                discarded=len(stream) - length,
                assembly=list(seq.solution),
                perfect=state.done,
                nodes_visited=state.nodes_visited,
                elapsed_ms=round(elapsed_ms, 3),
            )
            log.info(
                "sort_complete",
                longest_train=result.longest_train,
                discarded=result.discarded,
                elapsed_ms=result.elapsed_ms,
            )
            return result
