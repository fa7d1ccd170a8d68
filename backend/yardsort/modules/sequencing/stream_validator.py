# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
YardSort — Car Stream Validator
Validates raw car sequences before they reach the sequencer.
Checks emptiness, car types, the optional declared count header,
and the configured stream length limit.

Raises InvalidInputError (subclass of ValueError) on any failure
so the API error handler maps it cleanly to HTTP 422. No search work
happens for a stream that fails here.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from pydantic import ValidationError

from yardsort.api.middleware.error_handler import InvalidInputError
from yardsort.config import get_settings
from yardsort.models.train import CarStream
from yardsort.utils.logger import get_logger

log = get_logger(__name__)


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(p) for p in err.get("loc", ()))
    return f"{loc}: {err['msg']}" if loc else err["msg"]


def _materialise(items: Iterable[Any], label: str) -> tuple:
    """Snapshot any iterable (list, tuple, generator) into a tuple."""
    if items is None:
        raise InvalidInputError(f"The {label} is missing.")
    try:
        return tuple(items)
    except TypeError as exc:
        raise InvalidInputError(
            f"The {label} must be a sequence of numbers, got {type(items).__name__}."
        ) from exc


def validate_stream(
    cars: Iterable[Any],
    declared_count: Optional[int] = None,
) -> CarStream:
    """
    Validate an already-unframed car sequence.

    Checks performed (in order):
      1. Iterable and non-empty
      2. Length within Settings.max_cars
      3. Every car is a finite int or float, declared count matches

    Args:
        cars:           Cars in arrival order; any iterable is accepted.
        declared_count: Optional count header; must equal len(cars).

    Returns:
        Frozen CarStream.

    Raises:
        InvalidInputError: On any validation failure.
    """
    settings = get_settings()
    cars = _materialise(cars, "car stream")

    if not cars:
        raise InvalidInputError("The car stream is empty.")

    if len(cars) > settings.max_cars:
        raise InvalidInputError(
            f"The car stream has {len(cars)} cars, which exceeds the "
            f"maximum of {settings.max_cars}."
        )

    try:
        stream = CarStream(cars=cars, declared_count=declared_count)
    except ValidationError as exc:
        raise InvalidInputError(
            f"The car stream is malformed ({_first_error(exc)})."
        ) from exc

    log.debug("car_stream_validated", car_count=len(stream))
    return stream


def parse_framed(raw: Iterable[Any]) -> CarStream:
    """
    Split framed input into its count header and cars, then validate.
    raw[0] is the declared car count; raw[1:] are the cars.

    Raises:
        InvalidInputError: If raw is empty, the header is not a
        non-negative integer, or it does not match the car count.
    """
    raw = _materialise(raw, "framed input")
    if not raw:
        raise InvalidInputError("Framed input is empty; expected a car count header.")

    header = raw[0]
    if isinstance(header, bool) or not isinstance(header, int) or header < 0:
        raise InvalidInputError(
            f"The car count header must be a non-negative integer, got {header!r}."
        )

    return validate_stream(raw[1:], declared_count=header)
