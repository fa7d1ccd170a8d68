# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
YardSort — Assembly Ordering Helpers
An assembly is the outgoing train under construction, front to back.
It must stay non-increasing: assembly[i] >= assembly[i + 1].
"""

from __future__ import annotations

from collections import deque
from typing import Iterable

from yardsort.models.train import Car


def is_non_increasing(assembly: Iterable[Car]) -> bool:
    """True if every car is >= the car behind it. Empty and single-car trains qualify."""
    prev = None
    for car in assembly:
        if prev is not None and prev < car:
            return False
        prev = car
    return True


def fits_front(assembly: deque[Car], car: Car) -> bool:
    """Whether car can be attached at the front without breaking the order."""
    return not assembly or car >= assembly[0]


def fits_back(assembly: deque[Car], car: Car) -> bool:
    """Whether car can be attached at the back without breaking the order."""
    return not assembly or car <= assembly[-1]
