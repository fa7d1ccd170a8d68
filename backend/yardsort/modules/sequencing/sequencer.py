# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
YardSort — Branch-and-Bound Sequencer
Finds the longest non-increasing train that can be assembled from an
incoming car stream when each car, in arrival order, is attached to the
front of the train, attached to the back, or discarded to a siding.

Search order at every node:
  1. Stop      — done flag set (perfect train already found) or deadline hit
  2. Perfect   — train uses all N cars: record it, raise done, stop
  3. Bound     — cars discarded so far exceed the incumbent: prune
  4. Leaf      — every car decided: record the train, tighten the incumbent
  5. Branch    — prepend, then append, then discard the next car

The ordering cut is applied when branching. Every train on the recursion
path is already non-increasing, so an insertion only has to be compared
with the car it lands next to; a car that would break the order is not
explored. On an empty train prepend and append build the same train, so
only the prepend branch is taken.

The train is a single deque mutated in place and restored on return.
Worst case is still a ternary tree of depth N: this is an exhaustive
search with pruning, not a polynomial algorithm.
"""

from __future__ import annotations

import time
from collections import deque
from typing import Any, Optional, Sequence, Union

from yardsort.config import get_settings
from yardsort.models.train import Car, CarStream
from yardsort.modules.sequencing.assembly import fits_back, fits_front
from yardsort.modules.sequencing.search_state import SearchState
from yardsort.modules.sequencing.stream_validator import validate_stream
from yardsort.utils.logger import get_logger

log = get_logger(__name__)


class Sequencer:
    """
    Runs one branch-and-bound search per call to search().
    Each call builds a fresh SearchState; the last one stays readable
    through state, solution and found for verification.
    """

    def __init__(self, deadline_seconds: Optional[float] = None) -> None:
        self.deadline_seconds = deadline_seconds
        self._state: Optional[SearchState] = None

    @classmethod
    def from_settings(cls) -> Sequencer:
        return cls(deadline_seconds=get_settings().search_deadline_seconds)

    # ─── Public API ──────────────────────────────────────────────────────────

    def search(
        self,
        cars: Union[CarStream, Sequence[Any]],
        declared_count: Optional[int] = None,
    ) -> int:
        """
        Return the length of the longest assembly for the stream.

        Args:
            cars:           A validated CarStream, or raw cars in arrival order.
            declared_count: Optional count header for raw cars.

        Raises:
            InvalidInputError:      Stream empty, malformed, or count mismatch.
            SearchDeadlineExceeded: A deadline was set and ran out.
        """
        stream = cars if isinstance(cars, CarStream) else validate_stream(cars, declared_count)

        deadline = None
        if self.deadline_seconds is not None:
            deadline = time.monotonic() + self.deadline_seconds

        state = SearchState(car_count=len(stream), deadline=deadline)
        self._state = state

        log.debug("search_start", car_count=state.car_count, deadline_s=self.deadline_seconds)
        self._explore(0, deque(), stream.cars, state)

        log.info(
            "search_complete",
            car_count=state.car_count,
            longest_train=state.longest_train,
            perfect=state.done,
            nodes_visited=state.nodes_visited,
            pruned_by_order=state.pruned_by_order,
            pruned_by_bound=state.pruned_by_bound,
        )
        return state.longest_train

    @property
    def state(self) -> Optional[SearchState]:
        return self._state

    @property
    def solution(self) -> tuple[Car, ...]:
        """First assembly recorded at the final incumbent."""
        return self._state.solution if self._state is not None else ()

    @property
    def found(self) -> set[tuple[Car, ...]]:
        return self._state.found if self._state is not None else set()

    # ─── Recursion ───────────────────────────────────────────────────────────

    def _explore(
        self,
        position: int,
        train: deque[Car],
        cars: tuple[Car, ...],
        state: SearchState,
    ) -> None:
        if state.done:
            return
        state.visit()

        n = state.car_count

        # Zero discards cannot be beaten; must run before the bound check
        if len(train) == n:
            state.record(train)
            return

        if state.is_worse_than_incumbent(position, len(train)):
            state.pruned_by_bound += 1
            return

        if position == n:
            state.record(train)
            return

        car = cars[position]

        if fits_front(train, car):
            train.appendleft(car)
            self._explore(position + 1, train, cars, state)
            train.popleft()
        else:
            state.pruned_by_order += 1

        if train:
            if fits_back(train, car):
                train.append(car)
                self._explore(position + 1, train, cars, state)
                train.pop()
            else:
                state.pruned_by_order += 1

        self._explore(position + 1, train, cars, state)


def longest_train(
    cars: Sequence[Any],
    declared_count: Optional[int] = None,
) -> int:
    """Convenience wrapper: one fresh Sequencer, one search, no deadline."""
    return Sequencer().search(cars, declared_count)
