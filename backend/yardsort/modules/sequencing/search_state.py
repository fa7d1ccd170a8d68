# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
YardSort — Search State
Mutable context shared by every call of one branch-and-bound search.
Passed explicitly through the recursion; created fresh per search and
never reused across car streams.
"""

from __future__ import annotations

import math
import time
from typing import Iterable, Optional

from yardsort.api.middleware.error_handler import SearchDeadlineExceeded
from yardsort.models.train import Car


class SearchState:
    """
    Incumbent bound, retained assemblies and the early-stop flag,
    plus counters used for diagnostics and tests.
    """

    def __init__(self, car_count: int, deadline: Optional[float] = None) -> None:
        self.car_count = car_count
        # Fewest discards of any complete assembly so far; unbounded until the first leaf
        self.best_discard_count: float = math.inf
        # Assemblies recorded at the current incumbent
        self.found: set[tuple[Car, ...]] = set()
        self.solution: tuple[Car, ...] = ()
        self.done = False
        # time.monotonic() value after which the search aborts
        self.deadline = deadline

        self.nodes_visited = 0
        self.pruned_by_order = 0
        self.pruned_by_bound = 0
        self.incumbent_history: list[int] = []

    def visit(self) -> None:
        """Count a node and enforce the deadline, if one is set."""
        self.nodes_visited += 1
        if self.deadline is not None and time.monotonic() > self.deadline:
            raise SearchDeadlineExceeded(
                f"search aborted after {self.nodes_visited} nodes with "
                f"incumbent discard count {self.best_discard_count}"
            )

    def discarded(self, position: int, assembly_len: int) -> int:
        return position - assembly_len

    def is_worse_than_incumbent(self, position: int, assembly_len: int) -> bool:
        return self.discarded(position, assembly_len) > self.best_discard_count

    def record(self, assembly: Iterable[Car]) -> None:
        """
        Record a complete assembly. Improving the incumbent resets the
        retained set; a tie is added to it. A zero-discard assembly
        also raises the done flag.
        """
        train = tuple(assembly)
        discarded = self.car_count - len(train)

        if discarded < self.best_discard_count:
            self.best_discard_count = discarded
            self.incumbent_history.append(discarded)
            self.found = {train}
            self.solution = train
        elif discarded == self.best_discard_count:
            self.found.add(train)

        if discarded == 0:
            self.done = True

    @property
    def longest_train(self) -> int:
        if math.isinf(self.best_discard_count):
            return 0
        return self.car_count - int(self.best_discard_count)
