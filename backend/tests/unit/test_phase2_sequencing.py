# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Phase 2 — Sequencing module tests.
Pure logic — no server or config overrides required.
Tests cover: ordering helpers, search state bookkeeping, the
branch-and-bound sequencer on the example yards, and agreement with
an exhaustive oracle on small random streams.
"""

import random
import time

import pytest


# ─── Helpers ─────────────────────────────────────────────────────────────────

def _oracle(cars: list) -> int:
    """
    Exhaustive reference: try every prepend/append/discard choice.
    Only usable for short streams (3^N leaves).
    """
    best = 0

    def walk(i: int, train: list) -> None:
        nonlocal best
        if any(a < b for a, b in zip(train, train[1:])):
            return
        if i == len(cars):
            best = max(best, len(train))
            return
        walk(i + 1, [cars[i]] + train)
        walk(i + 1, train + [cars[i]])
        walk(i + 1, train)

    walk(0, [])
    return best


def _random_streams(seed: int, count: int, max_len: int = 7) -> list[list[int]]:
    rng = random.Random(seed)
    return [
        [rng.randint(1, 9) for _ in range(rng.randint(1, max_len))]
        for _ in range(count)
    ]


# ─── Assembly Helpers ────────────────────────────────────────────────────────

def test_is_non_increasing():
    from yardsort.modules.sequencing import is_non_increasing

    assert is_non_increasing([])
    assert is_non_increasing([3])
    assert is_non_increasing([5, 5, 4, 1])
    assert not is_non_increasing([5, 6])
    assert not is_non_increasing([9, 4, 4, 7])


def test_fits_front_and_back():
    from collections import deque
    from yardsort.modules.sequencing import fits_back, fits_front

    train = deque([7, 4])
    assert fits_front(train, 7)
    assert fits_front(train, 9)
    assert not fits_front(train, 6)
    assert fits_back(train, 4)
    assert fits_back(train, 1)
    assert not fits_back(train, 5)

    empty = deque()
    assert fits_front(empty, 3)
    assert fits_back(empty, 3)


# ─── Search State ────────────────────────────────────────────────────────────

def test_search_state_starts_unbounded():
    import math
    from yardsort.modules.sequencing import SearchState

    state = SearchState(car_count=4)
    assert math.isinf(state.best_discard_count)
    assert state.found == set()
    assert state.done is False
    assert state.longest_train == 0


def test_search_state_record_improves_and_ties():
    from yardsort.modules.sequencing import SearchState

    state = SearchState(car_count=5)
    state.record([4, 1])
    assert state.best_discard_count == 3
    assert state.solution == (4, 1)

    state.record([6, 4, 1])
    assert state.best_discard_count == 2
    assert state.found == {(6, 4, 1)}

    state.record([6, 5, 1])
    assert state.found == {(6, 4, 1), (6, 5, 1)}
    # First train at the incumbent stays the solution
    assert state.solution == (6, 4, 1)
    assert state.incumbent_history == [3, 2]
    assert state.done is False


def test_search_state_perfect_sets_done():
    from yardsort.modules.sequencing import SearchState

    state = SearchState(car_count=2)
    state.record([2, 1])
    assert state.done is True
    assert state.best_discard_count == 0
    assert state.longest_train == 2


def test_search_state_bound_check():
    from yardsort.modules.sequencing import SearchState

    state = SearchState(car_count=6)
    assert state.is_worse_than_incumbent(position=6, assembly_len=0) is False
    state.record([3, 2, 1, 0])  # incumbent 2
    assert state.is_worse_than_incumbent(position=4, assembly_len=2) is False
    assert state.is_worse_than_incumbent(position=4, assembly_len=1) is True


def test_search_state_deadline():
    from yardsort.api.middleware.error_handler import SearchDeadlineExceeded
    from yardsort.modules.sequencing import SearchState

    state = SearchState(car_count=3, deadline=time.monotonic() - 1.0)
    with pytest.raises(SearchDeadlineExceeded):
        state.visit()

    relaxed = SearchState(car_count=3, deadline=time.monotonic() + 60.0)
    relaxed.visit()
    assert relaxed.nodes_visited == 1


# ─── Sequencer: Example Yards ────────────────────────────────────────────────

@pytest.mark.parametrize(
    "cars, expected",
    [
        ([4, 5, 2, 1], 4),
        ([11, 5, 13, 15, 7, 1, 18, 12, 16, 17], 7),
        ([5, 6, 4, 7, 3, 8, 2, 9, 1, 10], 10),
        (
            [
                31, 19, 17, 4, 10, 37, 42, 35, 15, 43, 45, 30, 39, 9, 21, 33, 25,
                3, 47, 41, 50, 18, 11, 26, 28,
            ],
            12,
        ),
        ([42], 1),
        ([3, 3, 3], 3),
        ([1, 2, 3, 4, 5], 5),
    ],
)
def test_sequencer_example_yards(cars, expected):
    from yardsort.modules.sequencing import longest_train
    assert longest_train(cars) == expected


def test_sequencer_can_discard_first_car():
    from yardsort.modules.sequencing import Sequencer

    # Keeping the 1 caps the train at 4; dropping it allows 7, 6, 5, 4, 3
    seq = Sequencer()
    assert seq.search([1, 5, 4, 6, 3, 7]) == 5
    assert seq.solution == (7, 6, 5, 4, 3)


def test_sequencer_with_declared_count():
    from yardsort.modules.sequencing import Sequencer
    assert Sequencer().search([4, 5, 2, 1], declared_count=4) == 4


def test_sequencer_rejects_before_search():
    from yardsort.api.middleware.error_handler import InvalidInputError
    from yardsort.modules.sequencing import Sequencer

    seq = Sequencer()
    with pytest.raises(InvalidInputError):
        seq.search([4, 5, 2, 1], declared_count=5)
    with pytest.raises(InvalidInputError):
        seq.search([])
    assert seq.state is None
    assert seq.solution == ()


def test_sequencer_accepts_car_stream():
    from yardsort.modules.sequencing import Sequencer, parse_framed
    assert Sequencer().search(parse_framed([4, 4, 5, 2, 1])) == 4


# ─── Sequencer: Properties ───────────────────────────────────────────────────

def test_perfect_stream_stops_at_depth_n():
    from yardsort.modules.sequencing import Sequencer

    cars = [9, 7, 7, 3, 1]
    seq = Sequencer()
    assert seq.search(cars) == 5
    assert seq.state.done is True
    assert seq.state.best_discard_count == 0
    # One node per position 0..N, nothing explored after the perfect train
    assert seq.state.nodes_visited == len(cars) + 1
    assert seq.solution == (9, 7, 7, 3, 1)


def test_result_matches_incumbent_and_solution():
    from yardsort.modules.sequencing import Sequencer, is_non_increasing

    cars = [11, 5, 13, 15, 7, 1, 18, 12, 16, 17]
    seq = Sequencer()
    length = seq.search(cars)

    state = seq.state
    assert 0 <= length <= len(cars)
    assert length == len(cars) - state.best_discard_count
    assert len(seq.solution) == length
    assert is_non_increasing(seq.solution)
    assert seq.solution in seq.found
    for train in seq.found:
        assert len(train) == length
        assert is_non_increasing(train)


def test_solution_is_subsequence_of_cars():
    from collections import Counter
    from yardsort.modules.sequencing import Sequencer

    cars = [11, 5, 13, 15, 7, 1, 18, 12, 16, 17]
    seq = Sequencer()
    seq.search(cars)
    assert not Counter(seq.solution) - Counter(cars)


def test_incumbent_never_regresses():
    from yardsort.modules.sequencing import Sequencer

    for cars in _random_streams(seed=7, count=25, max_len=9):
        seq = Sequencer()
        seq.search(cars)
        history = seq.state.incumbent_history
        assert history, cars
        assert all(a > b for a, b in zip(history, history[1:])), history
        assert history[-1] == seq.state.best_discard_count


def test_search_is_deterministic():
    from yardsort.modules.sequencing import Sequencer

    cars = [11, 5, 13, 15, 7, 1, 18, 12, 16, 17]
    first, second = Sequencer(), Sequencer()
    assert first.search(cars) == second.search(cars)
    assert first.solution == second.solution
    assert first.state.nodes_visited == second.state.nodes_visited


def test_fresh_state_per_search():
    from yardsort.modules.sequencing import Sequencer

    seq = Sequencer()
    seq.search([5, 6, 4, 7, 3, 8, 2, 9, 1, 10])
    first_state = seq.state
    assert seq.search([1, 5, 4, 6, 3, 7]) == 5
    assert seq.state is not first_state
    assert seq.state.done is False


def test_pruning_counters_move():
    from yardsort.modules.sequencing import Sequencer

    seq = Sequencer()
    seq.search([11, 5, 13, 15, 7, 1, 18, 12, 16, 17])
    assert seq.state.pruned_by_order > 0
    assert seq.state.pruned_by_bound > 0


def test_float_cars():
    from yardsort.modules.sequencing import longest_train
    assert longest_train([2.5, 3.75, 1.0, 0.5]) == 4


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_matches_exhaustive_oracle(seed):
    from yardsort.modules.sequencing import longest_train

    for cars in _random_streams(seed=seed, count=40):
        assert longest_train(cars) == _oracle(cars), cars


def test_sequencer_deadline_aborts():
    from yardsort.api.middleware.error_handler import SearchDeadlineExceeded
    from yardsort.modules.sequencing import Sequencer

    rng = random.Random(0)
    long_yard = [rng.randint(1, 1000) for _ in range(80)]
    seq = Sequencer(deadline_seconds=0.05)
    with pytest.raises(SearchDeadlineExceeded):
        seq.search(long_yard)


# ─── Example Driver ──────────────────────────────────────────────────────────

def test_driver_only_skips_fifty_car_yard():
    import importlib.util
    from pathlib import Path

    script = Path(__file__).resolve().parents[2] / "scripts" / "run_examples.py"
    spec = importlib.util.spec_from_file_location("run_examples", script)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    slow = [raw[0] for raw, _, long_running in module.EXAMPLES if long_running]
    assert slow == [50]
    assert all(raw[0] == len(raw) - 1 for raw, _, _ in module.EXAMPLES)
