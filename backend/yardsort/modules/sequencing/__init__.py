# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
YardSort — Sequencing Module
Public API for the branch-and-bound train sequencer.
"""

from yardsort.modules.sequencing.assembly import (
    fits_back,
    fits_front,
    is_non_increasing,
)
from yardsort.modules.sequencing.search_state import SearchState
from yardsort.modules.sequencing.sequencer import Sequencer, longest_train
from yardsort.modules.sequencing.stream_validator import (
    parse_framed,
    validate_stream,
)

__all__ = [
    # Validation
    "validate_stream",
    "parse_framed",
    # Ordering helpers
    "is_non_increasing",
    "fits_front",
    "fits_back",
    # Search
    "SearchState",
    "Sequencer",
    "longest_train",
]
