# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
YardSort — Modules
Public API for the sequencing stage.
"""

from yardsort.modules.sequencing import (
    Sequencer,
    longest_train,
    parse_framed,
    validate_stream,
)

__all__ = [
    "Sequencer",
    "longest_train",
    "parse_framed",
    "validate_stream",
]
