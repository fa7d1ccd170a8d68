# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
YardSort — FastAPI Dependencies
Per-request providers injected into route handlers via Depends().
A Sequencer holds the state of a single search, so every request
gets its own instance; nothing is shared between requests.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from yardsort.modules.sequencing import Sequencer


def get_sequencer() -> Sequencer:
    """
    FastAPI dependency: a fresh Sequencer configured from Settings.

    Usage in a route:
        @router.post("/sort")
        def sort(body: SortRequest, sequencer: SequencerDep):
            ...
    """
    return Sequencer.from_settings()


# Annotated type alias for clean route signatures
SequencerDep = Annotated[Sequencer, Depends(get_sequencer)]
