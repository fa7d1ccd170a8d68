# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
YardSort — POST /sort + POST /sort/framed
Accepts an incoming car stream and returns the longest train that can
be assembled from it. Handlers are plain def so the CPU-bound search
runs in the threadpool rather than on the event loop.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from yardsort.core.sort_service import run_framed_sort, run_sort
from yardsort.dependencies import SequencerDep
from yardsort.models.train import FramedSortRequest, SortRequest, SortResult
from yardsort.utils.logger import get_logger

router = APIRouter(tags=["sort"])
log = get_logger(__name__)


@router.post(
    "/sort",
    response_model=SortResult,
    status_code=status.HTTP_200_OK,
    summary="Find the longest assemblable train",
    description=(
        "Cars arrive in list order. Each may be attached to the front or back "
        "of the outgoing train, or discarded. Returns the longest "
        "non-increasing train and one assembly that achieves it."
    ),
)
def sort_cars(body: SortRequest, sequencer: SequencerDep) -> SortResult:
    log.debug("sort_request_received", car_count=len(body.cars))
    return run_sort(body.cars, body.declared_count, sequencer=sequencer)


@router.post(
    "/sort/framed",
    response_model=SortResult,
    status_code=status.HTTP_200_OK,
    summary="Sort a framed car stream",
    description="Same as POST /sort, but raw[0] is the declared car count.",
)
def sort_framed(body: FramedSortRequest, sequencer: SequencerDep) -> SortResult:
    log.debug("framed_sort_request_received", raw_len=len(body.raw))
    return run_framed_sort(body.raw, sequencer=sequencer)
