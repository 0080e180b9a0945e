"""Scan planning: trailing-buffer capacity and early-exit ceiling."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from linerange.spec_parser import RangeDescriptor

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RangePlan:
    """How a scan must behave for a given descriptor list.

    ``scan_ceiling`` is the last line any descriptor can select when every
    descriptor counts from the start; ``None`` means the whole stream must
    be read.
    """

    buffer_capacity: int
    scan_ceiling: int | None
    exact: tuple[RangeDescriptor, ...]
    deferred: tuple[RangeDescriptor, ...]

    @property
    def can_exit_early(self) -> bool:
        return self.scan_ceiling is not None


def buffer_capacity_for(descriptors: Sequence[RangeDescriptor]) -> int:
    """Largest magnitude of any negative bound, 0 when there is none."""
    capacity = 0
    for d in descriptors:
        for bound in (d.low, d.high):
            if bound < 0:
                capacity = max(capacity, -bound)
    return capacity


def plan_ranges(descriptors: Sequence[RangeDescriptor]) -> RangePlan:
    exact = tuple(d for d in descriptors if d.is_exact)
    deferred = tuple(d for d in descriptors if not d.is_exact)

    ceiling: int | None = None
    if exact and not deferred:
        ceiling = max(d.high for d in exact)

    plan = RangePlan(
        buffer_capacity=buffer_capacity_for(descriptors),
        scan_ceiling=ceiling,
        exact=exact,
        deferred=deferred,
    )
    log.debug(
        "Planned %s: buffer=%d ceiling=%s",
        ",".join(d.to_text() for d in descriptors),
        plan.buffer_capacity,
        plan.scan_ceiling,
    )
    return plan
