"""Single forward pass over a line stream.

Start-anchored descriptors are evaluated as each line arrives.  Open-ended
ones (positive ``low``, negative ``high``) are evaluated optimistically,
since the true end is unknown until the stream is exhausted; the
reconciler corrects them afterwards using the trailing buffer.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from linerange.planner import RangePlan
from linerange.spec_parser import RangeDescriptor
from linerange.trailing_buffer import TrailingBuffer

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ScanState:
    """Everything the reconciler needs once the stream has ended."""

    buffer: TrailingBuffer
    result: dict[int, str] = field(default_factory=dict)
    total_lines: int = 0
    stopped_at_ceiling: bool = False

    @property
    def buffer_start(self) -> int:
        """Absolute line number of the oldest buffered line."""
        return self.buffer.start_line(self.total_lines)


def scan_lines(
    descriptors: Sequence[RangeDescriptor],
    plan: RangePlan,
    lines: Iterable[str],
) -> ScanState:
    """Consume *lines* once, filling the provisional result and the buffer.

    With a bounded ceiling the loop stops right after the ceiling line, so
    no further line is pulled from *lines*.  Errors raised by the iterator
    propagate unchanged.
    """
    state = ScanState(buffer=TrailingBuffer(plan.buffer_capacity))
    live = tuple(d for d in descriptors if d.low > 0)
    ceiling = plan.scan_ceiling
    buffering = plan.buffer_capacity > 0

    linenum = 0
    for line in lines:
        linenum += 1
        if buffering:
            state.buffer.push(line)
        for d in live:
            if linenum < d.low:
                continue
            if d.high > 0 and linenum > d.high:
                continue
            if d.on_step(linenum):
                state.result[linenum] = line
        if ceiling is not None and linenum >= ceiling:
            state.stopped_at_ceiling = True
            break

    state.total_lines = linenum
    if state.stopped_at_ceiling:
        log.debug("Stopped reading at line %d (ceiling)", linenum)
    else:
        log.debug(
            "Read %d lines, %d selected provisionally, %d buffered",
            linenum, len(state.result), len(state.buffer),
        )
    return state
