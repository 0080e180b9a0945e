"""Post-scan correction of descriptors that depend on the input length.

Once the stream has ended the total line count is known, so every
descriptor with a negative bound can be resolved to absolute line numbers.
Corrections only ever touch the trailing-buffer window: outside it the scan
was already exact, because the buffer is at least as large as the largest
negative bound.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

from linerange.selector import ScanState
from linerange.spec_parser import RangeDescriptor

log = logging.getLogger(__name__)


def reconcile(state: ScanState, descriptors: Sequence[RangeDescriptor]) -> dict[int, str]:
    """Fix up ``state.result`` in place and return it.

    Stage A drops provisional selections in the buffer window that no
    descriptor keeps once resolved.  Stage B adds every buffer-window line a
    deferred descriptor selects, stepping from the descriptor's ``low``.
    """
    deferred = [d for d in descriptors if d.needs_total]
    total = state.total_lines
    if not deferred or not len(state.buffer):
        return state.result

    window_start = max(state.buffer_start, 1)
    window_end = total

    # Stage A
    removed = 0
    for linenum in range(window_start, window_end + 1):
        if linenum not in state.result:
            continue
        if any(d.selects(linenum, total) for d in descriptors):
            continue
        del state.result[linenum]
        removed += 1

    # Stage B
    added = 0
    for d in deferred:
        first, last = d.resolve(total)
        first = max(first, window_start)
        last = min(last, window_end)
        for linenum in range(first, last + 1):
            if not d.on_step(linenum, total):
                continue
            if linenum not in state.result:
                added += 1
            state.result[linenum] = state.buffer.line_at(linenum, total)

    log.debug(
        "Reconciled lines %d..%d of %d: removed=%d added=%d",
        window_start, window_end, total, removed, added,
    )
    return state.result
