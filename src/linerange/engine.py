"""Line range selection entry points.

Ties the pieces together::

    spec text -> parse_spec -> plan_ranges -> scan_lines -> reconcile -> assemble

Public API:

* ``select(spec, lines)`` — tagged ``SelectResult``; never raises on a bad spec.
* ``select_lines(spec, lines)`` — list of lines, raises ``RangeSpecSyntaxError``.
* ``select_from_path(spec, path)`` — ``select`` over a text file read lazily.
* ``assemble`` / ``assemble_numbered`` — ordered output from a result set.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from linerange.planner import plan_ranges
from linerange.reconciler import reconcile
from linerange.selector import scan_lines
from linerange.spec_parser import (
    RangeDescriptor,
    RangeSpecError,
    RangeSpecSyntaxError,
    parse_spec,
)

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SelectResult:
    """Outcome of one selection run.

    On failure ``error`` is set and every other field is empty; partial
    output never accompanies an error.
    """

    lines: tuple[str, ...] = ()
    line_numbers: tuple[int, ...] = ()
    error: RangeSpecError | None = None
    total_lines: int = 0
    stopped_at_ceiling: bool = False

    @property
    def ok(self) -> bool:
        """True if the spec parsed and the input was processed."""
        return self.error is None

    def numbered(self) -> list[tuple[int, str]]:
        return list(zip(self.line_numbers, self.lines, strict=True))


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------

def assemble_numbered(result: Mapping[int, str]) -> list[tuple[int, str]]:
    """``(linenum, line)`` pairs in ascending line order."""
    return [(linenum, result[linenum]) for linenum in sorted(result)]


def assemble(result: Mapping[int, str]) -> list[str]:
    return [line for _, line in assemble_numbered(result)]


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

def select_descriptors(
    descriptors: tuple[RangeDescriptor, ...],
    lines: Iterable[str],
) -> SelectResult:
    """Run the scan and reconciliation for already-parsed descriptors."""
    plan = plan_ranges(descriptors)
    state = scan_lines(descriptors, plan, lines)
    result = reconcile(state, descriptors)
    pairs = assemble_numbered(result)
    return SelectResult(
        lines=tuple(line for _, line in pairs),
        line_numbers=tuple(linenum for linenum, _ in pairs),
        total_lines=state.total_lines,
        stopped_at_ceiling=state.stopped_at_ceiling,
    )


def select(spec: str, lines: Iterable[str]) -> SelectResult:
    """Select the lines of *lines* named by *spec*, in input order.

    The spec is parsed before the first line is pulled, so a bad spec
    leaves *lines* untouched.
    """
    parsed = parse_spec(spec)
    if parsed.error is not None:
        log.debug("Rejected spec %r: %s", spec, parsed.error.message)
        return SelectResult(error=parsed.error)
    return select_descriptors(parsed.descriptors, lines)


def select_lines(spec: str, lines: Iterable[str]) -> list[str]:
    result = select(spec, lines)
    if result.error is not None:
        raise RangeSpecSyntaxError(result.error)
    return list(result.lines)


def select_from_path(spec: str, path: Path, *, encoding: str = "utf-8") -> SelectResult:
    """``select`` over a text file, keeping each line's own terminator."""
    parsed = parse_spec(spec)
    if parsed.error is not None:
        return SelectResult(error=parsed.error)
    with open(path, encoding=encoding, errors="surrogateescape", newline="") as f:
        return select_descriptors(parsed.descriptors, f)
