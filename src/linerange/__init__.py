"""Single-pass line range selection."""

__version__ = "0.1.0"

from linerange.engine import (
    SelectResult,
    assemble,
    assemble_numbered,
    select,
    select_descriptors,
    select_from_path,
    select_lines,
)
from linerange.planner import RangePlan, buffer_capacity_for, plan_ranges
from linerange.reconciler import reconcile
from linerange.selector import ScanState, scan_lines
from linerange.spec_parser import (
    SELECT_ALL,
    ParseResult,
    RangeDescriptor,
    RangeSpecError,
    RangeSpecSyntaxError,
    parse_spec,
    parse_spec_or_raise,
)
from linerange.trailing_buffer import TrailingBuffer

__all__ = [
    "ParseResult",
    "RangeDescriptor",
    "RangePlan",
    "RangeSpecError",
    "RangeSpecSyntaxError",
    "SELECT_ALL",
    "ScanState",
    "SelectResult",
    "TrailingBuffer",
    "__version__",
    "assemble",
    "assemble_numbered",
    "buffer_capacity_for",
    "parse_spec",
    "parse_spec_or_raise",
    "plan_ranges",
    "reconcile",
    "scan_lines",
    "select",
    "select_descriptors",
    "select_from_path",
    "select_lines",
]
