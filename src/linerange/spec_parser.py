"""Parser for the line range mini-language.

Grammar (one term per comma-separated chunk)::

    term   := [ bound [ sep bound ] ] [ '/' step ]
    bound  := ['+' | '-'] DIGITS
    sep    := '..' | '-' | '+'
    step   := DIGITS

Whitespace is allowed around bounds, separators and the step slash.  An
empty spec selects every line.

Public API:

* ``parse_spec(text)`` — parse into a ``ParseResult`` (never raises).
* ``parse_spec_or_raise(text)`` — same, but raises ``RangeSpecSyntaxError``.
* ``RangeDescriptor`` — one normalized ``(low, high, step)`` term.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal, TypeAlias

ErrorCode: TypeAlias = Literal["invalid_term_syntax", "zero_line_number", "invalid_step"]

# ---------------------------------------------------------------------------
# Descriptor
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RangeDescriptor:
    """One normalized range term.

    ``low``/``high`` are nonzero line numbers: positive counts from the
    start (1 = first line), negative from the end (-1 = last line).

    Normalization:

    * both positive: ``low <= high``
    * both negative: ``low`` is the bound nearer the end (``low >= high``)
    * mixed: ``low`` is the positive bound, ``high`` the negative one

    The step phase is always counted from ``low``.
    """

    low: int
    high: int
    step: int = 1

    def __post_init__(self) -> None:
        if self.low == 0 or self.high == 0:
            raise ValueError(f"line numbers must be nonzero, got {self.low}..{self.high}")
        if self.step < 1:
            raise ValueError(f"step must be >= 1, got {self.step}")
        if self.low > 0 and self.high > 0 and self.low > self.high:
            raise ValueError(f"positive bounds must be ordered, got {self.low}..{self.high}")
        if self.low < 0 and self.high < 0 and self.low < self.high:
            raise ValueError(f"negative bounds must be ordered, got {self.low}..{self.high}")
        if self.low < 0 < self.high:
            raise ValueError(f"mixed bounds must put the positive one first, got {self.low}..{self.high}")

    @classmethod
    def from_bounds(cls, first: int, second: int, step: int = 1) -> RangeDescriptor:
        """Build a descriptor from two bounds given in any order."""
        if first > 0 and second > 0:
            return cls(min(first, second), max(first, second), step)
        # both negative or mixed: the larger bound leads
        return cls(max(first, second), min(first, second), step)

    @property
    def is_exact(self) -> bool:
        """Both bounds count from the start; resolvable during the scan."""
        return self.low > 0 and self.high > 0

    @property
    def is_end_anchored(self) -> bool:
        return self.low < 0 and self.high < 0

    @property
    def is_open_ended(self) -> bool:
        """Positive start, negative end."""
        return self.low > 0 > self.high

    @property
    def needs_total(self) -> bool:
        return self.high < 0

    def resolve(self, total: int) -> tuple[int, int]:
        """Absolute ``(first, last)`` window for an input of *total* lines.

        The window may fall partly or wholly outside ``1..total``; callers
        clamp.  Resolved bounds are reordered, so ``5..-3`` on six lines is
        the window ``4..5``.
        """
        a = self.low if self.low > 0 else total + self.low + 1
        b = self.high if self.high > 0 else total + self.high + 1
        return (a, b) if a <= b else (b, a)

    def step_position(self, linenum: int, total: int | None = None) -> int:
        """1-based position of *linenum* within the term, counted from ``low``.

        End-anchored terms count backward from the end-nearest bound, so
        *total* is required for them.
        """
        if self.low > 0:
            return linenum - self.low + 1
        if total is None:
            raise ValueError("total is required to position an end-anchored term")
        anchor = total + self.low + 1
        return anchor - linenum + 1

    def on_step(self, linenum: int, total: int | None = None) -> bool:
        if self.step == 1:
            return True
        return self.step_position(linenum, total) % self.step == 0

    def selects(self, linenum: int, total: int) -> bool:
        """Whether *linenum* is selected once the input length is known."""
        if linenum < 1 or linenum > total:
            return False
        first, last = self.resolve(total)
        if not first <= linenum <= last:
            return False
        return self.on_step(linenum, total)

    def to_text(self) -> str:
        text = str(self.low) if self.low == self.high else f"{self.low}..{self.high}"
        return text if self.step == 1 else f"{text}/{self.step}"


SELECT_ALL = RangeDescriptor(1, -1, 1)


# ---------------------------------------------------------------------------
# Errors and results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RangeSpecError:
    """Structured parse error naming the offending term."""

    code: ErrorCode
    message: str
    term: str = ""


class RangeSpecSyntaxError(ValueError):
    """Raised by the raising helpers when a spec does not parse."""

    def __init__(self, error: RangeSpecError) -> None:
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of parsing a spec: descriptors on success, an error otherwise."""

    descriptors: tuple[RangeDescriptor, ...]
    error: RangeSpecError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

_TERM_RE = re.compile(
    r"""
    \A\s*
    (?:
        (?P<first>[+-]?\d+)\s*
        (?:(?P<sep>\.\.|-|\+)\s*(?P<second>[+-]?\d+)\s*)?
    )?
    (?:/\s*(?P<step>\d+)\s*)?
    \Z
    """,
    re.VERBOSE,
)

_COMMA_RE = re.compile(r"\s*,\s*")


def _parse_term(term: str) -> RangeDescriptor | RangeSpecError:
    m = _TERM_RE.match(term)
    if m is None or not term.strip():
        return RangeSpecError(
            "invalid_term_syntax",
            f"Invalid line number/range specification '{term}'",
            term,
        )

    step = int(m.group("step")) if m.group("step") is not None else 1
    if step == 0:
        return RangeSpecError(
            "invalid_step", f"Invalid step 0 in range specification '{term}'", term,
        )

    if m.group("first") is None:
        return RangeDescriptor(SELECT_ALL.low, SELECT_ALL.high, step)

    first = int(m.group("first"))
    sep = m.group("sep")
    if sep is None:
        second = first
    elif sep == "+":
        delta = int(m.group("second"))
        if delta < 0:
            return RangeSpecError(
                "invalid_step",
                f"Negative offset {delta} after '+' in range specification '{term}'",
                term,
            )
        second = first + delta
        # -3+5 runs past the last line; stop at the last line
        if first < 0 and second >= 0:
            second = -1
    else:
        second = int(m.group("second"))

    if first == 0 or second == 0:
        return RangeSpecError(
            "zero_line_number",
            f"Invalid line number 0 in range specification '{term}'",
            term,
        )
    return RangeDescriptor.from_bounds(first, second, step)


def parse_spec(text: str) -> ParseResult:
    """Parse a comma-separated range spec.

    An empty (or all-whitespace) spec selects everything.  The first
    offending term aborts the parse; no partial descriptor list is returned.
    """
    if not text.strip():
        return ParseResult(descriptors=(SELECT_ALL,))

    descriptors: list[RangeDescriptor] = []
    for term in _COMMA_RE.split(text.strip()):
        parsed = _parse_term(term)
        if isinstance(parsed, RangeSpecError):
            return ParseResult(descriptors=(), error=parsed)
        descriptors.append(parsed)
    return ParseResult(descriptors=tuple(descriptors))


def parse_spec_or_raise(text: str) -> tuple[RangeDescriptor, ...]:
    result = parse_spec(text)
    if result.error is not None:
        raise RangeSpecSyntaxError(result.error)
    return result.descriptors
