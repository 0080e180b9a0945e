"""Static documentation for the range spec: summary, grammar notes, examples.

Plain constants only; ``linerange --examples`` prints them and the test
suite checks every example against the engine.
"""
from __future__ import annotations

from dataclasses import dataclass

SUMMARY = "Retrieve line ranges from a text stream in a single pass"

SPEC_DESCRIPTION = """\
A comma-separated list of line numbers ("N") or line ranges ("N1..N2" or
"N1-N2", or "N1+M" which means N2 is set to N1+M), where N, N1, and N2 are
line numbers. Line numbers begin at 1; a negative number counts from the end
(-1 is the last line, -2 the second last, and so on). N1..N2 is the same as
N2..N1. Any term may end with "/S" to keep only every S-th line of the range,
counted from its first bound; a bare "/S" applies to the whole input. An
empty spec selects every line.
"""


@dataclass(frozen=True, slots=True)
class SpecExample:
    """One documented spec with the lines it selects from ``sample_input``."""

    spec: str
    summary: str
    line_count: int = 10
    expected: tuple[int, ...] = ()

    def sample_input(self) -> list[str]:
        return [f"line {n}\n" for n in range(1, self.line_count + 1)]


EXAMPLES: tuple[SpecExample, ...] = (
    SpecExample("3", "Third line", expected=(3,)),
    SpecExample("1-5", "Lines 1 to 5", expected=(1, 2, 3, 4, 5)),
    SpecExample("1 .. 5", "Lines 1 to 5, '..' is a synonym for '-'", expected=(1, 2, 3, 4, 5)),
    SpecExample("5..1", "N1..N2 is the same as N2..N1", expected=(1, 2, 3, 4, 5)),
    SpecExample("1-2, 8 - 9", "Lines 1-2 as well as 8-9", expected=(1, 2, 8, 9)),
    SpecExample("3+0", "N1+M means N1..(N1+M); third line only", expected=(3,)),
    SpecExample("3+2", "Third to fifth line", expected=(3, 4, 5)),
    SpecExample("-3+2", "Third last to last line", expected=(8, 9, 10)),
    SpecExample("-3+1", "Third last to second last line", expected=(8, 9)),
    SpecExample("-5..-1", "Fifth last to last line", expected=(6, 7, 8, 9, 10)),
    SpecExample("-1..-5", "Fifth last to last line, either order", expected=(6, 7, 8, 9, 10)),
    SpecExample("5..-3", "Fifth line to third last", expected=(5, 6, 7, 8)),
    SpecExample("-3..5", "Fifth line to third last, either order", expected=(5, 6, 7, 8)),
    SpecExample("/3", "Every third line", line_count=9, expected=(3, 6, 9)),
    SpecExample("2..-1/3", "Every third line from line 2 onward", line_count=9, expected=(4, 7)),
    SpecExample("-1..-6/2", "Every second line counting back from the end", expected=(5, 7, 9)),
    SpecExample("1-10,5-15", "Overlapping ranges select each line once", line_count=20,
                expected=tuple(range(1, 16))),
    SpecExample("", "Empty spec selects everything", line_count=4, expected=(1, 2, 3, 4)),
)
