"""Tests for linerange.engine — end-to-end selection."""
from __future__ import annotations

import itertools
from collections.abc import Iterator
from pathlib import Path

import pytest

from linerange import (
    RangeSpecSyntaxError,
    SelectResult,
    assemble,
    assemble_numbered,
    select,
    select_from_path,
    select_lines,
)
from linerange.examples import EXAMPLES, SpecExample


def _lines(n: int) -> list[str]:
    return [f"line {i}\n" for i in range(1, n + 1)]


def _numbers(spec: str, n: int) -> list[int]:
    result = select(spec, _lines(n))
    assert result.ok, result.error
    return list(result.line_numbers)


class TestAssemble:
    def test_ascending_order(self) -> None:
        assert assemble({3: "c", 1: "a", 2: "b"}) == ["a", "b", "c"]

    def test_numbered(self) -> None:
        assert assemble_numbered({10: "x", 2: "y"}) == [(2, "y"), (10, "x")]

    def test_empty(self) -> None:
        assert assemble({}) == []


class TestSelect:
    def test_overlapping_terms_not_duplicated(self) -> None:
        assert _numbers("1-10,5-15", 20) == list(range(1, 16))

    def test_output_in_stream_order(self) -> None:
        assert _numbers("-1,5,1", 10) == [1, 5, 10]

    def test_empty_spec_selects_everything(self) -> None:
        result = select("", _lines(7))
        assert list(result.lines) == _lines(7)

    def test_every_third_line(self) -> None:
        assert _numbers("/3", 9) == [3, 6, 9]

    def test_step_anchored_at_low(self) -> None:
        assert _numbers("2..-1/3", 9) == [4, 7]

    def test_single_line_short_input(self) -> None:
        result = select("3", _lines(2))
        assert result.ok
        assert result.lines == ()

    def test_single_line(self) -> None:
        assert _numbers("3", 5) == [3]

    def test_lines_are_returned_verbatim(self) -> None:
        source = ["a\r\n", "b\n", "c"]
        assert list(select("2..-1", source).lines) == ["b\n", "c"]

    def test_empty_input(self) -> None:
        result = select("-3..-1", [])
        assert result.ok
        assert result.lines == ()
        assert result.total_lines == 0

    def test_numbered_pairs(self) -> None:
        result = select("2,4", _lines(5))
        assert result.numbered() == [(2, "line 2\n"), (4, "line 4\n")]

    def test_infinite_stream_with_positive_ranges(self) -> None:
        source = (f"line {n}\n" for n in itertools.count(1))
        result = select("1-3,100", source)
        assert result.line_numbers == (1, 2, 3, 100)
        assert result.stopped_at_ceiling

    @pytest.mark.parametrize("spec", ["0", "3..0", "1,x", "/0", "3+-2"])
    def test_parse_error_is_a_value(self, spec: str) -> None:
        result = select(spec, _lines(5))
        assert not result.ok
        assert result.error is not None
        assert result.lines == ()
        assert result.line_numbers == ()

    def test_parse_error_consumes_nothing(self) -> None:
        pulled: list[int] = []

        def source() -> Iterator[str]:
            for n in range(1, 4):
                pulled.append(n)
                yield f"line {n}\n"

        result = select("0", source())
        assert result.error is not None
        assert result.error.code == "zero_line_number"
        assert pulled == []

    def test_select_lines_raises(self) -> None:
        with pytest.raises(RangeSpecSyntaxError):
            select_lines("1..", _lines(3))

    def test_select_lines(self) -> None:
        assert select_lines("-1", _lines(3)) == ["line 3\n"]

    def test_result_defaults(self) -> None:
        result = SelectResult()
        assert result.ok
        assert result.numbered() == []


class TestSelectFromPath:
    def test_reads_file_preserving_terminators(self, tmp_path: Path) -> None:
        path = tmp_path / "input.txt"
        path.write_bytes(b"one\r\ntwo\nthree\r\nfour")
        result = select_from_path("2..-1", path)
        assert list(result.lines) == ["two\n", "three\r\n", "four"]
        assert result.total_lines == 4

    def test_bad_spec_does_not_open_file(self, tmp_path: Path) -> None:
        result = select_from_path("x", tmp_path / "missing.txt")
        assert result.error is not None
        assert result.error.code == "invalid_term_syntax"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            select_from_path("1", tmp_path / "missing.txt")


class TestDocumentedExamples:
    @pytest.mark.parametrize("example", EXAMPLES, ids=lambda e: e.spec or "<empty>")
    def test_example_selects_documented_lines(self, example: SpecExample) -> None:
        result = select(example.spec, example.sample_input())
        assert result.ok, result.error
        assert result.line_numbers == example.expected
