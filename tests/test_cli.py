"""Tests for the linerange command-line wrapper."""
from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from linerange import __version__
from linerange.cli import build_parser, main


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.txt"
    path.write_text("".join(f"line {n}\n" for n in range(1, 11)))
    return path


class TestBuildParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args(["1-3"])
        assert args.spec == "1-3"
        assert args.file is None
        assert not args.json
        assert not args.number

    def test_negative_spec_after_double_dash(self) -> None:
        args = build_parser().parse_args(["--", "-5..-1", "f.txt"])
        assert args.spec == "-5..-1"
        assert args.file == Path("f.txt")


class TestMain:
    def test_prints_selected_lines(self, sample_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["2-3", str(sample_file)]) == 0
        assert capsys.readouterr().out == "line 2\nline 3\n"

    def test_end_anchored(self, sample_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--", "-2..-1", str(sample_file)]) == 0
        assert capsys.readouterr().out == "line 9\nline 10\n"

    def test_number_prefix(self, sample_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--number", "/5", str(sample_file)]) == 0
        assert capsys.readouterr().out == "5\tline 5\n10\tline 10\n"

    def test_reads_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("a\nb\nc\n"))
        assert main(["2"]) == 0
        assert capsys.readouterr().out == "b\n"

    def test_dash_means_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("a\nb\nc\n"))
        assert main(["--", "-1", "-"]) == 0
        assert capsys.readouterr().out == "c\n"

    def test_json_output(self, sample_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--json", "9-20", str(sample_file)]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["spec"] == "9-20"
        assert payload["total_lines"] == 10
        assert payload["stopped_at_ceiling"] is False
        assert payload["lines"] == [
            {"line": 9, "text": "line 9\n"},
            {"line": 10, "text": "line 10\n"},
        ]

    def test_bad_spec_exits_nonzero(self, sample_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["3..0", str(sample_file)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error:" in captured.err
        assert "'3..0'" in captured.err

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["1", str(tmp_path / "nope.txt")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_missing_spec_is_usage_error(self) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 2

    def test_examples(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--examples"]) == 0
        out = capsys.readouterr().out
        assert "'-3+2'" in out
        assert "Third last to last line" in out

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])
        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out
