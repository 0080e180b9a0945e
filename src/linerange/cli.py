"""Print selected line ranges of a file or standard input.

Usage:
    # Lines 1 to 10
    linerange 1-10 notes.txt

    # Fifth line to the third last, read from stdin
    cat notes.txt | linerange '5..-3'

    # Every other line of the last 20, as JSON ('--' lets a spec start with '-')
    linerange --json -- '-1..-20/2' notes.txt
"""
from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import orjson

from linerange import __version__
from linerange.engine import SelectResult, select, select_from_path
from linerange.examples import EXAMPLES, SPEC_DESCRIPTION, SUMMARY

log = logging.getLogger("linerange")


def dump_json(obj: object) -> None:
    sys.stdout.buffer.write(orjson.dumps(obj, option=orjson.OPT_INDENT_2))
    sys.stdout.buffer.write(b"\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linerange",
        description=SUMMARY + ".",
        epilog=SPEC_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "spec",
        nargs="?",
        default=None,
        help="Line range specification (e.g. '1-10', '-5..-1', '2..-1/3').",
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        default=None,
        help="Input file. Reads standard input when omitted or '-'.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit a JSON document with line numbers instead of raw lines.",
    )
    parser.add_argument(
        "--number",
        "-n",
        action="store_true",
        help="Prefix each output line with its line number and a tab.",
    )
    parser.add_argument(
        "--examples",
        action="store_true",
        help="Show example specifications and exit.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _print_examples() -> None:
    for example in EXAMPLES:
        spec = repr(example.spec)
        print(f"  {spec:<14} {example.summary}")


def _write_lines(result: SelectResult, *, number: bool) -> None:
    out = sys.stdout
    for linenum, line in result.numbered():
        if number:
            out.write(f"{linenum}\t")
        out.write(line)
    out.flush()


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    if args.examples:
        _print_examples()
        return 0
    if args.spec is None:
        parser.error("the following arguments are required: spec")

    if args.file is None or str(args.file) == "-":
        log.debug("Reading standard input")
        result = select(args.spec, sys.stdin)
    else:
        if not args.file.is_file():
            print(f"Error: input file not found: {args.file}", file=sys.stderr)
            return 1
        result = select_from_path(args.spec, args.file)

    if result.error is not None:
        print(f"Error: {result.error.message}", file=sys.stderr)
        return 1

    log.debug(
        "Selected %d of %d lines read%s",
        len(result.lines),
        result.total_lines,
        " (stopped early)" if result.stopped_at_ceiling else "",
    )
    if args.json:
        dump_json({
            "spec": args.spec,
            "total_lines": result.total_lines,
            "stopped_at_ceiling": result.stopped_at_ceiling,
            "lines": [{"line": n, "text": text} for n, text in result.numbered()],
        })
    else:
        _write_lines(result, number=args.number)
    return 0


if __name__ == "__main__":
    sys.exit(main())
