#!/usr/bin/env python3
"""
Script to show the first-pass annotation of a text.

Prints every token with its <A>, <E> and <S> markers, so the effect of an
abbreviation list on a piece of text can be inspected by hand.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

# Add the parent directory to the path so we can import punktcore
script_dir = Path(__file__).parent
root_dir = script_dir.parent.parent
sys.path.append(str(root_dir))

from punktcore import PunktBase, PunktParameters, token_pairs
from punktcore.exceptions import EmptyInputError


def annotate_text(text: str, abbreviations: List[str], show_flags: bool = False) -> List[str]:
    """
    Annotate text and render one line per token.

    Args:
        text: The text to annotate
        abbreviations: Known abbreviations, without their final period
        show_flags: Also show paragraph-start and line-start flags

    Returns:
        The rendered lines
    """
    params = PunktParameters()
    params.update_abbreviations(abbreviations)
    result = PunktBase(oracle=params).annotate(text, strict=False)

    lines = []
    try:
        pairs = token_pairs(result.tokens)
    except EmptyInputError:
        return lines

    for current, following in pairs:
        line = str(current)
        if show_flags:
            flags = "".join(
                mark for mark, on in (("P", current.parastart), ("L", current.linestart)) if on
            )
            line = f"{line:<24} {flags:<2} -> {following.tok if following else '<end>'}"
        lines.append(line)
    for index, error in result.failures:
        lines.append(f"! token {index}: {error}")
    return lines


def main(argv: Optional[List[str]] = None) -> None:
    """Annotate a text file or standard input."""
    parser = argparse.ArgumentParser(description="Show punktcore first-pass annotation for a text")
    parser.add_argument("file", type=str, nargs="?", help="Text file to annotate (default: stdin)")
    parser.add_argument(
        "--abbrev", "-a", action="append", default=[], help="A known abbreviation (repeatable)"
    )
    parser.add_argument(
        "--flags", "-f", action="store_true", help="Show paragraph/line-start flags and the next token"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.file:
        text = Path(args.file).read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    for line in annotate_text(text, args.abbrev, show_flags=args.flags):
        print(line)


if __name__ == "__main__":
    try:
        main()
    except BrokenPipeError:
        # Python flushes standard streams on exit; redirect remaining output
        # to /dev/null to avoid another BrokenPipeError at shutdown
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(0)
