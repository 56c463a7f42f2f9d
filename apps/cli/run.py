# apps/cli/run.py
"""
CLI entry point for wordmatch.

This script:
  1) Reads every guess line from stdin (or a file) in one go.
  2) Parses and validates them (non-empty, one word length throughout).
  3) Prints, one per line, the candidate words consistent with every clue.

Input lines look like `<word> [<count>]`; a line with a count is a clue
("this many letters are in the right place"), a line without one is a
candidate. Example:

    $ printf 'apple\nangle 3\nample\n' | python -m apps.cli.run
    apple
    ample

Any input error is reported as a single line on stderr with exit status 1;
nothing is printed on stdout in that case.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from wordmatch import __version__
from wordmatch.engine import WordMatchError, load_guesses, filter_candidates, split_guesses

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="wordmatch: keep candidate words consistent with positional-match clues")
    ap.add_argument("input", nargs="?", default="-",
                    help="file with one guess per line (default: '-' reads stdin)")
    ap.add_argument("--strict", action="store_true",
                    help="reject lines with anything besides `word [count]` "
                         "(default: ignore text after the first match)")
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="log progress to stderr (-vv for debug output)")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )


def run(source, *, strict: bool = False) -> List[str]:
    """
    Load, validate and filter; return the surviving candidate words.
    Raises WordMatchError on any input problem.
    """
    guesses = load_guesses(source, strict=strict)

    clues, candidates = split_guesses(guesses)
    log.info(f"{len(clues)} clue(s), {len(candidates)} candidate(s), "
             f"word length {len(guesses[0].word)}")

    kept = filter_candidates(guesses)
    log.info(f"{len(kept)} candidate(s) consistent with every clue")
    return kept


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, run the filter and print results. Returns the exit status.
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    source = sys.stdin if args.input == "-" else args.input
    try:
        kept = run(source, strict=args.strict)
    except WordMatchError as e:
        sys.stderr.write(f"{e}\n")
        sys.stderr.flush()
        return 1

    for word in kept:
        print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())
