"""
Loading and validating a whole guess list.

All-or-nothing: the first bad line aborts the load, and the collection as a
whole must be non-empty and of one word length. The first guess in input
order fixes the expected length.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Iterable, List, Union

from wordmatch.datasets.io import read_text, split_lines

from .errors import InputReadError, NoGuessesError, UnequalLengthsError
from .guess import Guess, parse_guess

log = logging.getLogger(__name__)


def parse_guesses(lines: Iterable[str], strict: bool = False) -> List[Guess]:
    """Parse every line in order; a ParseGuessError stops the whole load."""
    return [parse_guess(line, strict=strict) for line in lines]


def validate_guesses(guesses: List[Guess]) -> List[Guess]:
    """
    Check the collection invariants and return it unchanged.

    Raises:
      NoGuessesError      : the list is empty
      UnequalLengthsError : some word's length differs from the first one's
    """
    if not guesses:
        raise NoGuessesError()

    expected = len(guesses[0].word)
    for g in guesses[1:]:
        if len(g.word) != expected:
            raise UnequalLengthsError(expected, g.word)
    return guesses


def load_guesses(source: Union[IO[str], Path, str], strict: bool = False) -> List[Guess]:
    """Read all of `source`, then parse and validate its lines."""
    try:
        text = read_text(source)
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(e) from e
    lines = split_lines(text)
    log.debug(f"Read {len(lines)} line(s)")

    guesses = validate_guesses(parse_guesses(lines, strict=strict))
    log.debug(f"Parsed {len(guesses)} guess(es) of length {len(guesses[0].word)}")
    return guesses
