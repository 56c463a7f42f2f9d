"""
Guess model and the single-line parser.

A line looks like `<word> [<count>]`:
  - word  : one or more ASCII letters (case is kept)
  - count : optional digits, the number of positions at which `word` agrees
            with the hidden target

Examples:
  parse_guess("apple")    -> Guess("apple", None)    # candidate
  parse_guess("angle 2")  -> Guess("angle", 2)       # clue
  parse_guess("cat3")     -> Guess("cat", 3)         # whitespace is optional
  parse_guess("123")      -> ParseGuessError
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .errors import ParseGuessError

# Searched for anywhere in the line; the first match wins. ASCII classes only.
GUESS_RE = re.compile(r"(?P<word>[A-Za-z]+)\s*(?P<count>[0-9]*)", re.ASCII)
ASCII_SPACE = " \t\n\v\f\r"


@dataclass(frozen=True)
class Guess:
    word: str
    count: Optional[int] = None

    @property
    def is_clue(self) -> bool:
        """A guess with a declared match count is a clue; otherwise a candidate."""
        return self.count is not None


def parse_guess(line: str, strict: bool = False) -> Guess:
    """
    Parse one input line into a Guess.

    In the default mode the pattern only has to occur somewhere in the line,
    so trailing text after `word [count]` is ignored. With `strict=True` the
    whole line (surrounding whitespace aside) must be `word [count]`.

    Raises:
      ParseGuessError if no word can be found, or the count exceeds the
      word's length.
    """
    if strict:
        m = GUESS_RE.fullmatch(line.strip(ASCII_SPACE))
    else:
        m = GUESS_RE.search(line)
    if m is None:
        raise ParseGuessError(line, "wrong guess format")

    word = m.group("word")
    digits = m.group("count")
    if not digits:
        return Guess(word)

    # Longer than any number up to len(word): reject before converting.
    if len(digits.lstrip("0")) > len(str(len(word))):
        raise ParseGuessError(line, "count is longer than the word")
    count = int(digits.lstrip("0") or "0")
    if count > len(word):
        raise ParseGuessError(line, "count is longer than the word")
    return Guess(word, count)
