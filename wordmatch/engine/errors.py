"""
Error kinds raised while turning input lines into a validated guess list.

Every kind derives from WordMatchError so the CLI can catch them in one
place and report `str(err)` as a single line on stderr.
"""

from __future__ import annotations


class WordMatchError(Exception):
    """Base class for every fatal input error."""


class ParseGuessError(WordMatchError):
    def __init__(self, line: str, detail: str) -> None:
        super().__init__(line, detail)
        self.line = line
        self.detail = detail

    def __str__(self) -> str:
        return f'parsing guess error: cannot parse line "{self.line}" into Guess: {self.detail}'


class NoGuessesError(WordMatchError):
    def __str__(self) -> str:
        return "no guesses were given"


class UnequalLengthsError(WordMatchError):
    def __init__(self, expected: int, word: str) -> None:
        super().__init__(expected, word)
        self.expected = expected
        self.word = word

    def __str__(self) -> str:
        return (
            f'guess "{self.word}" has length {len(self.word)}, '
            f"expected {self.expected} like the first guess"
        )


class InputReadError(WordMatchError):
    def __init__(self, cause: Exception) -> None:
        super().__init__(cause)
        self.cause = cause

    def __str__(self) -> str:
        return f"IO error: {self.cause}"
