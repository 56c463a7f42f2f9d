from .errors import (
    WordMatchError,
    ParseGuessError,
    NoGuessesError,
    UnequalLengthsError,
    InputReadError,
)
from .guess import Guess, parse_guess
from .matching import positional_matches, split_guesses, filter_candidates
from .validation import parse_guesses, validate_guesses, load_guesses

__all__ = [
    "WordMatchError",
    "ParseGuessError",
    "NoGuessesError",
    "UnequalLengthsError",
    "InputReadError",
    "Guess",
    "parse_guess",
    "positional_matches",
    "split_guesses",
    "filter_candidates",
    "parse_guesses",
    "validate_guesses",
    "load_guesses",
]
