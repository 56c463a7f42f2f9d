"""
Candidate filtering given positional-match clues.

Given:
  - clues      : guesses with a declared count (letters in the right place)
  - candidates : guesses without a count (words still under consideration)

Return:
  - candidate words whose positional-match count against EVERY clue equals
    the clue's declared count, in input order.

The comparison is exact: same character at the same index. It is not a
multiset count, so "abc" vs "cab" has 0 matches.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

from .guess import Guess


def positional_matches(a: str, b: str) -> int:
    """
    Number of indices i where a[i] == b[i].

    Examples:
      positional_matches("apple", "apply") -> 4
      positional_matches("cat", "dog")     -> 0
    """
    if len(a) != len(b):
        raise ValueError(f"words must have equal length: {a!r} vs {b!r}")
    return sum(1 for x, y in zip(a, b) if x == y)


def split_guesses(guesses: Iterable[Guess]) -> Tuple[List[Guess], List[Guess]]:
    """Partition into (clues, candidates), keeping input order in each."""
    clues: List[Guess] = []
    candidates: List[Guess] = []
    for g in guesses:
        (clues if g.is_clue else candidates).append(g)
    return clues, candidates


def _encode(words: Sequence[str], n: int) -> np.ndarray:
    # Words are ASCII letters after parsing: one byte per character.
    buf = "".join(words).encode("ascii")
    return np.frombuffer(buf, dtype=np.uint8).reshape(len(words), n)


def match_matrix(candidates: Sequence[str], clues: Sequence[str]) -> np.ndarray:
    """
    Positional-match counts for every (candidate, clue) pair.

    Returns an int array of shape (len(candidates), len(clues)); entry [i, j]
    equals positional_matches(candidates[i], clues[j]). All words must share
    one length.
    """
    words = list(candidates) + list(clues)
    n = len(words[0]) if words else 0
    if any(len(w) != n for w in words):
        raise ValueError("all words must have equal length")

    cand = _encode(candidates, n)
    clue = _encode(clues, n)
    # (c, 1, n) == (1, k, n) -> (c, k, n), summed over positions
    return (cand[:, None, :] == clue[None, :, :]).sum(axis=2)


def filter_candidates(guesses: Iterable[Guess]) -> List[str]:
    """
    Keep only candidate words consistent with every clue.

    Args:
      guesses : validated guesses (all of one word length), clues and
                candidates intermixed

    Returns:
      List[str] of consistent candidate words (order preserved).
      With no clues every candidate is returned.
    """
    clues, candidates = split_guesses(guesses)
    words = [g.word for g in candidates]
    if not clues or not words:
        return words

    counts = np.array([g.count for g in clues])
    matches = match_matrix(words, [g.word for g in clues])
    keep = (matches == counts[None, :]).all(axis=1)
    return [w for w, k in zip(words, keep) if k]
