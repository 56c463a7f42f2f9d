import pytest
from wordmatch.engine import Guess, positional_matches, split_guesses, filter_candidates
from wordmatch.engine.matching import match_matrix


def _guesses(*specs):
    return [Guess(w, c) for w, c in specs]


# --- positional match golden tests ---
@pytest.mark.parametrize("a,b,expected", [
    ("apple", "apply", 4),
    ("apple", "angle", 3),
    ("cat", "dog", 0),
    ("abc", "cab", 0),
    ("level", "level", 5),
    ("Apple", "apple", 4),
])
def test_positional_matches_golden(a, b, expected):
    assert positional_matches(a, b) == expected
    assert positional_matches(b, a) == expected


def test_positional_matches_rejects_unequal_lengths():
    with pytest.raises(ValueError):
        positional_matches("ab", "abc")


def test_match_matrix_agrees_with_pairwise():
    cands = ["crane", "raise", "stare"]
    clues = ["trace", "crane"]
    m = match_matrix(cands, clues)
    assert m.shape == (3, 2)
    for i, c in enumerate(cands):
        for j, k in enumerate(clues):
            assert m[i, j] == positional_matches(c, k)


def test_split_guesses_keeps_order():
    gs = _guesses(("aa", None), ("bb", 1), ("cc", None), ("dd", 0))
    clues, cands = split_guesses(gs)
    assert [g.word for g in clues] == ["bb", "dd"]
    assert [g.word for g in cands] == ["aa", "cc"]


# --- scenarios ---
@pytest.mark.parametrize("specs,expected", [
    ([("apple", None), ("angle", 2)], []),
    ([("apple", None), ("apply", 4)], ["apple"]),
    ([("cat", None), ("dog", 0)], ["cat"]),
    ([("cat", None), ("dog", 2)], []),
])
def test_filter_candidates_scenarios(specs, expected):
    assert filter_candidates(_guesses(*specs)) == expected


def test_filter_candidates_without_clues_returns_all_in_order():
    words = ["slate", "crane", "adieu", "crane"]
    assert filter_candidates([Guess(w) for w in words]) == words


def test_filter_candidates_without_candidates():
    assert filter_candidates(_guesses(("crane", 2))) == []


def test_impossible_clue_empties_result():
    gs = _guesses(("crane", None), ("raise", None), ("stare", None), ("zzzzz", 1))
    assert filter_candidates(gs) == []


def test_full_count_keeps_only_identical_word():
    gs = _guesses(("crane", None), ("crank", None), ("Crane", None), ("crane", 5))
    assert filter_candidates(gs) == ["crane"]


def test_filter_is_idempotent():
    clues = _guesses(("trace", 2), ("slate", 1))
    cands = [Guess(w) for w in ["crane", "raise", "stare", "grace", "brace", "cared"]]
    once = filter_candidates(cands + clues)
    twice = filter_candidates([Guess(w) for w in once] + clues)
    assert twice == once


def test_clues_and_candidates_may_interleave():
    gs = _guesses(("angle", 3), ("apple", None), ("apply", 4), ("ample", None))
    # ample vs apply: a,p,l -> 3, so only apple survives
    assert filter_candidates(gs) == ["apple"]
