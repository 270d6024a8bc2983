from collections import Counter

import pytest

from antiword.claims import WordClaimIndex
from antiword.enforcement import EnforcementMap
from antiword.feedback import Classification, KeyboardHints, evaluate_guess, score_guess

W = Classification.WRONG_PLACE
R = Classification.RIGHT_PLACE
A = Classification.ABSENT


def test_react_against_crane():
    assert score_guess("REACT", "CRANE") == [W, W, R, W, A]


def test_paper_against_apple_scores_double_p():
    assert score_guess("PAPER", "APPLE") == [W, W, R, W, A]


def test_llama_against_allow_caps_duplicate_letters():
    pattern = score_guess("LLAMA", "ALLOW")
    assert pattern == [W, R, W, A, A]
    non_absent_l = sum(1 for ch, p in zip("LLAMA", pattern) if ch == "L" and p != A)
    assert non_absent_l == 2


def test_exact_match_takes_priority_over_earlier_misplaced_copy():
    # the E at column 4 is exact, so the leading E has nothing left to bind
    assert score_guess("EERIE", "CRANE") == [A, A, W, A, R]


def test_all_right_and_all_absent():
    assert score_guess("crane", "CRANE") == [R] * 5
    assert score_guess("PLUMB", "CRANE") == [A] * 5


@pytest.mark.parametrize(
    "guess,secret",
    [
        ("ALLOT", "TOTAL"),
        ("PRESS", "SPREE"),
        ("ABBEY", "CABIN"),
        ("SISSY", "ASSET"),
        ("GEESE", "EERIE"),
        ("LLAMA", "ALLOW"),
        ("BOOBY", "ROBOT"),
    ],
)
def test_classification_invariants(guess, secret):
    pattern = score_guess(guess, secret)
    for i, p in enumerate(pattern):
        assert (p == R) == (guess[i] == secret[i])
    secret_counts = Counter(secret)
    hits = Counter(ch for ch, p in zip(guess, pattern) if p in (R, W))
    for ch, n in hits.items():
        assert n <= secret_counts[ch]


def test_evaluate_updates_keyboard_and_enforcement():
    claims = WordClaimIndex("CRANE")
    enforcement = EnforcementMap()
    keys = KeyboardHints()

    evaluate_guess("REACT", claims, enforcement, keys)

    assert keys.get("A") == R
    assert keys.get("R") == W
    assert keys.get("T") == A
    assert keys.get("Z") == Classification.UNKNOWN
    assert enforcement.legal_letters(2) == ["A"]
    assert not enforcement.is_legal(0, "R")
    assert not enforcement.is_legal(4, "T")
    assert enforcement.is_legal(0, "T")  # only the guessed column forbids it


def test_right_place_upgrades_misplaced_key():
    claims = WordClaimIndex("CRANE")
    enforcement = EnforcementMap()
    keys = KeyboardHints()

    evaluate_guess("REACT", claims, enforcement, keys)
    assert keys.get("R") == W
    evaluate_guess("BRINE", claims, enforcement, keys)
    assert keys.get("R") == R


def test_misplaced_and_absent_only_replace_unknown():
    keys = KeyboardHints()
    keys.mark_if_unknown("E", W)
    keys.mark_if_unknown("E", A)
    assert keys.get("E") == W
    keys.mark_if_unknown("T", A)
    keys.mark_if_unknown("T", W)
    assert keys.get("T") == A


def test_claims_persist_across_guesses():
    claims = WordClaimIndex("CRANE")
    enforcement = EnforcementMap()
    keys = KeyboardHints()

    first = evaluate_guess("CRONE", claims, enforcement, keys)
    second = evaluate_guess("CRANE", claims, enforcement, keys)

    assert first == [R, R, A, R, R]
    assert second == [R] * 5


def test_evaluate_rejects_wrong_length():
    with pytest.raises(ValueError):
        evaluate_guess("CRAN", WordClaimIndex("CRANE"), EnforcementMap(), KeyboardHints())
