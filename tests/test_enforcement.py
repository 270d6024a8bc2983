import numpy as np
import pytest

from antiword.enforcement import EnforcementMap


def test_starts_full():
    em = EnforcementMap()
    assert em.as_array().shape == (5, 26)
    assert np.all(em.as_array())
    assert len(em.legal_letters(3)) == 26


def test_collapse_and_forbid():
    em = EnforcementMap()
    em.forbid(0, "Q")
    em.collapse_column_to(1, "R")

    assert not em.is_legal(0, "Q")
    assert em.is_legal(0, "R")
    assert em.legal_letters(1) == ["R"]
    assert np.sum(em.as_array()) == 25 + 1 + 3 * 26


def test_forbidden_letters_stay_forbidden():
    em = EnforcementMap()
    em.forbid(2, "E")
    before = em.as_array()
    em.forbid(2, "T")
    em.collapse_column_to(4, "S")
    after = em.as_array()
    # nothing that was illegal became legal again
    assert not np.any(after & ~before)


def test_is_legal_rejects_bad_input():
    em = EnforcementMap()
    assert em.is_legal(5, "A") is False
    assert em.is_legal(-1, "A") is False
    assert em.is_legal(0, "a") is False
    assert em.is_legal(0, "AB") is False


def test_out_of_range_column_raises():
    em = EnforcementMap()
    with pytest.raises(IndexError):
        em.forbid(5, "A")
    with pytest.raises(IndexError):
        em.collapse_column_to(-1, "A")


def test_as_array_is_a_copy():
    em = EnforcementMap()
    arr = em.as_array()
    arr[:] = False
    assert em.is_legal(0, "A")
