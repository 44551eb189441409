import pytest

from ingredient_safety.similarity import edit_distance, similarity


@pytest.mark.parametrize("word", ["", "a", "glycerin", "sodium lauryl sulfate"])
def test_identical_strings_are_fully_similar(word):
    assert similarity(word, word) == 1.0


def test_empty_strings():
    assert similarity("", "") == 1.0
    assert similarity("abc", "") == 0.0
    assert similarity("", "abc") == 0.0


def test_edit_distance_classic_case():
    assert edit_distance("kitten", "sitting") == 3
    assert edit_distance("sitting", "kitten") == 3


def test_similarity_uses_longer_length():
    assert similarity("kitten", "sitting") == pytest.approx(4 / 7)
    assert similarity("sitting", "kitten") == pytest.approx(4 / 7)


def test_single_typo():
    assert similarity("glycerine", "glycerin") == pytest.approx(8 / 9)


@pytest.mark.parametrize("a,b,expected", [
    ("zinc oxxxe", "zinc oxide", 0.8),
    ("vitamin x", "vitamin e", 8 / 9),
    ("abc", "", 0.0),
])
def test_similarity_ratio_matches_max_length_formula(a, b, expected):
    assert similarity(a, b) == pytest.approx(expected)
    assert similarity(b, a) == pytest.approx(expected)
