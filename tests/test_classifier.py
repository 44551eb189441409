import pytest

from ingredient_safety.classifier import (
    calculate_default_score,
    common_use,
    default_concern,
    ingredient_function,
    parse_score,
    safety_level,
)
from ingredient_safety.models import SafetyLevel


@pytest.mark.parametrize("text,expected", [
    ("Score: 7/10", 7),
    ("This is a low risk ingredient", 2),
    ("Average hazard", 5),
    ("Potentially dangerous", 8),
    ("Score: 15", 10),
    ("0", 1),
    (7, 7),
    ("3-4", 3),
])
def test_parse_score(text, expected):
    assert parse_score(text) == expected


@pytest.mark.parametrize("text", ["", "   ", None, "not rated", "n/a"])
def test_parse_score_absent(text):
    assert parse_score(text) is None


def test_parse_score_prefers_low_keyword_first():
    assert parse_score("low to high") == 2


@pytest.mark.parametrize("name,expected", [
    ("Methylparaben", 8),
    ("lead acetate", 8),
    ("peg-100 stearate", 5),
    ("fragrance", 5),
    ("water", 2),
    ("glycerin", 2),
    ("green tea", 1),
    ("jojoba oil", 1),
    ("unknownium", 5),
])
def test_calculate_default_score(name, expected):
    assert calculate_default_score(name) == expected


@pytest.mark.parametrize("score,level", [
    (1, SafetyLevel.LOW),
    (2, SafetyLevel.LOW),
    (3, SafetyLevel.MODERATE),
    (6, SafetyLevel.MODERATE),
    (7, SafetyLevel.HIGH),
    (10, SafetyLevel.HIGH),
])
def test_safety_level_bands(score, level):
    assert safety_level(score) is level


def test_safety_level_label():
    assert SafetyLevel.HIGH.label == "High Concern"


def test_default_concern_bands():
    assert default_concern(1).startswith("Generally recognized as safe")
    assert default_concern(5).startswith("Moderate safety concerns")
    assert default_concern(9).startswith("High safety concerns")


@pytest.mark.parametrize("name,expected", [
    ("Methylparaben", "Preservative"),
    ("Fragrance", "Fragrance"),
    # "sodium" is a surfactant keyword, checked before anything else matches
    ("sodium chloride", "Surfactant"),
    ("Disodium EDTA", "Surfactant"),
    ("tocopherol", "Antioxidant"),
    ("water", "Other/Unknown"),
])
def test_ingredient_function(name, expected):
    assert ingredient_function(name) == expected


@pytest.mark.parametrize("name,expected", [
    ("glycerin", "Moisturizing agent"),
    ("xanthan gum", "Thickening agent"),
    ("Avobenzone", "Sun protection"),
    ("water", "Various applications"),
])
def test_common_use(name, expected):
    assert common_use(name) == expected
