# similarity.py -- Levenshtein-based name similarity used for curated lookups
from rapidfuzz.distance import Levenshtein


def edit_distance(a: str, b: str) -> int:
    """Classic Levenshtein distance, unit cost for insert/delete/substitute."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """Return (max_len - edit_distance) / max_len, or 1.0 for two empty strings."""
    return Levenshtein.normalized_similarity(a, b)
