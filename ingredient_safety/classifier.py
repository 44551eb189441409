# classifier.py -- pattern/keyword fallback used when no authoritative source matches
import re
from typing import Optional

from .knowledge import get_heuristics
from .models import SafetyLevel, clamp_score

# Score-text keywords, checked in this order
_RISK_WORDS = (
    (re.compile(r"\b(low|safe|minimal|good)\b", re.IGNORECASE), 2),
    (re.compile(r"\b(moderate|medium|average)\b", re.IGNORECASE), 5),
    (re.compile(r"\b(high|unsafe|dangerous|poor)\b", re.IGNORECASE), 8),
)
_NUMBER = re.compile(r"\d+")


def parse_score(score_text) -> Optional[int]:
    """
    Turn scraped score text into a 1..10 score.
    "Score: 7/10" -> 7, "low risk" -> 2, anything unreadable -> None.
    """
    if score_text is None or isinstance(score_text, bool):
        return None
    text = str(score_text).strip()
    if not text:
        return None

    m = _NUMBER.search(text)
    if m:
        return clamp_score(int(m.group(0)))

    for pattern, score in _RISK_WORDS:
        if pattern.search(text):
            return score
    return None


def calculate_default_score(ingredient: str) -> int:
    heur = get_heuristics()
    for tier in heur.risk_tiers:
        if any(p.search(ingredient) for p in tier.patterns):
            return tier.score
    return heur.default_score


def safety_level(score: int) -> SafetyLevel:
    return SafetyLevel.from_score(score)


def default_concern(score: int) -> str:
    concerns = get_heuristics().default_concerns
    level = SafetyLevel.from_score(score)
    if level is SafetyLevel.LOW:
        return concerns["low"]
    if level is SafetyLevel.MODERATE:
        return concerns["moderate"]
    return concerns["high"]


def _first_keyword_match(ingredient, table, fallback):
    lowered = (ingredient or "").lower()
    for label, keywords in table:
        if any(k in lowered for k in keywords):
            return label
    return fallback


def ingredient_function(ingredient: str) -> str:
    heur = get_heuristics()
    return _first_keyword_match(ingredient, heur.functions, heur.function_fallback)


def common_use(ingredient: str) -> str:
    heur = get_heuristics()
    return _first_keyword_match(ingredient, heur.uses, heur.use_fallback)
