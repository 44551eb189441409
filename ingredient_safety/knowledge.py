# knowledge.py -- static reference data (curated database + heuristic tables)
#
# Behavior:
# - JSON files under data/ are read once per process and exposed read-only
# - lookup(): exact key first, then best Levenshtein similarity above threshold

import json
import re
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple

from . import config
from .models import CuratedEntry
from .similarity import similarity

DATA_DIR = Path(__file__).resolve().parent / "data"

FILE_CURATED = "curated_ingredients.json"
FILE_HEURISTICS = "heuristics.json"
FILE_HEALTH = "health_responses.json"


class RiskTier(NamedTuple):
    name: str
    score: int
    patterns: Tuple[re.Pattern, ...]


class Heuristics(NamedTuple):
    risk_tiers: Tuple[RiskTier, ...]
    default_score: int
    default_concerns: Mapping[str, str]
    functions: Tuple[Tuple[str, Tuple[str, ...]], ...]
    function_fallback: str
    uses: Tuple[Tuple[str, Tuple[str, ...]], ...]
    use_fallback: str


def load_json(filename: str) -> Any:
    path = DATA_DIR / filename
    if not path.exists():
        raise FileNotFoundError(f"Missing data file: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e


# ---- Loaders (memoized) ----
@lru_cache(maxsize=None)
def get_curated_db() -> Mapping[str, CuratedEntry]:
    """Canonical lowercase name -> CuratedEntry, in declaration order."""
    raw = load_json(FILE_CURATED)
    table: Dict[str, CuratedEntry] = {}
    for key, row in raw.items():
        table[key.strip().lower()] = CuratedEntry.model_validate(row)
    return MappingProxyType(table)


def _keyword_table(rows) -> Tuple[Tuple[str, Tuple[str, ...]], ...]:
    return tuple((label, tuple(k.lower() for k in keywords)) for label, keywords in rows)


@lru_cache(maxsize=None)
def get_heuristics() -> Heuristics:
    raw = load_json(FILE_HEURISTICS)
    tiers = tuple(
        RiskTier(
            name=t["name"],
            score=int(t["score"]),
            patterns=tuple(re.compile(p, re.IGNORECASE) for p in t["patterns"]),
        )
        for t in raw["riskTiers"]
    )
    return Heuristics(
        risk_tiers=tiers,
        default_score=int(raw["defaultScore"]),
        default_concerns=MappingProxyType(dict(raw["defaultConcerns"])),
        functions=_keyword_table(raw["functions"]),
        function_fallback=raw["functionFallback"],
        uses=_keyword_table(raw["uses"]),
        use_fallback=raw["useFallback"],
    )


@lru_cache(maxsize=None)
def get_health_responses() -> Mapping[str, Any]:
    return MappingProxyType(load_json(FILE_HEALTH))


def reload_all() -> None:
    """Clear memoized data, e.g. after editing the JSON files of a running server."""
    get_curated_db.cache_clear()
    get_heuristics.cache_clear()
    get_health_responses.cache_clear()


# ---- Curated lookup ----
def lookup(name: str, threshold: Optional[float] = None) -> Optional[CuratedEntry]:
    term = (name or "").strip().lower()
    db = get_curated_db()

    if term in db:
        return db[term]

    if threshold is None:
        threshold = config.FUZZY_MATCH_THRESHOLD

    best = None
    best_score = 0.0
    for key, entry in db.items():
        score = similarity(term, key)
        # strict comparison keeps the first entry that reaches the max
        if score > best_score:
            best_score = score
            best = entry

    if best is not None and best_score > threshold:
        return best
    return None
