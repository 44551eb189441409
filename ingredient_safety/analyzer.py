# analyzer.py -- ingredient safety resolution pipeline
#
# For every ingredient token:
#   remote lookup (may be None) -> curated database -> heuristic classifier
# Each output field takes the first source that has a value for it.

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional

from . import classifier, config, knowledge
from .ewg_client import fetch_ewg_data
from .models import CuratedEntry, IngredientRecord, PartialRecord, SafetyLevel

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Optional[PartialRecord]]

_SPLIT = re.compile(r"[,;\n]+")


def split_ingredients(text: str) -> List[str]:
    """Lowercased tokens in input order; empty and one-character tokens dropped."""
    if not text:
        return []
    tokens = (t.strip() for t in _SPLIT.split(text.lower()))
    return [t for t in tokens if len(t) > 1]


def display_name(token: str) -> str:
    return " ".join(w[:1].upper() + w[1:] for w in token.split(" "))


def _first_present(*candidates):
    for value in candidates:
        if value is not None:
            return value
    return None


def _joined(items, sep=", ") -> Optional[str]:
    if items is None:
        return None
    return sep.join(items)


def merge_record(token: str, remote: Optional[PartialRecord], curated: Optional[CuratedEntry]) -> IngredientRecord:
    if remote is None:
        remote = PartialRecord(source="none")

    score = _first_present(
        remote.ewg_score,
        curated.base_score if curated else None,
    )
    if score is None:
        score = classifier.calculate_default_score(token)

    # An empty curated concern list still counts as curated data (e.g. glycerin)
    concern = _first_present(
        remote.reason_for_concern,
        _joined(curated.concerns) if curated else None,
    )
    if concern is None:
        concern = classifier.default_concern(score)

    function = _first_present(
        remote.function,
        curated.category if curated else None,
    )
    if function is None:
        function = classifier.ingredient_function(token)

    use = remote.common_use
    if use is None:
        use = classifier.common_use(token)

    return IngredientRecord(
        name=display_name(token),
        function=function,
        ewg_score=score,
        safety_level=SafetyLevel.from_score(score),
        reason_for_concern=concern,
        common_use=use,
        scientific_name=curated.scientific_name if curated else None,
        benefits=_joined(curated.benefits) if curated else None,
        restrictions=_joined(curated.restrictions) if curated else None,
        natural_alternatives=_joined(curated.natural_alternatives) if curated else None,
        research_links=_joined(curated.research_links, "\n") if curated else None,
    )


def resolve_ingredient(token: str, fetch: Optional[Fetcher] = None) -> IngredientRecord:
    remote = fetch(token) if fetch is not None else None
    curated = knowledge.lookup(token)
    logger.debug(
        "resolved %r remote=%s curated=%s",
        token, remote.source if remote is not None else None, curated is not None,
    )
    return merge_record(token, remote, curated)


def _default_fetcher() -> Optional[Fetcher]:
    return fetch_ewg_data if config.EWG_ENABLED else None


def analyze_ingredients(text: str, fetch: Optional[Fetcher] = None, workers: Optional[int] = None) -> List[IngredientRecord]:
    """
    Analyze a comma/semicolon/newline separated ingredient list.

    fetch defaults to the EWG collaborator (or nothing when EWG_ENABLED is off).
    workers > 1 resolves ingredients in a thread pool; output order always
    follows input order.
    """
    tokens = split_ingredients(text)
    if not tokens:
        return []

    if fetch is None:
        fetch = _default_fetcher()
    if workers is None:
        workers = config.ANALYZE_WORKERS

    if workers <= 1 or len(tokens) == 1:
        return [resolve_ingredient(t, fetch) for t in tokens]

    with ThreadPoolExecutor(max_workers=min(workers, len(tokens))) as ex:
        return list(ex.map(lambda t: resolve_ingredient(t, fetch), tokens))
