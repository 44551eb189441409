# ewg_client.py -- remote lookup adapter for the EWG search collaborator
#
# The collaborator answers either {"data": [listing, ...]} (structured scrape)
# or {"html": "<page>"} (raw search page). Both are normalized into a
# PartialRecord; any failure degrades to None.

import logging
from typing import Any, Callable, Dict, List, Optional

import requests
from bs4 import BeautifulSoup

from . import config
from .classifier import parse_score
from .models import PartialRecord

logger = logging.getLogger(__name__)

Transport = Callable[[str], Dict[str, Any]]


def request_ewg_search(ingredient: str) -> Dict[str, Any]:
    """GET the collaborator endpoint; raises on transport/HTTP errors."""
    headers = {}
    if config.EWG_TOKEN:
        headers["Authorization"] = f"Bearer {config.EWG_TOKEN}"
    resp = requests.get(
        config.EWG_URL,
        params={"ingredient": ingredient},
        headers=headers,
        timeout=config.EWG_TIMEOUT,
    )
    resp.raise_for_status()
    return resp.json()


def _clean(value) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _join(items) -> Optional[str]:
    if not items:
        return None
    if isinstance(items, str):
        return _clean(items)
    parts = [str(i).strip() for i in items if i is not None and str(i).strip()]
    return ", ".join(parts) or None


def from_structured(listings: List[Dict[str, Any]]) -> Optional[PartialRecord]:
    if not listings:
        return None
    first = listings[0] or {}
    return PartialRecord(
        source="structured",
        function=_clean(first.get("category")),
        ewg_score=parse_score(first.get("score")),
        reason_for_concern=_join(first.get("concerns")),
    )


def from_html(html: str) -> Optional[PartialRecord]:
    soup = BeautifulSoup(html or "", "html.parser")
    listing = soup.select_one(".product-listing")
    if listing is None:
        return None

    def text_of(selector):
        node = listing.select_one(selector)
        return _clean(node.get_text(" ", strip=True)) if node else None

    concerns = [li.get_text(" ", strip=True) for li in listing.select(".product-concerns li")]
    return PartialRecord(
        source="html",
        function=text_of(".product-details .function"),
        ewg_score=parse_score(text_of(".product-score")),
        reason_for_concern=_join(concerns),
        common_use=text_of(".product-details .common-use"),
    )


def normalize_response(payload: Dict[str, Any]) -> Optional[PartialRecord]:
    if not isinstance(payload, dict):
        raise ValueError(f"unexpected collaborator payload: {type(payload).__name__}")
    if payload.get("data") is not None:
        return from_structured(payload["data"])
    if payload.get("html") is not None:
        return from_html(payload["html"])
    return None


def fetch_ewg_data(ingredient: str, transport: Optional[Transport] = None) -> Optional[PartialRecord]:
    """Remote lookup for one ingredient. Never raises; None means "no remote data"."""
    transport = transport or request_ewg_search
    try:
        return normalize_response(transport(ingredient))
    except Exception as e:
        logger.warning("Error fetching EWG data for %s: %s", ingredient, e)
        return None
