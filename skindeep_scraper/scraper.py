#!/usr/bin/env python3
# scraper.py -- EWG Skin Deep search scraper
#
# Behavior:
# - GET the Skin Deep search page for one ingredient
# - Parse every .product-listing into a structured dict -> {"data": [...]}
# - No listings or a parse failure -> hand back the raw page as {"html": ...}
# - Transport errors propagate to the caller

import sys, json, re, random, logging
import requests
from bs4 import BeautifulSoup
from html import unescape
from concurrent.futures import ThreadPoolExecutor

logger = logging.getLogger(__name__)

# ---- Config ----
EWG_SEARCH_URL = "https://www.ewg.org/skindeep/search/"
SCRAPE_TIMEOUT = 30
MAX_WORKERS = 4

USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/128.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.0 Safari/605.1.15",
    "Mozilla/5.0 (X11; Linux x86_64; rv:129.0) Gecko/20100101 Firefox/129.0"
]

# ---- Helpers ----
def clean_text(s: str):
    if not s:
        return ""
    s = re.sub(r'\s+', ' ', unescape(s))
    s = re.sub(r'\[[^\]]*\]', '', s)
    return s.strip()

def normalize_key(s: str) -> str:
    return re.sub(r'\s+', ' ', unescape(str(s or "").strip().lower()))

def _text(node, selector):
    el = node.select_one(selector)
    if el is None:
        return None
    return clean_text(el.get_text(" ", strip=True)) or None

def _texts(node, selector):
    out = []
    for el in node.select(selector):
        txt = clean_text(el.get_text(" ", strip=True))
        if txt:
            out.append(txt)
    return out

# ---- Fetch ----
def fetch_search_page(ingredient, timeout=SCRAPE_TIMEOUT):
    headers = {"User-Agent": random.choice(USER_AGENTS)}
    r = requests.get(EWG_SEARCH_URL, params={"search": ingredient}, headers=headers, timeout=timeout)
    r.raise_for_status()
    return r.text

# ---- Parse ----
def parse_listings(html):
    """Every .product-listing on the page, in page order."""
    soup = BeautifulSoup(html or "", "html.parser")
    products = []
    for product in soup.select(".product-listing"):
        products.append({
            "name": _text(product, ".product-name"),
            "score": _text(product, ".product-score"),
            "concerns": _texts(product, ".product-concerns li"),
            "ingredients": _texts(product, ".product-ingredients li"),
            "category": _text(product, ".product-category"),
            "certifications": _texts(product, ".product-certifications li"),
        })
    return products

# ---- search (one ingredient) ----
def search(ingredient):
    html = fetch_search_page(ingredient)
    try:
        listings = parse_listings(html)
    except Exception as e:
        logger.warning("Listing parse failed for %s, returning raw page: %s", ingredient, e)
        return {"html": html}
    if not listings:
        return {"html": html}
    return {"data": listings}

def lookup_one(ingredient):
    orig = str(ingredient or "").strip()
    out = {"Ingredient": orig, "Canonical_Name": normalize_key(orig)}
    if not orig:
        out["error"] = "empty ingredient"
        return out
    try:
        out.update(search(orig))
    except requests.RequestException as e:
        logger.warning("Request failed for %s: %s", orig, e)
        out["error"] = f"Failed to fetch EWG data: {e}"
    return out

# ---- Main ----
def main():
    logging.basicConfig(level=logging.WARNING)
    try:
        raw = sys.stdin.read()
        if not raw:
            user = input("Enter comma-separated ingredients: ").strip()
            data = {"ingredients": [w.strip() for w in user.split(",") if w.strip()]}
        else:
            data = json.loads(raw)
    except Exception as e:
        print(json.dumps({"error": f"Invalid input: {e}"}))
        return

    ingredients = data.get("ingredients", [])

    # map() keeps input order
    with ThreadPoolExecutor(max_workers=min(MAX_WORKERS, len(ingredients) or 1)) as ex:
        results = list(ex.map(lookup_one, ingredients))

    print(json.dumps({"results": results}, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
