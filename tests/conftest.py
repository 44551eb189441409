import pytest

from ingredient_safety import config


@pytest.fixture
def no_remote():
    """Fetcher standing in for an unreachable EWG collaborator."""
    return lambda name: None


@pytest.fixture
def offline(monkeypatch):
    monkeypatch.setattr(config, "EWG_ENABLED", False)


LISTING_HTML = """
<html><body>
  <div class="product-listing">
    <div class="product-name">Rose Face Cream</div>
    <div class="product-score">Score: 4</div>
    <ul class="product-concerns"><li>Allergies</li><li> Irritation </li></ul>
    <ul class="product-ingredients"><li>Water</li><li>Fragrance</li></ul>
    <div class="product-category">Moisturizer</div>
    <ul class="product-certifications"><li>EWG Verified</li></ul>
    <div class="product-details">
      <span class="function">Fragrance</span>
      <span class="common-use">Scent</span>
    </div>
  </div>
  <div class="product-listing">
    <div class="product-name">Second Listing</div>
    <div class="product-score">9</div>
  </div>
</body></html>
"""


@pytest.fixture
def listing_html():
    return LISTING_HTML
