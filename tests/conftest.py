"""Shared fixtures: listing pages and a client whose fetches never hit the network."""

import httpx
import pytest
from fastapi.testclient import TestClient

from app.utils.http import Http, get_http
from main import app

IS24_URL = "https://www.immobilienscout24.de/expose/123"
IMMOWELT_URL = "https://www.immowelt.de/expose/2abc3"

IS24_PAGE = """
<html><body>
  <div class="is24-expose">
    <div data-qa="expose-price">350.000 €</div>
    <div data-qa="expose-wohnflaeche">90 m²</div>
    <div data-qa="expose-zimmer">3</div>
  </div>
</body></html>
"""

IS24_INVESTMENT_PAGE = """
<html><body>
  <dl>
    <dt>Kaufpreis</dt><dd class="is24qa-kaufpreis grid-item">480.000 €</dd>
    <dt>Mieteinnahmen</dt><dd class="is24qa-mieteinnahmen">21.600 €</dd>
    <dt>Wohnfläche</dt><dd class="is24qa-wohnflaeche">160 m²</dd>
    <dt>Zimmer</dt><dd class="is24qa-zi">6</dd>
  </dl>
</body></html>
"""

IMMOWELT_PAGE = """
<html><body>
  <div data-test="price">299.000,00 €</div>
  <div class="hardfacts">
    <div class="hardfact">Wohnfläche</div><div>72,5 m²</div>
    <div class="hardfact">Zimmer</div><div>2,5</div>
  </div>
</body></html>
"""

NO_PRICE_PAGE = """
<html><body><h1>Dieses Exposé ist nicht mehr verfügbar</h1></body></html>
"""


@pytest.fixture
def client_for():
    """Return a factory: give it a MockTransport handler, get a TestClient."""

    def _make(handler):
        async def _get_http():
            http = Http(transport=httpx.MockTransport(handler))
            try:
                yield http
            finally:
                await http.close()

        app.dependency_overrides[get_http] = _get_http
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


def serve(html: str, status_code: int = 200):
    """MockTransport handler answering every request with the given page."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, html=html)

    return handler
