import logging
import math
import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Dict, Optional, Sequence, Tuple
from bs4 import BeautifulSoup

from app.estimator import DEFAULT_RATES, EstimationRates, complete, round_half_up
from app.schemas import PropertyData

logger = logging.getLogger(__name__)

RE_NOT_NUMERIC = re.compile(r"[^\d,.]")
RE_AREA = re.compile(r"(\d+[,.]?\d*)\s*m²")
RE_NUMBER = re.compile(r"\d+(?:[,.]\d+)?")


def extract_price(text: Optional[str]) -> Optional[int]:
    """Parse a price fragment such as ``"350.000 €"`` into whole currency units.

    Commas and periods are not told apart by locale. After commas become
    periods, every period but the last is a thousands separator; the last
    one is the decimal point unless exactly three digits follow it.
    ``"299.000,00 €"`` -> 299000, ``"350.000 €"`` -> 350000, ``"1.500"`` -> 1500.
    """
    if not text:
        return None
    cleaned = RE_NOT_NUMERIC.sub("", text).replace(",", ".")
    if not any(c.isdigit() for c in cleaned):
        return None
    head, sep, tail = cleaned.rpartition(".")
    if not sep:
        number = cleaned
    elif len(tail) == 3:
        number = cleaned.replace(".", "")
    else:
        number = head.replace(".", "") + "." + tail
    try:
        return round_half_up(Decimal(number))
    except InvalidOperation:
        return None


def extract_area(text: Optional[str]) -> Optional[float]:
    """First ``<number> m²`` in the text, e.g. ``"72,5m²"`` -> 72.5."""
    if not text:
        return None
    m = RE_AREA.search(text)
    if not m:
        return None
    area = float(m.group(1).replace(",", "."))
    return area if math.isfinite(area) else None


def extract_rooms(text: Optional[str]) -> Optional[float]:
    if not text:
        return None
    m = RE_NUMBER.search(text)
    return float(m.group(0).replace(",", ".")) if m else None


@dataclass(frozen=True)
class Selector:
    """One place to look for a field.

    ``first`` reads only the first match, otherwise the text of all matches
    is joined. ``next_sibling`` reads the element following each match
    (label/value pairs).
    """
    css: str
    first: bool = False
    next_sibling: bool = False

    def text(self, soup: BeautifulSoup) -> str:
        nodes = soup.select(self.css, limit=1 if self.first else 0)
        if self.next_sibling:
            nodes = [n.find_next_sibling() for n in nodes]
        return "".join(n.get_text() for n in nodes if n is not None).strip()


def select_text(soup: BeautifulSoup, selectors: Sequence[Selector]) -> Tuple[str, Optional[Selector]]:
    """Try selectors in order; the first non-blank text wins."""
    for sel in selectors:
        text = sel.text(soup)
        if text:
            return text, sel
    return "", None


@dataclass(frozen=True)
class Portal:
    name: str
    domain: str
    # field ("price", "rent", "area", "rooms") -> selectors in priority order
    selectors: Dict[str, Tuple[Selector, ...]] = field(default_factory=dict)
    annual_rent: bool = False

    def matches(self, hostname: str) -> bool:
        return self.domain in hostname.lower()

    def _field(self, soup: BeautifulSoup, name: str) -> str:
        text, sel = select_text(soup, self.selectors.get(name, ()))
        if sel is not None:
            logger.debug("%s: %s matched %r", self.name, name, sel.css)
        return text

    def extract(self, html: str, rates: EstimationRates = DEFAULT_RATES) -> PropertyData:
        soup = BeautifulSoup(html, "lxml")

        kaufpreis = extract_price(self._field(soup, "price"))

        miete = extract_price(self._field(soup, "rent"))
        if miete and self.annual_rent:
            miete = round_half_up(Decimal(miete) / 12)

        area = extract_area(self._field(soup, "area"))
        rooms = extract_rooms(self._field(soup, "rooms"))

        figures = complete(kaufpreis, miete or None, area, rates)
        logger.info("%s: kaufpreis=%s miete=%s wohnflaeche=%s zimmer=%s",
                    self.name, figures["kaufpreis"], figures["miete"], area, rooms)
        return PropertyData(**figures, wohnflaeche=area, zimmer=rooms)

    async def scrape(self, http, url: str, rates: EstimationRates = DEFAULT_RATES) -> PropertyData:
        html = await http.get_text(url)
        return self.extract(html, rates)
