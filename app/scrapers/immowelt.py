from app.scrapers.common import Portal, Selector

# No rent on Immowelt pages; it is always estimated
PORTAL = Portal(
    name="Immowelt",
    domain="immowelt.de",
    selectors={
        "price": (
            Selector('[data-test="price"]', first=True),
            Selector(".price-value", first=True),
        ),
        "area": (
            Selector('[data-test="area"]'),
            Selector('.hardfact:-soup-contains("Wohnfläche")', next_sibling=True),
        ),
        "rooms": (
            Selector('[data-test="rooms"]'),
            Selector('.hardfact:-soup-contains("Zimmer")', next_sibling=True),
        ),
    },
)
