from app.scrapers.common import Portal, Selector

# Investment listings publish yearly rent income ("Mieteinnahmen")
PORTAL = Portal(
    name="ImmobilienScout24",
    domain="immobilienscout24.de",
    annual_rent=True,
    selectors={
        "price": (
            Selector('[data-qa="expose-price"]', first=True),
            Selector(".is24qa-kaufpreis", first=True),
            Selector('dd[class*="kaufpreis"]', first=True),
        ),
        "rent": (
            Selector('[data-qa="mieteinnahmen"]'),
            Selector(".is24qa-mieteinnahmen"),
            Selector('dd:-soup-contains("Mieteinnahmen")'),
        ),
        "area": (
            Selector('[data-qa="expose-wohnflaeche"]'),
            Selector(".is24qa-wohnflaeche"),
        ),
        "rooms": (
            Selector('[data-qa="expose-zimmer"]'),
            Selector(".is24qa-zi"),
        ),
    },
)
