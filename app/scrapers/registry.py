from typing import Optional
from app.scrapers import immobilienscout24, immowelt
from app.scrapers.common import Portal

PORTALS = (immobilienscout24.PORTAL, immowelt.PORTAL)


def resolve_portal(hostname: str) -> Optional[Portal]:
    """Portal whose domain occurs in the host (case-insensitive), if any."""
    for portal in PORTALS:
        if portal.matches(hostname):
            return portal
    return None
