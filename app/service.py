import logging
from urllib.parse import urlparse

from app.errors import BadRequest, ExtractionError, InternalError, Unprocessable, UnsupportedSite
from app.estimator import DEFAULT_RATES, EstimationRates
from app.schemas import ExtractRequest, PropertyData
from app.scrapers.registry import resolve_portal
from app.utils.http import Http

logger = logging.getLogger(__name__)


def parse_hostname(url: str | None) -> str:
    """Hostname of an absolute http(s) URL, or BadRequest."""
    if not url or not url.strip():
        raise BadRequest()
    try:
        u = urlparse(url.strip())
        hostname = u.hostname
    except ValueError:
        raise BadRequest("Ungültige URL")
    if u.scheme.lower() not in ("http", "https") or not hostname:
        raise BadRequest("Ungültige URL")
    return hostname.lower()


async def handle(req: ExtractRequest, http: Http, rates: EstimationRates = DEFAULT_RATES) -> PropertyData:
    """Resolve the portal, scrape the listing and check a price was found.

    Raises an ``ExtractionError`` subclass for every failure; anything the
    scrapers raise besides ``FetchFailed`` becomes an ``InternalError``.
    """
    hostname = parse_hostname(req.url)
    portal = resolve_portal(hostname)
    if portal is None:
        raise UnsupportedSite()

    try:
        data = await portal.scrape(http, req.url.strip(), rates)
    except ExtractionError:
        raise
    except Exception as e:
        logger.exception("Unexpected error extracting %s", req.url)
        raise InternalError() from e

    if not data.kaufpreis:
        logger.warning("%s: no purchase price found at %s", portal.name, req.url)
        raise Unprocessable()
    return data
