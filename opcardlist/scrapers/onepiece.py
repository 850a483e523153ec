"""
One Piece Card Game card list fetcher.

The official card list is a form: POSTing a color returns one HTML page
holding every card of that color. Parsing lives in parsers.cardlist.

Note: Web scraping is inherently fragile. Page structure may change.
"""

import logging
from dataclasses import dataclass

import httpx

from opcardlist.config import settings

logger = logging.getLogger(__name__)

# Fetch order of the color filter on the card list form
CARDLIST_COLORS: tuple[str, ...] = ("Red", "Green", "Blue", "Purple", "Black", "Yellow")

REQUEST_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8",
    "Accept-Language": "en-GB,en;q=0.9",
    "DNT": "1",
    "Upgrade-Insecure-Requests": "1",
}


@dataclass(frozen=True)
class CardSource:
    """A regional card list and the colors to fetch from it."""

    url: str
    region: str
    colors: tuple[str, ...] = CARDLIST_COLORS


CARD_SOURCES: tuple[CardSource, ...] = (
    CardSource(url="https://en.onepiece-cardgame.com/cardlist/", region="en"),
    CardSource(url="https://asia-en.onepiece-cardgame.com/cardlist/", region="jp"),
)


def build_client() -> httpx.Client:
    """HTTP client with browser-like headers, shared across fetches."""
    return httpx.Client(
        headers={"User-Agent": settings.user_agent, **REQUEST_HEADERS},
        follow_redirects=True,
        timeout=settings.request_timeout,
    )


def fetch_cardlist_page(
    source: CardSource,
    color: str,
    client: httpx.Client | None = None,
) -> str:
    """
    Fetch the card list page for one color.

    Args:
        source: Regional card list
        color: Color filter, e.g. "Red"
        client: Optional httpx client for connection reuse

    Returns:
        Raw HTML content

    Raises:
        httpx.HTTPError: If request fails
    """
    form_data = {
        "freewords": "",
        "series": "",
        "colors[]": color,
    }

    logger.info("Fetching %s cards from %s", color, source.url)

    if client:
        response = client.post(source.url, data=form_data)
    else:
        response = httpx.post(
            source.url,
            data=form_data,
            headers={"User-Agent": settings.user_agent, **REQUEST_HEADERS},
            follow_redirects=True,
            timeout=settings.request_timeout,
        )

    response.raise_for_status()
    return response.text
