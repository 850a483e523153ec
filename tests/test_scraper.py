from urllib.parse import parse_qs

import httpx
import pytest
import respx

from opcardlist.config import settings
from opcardlist.scrapers.onepiece import (
    CARD_SOURCES,
    CARDLIST_COLORS,
    CardSource,
    build_client,
    fetch_cardlist_page,
)

EN_SOURCE = CardSource(url="https://en.onepiece-cardgame.com/cardlist/", region="en")


class TestCardSources:
    def test_regions(self) -> None:
        assert [s.region for s in CARD_SOURCES] == ["en", "jp"]

    def test_jp_uses_asia_site(self) -> None:
        jp = next(s for s in CARD_SOURCES if s.region == "jp")

        assert jp.url == "https://asia-en.onepiece-cardgame.com/cardlist/"

    def test_color_fetch_order(self) -> None:
        assert CARDLIST_COLORS == ("Red", "Green", "Blue", "Purple", "Black", "Yellow")
        assert all(s.colors == CARDLIST_COLORS for s in CARD_SOURCES)


class TestFetchCardlistPage:
    @respx.mock
    def test_posts_color_form(self) -> None:
        """The color filter is sent as a form POST."""
        route = respx.post(EN_SOURCE.url).mock(
            return_value=httpx.Response(200, text="<html>cards</html>")
        )

        html = fetch_cardlist_page(EN_SOURCE, "Red")

        assert html == "<html>cards</html>"
        request = route.calls.last.request
        form = parse_qs(request.content.decode(), keep_blank_values=True)
        assert form == {"freewords": [""], "series": [""], "colors[]": ["Red"]}
        assert request.headers["User-Agent"] == settings.user_agent

    @respx.mock
    def test_uses_given_client(self) -> None:
        route = respx.post(EN_SOURCE.url).mock(return_value=httpx.Response(200, text="ok"))

        with build_client() as client:
            assert fetch_cardlist_page(EN_SOURCE, "Blue", client) == "ok"

        request = route.calls.last.request
        assert request.headers["Accept-Language"] == "en-GB,en;q=0.9"
        assert b"colors%5B%5D=Blue" in request.content

    @respx.mock
    def test_http_error_raises(self) -> None:
        """Non-2xx responses are not retried."""
        route = respx.post(EN_SOURCE.url).mock(return_value=httpx.Response(503))

        with pytest.raises(httpx.HTTPStatusError):
            fetch_cardlist_page(EN_SOURCE, "Red")

        assert route.call_count == 1
