"""Tests for the card list update job."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import httpx
import pytest

from opcardlist.jobs.update_cardlist import (
    UpdateReport,
    main,
    run_update,
    update_category,
)
from opcardlist.models.failure import MissingElementError
from opcardlist.scrapers.onepiece import CardSource

EN_RED = CardSource(url="https://en.example/cardlist/", region="en", colors=("Red",))
EN_TWO = CardSource(url="https://en.example/cardlist/", region="en", colors=("Red", "Green"))
JP_RED = CardSource(url="https://jp.example/cardlist/", region="jp", colors=("Red",))

BROKEN_PAGE = '<dl class="modalCol"><dt><div class="infoCol"></div></dt></dl>'


class TestUpdateCategory:
    def test_persists_region_files(self, cardlist_html: str, output_dirs: Path) -> None:
        """A fetched page is cached, parsed and written to the region directory."""
        with patch(
            "opcardlist.jobs.update_cardlist.fetch_cardlist_page",
            return_value=cardlist_html,
        ):
            count = update_category(EN_RED, "Red", MagicMock())

        assert count == 5
        assert (output_dirs / "input" / "cardlist-red-en.html").read_text(
            encoding="utf-8"
        ) == cardlist_html
        region = output_dirs / "json" / "en"
        assert (region / "cards-full.json").exists()
        assert (region / "cards.json").exists()
        assert (region / "filters.json").exists()

    def test_second_color_merges_into_first(
        self, cardlist_html: str, output_dirs: Path
    ) -> None:
        """Fetching the same cards again keeps the collection size."""
        with patch(
            "opcardlist.jobs.update_cardlist.fetch_cardlist_page",
            return_value=cardlist_html,
        ):
            update_category(EN_TWO, "Red", MagicMock())
            count = update_category(EN_TWO, "Green", MagicMock())

        assert count == 5
        data = json.loads((output_dirs / "json" / "en" / "cards-full.json").read_text("utf-8"))
        assert len(data) == 5

    def test_parse_error_writes_nothing(self, output_dirs: Path) -> None:
        with (
            patch(
                "opcardlist.jobs.update_cardlist.fetch_cardlist_page",
                return_value=BROKEN_PAGE,
            ),
            pytest.raises(MissingElementError, match="Missing card number"),
        ):
            update_category(EN_RED, "Red", MagicMock())

        assert not (output_dirs / "json" / "en").exists()


class TestRunUpdate:
    def test_updates_every_category(self, cardlist_html: str, output_dirs: Path) -> None:
        sleep = MagicMock()

        with patch(
            "opcardlist.jobs.update_cardlist.fetch_cardlist_page",
            return_value=cardlist_html,
        ):
            report = run_update(sources=(EN_TWO, JP_RED), sleep=sleep)

        assert report.ok
        assert report.completed == {"en/Red": 5, "en/Green": 5, "jp/Red": 5}
        assert sleep.call_count == 3

    def test_http_error_skips_category(self, cardlist_html: str, output_dirs: Path) -> None:
        """A failed fetch is recorded and the next color still runs."""
        with patch(
            "opcardlist.jobs.update_cardlist.fetch_cardlist_page",
            side_effect=[httpx.HTTPError("Network error"), cardlist_html],
        ):
            report = run_update(sources=(EN_TWO,), sleep=MagicMock())

        assert report.failed == {"en/Red": "Network error"}
        assert report.completed == {"en/Green": 5}
        assert not report.ok

    def test_parse_error_skips_category(self, cardlist_html: str, output_dirs: Path) -> None:
        with patch(
            "opcardlist.jobs.update_cardlist.fetch_cardlist_page",
            side_effect=[BROKEN_PAGE, cardlist_html],
        ):
            report = run_update(sources=(EN_TWO,), sleep=MagicMock())

        assert report.failed == {"en/Red": "Missing card number"}
        assert report.completed == {"en/Green": 5}

    def test_corrupt_collection_skips_region(
        self, cardlist_html: str, output_dirs: Path
    ) -> None:
        """An unreadable collection stops its region but not the others."""
        region = output_dirs / "json" / "en"
        region.mkdir(parents=True)
        (region / "cards-full.json").write_text("{broken", encoding="utf-8")
        fetch = MagicMock(return_value=cardlist_html)

        with patch("opcardlist.jobs.update_cardlist.fetch_cardlist_page", fetch):
            report = run_update(sources=(EN_TWO, JP_RED), sleep=MagicMock())

        assert list(report.failed) == ["en/Red"]
        assert report.completed == {"jp/Red": 5}
        assert fetch.call_count == 2
        assert (region / "cards-full.json").read_text(encoding="utf-8") == "{broken"


class TestMain:
    def test_exits_non_zero_on_failure(self) -> None:
        report = UpdateReport(failed={"en/Red": "Network error"})

        with (
            patch("opcardlist.jobs.update_cardlist.run_update", return_value=report),
            pytest.raises(SystemExit) as exc_info,
        ):
            main()

        assert exc_info.value.code == 1

    def test_success_returns_normally(self) -> None:
        report = UpdateReport(completed={"en/Red": 5})

        with patch("opcardlist.jobs.update_cardlist.run_update", return_value=report):
            main()
