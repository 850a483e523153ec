from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from opcardlist.config import settings
from opcardlist.models.card import Card, CardType, Color, Rarity

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def cardlist_html() -> str:
    """Red card list page with five printings, one of them a parallel."""
    return (FIXTURES / "cardlist_red_en.html").read_text(encoding="utf-8")


@pytest.fixture
def make_card() -> Callable[..., Card]:
    """Factory for Card records; keyword arguments override the defaults."""

    def _make(**overrides: Any) -> Card:
        number = overrides.get("card_number", "OP01-001")
        values: dict[str, Any] = {
            "card_name": "Roronoa Zoro",
            "card_number": number,
            "rarity": Rarity.COMMON,
            "is_alternate_art": False,
            "card_type": CardType.CHARACTER,
            "image_url": f"https://en.onepiece-cardgame.com/images/cardlist/card/{number}.png",
            "life": "-",
            "cost": "3",
            "attributes": ["Slash"],
            "power": "5000",
            "counter": "1000",
            "colors": [Color.RED],
            "types": ["Straw Hat Crew"],
            "effects": "[On Play] Draw 1 card.",
            "card_effects": ["[On Play]"],
            "card_sets": "-ROMANCE DAWN- [OP-01]",
            "image_name": number,
        }
        values.update(overrides)
        return Card(**values)

    return _make


@pytest.fixture
def output_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the output and page cache directories at tmp_path."""
    monkeypatch.setattr(settings, "output_dir", tmp_path / "json")
    monkeypatch.setattr(settings, "input_dir", tmp_path / "input")
    return tmp_path
