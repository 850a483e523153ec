"""
Card list page parser.

A card list page holds one <dl class="modalCol"> per printing:

    <dl class="modalCol" id="OP01-001">
      <dt>
        <div class="infoCol"><span>OP01-001</span> | <span>L</span> | <span>LEADER</span></div>
        <div class="cardName">Roronoa Zoro</div>
      </dt>
      <dd>
        <div class="frontCol"><img data-src="../images/cardlist/card/OP01-001.png?241220"></div>
        <div class="backCol"> ...stat blocks, see parsers.fields... </div>
      </dd>
    </dl>

A fragment missing any of the number, rarity, type, name, image or back
block aborts the whole page: no partial card is ever produced.
"""

import html
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from opcardlist.models.card import Card
from opcardlist.models.failure import MissingElementError
from opcardlist.parsers.fields import (
    parse_attributes,
    parse_card_sets,
    parse_card_type,
    parse_colors,
    parse_counter,
    parse_effects,
    parse_life_cost,
    parse_power,
    parse_rarity,
    parse_types,
)
from opcardlist.services.card_store import full_cards_path, load_cards
from opcardlist.services.reconciler import merge_cards

CARD_SELECTOR = "dl.modalCol"
IMAGE_BASE_URL = "https://{prefix}onepiece-cardgame.com/images/cardlist/card/"

PARALLEL_SUFFIX = " (Parallel)"
INCLUDED_IN_MARKER = "Included in"


def image_base_url(region: str) -> str:
    """
    Image host for a region.

    The "jp" list serves images from the bare domain, every other region
    from "<region>.onepiece-cardgame.com".
    """
    prefix = "" if region == "jp" else f"{region}."
    return IMAGE_BASE_URL.format(prefix=prefix)


def is_alternate_art(card_number: str, image_url: str, card_sets: str) -> bool:
    """
    Alternate art printings use "<card_number>_<n>" image filenames.

    Cards reprinted as-is in another product also get a suffixed filename,
    but their set label reads "Included in ...", so those are excluded.
    Matching is case sensitive and only checks for the "<number>_" substring.
    """
    return f"{card_number}_" in image_url and INCLUDED_IN_MARKER not in card_sets


def _require(element: Tag | None, name: str) -> Tag:
    if element is None:
        raise MissingElementError(name)
    return element


def parse_single_card(element: Tag, base_image_url: str) -> Card:
    """
    Build a Card from one modalCol fragment.

    Raises:
        MissingElementError: If a required element is absent
        UnknownValueError: If rarity, card type or a color is not recognised
    """
    info_spans = element.select(".infoCol > span")
    card_number = _require(info_spans[0] if info_spans else None, "card number")
    rarity = _require(info_spans[1] if len(info_spans) > 1 else None, "rarity")
    card_type = _require(info_spans[2] if len(info_spans) > 2 else None, "card type")

    card_name = html.unescape(
        _require(element.select_one(".cardName"), "card name")
        .get_text()
        .replace(PARALLEL_SUFFIX, "")
    )

    image = _require(element.select_one(".frontCol img"), "image")
    image_src = image.get("data-src")
    if not image_src:
        raise MissingElementError("image src")

    # Keeps any cache-busting query string, e.g. "OP01-001.png?241220"
    image_file = str(image_src).split("/")[-1]
    image_url = f"{base_image_url}{image_file}"

    back_col = _require(element.select_one(".backCol"), "back column")

    number = card_number.get_text().strip()
    life, cost = parse_life_cost(back_col)
    effects, card_effects = parse_effects(back_col)
    card_sets = parse_card_sets(back_col)

    return Card(
        card_name=card_name,
        card_number=number,
        rarity=parse_rarity(rarity.get_text()),
        is_alternate_art=is_alternate_art(number, image_url, card_sets),
        card_type=parse_card_type(card_type.get_text()),
        image_url=image_url,
        life=life,
        cost=cost,
        attributes=parse_attributes(back_col),
        power=parse_power(back_col),
        counter=parse_counter(back_col),
        colors=parse_colors(back_col),
        types=parse_types(back_col),
        effects=effects,
        card_effects=card_effects,
        card_sets=card_sets,
        image_name=image_file.split(".")[0],
    )


def parse_cards(
    html_content: str,
    region: str,
    merge: bool = False,
    cards_path: Path | None = None,
) -> list[Card]:
    """
    Parse every card on a card list page, in document order.

    Args:
        html_content: Raw card list HTML
        region: Region code, selects the image host (see image_base_url)
        merge: Fold the parsed cards into the region's persisted collection
        cards_path: Persisted full collection to merge into. Defaults to the
            region's cards-full.json

    Returns:
        With merge, the persisted cards with matching ones replaced in place
        and new ones appended. Without merge, only the cards on this page.

    Raises:
        CardlistError: If any card fragment cannot be parsed
    """
    document = BeautifulSoup(html_content, "html.parser")
    base_image_url = image_base_url(region)

    cards = [
        parse_single_card(element, base_image_url)
        for element in document.select(CARD_SELECTOR)
    ]
    if not merge:
        return cards

    return merge_cards(load_cards(cards_path or full_cards_path(region)), cards)
