"""
Field normalizers for card list markup.

Each function takes the back-face block of one card (the ".backCol" element)
or a piece of text and returns a cleaned value. Closed vocabularies (rarity,
card type, color) raise UnknownValueError on text they do not recognise.
Optional stat blocks fall back to "-".

Stat blocks look like:
    <div class="power"><h3>Power</h3>5000</div>
so values are read from the block's inner HTML with the heading removed.
"""

import html
from enum import Enum
from typing import TypeVar

from bs4 import Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from opcardlist.models.card import NOT_APPLICABLE, CardEffect, CardType, Color, Rarity
from opcardlist.models.failure import UnknownValueError

E = TypeVar("E", bound=Enum)

# Known mislabelled set names, replaced as whole strings before the
# generic fixups below run
CARD_SET_CORRECTIONS: dict[str, str] = {
    "OP-05": "[OP-05] -AWAKENING OF THE NEW ERA- [OP-05]",
    "[OP-06] -Wings of Captain- [OP-06]": "[OP-06] -WINGS OF THE CAPTAIN- [OP-06]",
    "OP-06": "[OP-06] -WINGS OF THE CAPTAIN- [OP-06]",
    "[OP-07] -500 Years in the Future- [OP-07]": "[OP-07] -500 YEARS IN THE FUTURE- [OP-07]",
    "OP-07": "[OP-07] -500 YEARS IN THE FUTURE- [OP-07]",
    "[OP-08] -Two Legends- [OP-08]": "[OP-08] -TWO LEGENDS- [OP-08]",
    "OP-08": "[OP-08] -TWO LEGENDS- [OP-08]",
    "[OP-09] -Emperors in the New World- [OP-09]": "[OP-09] -EMPERORS IN THE NEW WORLD- [OP-09]",
    "OP-09": "[OP-09] -EMPERORS IN THE NEW WORLD- [OP-09]",
    "[EB-01] -Memorial Collection- [EB-01]": "[EB-01] -MEMORIAL COLLECTION- [EB-01]",
    "EB-01": "[EB-01] -MEMORIAL COLLECTION- [EB-01]",
}

# Applied in order: add the hyphen after a set family prefix, collapse the
# double hyphen that creates on already-correct labels, then space the
# closing dash of the set name away from the bracket
CARD_SET_REWRITES: tuple[tuple[str, str], ...] = (
    ("[OP", "[OP-"),
    ("[OP--", "[OP-"),
    ("[EB", "[EB-"),
    ("[EB--", "[EB-"),
    ("[ST", "[ST-"),
    ("[ST--", "[ST-"),
    ("-[OP", "- [OP"),
    ("-[EB", "- [EB"),
    ("-[ST", "- [ST"),
)

# Minimal entity escaping, void tags written as <br> rather than <br/>
INNER_HTML_FORMATTER = HTMLFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)

TYPE_CORRECTIONS: dict[str, str] = {
    "Smile": "SMILE",
}


def _lookup(enum_cls: type[E], value: str, field: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        raise UnknownValueError(field, value) from None


def _block_html(block: Tag, heading: str) -> str:
    """Inner HTML of a stat block without its <h3> heading."""
    content = block.decode_contents(formatter=INNER_HTML_FORMATTER)
    return content.replace(f"<h3>{heading}</h3>", "").strip()


def _stat(back_col: Tag, selector: str, heading: str) -> str:
    block = back_col.select_one(selector)
    if block is None:
        return NOT_APPLICABLE
    return _block_html(block, heading)


def parse_rarity(text: str) -> Rarity:
    return _lookup(Rarity, text.strip(), "rarity")


def parse_card_type(text: str) -> CardType:
    return _lookup(CardType, text.strip().upper(), "card type")


def parse_color(text: str) -> Color:
    return _lookup(Color, text.strip(), "color")


def parse_life_cost(back_col: Tag) -> tuple[str, str]:
    """
    Read the shared life/cost block.

    Leaders show life in the slot other cards use for cost, so the heading
    decides which one the value is. The other is "-".

    Returns:
        (life, cost)
    """
    block = back_col.select_one(".cost")
    if block is None:
        return NOT_APPLICABLE, NOT_APPLICABLE

    content = block.decode_contents(formatter=INNER_HTML_FORMATTER)
    if "Cost" in content:
        return NOT_APPLICABLE, _block_html(block, "Cost")
    return _block_html(block, "Life"), NOT_APPLICABLE


def parse_power(back_col: Tag) -> str:
    return _stat(back_col, ".power", "Power")


def parse_counter(back_col: Tag) -> str:
    return _stat(back_col, ".counter", "Counter")


def parse_attributes(back_col: Tag) -> list[str]:
    """
    Attribute names, e.g. ["Slash"] or ["Strike", "Special"].

    Returns ["-"] when the card has no attribute.
    """
    attributes: list[str] = []

    for element in back_col.select(".attribute i"):
        text = html.unescape(element.get_text())
        attributes.extend(part.strip() for part in text.split("/") if part.strip())

    return attributes or [NOT_APPLICABLE]


def parse_colors(back_col: Tag) -> list[Color]:
    block = back_col.select_one(".color")
    if block is None:
        return []

    return [parse_color(part) for part in _block_html(block, "Color").split("/")]


def parse_types(back_col: Tag) -> list[str]:
    """Subtypes such as ["Supernovas", "Straw Hat Crew"]. May be empty."""
    block = back_col.select_one(".feature")
    if block is None:
        return []

    types: list[str] = []
    for part in _block_html(block, "Type").split("/"):
        name = html.unescape(part.strip())
        if name:
            types.append(TYPE_CORRECTIONS.get(name, name))
    return types


def extract_card_effects(effects: str) -> list[str]:
    """
    Effect tags present in the text, in catalog order.

    Returns ["-"] when no tag is present.
    """
    found = [effect.value for effect in CardEffect if effect.value in effects]
    return found or [NOT_APPLICABLE]


def parse_effects(back_col: Tag) -> tuple[str, list[str]]:
    """
    Effect text plus the trigger text, and the tags found in them.

    Returns:
        (effects, card_effects)
    """
    parts: list[str] = []

    text_block = back_col.select_one(".text")
    if text_block is not None:
        parts.append(
            _block_html(text_block, "Effect").replace("</slash>", "").replace("<slash>", "<Slash>")
        )

    trigger_block = back_col.select_one(".trigger")
    if trigger_block is not None:
        parts.append(_block_html(trigger_block, "Trigger"))

    effects = " ".join(parts)
    return effects, extract_card_effects(effects)


def normalize_card_sets(raw: str) -> str:
    """
    Clean up a set label.

    Examples:
        "OP-05"                      -> "[OP-05] -AWAKENING OF THE NEW ERA- [OP-05]"
        "-ROMANCE DAWN-[OP01]"       -> "-ROMANCE DAWN- [OP-01]"
        "-Straw Hat Crew- [ST01]"    -> "-Straw Hat Crew- [ST-01]"
    """
    card_sets = CARD_SET_CORRECTIONS.get(raw, raw)
    for old, new in CARD_SET_REWRITES:
        card_sets = card_sets.replace(old, new)
    return html.unescape(card_sets)


def parse_card_sets(back_col: Tag) -> str:
    block = back_col.select_one(".getInfo")
    if block is None:
        return ""
    return normalize_card_sets(_block_html(block, "Card Set(s)"))
