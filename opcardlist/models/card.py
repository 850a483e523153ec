"""
Card record and the closed vocabularies used by the card list.

Two keys identify a card, and they are deliberately different:
- Equality and ordering use (card_sets, card_number), so printings group by
  the set label and number shown on the card list.
- Merging uses image_url (see services.reconciler), which tracks the unique
  image asset across runs even when a set label gets corrected.
"""

import string
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering

NOT_APPLICABLE = "-"


class Rarity(str, Enum):
    """Card rarity, valued by the text printed on the card list."""

    COMMON = "C"
    UNCOMMON = "UC"
    RARE = "R"
    SUPER_RARE = "SR"
    LEADER = "L"
    SPECIAL_CARD = "SP CARD"
    SECRET_RARE = "SEC"
    PROMO = "P"
    TREASURE_RARE = "TR"


class CardType(str, Enum):
    LEADER = "LEADER"
    STAGE = "STAGE"
    EVENT = "EVENT"
    CHARACTER = "CHARACTER"


class Color(str, Enum):
    RED = "Red"
    BLUE = "Blue"
    GREEN = "Green"
    YELLOW = "Yellow"
    BLACK = "Black"
    PURPLE = "Purple"


class CardEffect(str, Enum):
    """
    Bracketed keyword tags recognised in effect text.

    Declaration order is the order tags are reported in, regardless of
    where they appear in the text.
    """

    ACTIVATE_MAIN = "[Activate: Main]"
    BANISH = "[Banish]"
    BLOCKER = "[Blocker]"
    COUNTER = "[Counter]"
    DON_X1 = "[DON!! x1]"
    DON_X2 = "[DON!! x2]"
    DOUBLE_ATTACK = "[Double Attack]"
    END_OF_YOUR_TURN = "[End of Your Turn]"
    MAIN = "[Main]"
    ON_BLOCK = "[On Block]"
    ON_KO = "[On K.O.]"
    ON_PLAY = "[On Play]"
    ON_YOUR_OPPONENTS_ATTACK = "[On Your Opponent's Attack]"
    ONCE_PER_TURN = "[Once Per Turn]"
    OPPONENTS_TURN = "[Opponent's Turn]"
    RUSH = "[Rush]"
    TRIGGER = "[Trigger]"
    WHEN_ATTACKING = "[When Attacking]"
    YOUR_TURN = "[Your Turn]"


def split_card_number(card_number: str) -> tuple[str, int]:
    """
    Split a card number into its prefix and trailing number.

    Examples:
        "ST01-001" -> ("ST01-", 1)
        "OP05-119" -> ("OP05-", 119)
        "P-001"    -> ("P-", 1)
        "P001"     -> ("P", 1)
    """
    # Everything before the first ASCII digit, or nothing if there is no digit
    numeric_start = next((i for i, c in enumerate(card_number) if c in string.digits), 0)
    prefix, rest = card_number[:numeric_start], card_number[numeric_start:]

    # A hyphen at the very start of the remainder does not count as a separator
    last_dash = rest.rfind("-")
    if last_dash > 0:
        final_number = rest[last_dash + 1 :]
        prefix = f"{prefix}{rest[:last_dash]}-"
    else:
        final_number = rest

    digits = "".join(c for c in final_number if c in string.digits)
    return prefix, int(digits) if digits else 0


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Card:
    """
    One printing on the card list.

    Attributes:
        card_name: Name with HTML entities decoded and "(Parallel)" removed
        card_number: Vendor number, e.g. "ST01-001"
        is_alternate_art: Image filename is "<card_number>_..." and the set
            label is not an "Included in" note
        image_url: Fully qualified image URL (merge identity)
        life / cost / power / counter: Numeric text or "-" when not applicable
        attributes: Attribute names, ["-"] when none
        types: Subtypes, may be empty
        effects: Full effect text, None in the public view
        card_effects: Recognised effect tags, ["-"] when none
        card_sets: Normalised set label
        image_name: Image filename without extension
    """

    card_name: str
    card_number: str
    rarity: Rarity
    is_alternate_art: bool
    card_type: CardType
    image_url: str
    life: str
    cost: str
    attributes: list[str]
    power: str
    counter: str
    colors: list[Color]
    types: list[str]
    effects: str | None
    card_effects: list[str]
    card_sets: str
    image_name: str

    def sort_key(self) -> tuple[str, str, int]:
        """Set label, then card number prefix, then card number as an integer."""
        prefix, number = split_card_number(self.card_number)
        return self.card_sets, prefix, number

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.card_sets == other.card_sets and self.card_number == other.card_number

    def __lt__(self, other: "Card") -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        return hash((self.card_sets, self.card_number))


def sort_cards(cards: list[Card]) -> list[Card]:
    """Return cards in persisted order (stable for equal keys)."""
    return sorted(cards, key=Card.sort_key)
