from dataclasses import dataclass, field

from opcardlist.models.card import CardType, Rarity


@dataclass
class FilterIndex:
    """
    Distinct values per filterable field, each list sorted.

    Rebuilt from the full collection on every run. Field names are the keys
    of the published filters.json.
    """

    card_names: list[str] = field(default_factory=list)
    card_numbers: list[str] = field(default_factory=list)
    rarities: list[Rarity] = field(default_factory=list)
    card_types: list[CardType] = field(default_factory=list)
    life_values: list[str] = field(default_factory=list)
    cost_values: list[str] = field(default_factory=list)
    powers: list[str] = field(default_factory=list)
    counters: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    types: list[str] = field(default_factory=list)
    card_effects: list[str] = field(default_factory=list)
    card_sets: list[str] = field(default_factory=list)
