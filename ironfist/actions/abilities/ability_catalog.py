"""
Ability catalog lookups.

Player abilities are looked up by (class, id), boss abilities by id. The two
id namespaces are disjoint. Every lookup returns ``None`` for an unknown id:
callers treat that as a fallback to the basic attack, never as an error.
"""

from ironfist.core.constants import CharacterClass

from .base_ability import AbilityDef
from .boss_abilities import BOSS_ABILITIES
from .class_abilities import CLASS_ABILITIES

_BOSS_ABILITY_MAP: dict[str, AbilityDef] = {
    ability.id: ability for ability in BOSS_ABILITIES
}


def get_abilities_for_class(
    character_class: CharacterClass, level: int
) -> list[AbilityDef]:
    """Returns the class abilities unlocked at ``level``, in unlock order."""
    return [
        ability
        for ability in CLASS_ABILITIES.get(character_class, ())
        if ability.unlock_level <= level
    ]


def get_ability_by_id(
    character_class: CharacterClass, ability_id: str
) -> AbilityDef | None:
    """Finds a class ability by id, regardless of level."""
    for ability in CLASS_ABILITIES.get(character_class, ()):
        if ability.id == ability_id:
            return ability
    return None


def get_boss_ability_by_id(ability_id: str) -> AbilityDef | None:
    """Finds a boss ability by id."""
    return _BOSS_ABILITY_MAP.get(ability_id)


def is_boss_ability(ability_id: str) -> bool:
    return ability_id in _BOSS_ABILITY_MAP


def find_ability(
    character_class: CharacterClass, ability_id: str
) -> AbilityDef | None:
    """Tries the class table first, then the boss table."""
    return get_ability_by_id(character_class, ability_id) or get_boss_ability_by_id(
        ability_id
    )
