"""
Combatant builder for the battle engine.

Folds raw character stats, origin bonuses and aggregated equipment bonuses
into a ready-to-fight ``CombatantState``. Invalid inputs are rejected here,
before a battle ever starts.
"""

import math

from pydantic import BaseModel, Field, TypeAdapter

from ironfist.core.constants import CharacterClass, CharacterOrigin
from ironfist.core.utils import ContentError

from .character_origin import apply_origin_bonuses
from .character_stats import STAT_NAMES, BaseStats, compute_derived_stats
from .combatant import CombatantState

_ORIGIN_ADAPTER = TypeAdapter(CharacterOrigin | None)


class EquipmentBonuses(BaseModel):
    """Stats aggregated from every equipped item."""

    ATK: int = Field(0, description="Added to strength.")
    DEF: int = Field(0, description="Added to endurance.")
    HP: int = Field(0, description="Added to max HP.")
    CRIT: float = Field(0.0, description="Added to crit chance, in percent.")
    SPEED: int = Field(0, description="Reserved, not used by the combat formulas.")
    ARMOR: int = Field(0, description="Added to flat armor.")


def build_combatant_state(
    *,
    id: str,
    name: str,
    character_class: CharacterClass | str,
    level: int,
    stats: BaseStats,
    origin: CharacterOrigin | str | None = None,
    armor: int = 0,
    equipment_bonuses: EquipmentBonuses | None = None,
    boss_ability_ids: list[str] | None = None,
) -> CombatantState:
    """
    Builds the battle state of a character.

    ATK and DEF raise strength and endurance before the origin bonuses are
    applied; HP, CRIT and ARMOR are added to the derived values.

    Args:
        id (str):
            Unique identifier of the combatant.
        name (str):
            Display name.
        character_class (CharacterClass | str):
            The class, which decides the available abilities.
        level (int):
            Character level.
        stats (BaseStats):
            Raw stats before origin and equipment.
        origin (CharacterOrigin | str | None):
            Optional origin.
        armor (int):
            Flat armor of the character.
        equipment_bonuses (EquipmentBonuses | None):
            Aggregated equipment stats.
        boss_ability_ids (list[str] | None):
            Boss abilities the combatant may use.

    Returns:
        CombatantState:
            A full-health state ready for ``simulate_combat``.

    Raises:
        pydantic.ValidationError:
            If the class, origin, level or stats are invalid.

    """
    equipment = equipment_bonuses or EquipmentBonuses()
    origin = _ORIGIN_ADAPTER.validate_python(origin)
    boosted = stats.model_copy(
        update={
            "strength": stats.strength + equipment.ATK,
            "endurance": stats.endurance + equipment.DEF,
        }
    )
    base = apply_origin_bonuses(BaseStats.model_validate(boosted.model_dump()), origin)
    total_armor = armor + equipment.ARMOR
    derived = compute_derived_stats(
        base,
        armor=total_armor,
        crit_equipment_bonus=equipment.CRIT,
    )
    max_hp = derived.max_hp + equipment.HP
    return CombatantState(
        id=id,
        name=name,
        character_class=character_class,
        origin=origin,
        level=level,
        base_stats=base,
        derived=derived,
        current_hp=max_hp,
        max_hp=max_hp,
        armor=total_armor,
        magic_resist=derived.magic_resist,
        boss_ability_ids=list(boss_ability_ids) if boss_ability_ids else None,
    )


def build_preset_opponent(preset_id: str, *, id: str | None = None) -> CombatantState:
    """
    Builds one of the fixed test opponents.

    Raises:
        ContentError:
            If the preset does not exist.

    """
    from ironfist.core.content import ContentRepository
    preset = ContentRepository().get_preset(preset_id)
    if preset is None:
        raise ContentError(f"Unknown preset opponent: {preset_id}")
    return build_combatant_state(
        id=id or f"preset_{preset.id}",
        name=preset.name,
        character_class=preset.character_class,
        level=preset.level,
        stats=preset.stats,
        armor=preset.armor,
    )


def scale_dummy_stats(player_stats: BaseStats, weights: dict[str, float]) -> BaseStats:
    """Scales each player stat by its weight, flooring and keeping at least 1."""
    return BaseStats(
        **{
            stat: max(1, math.floor(getattr(player_stats, stat) * weights[stat]))
            for stat in STAT_NAMES
        }
    )


def build_training_dummy(
    dummy_id: str,
    player: CombatantState,
    *,
    id: str = "training_dummy",
) -> CombatantState:
    """
    Builds a practice opponent whose stats follow the player's own stats,
    weighted to the flavour of the dummy's class.

    Args:
        dummy_id (str):
            The dummy preset, one per class.
        player (CombatantState):
            The player the dummy is scaled from.
        id (str):
            Identifier of the dummy.

    Returns:
        CombatantState:
            The dummy at the player's level, without armor.

    Raises:
        ContentError:
            If the dummy preset does not exist.

    """
    from ironfist.core.content import ContentRepository
    dummy = ContentRepository().get_dummy(dummy_id)
    if dummy is None:
        raise ContentError(f"Unknown training dummy: {dummy_id}")
    return build_combatant_state(
        id=id,
        name=dummy.name,
        character_class=dummy.character_class,
        level=player.level,
        stats=scale_dummy_stats(player.base_stats, dummy.weights),
    )


def build_boss_combatant(
    dungeon_id: str,
    boss_index: int,
    *,
    level: int,
    stats: BaseStats,
    armor: int = 0,
    current_hp: int | None = None,
    max_hp: int | None = None,
    id: str = "boss",
) -> CombatantState:
    """
    Builds a dungeon boss with the abilities listed in the boss catalog.

    Bosses fight as warriors; their damage options come from their boss
    abilities. The dungeon run may carry the boss's HP across fights, so
    both ``max_hp`` and ``current_hp`` can be overridden.

    Raises:
        ContentError:
            If the boss is not in the catalog.
        pydantic.ValidationError:
            If the overridden ``max_hp`` is below 1.

    """
    from ironfist.core.content import ContentRepository
    entry = ContentRepository().get_boss_catalog_entry(dungeon_id, boss_index)
    if entry is None:
        raise ContentError(f"Unknown boss: {dungeon_id}#{boss_index}")
    state = build_combatant_state(
        id=id,
        name=entry.name,
        character_class=CharacterClass.WARRIOR,
        level=level,
        stats=stats,
        armor=armor,
        boss_ability_ids=entry.ability_ids,
    )
    overrides: dict[str, int] = {}
    if max_hp is not None:
        overrides["max_hp"] = overrides["current_hp"] = max_hp
    if current_hp is not None:
        ceiling = overrides.get("max_hp", state.max_hp)
        overrides["current_hp"] = max(0, min(current_hp, ceiling))
    if not overrides:
        return state
    return CombatantState.model_validate({**state.model_dump(), **overrides})
