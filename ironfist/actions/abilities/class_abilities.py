"""
Player class abilities.

Four abilities per class, unlocked at levels 5, 10, 15 and 20.
"""

from ironfist.core.constants import AbilityType, CharacterClass, StatusEffectType

from .base_ability import AbilityDef, StatusSpec

CLASS_ABILITIES: dict[CharacterClass, tuple[AbilityDef, ...]] = {
    CharacterClass.WARRIOR: (
        AbilityDef(
            id="heavy_strike",
            name="Heavy Strike",
            unlock_level=5,
            type=AbilityType.PHYSICAL,
            multiplier=2.0,
            status=StatusSpec(chance=0.15, duration=1, type=StatusEffectType.STUN),
            cooldown=3,
        ),
        AbilityDef(
            id="battle_cry",
            name="Battle Cry",
            unlock_level=10,
            type=AbilityType.BUFF,
            self_buff={"str": 0.3},
            cooldown=6,
        ),
        AbilityDef(
            id="whirlwind",
            name="Whirlwind",
            unlock_level=15,
            type=AbilityType.PHYSICAL,
            multiplier=1.5,
            hits=2,
            cooldown=4,
        ),
        AbilityDef(
            id="titan_slam",
            name="Titan's Slam",
            unlock_level=20,
            type=AbilityType.PHYSICAL,
            multiplier=3.5,
            armor_break=0.5,
            cooldown=5,
        ),
    ),
    CharacterClass.ROGUE: (
        AbilityDef(
            id="quick_strike",
            name="Quick Strike",
            unlock_level=5,
            type=AbilityType.PHYSICAL,
            multiplier=1.6,
            crit_bonus=20,
            cooldown=2,
        ),
        AbilityDef(
            id="shadow_step",
            name="Shadow Step",
            unlock_level=10,
            type=AbilityType.BUFF,
            dodge_bonus=50,
            dodge_bonus_turns=2,
            cooldown=5,
        ),
        AbilityDef(
            id="backstab",
            name="Backstab",
            unlock_level=15,
            type=AbilityType.PHYSICAL,
            multiplier=2.5,
            first_strike_only=True,
            cooldown=3,
        ),
        AbilityDef(
            id="assassinate",
            name="Assassinate",
            unlock_level=20,
            type=AbilityType.PHYSICAL,
            multiplier=4.0,
            execute_threshold=0.3,
            cooldown=6,
        ),
    ),
    CharacterClass.MAGE: (
        AbilityDef(
            id="fireball",
            name="Fireball",
            unlock_level=5,
            type=AbilityType.MAGIC,
            multiplier=2.2,
            status=StatusSpec(chance=0.18, duration=3, type=StatusEffectType.BURN),
            cooldown=2,
        ),
        AbilityDef(
            id="frost_nova",
            name="Frost Nova",
            unlock_level=10,
            type=AbilityType.MAGIC,
            multiplier=1.8,
            status=StatusSpec(chance=0.25, duration=2, type=StatusEffectType.SLOW),
            cooldown=4,
        ),
        AbilityDef(
            id="lightning_strike",
            name="Lightning Strike",
            unlock_level=15,
            type=AbilityType.MAGIC,
            multiplier=2.8,
            status=StatusSpec(chance=0.1, duration=1, type=StatusEffectType.STUN),
            cooldown=3,
        ),
        AbilityDef(
            id="meteor_storm",
            name="Meteor Storm",
            unlock_level=20,
            type=AbilityType.MAGIC,
            multiplier=3.8,
            cooldown=6,
        ),
    ),
    CharacterClass.TANK: (
        AbilityDef(
            id="shield_bash",
            name="Shield Bash",
            unlock_level=5,
            type=AbilityType.PHYSICAL,
            multiplier=1.4,
            cooldown=2,
        ),
        AbilityDef(
            id="iron_wall",
            name="Iron Wall",
            unlock_level=10,
            type=AbilityType.BUFF,
            self_buff={"armor": 0.8},
            cooldown=6,
        ),
        AbilityDef(
            id="counter_strike",
            name="Counter Strike",
            unlock_level=15,
            type=AbilityType.PHYSICAL,
            multiplier=1.2,
            cooldown=4,
        ),
        AbilityDef(
            id="immovable_object",
            name="Immovable Object",
            unlock_level=20,
            type=AbilityType.BUFF,
            self_buff={"resist": 0.6},
            cooldown=8,
        ),
    ),
}
