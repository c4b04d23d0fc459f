"""
Boss abilities.

Twenty abilities shared by every dungeon boss. They carry no level gate and
are assigned explicitly per boss in the boss catalog.
"""

from ironfist.core.constants import AbilityType, StatusEffectType

from .base_ability import AbilityDef, StatusSpec

_PHYSICAL = AbilityType.PHYSICAL
_MAGIC = AbilityType.MAGIC
_BUFF = AbilityType.BUFF

BOSS_ABILITIES: tuple[AbilityDef, ...] = (
    # Physical.
    AbilityDef(
        id="boss_crushing_blow",
        name="Crushing Blow",
        type=_PHYSICAL,
        multiplier=2.2,
        armor_break=0.3,
        cooldown=4,
    ),
    AbilityDef(
        id="boss_tail_swipe",
        name="Tail Swipe",
        type=_PHYSICAL,
        multiplier=1.4,
        hits=2,
        cooldown=3,
    ),
    AbilityDef(
        id="boss_frenzy",
        name="Frenzy",
        type=_PHYSICAL,
        multiplier=1.2,
        hits=3,
        cooldown=5,
    ),
    AbilityDef(
        id="boss_ground_slam",
        name="Ground Slam",
        type=_PHYSICAL,
        multiplier=2.5,
        status=StatusSpec(chance=0.25, duration=1, type=StatusEffectType.STUN),
        cooldown=5,
    ),
    AbilityDef(
        id="boss_impale",
        name="Impale",
        type=_PHYSICAL,
        multiplier=2.0,
        status=StatusSpec(chance=0.35, duration=3, type=StatusEffectType.BLEED),
        cooldown=4,
    ),
    AbilityDef(
        id="boss_charge",
        name="Charge",
        type=_PHYSICAL,
        multiplier=2.8,
        first_strike_only=True,
        cooldown=6,
    ),
    AbilityDef(
        id="boss_rend",
        name="Rend",
        type=_PHYSICAL,
        multiplier=1.6,
        status=StatusSpec(chance=0.4, duration=3, type=StatusEffectType.BLEED),
        crit_bonus=10,
        cooldown=3,
    ),
    # Magic.
    AbilityDef(
        id="boss_shadow_bolt",
        name="Shadow Bolt",
        type=_MAGIC,
        multiplier=2.4,
        status=StatusSpec(chance=0.2, duration=2, type=StatusEffectType.WEAKEN),
        cooldown=3,
    ),
    AbilityDef(
        id="boss_frost_breath",
        name="Frost Breath",
        type=_MAGIC,
        multiplier=2.0,
        status=StatusSpec(chance=0.3, duration=2, type=StatusEffectType.SLOW),
        cooldown=4,
    ),
    AbilityDef(
        id="boss_fire_wave",
        name="Fire Wave",
        type=_MAGIC,
        multiplier=1.8,
        hits=2,
        status=StatusSpec(chance=0.25, duration=3, type=StatusEffectType.BURN),
        cooldown=4,
    ),
    AbilityDef(
        id="boss_poison_cloud",
        name="Poison Cloud",
        type=_MAGIC,
        multiplier=1.4,
        status=StatusSpec(chance=0.45, duration=4, type=StatusEffectType.POISON),
        cooldown=5,
    ),
    AbilityDef(
        id="boss_life_drain",
        name="Life Drain",
        type=_MAGIC,
        multiplier=2.0,
        status=StatusSpec(chance=1.0, duration=2, type=StatusEffectType.REGEN),
        cooldown=5,
    ),
    AbilityDef(
        id="boss_chain_lightning",
        name="Chain Lightning",
        type=_MAGIC,
        multiplier=1.5,
        hits=3,
        status=StatusSpec(chance=0.15, duration=1, type=StatusEffectType.STUN),
        cooldown=5,
    ),
    AbilityDef(
        id="boss_arcane_burst",
        name="Arcane Burst",
        type=_MAGIC,
        multiplier=3.2,
        cooldown=6,
    ),
    # Buff and utility.
    AbilityDef(
        id="boss_enrage",
        name="Enrage",
        type=_BUFF,
        self_buff={"str": 0.35},
        cooldown=7,
    ),
    AbilityDef(
        id="boss_stone_skin",
        name="Stone Skin",
        type=_BUFF,
        self_buff={"armor": 0.6},
        cooldown=6,
    ),
    AbilityDef(
        id="boss_dark_shield",
        name="Dark Shield",
        type=_BUFF,
        self_buff={"resist": 0.5},
        cooldown=6,
    ),
    AbilityDef(
        id="boss_regeneration",
        name="Regeneration",
        type=_BUFF,
        self_buff={"regen": 0.08},
        cooldown=7,
    ),
    AbilityDef(
        id="boss_battle_roar",
        name="Battle Roar",
        type=_BUFF,
        self_buff={"str": 0.2},
        status=StatusSpec(chance=0.2, duration=1, type=StatusEffectType.STUN),
        cooldown=6,
    ),
    AbilityDef(
        id="boss_haste",
        name="Haste",
        type=_BUFF,
        dodge_bonus=35,
        dodge_bonus_turns=3,
        cooldown=7,
    ),
)
