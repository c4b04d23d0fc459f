"""
Content repository for the battle engine.

Loads the static JSON content shipped under ``ironfist/data``: the boss
catalog, the preset opponents and the training dummy weights.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from catchery import log_warning
from pydantic import BaseModel, Field, ValidationError

from ironfist.actions.abilities.ability_catalog import is_boss_ability
from ironfist.character.character_stats import STAT_NAMES, BaseStats

from .constants import CharacterClass
from .utils import ContentError, Singleton

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class BossCatalogEntry(BaseModel):
    """A dungeon boss and the boss abilities it may use."""

    dungeon_id: str = Field(description="The dungeon the boss guards.")
    boss_index: int = Field(ge=0, description="Position of the boss in the dungeon.")
    name: str = Field(description="Display name.")
    description: str = Field("", description="Flavour text.")
    ability_ids: list[str] = Field(
        default_factory=list,
        description="Ids from the boss ability table.",
    )


class PresetOpponent(BaseModel):
    """A fixed test opponent."""

    id: str
    name: str
    character_class: CharacterClass
    level: int = Field(ge=1)
    stats: BaseStats
    armor: int = Field(0, ge=0)


class TrainingDummyWeights(BaseModel):
    """Per-stat weights applied to a player's stats to build a dummy."""

    id: str
    name: str
    description: str = ""
    character_class: CharacterClass
    weights: dict[str, float] = Field(
        description="Multiplier applied to each of the player's stats.",
    )

    def model_post_init(self, _: Any) -> None:
        missing = set(STAT_NAMES) - set(self.weights)
        if missing:
            raise ValueError(f"Missing stat weights: {sorted(missing)}")
        if any(weight < 0 for weight in self.weights.values()):
            raise ValueError("Stat weights must be non-negative.")


class ContentRepository(metaclass=Singleton):
    """
    One-stop registry for the static content used to build combatants.
    """

    bosses: dict[tuple[str, int], BossCatalogEntry]
    presets: dict[str, PresetOpponent]
    dummies: dict[str, TrainingDummyWeights]

    def __init__(self, data_dir: Path | None = None) -> None:
        """
        Initialize the ContentRepository.

        Args:
            data_dir (Path | None):
                The directory containing the data files. The packaged data
                directory is used on first use when None.

        """
        if data_dir:
            self.reload(data_dir)
        elif not hasattr(self, "loaded"):
            self.reload(DATA_DIR)

    def reload(self, root: Path) -> None:
        """
        (Re)load every JSON asset from disk.

        Args:
            root (Path):
                The directory containing the data files.

        Raises:
            ContentError:
                If a file is missing or malformed.

        """
        self.bosses = _load_json_file(
            root / "boss_catalog.json",
            self._load_bosses,
            "boss catalog",
        )
        self.presets = _load_json_file(
            root / "preset_opponents.json",
            self._load_presets,
            "preset opponents",
        )
        self.dummies = _load_json_file(
            root / "training_dummies.json",
            self._load_dummies,
            "training dummies",
        )
        self.loaded = True

    # ============================================================================
    # LOOKUPS
    # ============================================================================

    def get_boss_catalog_entry(
        self, dungeon_id: str, boss_index: int
    ) -> BossCatalogEntry | None:
        """
        Returns the boss at ``boss_index`` in ``dungeon_id``.

        Args:
            dungeon_id (str):
                The dungeon identifier.
            boss_index (int):
                Position of the boss in the dungeon, starting at 0.

        Returns:
            BossCatalogEntry | None:
                The entry, or None if there is no such boss.

        """
        entry = self.bosses.get((dungeon_id, boss_index))
        if entry is None:
            log_warning(
                "Boss not found in the catalog.",
                {"dungeon_id": dungeon_id, "boss_index": boss_index},
            )
        return entry

    def get_dungeon_bosses(self, dungeon_id: str) -> list[BossCatalogEntry]:
        """Returns the bosses of a dungeon ordered by index."""
        return sorted(
            (entry for entry in self.bosses.values() if entry.dungeon_id == dungeon_id),
            key=lambda entry: entry.boss_index,
        )

    def get_preset(self, preset_id: str) -> PresetOpponent | None:
        preset = self.presets.get(preset_id)
        if preset is None:
            log_warning(
                f"Preset opponent '{preset_id}' not found.",
                {"preset_id": preset_id, "available": sorted(self.presets)},
            )
        return preset

    def get_dummy(self, dummy_id: str) -> TrainingDummyWeights | None:
        dummy = self.dummies.get(dummy_id)
        if dummy is None:
            log_warning(
                f"Training dummy '{dummy_id}' not found.",
                {"dummy_id": dummy_id, "available": sorted(self.dummies)},
            )
        return dummy

    # ============================================================================
    # LOADERS
    # ============================================================================

    @staticmethod
    def _load_bosses(data: list[dict]) -> dict[tuple[str, int], BossCatalogEntry]:
        bosses: dict[tuple[str, int], BossCatalogEntry] = {}
        for item in data:
            entry = BossCatalogEntry(**item)
            unknown = [aid for aid in entry.ability_ids if not is_boss_ability(aid)]
            if unknown:
                log_warning(
                    f"Boss '{entry.name}' references unknown abilities, ignoring them.",
                    {"dungeon_id": entry.dungeon_id, "unknown": unknown},
                )
                entry.ability_ids = [
                    aid for aid in entry.ability_ids if is_boss_ability(aid)
                ]
            bosses[(entry.dungeon_id, entry.boss_index)] = entry
        return bosses

    @staticmethod
    def _load_presets(data: list[dict]) -> dict[str, PresetOpponent]:
        presets: dict[str, PresetOpponent] = {}
        for item in data:
            preset = PresetOpponent(**item)
            presets[preset.id] = preset
        return presets

    @staticmethod
    def _load_dummies(data: list[dict]) -> dict[str, TrainingDummyWeights]:
        dummies: dict[str, TrainingDummyWeights] = {}
        for item in data:
            dummy = TrainingDummyWeights(**item)
            dummies[dummy.id] = dummy
        return dummies


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[list[dict]], dict[Any, Any]],
    description: str,
) -> dict[Any, Any]:
    """
    Reads a JSON list of records and hands it to ``loader_func``.

    Raises:
        ContentError:
            If the file is missing, is not a non-empty JSON list, or one of
            its records fails validation.

    """
    if not filepath.is_file():
        raise ContentError(f"Missing {description} file: {filepath}")
    try:
        data = json.loads(filepath.read_text(encoding="utf-8"))
        if not isinstance(data, list) or not data:
            raise ValueError(f"expected a non-empty list, got {type(data).__name__}")
        return loader_func(data)
    except (json.JSONDecodeError, ValidationError, ValueError) as e:
        raise ContentError(f"Invalid {description} in {filepath}: {e}") from e
