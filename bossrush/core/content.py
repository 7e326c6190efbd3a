import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from bossrush.core.constants import UnitClass
from bossrush.core.logging import log_debug
from bossrush.items.equipment import Equipment
from bossrush.items.potion import Potion
from bossrush.units.unit_template import BossTemplate, ClassTemplate

# Content shipped with the package.
DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class ContentRepository:
    """
    One-stop registry for the game content: class templates, the boss roster,
    the equipment catalog and the potions.
    """

    classes: dict[UnitClass, ClassTemplate]
    bosses: list[BossTemplate]
    equipment: dict[str, Equipment]
    potions: dict[str, Potion]

    def __init__(self, data_dir: Path | None = None) -> None:
        """
        Initialize the ContentRepository.

        Args:
            data_dir (Path | None):
                The directory containing the data files. Defaults to the
                content shipped with the package.

        """
        self.data_dir = Path(data_dir) if data_dir else DEFAULT_DATA_DIR
        self.reload(self.data_dir)

    def reload(self, root: Path) -> None:
        """
        (Re)load all JSON assets from disk.

        Args:
            root (Path):
                The directory containing data files to load.
        """
        self.classes = _load_json_file(
            root / "classes.json",
            self._load_classes,
            "class templates",
        )
        self.bosses = _load_json_file(
            root / "bosses.json",
            self._load_bosses,
            "boss roster",
        )
        self.equipment = _load_json_file(
            root / "equipment.json",
            self._load_equipment,
            "equipment",
        )
        self.potions = _load_json_file(
            root / "potions.json",
            self._load_potions,
            "potions",
        )
        if UnitClass.BOSS not in self.classes:
            raise ValueError(f"No BOSS class template in {root / 'classes.json'}")

    # === Queries ===

    def get_class_template(self, unit_class: UnitClass) -> ClassTemplate:
        """
        Get the template of a unit class.

        Raises:
            ValueError: If the class has no template.

        """
        template = self.classes.get(unit_class)
        if template is None:
            raise ValueError(f"No template for class {unit_class}")
        return template

    def get_boss(self, stage: int) -> BossTemplate:
        """
        Get the roster entry of the boss guarding a stage.

        Args:
            stage (int): The 1-based stage number.

        Raises:
            ValueError: If the roster has no boss for that stage.

        """
        if stage < 1 or stage > len(self.bosses):
            raise ValueError(
                f"No boss for stage {stage}, the roster has {len(self.bosses)} entries."
            )
        return self.bosses[stage - 1]

    @property
    def equipment_catalog(self) -> list[Equipment]:
        return list(self.equipment.values())

    @property
    def potion_catalog(self) -> list[Potion]:
        return list(self.potions.values())

    # === Loaders ===

    @staticmethod
    def _load_classes(data: list[dict]) -> dict[UnitClass, ClassTemplate]:
        """
        Load class templates from JSON data.

        Raises:
            ValueError: If a class is defined twice.

        """
        classes: dict[UnitClass, ClassTemplate] = {}
        for class_data in data:
            template = ClassTemplate(**class_data)
            if template.unit_class in classes:
                raise ValueError(f"Duplicate class: {template.unit_class}")
            classes[template.unit_class] = template
        return classes

    @staticmethod
    def _load_bosses(data: list[dict]) -> list[BossTemplate]:
        """
        Load the boss roster from JSON data, in stage order.

        Raises:
            ValueError: If a boss appears twice.

        """
        bosses: list[BossTemplate] = []
        for boss_data in data:
            boss = BossTemplate(**boss_data)
            if any(entry.name == boss.name for entry in bosses):
                raise ValueError(f"Duplicate boss name: {boss.name}")
            bosses.append(boss)
        return bosses

    @staticmethod
    def _load_equipment(data: list[dict]) -> dict[str, Equipment]:
        """
        Load the equipment catalog from JSON data.

        Raises:
            ValueError: If duplicate equipment names are found.

        """
        equipment: dict[str, Equipment] = {}
        for item_data in data:
            item = Equipment(**item_data)
            if item.name in equipment:
                raise ValueError(f"Duplicate equipment name: {item.name}")
            equipment[item.name] = item
        return equipment

    @staticmethod
    def _load_potions(data: list[dict]) -> dict[str, Potion]:
        potions: dict[str, Potion] = {}
        for potion_data in data:
            potion = Potion(**potion_data)
            if potion.name in potions:
                raise ValueError(f"Duplicate potion name: {potion.name}")
            potions[potion.name] = potion
        return potions


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[list[dict]], Any],
    description: str,
) -> Any:
    """Helper to load and validate JSON files"""
    try:
        log_debug(f"Loading {description} using {loader_func.__name__}...")
        # Validate file path
        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")
        if not filepath.is_file():
            raise ValueError(f"Not a file: {filepath}")
        # Load and validate JSON
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not data:
            raise ValueError(f"Empty data list in {filepath}")
        if not isinstance(data, list):
            raise ValueError(f"Expected list in {filepath}, got {type(data).__name__}")
        return loader_func(data)
    except (json.JSONDecodeError, FileNotFoundError, ValueError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}")
