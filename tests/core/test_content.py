"""
Tests for the content repository and the shipped data files.
"""

import json
import shutil

import pytest

from bossrush.core.constants import PotionKind, UnitClass
from bossrush.core.content import DEFAULT_DATA_DIR, ContentRepository
from bossrush.core.utils import BattleLog, RandomSource


def test_boss_roster_order(repo):
    assert [boss.name for boss in repo.bosses] == [
        "Goblin King",
        "Shadow Knight",
        "Crimson Wraith",
        "Lich Queen",
        "Doom Reaper",
    ]
    assert repo.get_boss(5).skill_names == ["Void Strike", "Void Corruption", "Void Stasis"]


def test_equipment_catalog(repo):
    assert set(repo.equipment) == {
        "Fire Sword",
        "Ice Shield",
        "Vampire Ring",
        "Poison Dagger",
        "Dragon Scale",
        "Lightning Orb",
    }
    assert repo.equipment["Lightning Orb"].attack == 12
    assert repo.equipment["Fire Sword"].description == "Burns enemies with fire damage"


def test_potions(repo):
    assert repo.potions["Health Potion"].kind == PotionKind.HEALTH
    assert repo.potions["Health Potion"].amount == 30
    assert repo.potions["Mana Potion"].kind == PotionKind.MANA
    assert repo.potions["Mana Potion"].amount == 20


def test_class_skills(repo):
    template = repo.get_class_template(UnitClass.ARCHER)
    assert [skill.name for skill in template.skills] == [
        "Poison Arrow",
        "Piercing Shot",
        "Double Shot",
    ]
    assert [skill.cost for skill in template.skills] == [10, 15, 20]


def test_class_descriptions(repo):
    assert repo.get_class_template(UnitClass.WARRIOR).description == (
        "High HP, Medium MP, Physical skills"
    )
    assert repo.get_class_template(UnitClass.ARCHER).description == (
        "Medium HP, Poison/Bleed skills"
    )
    assert repo.get_class_template(UnitClass.MAGE).description == (
        "Low HP, High MP, Magic skills"
    )


def test_missing_entries(repo):
    assert "Excalibur" not in repo.equipment
    with pytest.raises(ValueError):
        repo.get_boss(6)


def test_duplicate_equipment_is_rejected(tmp_path):
    """
    Test that a data directory with a duplicated item fails to load.
    """
    for path in DEFAULT_DATA_DIR.glob("*.json"):
        shutil.copy(path, tmp_path / path.name)
    items = json.loads((tmp_path / "equipment.json").read_text(encoding="utf-8"))
    items.append(items[0])
    (tmp_path / "equipment.json").write_text(json.dumps(items), encoding="utf-8")

    with pytest.raises(ValueError, match="Duplicate equipment name"):
        ContentRepository(tmp_path)


def test_missing_file_is_reported(tmp_path):
    with pytest.raises(ValueError, match="raised an error"):
        ContentRepository(tmp_path)


def test_battle_log_drain():
    log = BattleLog()
    log.add("one")
    log.add("two")
    assert log.drain() == ["one", "two"]
    assert len(log) == 0


def test_random_source_is_reproducible():
    first = RandomSource(3)
    second = RandomSource(3)
    assert [first.coin_flip() for _ in range(10)] == [second.coin_flip() for _ in range(10)]
