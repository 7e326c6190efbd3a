"""
Tests for the status effect table of a unit.
"""

from bossrush.core.constants import StatusKind


def test_reapplying_status_overwrites_duration_and_keeps_order(boss):
    """
    Test that re-applying a status overwrites its remaining turns in place.
    """
    boss.add_status(StatusKind.POISON, 3, "Hero")
    boss.add_status(StatusKind.BLEED, 2, "Hero")
    boss.add_status(StatusKind.POISON, 5, "Hero")

    assert list(boss.effects.statuses) == [StatusKind.POISON, StatusKind.BLEED]
    assert boss.effects.get_remaining(StatusKind.POISON) == 5
    assert "Hero applied Poison to Goblin King!" in boss.battle_log


def test_none_and_empty_statuses_are_ignored(boss):
    assert not boss.add_status(StatusKind.NONE, 3, "Hero")
    assert not boss.add_status(StatusKind.POISON, 0, "Hero")
    assert len(boss.effects) == 0


def test_poison_ticks_then_wears_off(boss):
    """
    Test that poison deals 5 damage per tick and is removed after its last tick.
    """
    boss.add_status(StatusKind.POISON, 3, "Hero")

    boss.process_status_effects()
    assert boss.health == 85
    assert boss.effects.get_remaining(StatusKind.POISON) == 2

    boss.process_status_effects()
    boss.process_status_effects()
    assert boss.health == 75
    assert not boss.has_status(StatusKind.POISON)
    assert "Goblin King took 5 damage from Poison! [90 -> 85/90 HP]" in boss.battle_log
    assert "Goblin King's Poison wore off!" in boss.battle_log


def test_damage_over_time_respects_defense(warrior):
    """
    Test that poison and bleed go through the defense-reduced damage pipeline.
    """
    warrior.add_status(StatusKind.POISON, 1, "Boss")
    warrior.process_status_effects()
    assert warrior.health == 117

    warrior.increase_defense(10)
    warrior.add_status(StatusKind.BLEED, 1, "Boss")
    warrior.process_status_effects()
    assert warrior.health == 116


def test_damage_over_time_does_not_hit_dead_units(boss):
    boss.add_status(StatusKind.POISON, 3, "Hero")
    boss.take_damage(1000)
    boss.clear_battle_log()

    boss.process_status_effects()

    assert boss.health == 0
    assert not any("took" in entry for entry in boss.battle_log)


def test_attack_modifiers_restore_base_attack(warrior):
    """
    Test that ticking out both Strength Up and Weakness restores the base attack.
    """
    warrior.add_status(StatusKind.STRENGTH_UP, 3, "Hero")
    warrior.add_status(StatusKind.WEAKNESS, 2, "Boss")

    warrior.process_status_effects()
    # Weakness was applied last, so it is processed last.
    assert warrior.current_attack == 15

    warrior.process_status_effects()
    assert not warrior.has_status(StatusKind.WEAKNESS)
    assert warrior.current_attack == 20

    warrior.process_status_effects()
    assert len(warrior.effects) == 0
    assert warrior.current_attack == warrior.base_attack == 20


def test_strength_up_raises_attack_while_active(warrior):
    warrior.add_status(StatusKind.STRENGTH_UP, 3, "Hero")
    warrior.process_status_effects()
    assert warrior.current_attack == 30


def test_weakness_never_drops_attack_below_one(warrior):
    warrior.stats.base_attack = 3
    warrior.add_status(StatusKind.WEAKNESS, 2, "Boss")
    warrior.process_status_effects()
    assert warrior.current_attack == 1


def test_clearing_attack_modifier_resets_attack(warrior):
    warrior.add_status(StatusKind.STRENGTH_UP, 3, "Hero")
    warrior.process_status_effects()

    assert warrior.clear_status(StatusKind.STRENGTH_UP)
    assert warrior.current_attack == 20
    assert not warrior.clear_status(StatusKind.STRENGTH_UP)


def test_stun_only_counts_down(warrior):
    warrior.add_status(StatusKind.STUN, 2, "Boss")
    warrior.process_status_effects()
    assert warrior.health == 120
    assert warrior.effects.get_remaining(StatusKind.STUN) == 1


def test_status_line_lists_active_statuses(boss):
    boss.add_status(StatusKind.POISON, 3, "Hero")
    assert "Poison" in boss.display.get_effects_summary()
    assert "(3)" in boss.display.get_effects_summary()
