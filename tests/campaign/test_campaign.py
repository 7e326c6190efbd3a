"""
Tests for the campaign loop and the stage-clear rewards.
"""

import pytest

from bossrush.campaign import Campaign, apply_upgrade
from bossrush.core.constants import (
    FINAL_STAGE,
    BattleState,
    CampaignOutcome,
    CoinSide,
    Upgrade,
)


@pytest.fixture
def champion(warrior):
    """A warrior strong enough to defeat any boss with one attack."""
    warrior.increase_attack(500)
    warrior.clear_battle_log()
    return warrior


def test_apply_each_upgrade(warrior):
    warrior.take_damage(42)
    warrior.spend_mana(30)

    apply_upgrade(warrior, Upgrade.HEAL)
    apply_upgrade(warrior, Upgrade.RESTORE_MANA)
    apply_upgrade(warrior, Upgrade.ATTACK)
    apply_upgrade(warrior, Upgrade.DEFENSE)

    assert warrior.health == 110
    assert warrior.mana == 40
    assert warrior.base_attack == 25
    assert warrior.defense == 5


def test_campaign_win(champion, repo, make_ui, make_rng):
    """
    Test that clearing all five stages wins, with rewards after every stage.
    """
    ui = make_ui()
    result = Campaign(champion, ui, make_rng(), repo).run()

    assert result.outcome == CampaignOutcome.WON
    assert result.won
    assert result.stages_cleared == FINAL_STAGE
    assert result.defeated_at is None
    assert ui.results == [result]
    assert [stage for stage, _ in ui.rewards] == [1, 2, 3, 4, 5]
    assert ui.calls["upgrade"] == 4
    assert ui.calls["equipment"] == 4
    assert len(champion.inventory.equipment) == 4
    assert all(1 <= len(potions) <= 3 for _, potions in ui.rewards)
    assert len(champion.potions) == sum(len(potions) for _, potions in ui.rewards)


def test_defeat_ends_the_campaign(warrior, repo, make_ui, make_rng):
    """
    Test that losing a battle ends the campaign at once.
    """
    ui = make_ui()
    warrior.stats.health = 1
    result = Campaign(warrior, ui, make_rng(coins=[CoinSide.TAILS]), repo).run()

    assert result.outcome == CampaignOutcome.LOST
    assert result.stages_cleared == 0
    assert result.defeated_at == 1
    assert ui.rewards == []
    assert ui.calls["upgrade"] == 0
    assert ui.calls["coin"] == 1
    assert "Hero was defeated in stage 1!" in ui.log


def test_coin_is_tossed_again_each_stage(champion, repo, make_ui, make_rng):
    """
    Test that losing the coin toss in stage 3 only affects stage 3.
    """
    ui = make_ui(coin_calls=[1, 1])
    campaign = Campaign(
        champion, ui, make_rng(coins=[CoinSide.TAILS, CoinSide.HEADS]), repo
    )

    assert campaign.run_stage(3) == BattleState.PLAYER_WON
    assert "Crimson Wraith goes first!" in ui.log

    assert campaign.run_stage(4) == BattleState.PLAYER_WON
    assert "Hero goes first!" in ui.log
    assert ui.calls["coin"] == 2


def test_player_state_carries_over(warrior, repo, make_ui, make_rng):
    """
    Test that the player is not restored between stages.
    """
    ui = make_ui(coin_calls=[2], upgrades=[Upgrade.DEFENSE])
    warrior.increase_attack(500)
    campaign = Campaign(warrior, ui, make_rng(coins=[CoinSide.HEADS]), repo)

    campaign.run_stage(1)

    # The boss struck once for 15 - 2 before falling.
    assert warrior.health == warrior.max_health - 13
    assert warrior.defense >= 5


def test_final_stage_only_drops_potions(champion, repo, make_ui, make_rng):
    ui = make_ui()
    campaign = Campaign(champion, ui, make_rng(), repo)

    campaign.grant_rewards(FINAL_STAGE)

    assert ui.calls["upgrade"] == 0
    assert ui.calls["equipment"] == 0
    assert 1 <= len(champion.potions) <= 3


def test_equipment_offer_is_applied(champion, repo, make_ui, make_rng):
    ui = make_ui(equipment=[2])
    campaign = Campaign(champion, ui, make_rng(), repo)

    campaign.grant_rewards(1)

    offer = ui.offers[0]
    assert len({item.name for item in offer}) == 3
    assert champion.inventory.equipment == [offer[1]]


def test_out_of_range_equipment_choice(champion, repo, make_ui, make_rng):
    campaign = Campaign(champion, make_ui(equipment=[4]), make_rng(), repo)
    with pytest.raises(ValueError):
        campaign.grant_rewards(1)


def test_bosses_follow_the_roster(repo, warrior, make_ui, make_rng):
    campaign = Campaign(warrior, make_ui(), make_rng(), repo)
    boss = campaign.create_boss(2)
    assert boss.name == "Shadow Knight"
    assert (boss.max_health, boss.base_attack, boss.defense) == (110, 20, 1)
