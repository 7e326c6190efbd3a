"""
Campaign system module for the game.

Chains the boss battles of a run and applies the rewards between stages.
"""

from .campaign import Campaign, CampaignResult
from .rewards import apply_upgrade

__all__ = [
    # Import from campaign.py
    "Campaign",
    "CampaignResult",
    # Import from rewards.py
    "apply_upgrade",
]
