"""Badge tier styling and badge collection summaries.

Tier styles are class-token descriptors handed to whatever renders the badge
(the web front end uses them as CSS classes, the terminal maps them to Rich
colors). Rendering a badge must never fail, so an unknown tier is styled as
bronze instead of raising.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from scholar_rank.models import Badge


class BadgeTier(str, Enum):
    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"
    DIAMOND = "diamond"

    @classmethod
    def parse(cls, value: str | None) -> "BadgeTier":
        """Return the matching tier, or BRONZE for anything unrecognized."""
        try:
            return cls(value)
        except ValueError:
            return cls.BRONZE


@dataclass(frozen=True)
class TierStyle:
    background: str
    text: str
    border: str
    glow: str


TIER_STYLES: dict[BadgeTier, TierStyle] = {
    BadgeTier.BRONZE: TierStyle(
        "bg-orange-900/30", "text-orange-400", "border-orange-700/50", "shadow-orange-500/20"
    ),
    BadgeTier.SILVER: TierStyle(
        "bg-slate-700/30", "text-slate-300", "border-slate-600/50", "shadow-slate-400/20"
    ),
    BadgeTier.GOLD: TierStyle(
        "bg-yellow-900/30", "text-yellow-400", "border-yellow-700/50", "shadow-yellow-500/30"
    ),
    BadgeTier.PLATINUM: TierStyle(
        "bg-purple-900/30", "text-purple-400", "border-purple-700/50", "shadow-purple-500/30"
    ),
    BadgeTier.DIAMOND: TierStyle(
        "bg-blue-900/30", "text-blue-400", "border-blue-700/50", "shadow-blue-500/40"
    ),
}

# Highest tier first, the order badge pages list them in.
DISPLAY_ORDER: list[BadgeTier] = [
    BadgeTier.DIAMOND,
    BadgeTier.PLATINUM,
    BadgeTier.GOLD,
    BadgeTier.SILVER,
    BadgeTier.BRONZE,
]

FILTER_MODES = ("all", "earned", "locked")


def present_badge_tier(tier: str | BadgeTier | None) -> TierStyle:
    """Return the style descriptor for a tier. Unknown or missing -> bronze."""
    if isinstance(tier, BadgeTier):
        return TIER_STYLES[tier]
    return TIER_STYLES[BadgeTier.parse(tier)]


def filter_badges(badges: Iterable[Badge], mode: str = "all") -> list[Badge]:
    """Filter a badge list by 'all', 'earned' or 'locked'."""
    if mode not in FILTER_MODES:
        raise ValueError(f"Invalid filter {mode!r}. Must be one of: {', '.join(FILTER_MODES)}")
    badges = list(badges)
    if mode == "earned":
        return [b for b in badges if b.earned]
    if mode == "locked":
        return [b for b in badges if not b.earned]
    return badges


def group_by_tier(badges: Iterable[Badge]) -> list[tuple[BadgeTier, list[Badge]]]:
    """Group badges by tier in DISPLAY_ORDER, skipping tiers with no badges."""
    buckets: dict[BadgeTier, list[Badge]] = {tier: [] for tier in DISPLAY_ORDER}
    for badge in badges:
        buckets[badge.tier].append(badge)
    return [(tier, buckets[tier]) for tier in DISPLAY_ORDER if buckets[tier]]


def completion_pct(badges: Iterable[Badge]) -> int:
    """Percentage of badges earned, rounded half up. 0 when there are no badges."""
    badges = list(badges)
    if not badges:
        return 0
    earned = sum(1 for b in badges if b.earned)
    return math.floor(earned * 100 / len(badges) + 0.5)
