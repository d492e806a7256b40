"""Leaderboard position -> medal glyph and color token."""

from __future__ import annotations

from typing import NamedTuple


class RankStyle(NamedTuple):
    glyph: str
    color: str


_MEDALS: dict[int, RankStyle] = {
    1: RankStyle("\U0001f947", "gold"),
    2: RankStyle("\U0001f948", "silver"),
    3: RankStyle("\U0001f949", "bronze"),
}

NEUTRAL_COLOR = "neutral"


def present_rank(rank: int) -> RankStyle:
    """Medal for the podium places, '#N' for everyone else."""
    medal = _MEDALS.get(rank)
    if medal is not None:
        return medal
    return RankStyle(f"#{rank}", NEUTRAL_COLOR)
