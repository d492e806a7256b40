"""Level and title progression calculation. Pure functions, no side effects."""

from __future__ import annotations

from dataclasses import dataclass

XP_PER_LEVEL = 1000

# Checked highest-first; the first threshold the level reaches wins.
TITLES: list[tuple[int, str]] = [
    (50, "Legendary Scholar"),
    (30, "Grandmaster"),
    (20, "Expert"),
    (15, "Advanced"),
    (10, "Intermediate"),
    (5, "Apprentice"),
]

DEFAULT_TITLE = "Beginner"


@dataclass(frozen=True)
class LevelInfo:
    """Where a cumulative XP total sits on the level curve."""

    current_level: int
    xp_into_level: int
    xp_per_level: int
    progress_fraction: float

    @property
    def progress_pct(self) -> float:
        """Progress through the current level as a 0-100 percentage."""
        return self.progress_fraction * 100

    @property
    def xp_to_next(self) -> int:
        return self.xp_per_level - self.xp_into_level


def compute_level_info(xp: int) -> LevelInfo:
    """Convert total XP into level, XP into that level and progress fraction.

    The curve is linear: every level costs XP_PER_LEVEL. Level 1 starts at 0 XP.
    Negative XP is treated as 0.
    """
    xp = max(0, xp)
    xp_into_level = xp % XP_PER_LEVEL
    return LevelInfo(
        current_level=xp // XP_PER_LEVEL + 1,
        xp_into_level=xp_into_level,
        xp_per_level=XP_PER_LEVEL,
        progress_fraction=xp_into_level / XP_PER_LEVEL,
    )


def level_from_xp(xp: int) -> int:
    """Given total XP, return current level (1 and up, uncapped)."""
    return compute_level_info(xp).current_level


def title_for_level(level: int) -> str:
    """Return the title for a level. Anything below 5 (including <1) is a Beginner."""
    for threshold, title in TITLES:
        if level >= threshold:
            return title
    return DEFAULT_TITLE
