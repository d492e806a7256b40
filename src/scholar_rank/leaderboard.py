"""Leaderboard loading, ranking and row presentation for scholar-rank.

Reads a leaderboard payload saved from the platform API and turns it into
ranked, display-ready rows. File I/O is limited to load_entries.
"""
from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path

from scholar_rank.formatting import avatar_url
from scholar_rank.levels import title_for_level
from scholar_rank.models import LeaderboardEntry
from scholar_rank.ranks import present_rank

logger = logging.getLogger(__name__)

PODIUM_SIZE = 3


def parse_payload(data: object) -> tuple[list[LeaderboardEntry], int | None]:
    """Parse a leaderboard payload into (entries, my_rank).

    Accepts the API response shape ``{"leaderboard": [...], "myRank": n}``
    or a bare list of rows. Rows that fail validation are skipped.
    """
    my_rank = None
    if isinstance(data, dict):
        rows = data.get("leaderboard") or []
        if not isinstance(rows, list):
            raise ValueError(f"Unexpected leaderboard rows: {type(rows).__name__}")
        raw_rank = data.get("myRank")
        if isinstance(raw_rank, int) and not isinstance(raw_rank, bool) and raw_rank > 0:
            my_rank = raw_rank
    elif isinstance(data, list):
        rows = data
    else:
        raise ValueError(f"Unexpected leaderboard payload: {type(data).__name__}")

    entries: list[LeaderboardEntry] = []
    for i, row in enumerate(rows):
        try:
            entries.append(LeaderboardEntry.from_dict(row))
        except ValueError as exc:
            logger.warning("Skipping leaderboard row %d: %s", i, exc)
    return entries, my_rank


def load_entries(path: Path) -> tuple[list[LeaderboardEntry], int | None]:
    """Read and parse a leaderboard JSON file.

    Raises FileNotFoundError if the file is missing and ValueError if it is
    not valid JSON or not a leaderboard payload.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path} is not valid JSON: {exc}") from exc
    entries, my_rank = parse_payload(data)
    logger.debug("Loaded %d leaderboard entries from %s", len(entries), path)
    return entries, my_rank


def rank_entries(entries: list[LeaderboardEntry]) -> list[LeaderboardEntry]:
    """Sort entries by xp descending and fill in missing 1-based ranks.

    Tie-break: streak desc, then badge_count desc. Ranks supplied by the
    API are kept.
    """
    sorted_entries = sorted(
        entries,
        key=lambda e: (-e.xp, -e.streak, -e.badge_count),
    )
    return [
        e if e.rank is not None else dataclasses.replace(e, rank=i + 1)
        for i, e in enumerate(sorted_entries)
    ]


def split_podium(
    entries: list[LeaderboardEntry],
) -> tuple[list[LeaderboardEntry], list[LeaderboardEntry]]:
    """Return (podium, rest). The podium is empty unless three entries exist."""
    if len(entries) < PODIUM_SIZE:
        return [], list(entries)
    return list(entries[:PODIUM_SIZE]), list(entries[PODIUM_SIZE:])


def find_rank(entries: list[LeaderboardEntry], who: str) -> int | None:
    """Rank of the entry whose id or name matches ``who``, or None."""
    for entry in entries:
        if who in (entry.id, entry.name):
            return entry.rank
    return None


def present_row(entry: LeaderboardEntry, highlight: str | None = None) -> dict:
    """Build the display fields for one leaderboard row."""
    rank = entry.rank or 0
    style = present_rank(rank)
    return {
        "rank": rank,
        "glyph": style.glyph,
        "color": style.color,
        "name": entry.name,
        "level": entry.level,
        "title": title_for_level(entry.level),
        "xp": entry.xp,
        "points": entry.points,
        "streak": entry.streak,
        "badge_count": entry.badge_count,
        "avatar": entry.avatar or avatar_url(entry.name),
        "is_current_user": highlight is not None and highlight in (entry.id, entry.name),
    }
