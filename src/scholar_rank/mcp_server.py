"""MCP server for scholar-rank.

Exposes the progression helpers as MCP tools so an assistant can answer
"what level is 12,400 XP?" style questions mid-conversation.
Run via: python3 -m scholar_rank.mcp_server
"""
from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from scholar_rank.badge import present_badge_tier
from scholar_rank.levels import compute_level_info, title_for_level
from scholar_rank.ranks import present_rank
from scholar_rank.timefmt import time_ago

mcp = FastMCP(name="scholar-rank")


@mcp.tool()
def get_level(xp: int) -> dict[str, Any]:
    """Get level, title and progress toward the next level for a total XP value."""
    info = compute_level_info(xp)
    return {
        **dataclasses.asdict(info),
        "progress_pct": info.progress_pct,
        "xp_to_next": info.xp_to_next,
        "title": title_for_level(info.current_level),
    }


@mcp.tool()
def get_title(level: int) -> dict[str, Any]:
    """Get the title for a level."""
    return {"level": level, "title": title_for_level(level)}


@mcp.tool()
def get_rank_style(rank: int) -> dict[str, Any]:
    """Get the medal glyph and color token for a 1-based leaderboard position."""
    if rank < 1:
        return {"error": "Rank must be 1 or greater."}
    style = present_rank(rank)
    return {"rank": rank, "glyph": style.glyph, "color": style.color}


@mcp.tool()
def get_tier_style(tier: str) -> dict[str, Any]:
    """Get the style tokens for a badge tier. Unknown tiers are styled as bronze."""
    return {"tier": tier, **dataclasses.asdict(present_badge_tier(tier))}


@mcp.tool()
def get_time_ago(timestamp: str) -> dict[str, Any]:
    """Format an ISO-8601 timestamp relative to now ('5m ago', '2d ago', ...)."""
    try:
        return {"timestamp": timestamp, "text": time_ago(timestamp)}
    except ValueError:
        return {"error": f"Not an ISO-8601 timestamp: {timestamp}"}


@mcp.tool()
def get_leaderboard(path: str = "", user: str = "") -> dict[str, Any]:
    """Read a saved leaderboard JSON file and return ranked, display-ready rows.

    path: leaderboard JSON file. If empty, uses the configured file.
    user: name or id to flag as the current user. If empty, uses the configured username.
    """
    from scholar_rank.config import get_leaderboard_file, get_username
    from scholar_rank.leaderboard import find_rank, load_entries, present_row, rank_entries

    lb_file = Path(path) if path else get_leaderboard_file()
    if lb_file is None or not lb_file.is_file():
        return {
            "error": "No leaderboard file found. "
            "Run: scholar-rank config --leaderboard-file /path/to/leaderboard.json"
        }
    try:
        entries, my_rank = load_entries(lb_file)
    except ValueError as exc:
        return {"error": str(exc)}

    highlight = user or get_username()
    ranked = rank_entries(entries)
    rows = [present_row(e, highlight=highlight) for e in ranked]
    if my_rank is None and highlight:
        my_rank = find_rank(ranked, highlight)
    return {"entries": rows, "count": len(rows), "your_rank": my_rank}


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
