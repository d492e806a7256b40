"""CLI commands for scholar-rank."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
from pathlib import Path

from scholar_rank.badge import (
    FILTER_MODES,
    completion_pct,
    filter_badges,
    group_by_tier,
    present_badge_tier,
)
from scholar_rank.config import (
    get_leaderboard_file,
    get_username,
    load_config,
    set_leaderboard_file,
    set_username,
)
from scholar_rank.display import (
    print_badges,
    print_config,
    print_error,
    print_leaderboard,
    print_level,
    print_tier_style,
    print_value,
)
from scholar_rank.leaderboard import (
    find_rank,
    load_entries,
    present_row,
    rank_entries,
    split_podium,
)
from scholar_rank.levels import compute_level_info, title_for_level
from scholar_rank.models import Badge
from scholar_rank.observability import setup_logging
from scholar_rank.ranks import present_rank
from scholar_rank.timefmt import time_ago

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="scholar-rank",
        description="Levels, titles, ranks and badges for a gamified learning platform",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    level_p = subparsers.add_parser("level", help="Show level and progress for an XP total")
    level_p.add_argument("xp", type=int)
    title_p = subparsers.add_parser("title", help="Show the title for a level")
    title_p.add_argument("level", type=int)
    rank_p = subparsers.add_parser("rank", help="Show the medal for a leaderboard position")
    rank_p.add_argument("rank", type=int)
    tier_p = subparsers.add_parser("tier", help="Show the style tokens for a badge tier")
    tier_p.add_argument("tier")
    ago_p = subparsers.add_parser("ago", help="Format an ISO-8601 timestamp as 'time ago'")
    ago_p.add_argument("timestamp")

    lb_p = subparsers.add_parser("leaderboard", help="Show a saved leaderboard")
    lb_p.add_argument("--file", "-f", default=None, help="Leaderboard JSON file")
    lb_p.add_argument("--user", "-u", default=None, help="Name or id to highlight")

    badges_p = subparsers.add_parser("badges", help="Show a saved badge list")
    badges_p.add_argument("--file", "-f", required=True, help="Badges JSON file")
    badges_p.add_argument("--filter", choices=FILTER_MODES, default="all")

    config_p = subparsers.add_parser("config", help="Show or update settings")
    config_p.add_argument("--username", default=None, help="Your display name")
    config_p.add_argument("--leaderboard-file", default=None, help="Default leaderboard JSON file")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")

    command = args.command
    if command is None:
        parser.print_help()
    elif command == "level":
        do_level(args.xp)
    elif command == "title":
        do_title(args.level)
    elif command == "rank":
        do_rank(args.rank)
    elif command == "tier":
        do_tier(args.tier)
    elif command == "ago":
        do_ago(args.timestamp)
    elif command == "leaderboard":
        do_leaderboard(path=args.file, user=args.user)
    elif command == "badges":
        do_badges(path=args.file, mode=args.filter)
    elif command == "config":
        do_config(username=args.username, leaderboard_file=args.leaderboard_file)


def do_level(xp: int) -> dict:
    """Show level, title and progress bar for a total XP value."""
    info = compute_level_info(xp)
    title = title_for_level(info.current_level)
    print_level(xp, info, title)
    return {"ok": True, **dataclasses.asdict(info), "title": title}


def do_title(level: int) -> dict:
    title = title_for_level(level)
    print_value(f"Level {level}", title)
    return {"ok": True, "level": level, "title": title}


def do_rank(rank: int) -> dict:
    style = present_rank(rank)
    print_value(f"Rank {rank}", style.glyph)
    return {"ok": True, "rank": rank, "glyph": style.glyph, "color": style.color}


def do_tier(tier: str) -> dict:
    """Show the style descriptor for a badge tier (unknown tiers fall back to bronze)."""
    style = dataclasses.asdict(present_badge_tier(tier))
    print_tier_style(tier, style)
    return {"ok": True, "tier": tier, **style}


def do_ago(timestamp: str) -> dict:
    try:
        text = time_ago(timestamp)
    except ValueError:
        print_error(f"Not an ISO-8601 timestamp: {timestamp}")
        return {"ok": False, "reason": "invalid_timestamp"}
    print_value(timestamp, text)
    return {"ok": True, "timestamp": timestamp, "text": text}


def do_leaderboard(
    path: str | None = None, user: str | None = None, config_path: Path | None = None
) -> dict:
    """Show a leaderboard saved from the platform API."""
    lb_file = Path(path).expanduser() if path else get_leaderboard_file(config_path)
    if lb_file is None:
        print_error(
            "No leaderboard file configured. "
            "Use --file or run: scholar-rank config --leaderboard-file <path>"
        )
        return {"ok": False, "reason": "no_file"}
    if not lb_file.is_file():
        print_error(f"File not found: {lb_file}")
        return {"ok": False, "reason": "file_not_found"}

    try:
        entries, my_rank = load_entries(lb_file)
    except ValueError as exc:
        print_error(str(exc))
        return {"ok": False, "reason": "invalid_file"}

    highlight = user or get_username(config_path)
    ranked = rank_entries(entries)
    rows = [present_row(e, highlight=highlight) for e in ranked]
    if my_rank is None and highlight:
        my_rank = find_rank(ranked, highlight)
    podium, _ = split_podium(ranked)
    print_leaderboard(rows, my_rank=my_rank, podium=[e.name for e in podium])
    return {"ok": True, "rows": rows, "count": len(rows), "my_rank": my_rank}


def _read_badges(path: Path) -> list[Badge]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("badges") or []
    if not isinstance(data, list):
        raise ValueError(f"Unexpected badges payload: {type(data).__name__}")
    badges = []
    for i, row in enumerate(data):
        try:
            badges.append(Badge.from_dict(row))
        except ValueError as exc:
            logger.warning("Skipping badge %d: %s", i, exc)
    return badges


def do_badges(path: str, mode: str = "all") -> dict:
    """Show a badge list saved from the platform API, grouped by tier."""
    badge_file = Path(path).expanduser()
    if not badge_file.is_file():
        print_error(f"File not found: {badge_file}")
        return {"ok": False, "reason": "file_not_found"}
    try:
        badges = _read_badges(badge_file)
    except ValueError as exc:
        print_error(f"Could not read badges: {exc}")
        return {"ok": False, "reason": "invalid_file"}

    earned = sum(1 for b in badges if b.earned)
    pct = completion_pct(badges)
    groups = group_by_tier(filter_badges(badges, mode))
    print_badges(groups, earned=earned, total=len(badges), pct=pct)
    return {
        "ok": True,
        "earned": earned,
        "total": len(badges),
        "completion_pct": pct,
        "tiers": {tier.value: len(items) for tier, items in groups},
    }


def do_config(
    username: str | None = None,
    leaderboard_file: str | None = None,
    config_path: Path | None = None,
) -> dict:
    """Update any settings given, then print the current config."""
    if username:
        set_username(username, config_path)
    if leaderboard_file:
        set_leaderboard_file(Path(leaderboard_file).expanduser().resolve(), config_path)
    config = load_config(config_path)
    print_config(config)
    return {"ok": True, **config}


if __name__ == "__main__":
    main()
