"""Rich terminal display for scholar-rank."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from scholar_rank.badge import BadgeTier, present_badge_tier
from scholar_rank.formatting import format_compact
from scholar_rank.levels import LevelInfo

console = Console()

# Rank color tokens -> Rich color names
_RANK_COLORS: dict[str, str] = {
    "gold": "gold1",
    "silver": "grey70",
    "bronze": "dark_orange3",
    "neutral": "grey50",
}

# Tier text tokens ("text-orange-400") -> Rich color names
_TIER_COLORS: dict[str, str] = {
    "text-orange-400": "dark_orange3",
    "text-slate-300": "grey70",
    "text-yellow-400": "gold1",
    "text-purple-400": "medium_purple1",
    "text-blue-400": "deep_sky_blue1",
}


def _rank_color(token: str) -> str:
    return _RANK_COLORS.get(token, "grey50")


def tier_color(tier: str | BadgeTier | None) -> str:
    """Map a badge tier to a Rich color via its text token."""
    return _TIER_COLORS.get(present_badge_tier(tier).text, "dark_orange3")


def _xp_bar(fraction: float, width: int = 20) -> str:
    """Render a progress bar as text: [████████░░░░░░░░░░░░]."""
    fraction = max(0.0, min(fraction, 1.0))
    filled = int(fraction * width)
    empty = width - filled
    return "[" + "█" * filled + "░" * empty + "]"


def print_level(xp: int, info: LevelInfo, title: str) -> None:
    """Print the level card: level, title, progress bar and XP to next level."""
    lines = [
        "",
        f"  [bold]Level {info.current_level} - {title}[/]",
        f"  {_xp_bar(info.progress_fraction)} "
        f"{info.xp_into_level:,}/{info.xp_per_level:,} XP ({info.progress_pct:.1f}%)",
        f"  {info.xp_to_next:,} XP to level {info.current_level + 1}",
        f"  Total: [bold]{format_compact(xp)}[/] XP",
        "",
    ]
    console.print(Panel("\n".join(lines), title="[bold]SCHOLAR RANK[/]", box=box.ROUNDED, width=50))


def print_value(label: str, value: str, style: str = "bold") -> None:
    console.print(f"{escape(label)}: [{style}]{escape(value)}[/]")


def print_tier_style(tier: str, style: dict) -> None:
    """Print the style tokens for a badge tier."""
    table = Table(title=f"Tier: {escape(tier)}", box=box.ROUNDED, border_style=tier_color(tier))
    table.add_column("Slot", style="bold")
    table.add_column("Token")
    for slot, token in style.items():
        table.add_row(slot, escape(token))
    console.print(table)


def print_leaderboard(
    rows: list[dict], my_rank: int | None = None, podium: list[str] | None = None
) -> None:
    """Print ranked leaderboard rows. Rows come from leaderboard.present_row."""
    if not rows:
        console.print("[dim]No leaderboard entries found.[/]")
        return

    if podium:
        medals = ["\U0001f947", "\U0001f948", "\U0001f949"]
        console.print("  " + "   ".join(f"{m} [bold]{escape(name)}[/]" for m, name in zip(medals, podium)))

    table = Table(
        title="Leaderboard",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("Rank", justify="center")
    table.add_column("Name", style="bold")
    table.add_column("Level")
    table.add_column("XP", justify="right")
    table.add_column("Points", justify="right")
    table.add_column("Streak", justify="right")
    table.add_column("Badges", justify="right")

    for row in rows:
        name = escape(row["name"])
        if row.get("is_current_user"):
            name = f"[reverse]{name} (you)[/]"
        table.add_row(
            f"[{_rank_color(row['color'])}]{row['glyph']}[/]",
            name,
            f"Lv.{row['level']} · {row['title']}",
            f"{row['xp']:,}",
            f"{row['points']:,}",
            f"{row['streak']}d",
            str(row["badge_count"]),
        )

    console.print(table)
    if my_rank:
        console.print(f"  Your current rank: [bold]#{my_rank}[/]")


def print_badges(groups: list[tuple[BadgeTier, list]], earned: int, total: int, pct: int) -> None:
    """Print badges grouped by tier, highest tier first."""
    console.print(f"[bold]{earned} of {total} badges earned[/] ({pct}% complete)")
    if not groups:
        console.print("[dim]No badges match this filter.[/]")
        return
    for tier, badges in groups:
        color = tier_color(tier)
        tier_earned = sum(1 for b in badges if b.earned)
        table = Table(
            title=f"[{color}]{tier.value.upper()} TIER[/] ({tier_earned}/{len(badges)})",
            box=box.SIMPLE,
            show_header=False,
        )
        table.add_column("Badge")
        table.add_column("Reward / Criteria")
        for badge in badges:
            if badge.earned:
                name = f"{escape(badge.icon)} [{color}]{escape(badge.name)}[/]"
                detail = f"⚡ +{badge.xp_reward}  \U0001fa99 +{badge.points_reward}"
            else:
                name = f"\U0001f512 [dim]{escape(badge.name)}[/]"
                detail = (
                    f"{escape(badge.criteria.type)}: {badge.criteria.threshold}"
                    if badge.criteria else ""
                )
            table.add_row(name, detail)
        console.print(table)


def print_config(config: dict) -> None:
    if not config:
        console.print("[dim]No configuration set.[/]")
        return
    for key, value in sorted(config.items()):
        console.print(f"  {escape(str(key))}: [bold]{escape(str(value))}[/]")


def print_error(message: str) -> None:
    console.print(f"[red]{escape(message)}[/]")
