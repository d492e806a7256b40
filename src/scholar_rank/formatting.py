"""Small display helpers shared by course and leaderboard views."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from urllib.parse import quote, urlencode

AVATAR_BASE_URL = "https://ui-avatars.com/api/"

_GREEN = "text-green-400 bg-green-400/10 border-green-400/30"
_YELLOW = "text-yellow-400 bg-yellow-400/10 border-yellow-400/30"
_RED = "text-red-400 bg-red-400/10 border-red-400/30"

DIFFICULTY_STYLES: dict[str, str] = {
    "beginner": _GREEN,
    "easy": _GREEN,
    "intermediate": _YELLOW,
    "medium": _YELLOW,
    "advanced": _RED,
    "hard": _RED,
}


def _one_decimal(n: int, unit: int) -> Decimal:
    """n / unit to one decimal place, halves rounded up (1250 / 1000 -> 1.3)."""
    return (Decimal(n) / unit).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def _quote_component(value: str, safe: str = "", encoding=None, errors=None) -> str:
    # Leaves the same punctuation unescaped as encodeURIComponent
    return quote(value, safe="!'()*", encoding=encoding, errors=errors)


def format_compact(n: int) -> str:
    """Compact counter: 1234567 -> '1.2M', 1500 -> '1.5K', 999 -> '999'."""
    if n >= 1_000_000:
        return f"{_one_decimal(n, 1_000_000)}M"
    if n >= 1_000:
        return f"{_one_decimal(n, 1_000)}K"
    return str(n)


def difficulty_style(difficulty: str | None) -> str:
    """Class tokens for a course difficulty pill. Unknown -> beginner."""
    return DIFFICULTY_STYLES.get(difficulty or "", DIFFICULTY_STYLES["beginner"])


def avatar_url(name: str, size: int = 40, background: str = "6366f1") -> str:
    """Generated-initials avatar for users without an uploaded picture."""
    query = urlencode(
        {"name": name, "size": size, "background": background, "color": "fff", "bold": "true"},
        quote_via=_quote_component,
    )
    return f"{AVATAR_BASE_URL}?{query}"
