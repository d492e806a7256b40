"""Typed records for the payloads the learning platform API returns.

Each record is built from the raw JSON dict once, at the boundary, by its
``from_dict`` classmethod. Malformed payloads raise ValueError naming the
offending field; optional relations (a course without an educator, a badge
without criteria) come through as None instead of missing keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from scholar_rank.badge import BadgeTier


def _require(data: dict, key: str) -> Any:
    if key not in data or data[key] is None:
        raise ValueError(f"Missing required field: {key}")
    return data[key]


def _require_str(data: dict, key: str) -> str:
    value = _require(data, key)
    if not isinstance(value, str) or not value:
        raise ValueError(f"Field {key!r} must be a non-empty string")
    return value


def _int(data: dict, key: str, default: int = 0) -> int:
    value = data.get(key, default)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Field {key!r} must be a number, got {value!r}")
    if value < 0:
        raise ValueError(f"Field {key!r} must not be negative")
    return int(value)


def _record_id(data: dict) -> str:
    raw = data.get("_id", data.get("id"))
    if raw is None:
        raise ValueError("Missing required field: _id")
    return str(raw)


def _ensure_dict(data: Any, what: str) -> dict:
    if not isinstance(data, dict):
        raise ValueError(f"{what} payload must be an object, got {type(data).__name__}")
    return data


@dataclass(frozen=True)
class Educator:
    name: str
    avatar: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Educator":
        data = _ensure_dict(data, "Educator")
        return cls(name=_require_str(data, "name"), avatar=data.get("avatar") or None)


@dataclass(frozen=True)
class Course:
    id: str
    title: str
    difficulty: str
    duration_minutes: int
    xp_reward: int
    category: str
    rating: float
    educator: Educator | None

    @classmethod
    def from_dict(cls, data: Any) -> "Course":
        data = _ensure_dict(data, "Course")
        rating = data.get("rating") or 0.0
        # Admin listings nest the rating as {"average": x, "count": n}
        if isinstance(rating, dict):
            rating = rating.get("average") or 0.0
        if isinstance(rating, bool) or not isinstance(rating, (int, float)):
            raise ValueError(f"Field 'rating' must be a number, got {rating!r}")
        educator = data.get("educator")
        return cls(
            id=_record_id(data),
            title=_require_str(data, "title"),
            difficulty=data.get("difficulty") or "beginner",
            duration_minutes=_int(data, "duration"),
            xp_reward=_int(data, "xpReward"),
            category=data.get("category") or "",
            rating=float(rating),
            educator=Educator.from_dict(educator) if educator else None,
        )


@dataclass(frozen=True)
class VideoContent:
    video_url: str
    kind: str = "video"

    @property
    def embed_url(self) -> str:
        """YouTube watch links rewritten to their embeddable form."""
        if "youtube" in self.video_url or "youtu.be" in self.video_url:
            return self.video_url.replace("watch?v=", "embed/")
        return self.video_url


@dataclass(frozen=True)
class TextContent:
    body: str
    kind: str = "text"


@dataclass(frozen=True)
class MixedContent:
    video_url: str
    body: str
    kind: str = "mixed"

    @property
    def video(self) -> VideoContent:
        return VideoContent(self.video_url)


LessonContent = Union[VideoContent, TextContent, MixedContent]


def parse_lesson_content(data: Any) -> LessonContent:
    """Select the content variant from the lesson's ``contentType`` tag."""
    data = _ensure_dict(data, "Lesson")
    kind = data.get("contentType")
    if kind == "video":
        return VideoContent(video_url=_require_str(data, "videoUrl"))
    if kind == "text":
        return TextContent(body=_require_str(data, "content"))
    if kind == "mixed":
        return MixedContent(
            video_url=_require_str(data, "videoUrl"),
            body=_require_str(data, "content"),
        )
    raise ValueError(f"Unknown contentType: {kind!r}")


@dataclass(frozen=True)
class BadgeCriteria:
    type: str
    threshold: int

    @classmethod
    def from_dict(cls, data: Any) -> "BadgeCriteria":
        data = _ensure_dict(data, "BadgeCriteria")
        return cls(type=_require_str(data, "type"), threshold=_int(data, "threshold"))


@dataclass(frozen=True)
class Badge:
    id: str
    name: str
    description: str
    icon: str
    tier: BadgeTier
    xp_reward: int = 0
    points_reward: int = 0
    criteria: BadgeCriteria | None = None
    earned: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Badge":
        data = _ensure_dict(data, "Badge")
        criteria = data.get("criteria")
        return cls(
            id=_record_id(data),
            name=_require_str(data, "name"),
            description=data.get("description") or "",
            icon=data.get("icon") or "",
            tier=BadgeTier.parse(data.get("tier")),
            xp_reward=_int(data, "xpReward"),
            points_reward=_int(data, "pointsReward"),
            criteria=BadgeCriteria.from_dict(criteria) if criteria else None,
            earned=bool(data.get("earned", False)),
        )


@dataclass(frozen=True)
class LeaderboardEntry:
    id: str
    name: str
    xp: int
    level: int = 1
    streak: int = 0
    badge_count: int = 0
    points: int = 0
    avatar: str | None = None
    rank: int | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "LeaderboardEntry":
        data = _ensure_dict(data, "LeaderboardEntry")
        # Missing, null and 0 ranks all mean "not ranked yet"
        rank = _int(data, "rank")
        return cls(
            id=_record_id(data),
            name=_require_str(data, "name"),
            xp=_int(data, "xp"),
            level=max(1, _int(data, "level", 1)),
            streak=_int(data, "streak"),
            badge_count=_int(data, "badgeCount"),
            points=_int(data, "points"),
            avatar=data.get("avatar") or None,
            rank=rank if rank >= 1 else None,
        )
