"""Configuration file management for scholar-rank.

Reads and writes ~/.scholar-rank/config.json for per-user settings
(who to highlight on the leaderboard, where the saved leaderboard lives).
"""
from __future__ import annotations

import json
from pathlib import Path

DEFAULT_CONFIG_PATH: Path = Path.home() / ".scholar-rank" / "config.json"


def load_config(config_path: Path | None = None) -> dict:
    """Load config from JSON file. Returns {} if file missing or invalid."""
    path = config_path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict, config_path: Path | None = None) -> None:
    """Write config dict to JSON file. Creates parent dirs if needed."""
    path = config_path or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def get_username(config_path: Path | None = None) -> str | None:
    """Return the configured username, or None if not set."""
    return load_config(config_path).get("username") or None


def set_username(username: str, config_path: Path | None = None) -> None:
    config = load_config(config_path)
    config["username"] = username
    save_config(config, config_path)


def get_leaderboard_file(config_path: Path | None = None) -> Path | None:
    """Return the configured leaderboard JSON file, or None if not set."""
    raw = load_config(config_path).get("leaderboard_file")
    if raw:
        return Path(raw)
    return None


def set_leaderboard_file(path: Path, config_path: Path | None = None) -> None:
    """Persist the leaderboard file path to config."""
    config = load_config(config_path)
    config["leaderboard_file"] = str(path)
    save_config(config, config_path)
