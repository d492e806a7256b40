"""Tests for the leaderboard module."""
import json
import logging

import pytest

from scholar_rank.leaderboard import (
    find_rank,
    load_entries,
    parse_payload,
    present_row,
    rank_entries,
    split_podium,
)
from scholar_rank.models import LeaderboardEntry


def _row(name, xp, **overrides):
    base = {"_id": f"id-{name}", "name": name, "xp": xp, "level": xp // 1000 + 1}
    base.update(overrides)
    return base


def _entry(name, xp, **overrides):
    return LeaderboardEntry.from_dict(_row(name, xp, **overrides))


class TestParsePayload:
    def test_api_shape(self):
        entries, my_rank = parse_payload({"leaderboard": [_row("ada", 10)], "myRank": 4})
        assert [e.name for e in entries] == ["ada"]
        assert my_rank == 4

    def test_bare_list(self):
        entries, my_rank = parse_payload([_row("ada", 10), _row("bob", 20)])
        assert len(entries) == 2
        assert my_rank is None

    def test_missing_leaderboard_key(self):
        assert parse_payload({}) == ([], None)

    def test_invalid_rows_skipped_and_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="scholar_rank.leaderboard"):
            entries, _ = parse_payload([_row("ada", 10), {"name": "no-id"}, "junk"])
        assert [e.name for e in entries] == ["ada"]
        assert "Skipping leaderboard row 1" in caplog.text
        assert "Skipping leaderboard row 2" in caplog.text

    def test_non_positive_my_rank_ignored(self):
        assert parse_payload({"leaderboard": [], "myRank": 0}) == ([], None)

    def test_unexpected_type_raises(self):
        with pytest.raises(ValueError, match="Unexpected leaderboard payload"):
            parse_payload("nope")

    def test_non_list_rows_raise(self):
        with pytest.raises(ValueError, match="Unexpected leaderboard rows"):
            parse_payload({"leaderboard": 5})


class TestLoadEntries:
    def test_reads_file(self, tmp_path):
        path = tmp_path / "lb.json"
        path.write_text(json.dumps({"leaderboard": [_row("ada", 10)], "myRank": 1}), encoding="utf-8")
        entries, my_rank = load_entries(path)
        assert entries[0].name == "ada"
        assert my_rank == 1

    def test_invalid_json_raises_value_error(self, tmp_path):
        path = tmp_path / "lb.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="not valid JSON"):
            load_entries(path)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_entries(tmp_path / "missing.json")


class TestRankEntries:
    def test_sorted_by_xp_desc(self):
        ranked = rank_entries([_entry("a", 100), _entry("b", 300), _entry("c", 200)])
        assert [e.name for e in ranked] == ["b", "c", "a"]
        assert [e.rank for e in ranked] == [1, 2, 3]

    def test_tie_break_streak_then_badges(self):
        ranked = rank_entries([
            _entry("a", 100, streak=1, badgeCount=9),
            _entry("b", 100, streak=5, badgeCount=0),
            _entry("c", 100, streak=1, badgeCount=10),
        ])
        assert [e.name for e in ranked] == ["b", "c", "a"]

    def test_keeps_api_rank(self):
        ranked = rank_entries([_entry("a", 100, rank=7), _entry("b", 50)])
        assert ranked[0].rank == 7
        assert ranked[1].rank == 2

    def test_zero_rank_is_filled_in(self):
        ranked = rank_entries([_entry("a", 100, rank=0), _entry("b", 50)])
        assert [e.rank for e in ranked] == [1, 2]

    def test_does_not_mutate_input(self):
        entries = [_entry("a", 1)]
        rank_entries(entries)
        assert entries[0].rank is None

    def test_empty(self):
        assert rank_entries([]) == []


class TestSplitPodium:
    def test_three_or_more(self):
        entries = rank_entries([_entry(str(i), i * 10) for i in range(5)])
        podium, rest = split_podium(entries)
        assert [e.rank for e in podium] == [1, 2, 3]
        assert [e.rank for e in rest] == [4, 5]

    def test_fewer_than_three_has_no_podium(self):
        entries = rank_entries([_entry("a", 1), _entry("b", 2)])
        podium, rest = split_podium(entries)
        assert podium == []
        assert len(rest) == 2


class TestFindRank:
    def test_by_name_and_id(self):
        ranked = rank_entries([_entry("ada", 100), _entry("bob", 50)])
        assert find_rank(ranked, "bob") == 2
        assert find_rank(ranked, "id-ada") == 1

    def test_not_found(self):
        assert find_rank(rank_entries([_entry("ada", 1)]), "zed") is None


class TestPresentRow:
    def test_podium_row(self):
        row = present_row(rank_entries([_entry("ada", 12_000)])[0])
        assert row["glyph"] == "🥇"
        assert row["color"] == "gold"
        assert row["level"] == 13
        assert row["title"] == "Intermediate"
        assert row["avatar"].startswith("https://ui-avatars.com/api/?name=ada")
        assert row["is_current_user"] is False

    def test_plain_row(self):
        entries = rank_entries([_entry(str(i), 100 - i) for i in range(5)])
        row = present_row(entries[4])
        assert row["glyph"] == "#5"
        assert row["color"] == "neutral"

    def test_uploaded_avatar_kept(self):
        row = present_row(_entry("ada", 1, avatar="https://img/ada.png", rank=1))
        assert row["avatar"] == "https://img/ada.png"

    def test_highlight(self):
        entry = _entry("ada", 1, rank=1)
        assert present_row(entry, highlight="ada")["is_current_user"] is True
        assert present_row(entry, highlight="id-ada")["is_current_user"] is True
        assert present_row(entry, highlight="bob")["is_current_user"] is False
