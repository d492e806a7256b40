import pytest

from scholar_rank.badge import (
    DISPLAY_ORDER,
    TIER_STYLES,
    BadgeTier,
    TierStyle,
    completion_pct,
    filter_badges,
    group_by_tier,
    present_badge_tier,
)
from scholar_rank.models import Badge


def _badge(badge_id: str, tier: BadgeTier = BadgeTier.BRONZE, earned: bool = False) -> Badge:
    return Badge(id=badge_id, name=badge_id.title(), description="", icon="🏅", tier=tier, earned=earned)


class TestBadgeTier:
    def test_parse_known(self):
        assert BadgeTier.parse("diamond") is BadgeTier.DIAMOND

    def test_parse_unknown_is_bronze(self):
        assert BadgeTier.parse("mythic") is BadgeTier.BRONZE

    def test_parse_none_is_bronze(self):
        assert BadgeTier.parse(None) is BadgeTier.BRONZE

    def test_parse_is_case_sensitive(self):
        assert BadgeTier.parse("Gold") is BadgeTier.BRONZE

    def test_str_value(self):
        assert BadgeTier.GOLD == "gold"


class TestPresentBadgeTier:
    def test_gold(self):
        style = present_badge_tier("gold")
        assert style == TIER_STYLES[BadgeTier.GOLD]
        assert style.text == "text-yellow-400"

    def test_unknown_matches_bronze(self):
        assert present_badge_tier("mythic") == present_badge_tier("bronze")

    def test_none_matches_bronze(self):
        assert present_badge_tier(None) == present_badge_tier("bronze")

    def test_accepts_enum(self):
        assert present_badge_tier(BadgeTier.DIAMOND).glow == "shadow-blue-500/40"

    def test_every_tier_has_style(self):
        for tier in BadgeTier:
            assert isinstance(TIER_STYLES[tier], TierStyle)

    def test_styles_are_distinct(self):
        assert len(set(TIER_STYLES.values())) == len(BadgeTier)


class TestFilterBadges:
    def setup_method(self):
        self.badges = [_badge("a", earned=True), _badge("b"), _badge("c", earned=True)]

    def test_all(self):
        assert filter_badges(self.badges, "all") == self.badges

    def test_earned(self):
        assert [b.id for b in filter_badges(self.badges, "earned")] == ["a", "c"]

    def test_locked(self):
        assert [b.id for b in filter_badges(self.badges, "locked")] == ["b"]

    def test_invalid_mode_raises(self):
        with pytest.raises(ValueError, match="Invalid filter"):
            filter_badges(self.badges, "shiny")


class TestGroupByTier:
    def test_display_order_highest_first(self):
        badges = [
            _badge("b1", BadgeTier.BRONZE),
            _badge("d1", BadgeTier.DIAMOND),
            _badge("g1", BadgeTier.GOLD),
            _badge("b2", BadgeTier.BRONZE),
        ]
        groups = group_by_tier(badges)
        assert [tier for tier, _ in groups] == [BadgeTier.DIAMOND, BadgeTier.GOLD, BadgeTier.BRONZE]
        assert [b.id for b in groups[-1][1]] == ["b1", "b2"]

    def test_empty(self):
        assert group_by_tier([]) == []

    def test_display_order_covers_all_tiers(self):
        assert set(DISPLAY_ORDER) == set(BadgeTier)


class TestCompletionPct:
    def test_no_badges(self):
        assert completion_pct([]) == 0

    def test_all_earned(self):
        assert completion_pct([_badge("a", earned=True)]) == 100

    def test_rounds_half_up(self):
        badges = [_badge("a", earned=True)] + [_badge(str(i)) for i in range(7)]
        # 1/8 = 12.5%
        assert completion_pct(badges) == 13

    def test_one_third(self):
        badges = [_badge("a", earned=True), _badge("b"), _badge("c")]
        assert completion_pct(badges) == 33
