"""Tests for player and draft pick valuation."""

import pytest

from astral_draft.models.league import ScoringType
from astral_draft.models.player import DraftPick, InjuryStatus, Position, TradeBundle
from astral_draft.services.valuation import (
    describe_bundle,
    remaining_season_fraction,
    roster_strength,
    round_value,
    valuate_asset,
    valuate_bundle,
    valuate_pick,
    valuate_player,
)

from conftest import SEASON, make_player


class TestPlayerValuation:
    def test_active_qb_week_one(self, league):
        # 200 base * 1.2 scarcity * 16/17 remaining
        qb = make_player("qb", Position.QB, avg_points=20)
        assert valuate_player(qb, league) == 226

    def test_only_five_most_recent_games_count(self, league):
        qb = make_player("qb", Position.QB, avg_points=20)
        older = qb.stats + [qb.stats[0].model_copy(update={"fantasy_points": 100.0})]
        qb_with_history = qb.model_copy(update={"stats": older})
        assert valuate_player(qb_with_history, league) == 226

    def test_projections_blend_with_total_not_per_game(self, league):
        # (100 + (50 + 50)) / 2 = 100, * 16/17 on WR
        wr = make_player("wr", Position.WR, avg_points=10, projections=[50, 50])
        assert valuate_player(wr, league) == round_value(100 * 16 / 17)

    def test_projections_without_history(self, league):
        wr = make_player("wr", Position.WR, projections=[60, 60])
        assert valuate_player(wr, league) == round_value(60 * 16 / 17)

    def test_no_data_is_zero(self, league):
        assert valuate_player(make_player("empty", Position.RB), league) == 0

    def test_injury_multiplier_ordering(self, league):
        values = [
            valuate_player(
                make_player("qb", Position.QB, avg_points=20, injury_status=status),
                league,
            )
            for status in (
                InjuryStatus.ACTIVE,
                InjuryStatus.QUESTIONABLE,
                InjuryStatus.DOUBTFUL,
                InjuryStatus.OUT,
                InjuryStatus.IR,
            )
        ]
        assert values == sorted(values, reverse=True)
        assert len(set(values)) == len(values)

    def test_unlisted_injury_matches_active(self, league):
        unlisted = make_player("a", Position.WR, avg_points=12)
        active = make_player("b", Position.WR, avg_points=12, injury_status=InjuryStatus.ACTIVE)
        assert valuate_player(unlisted, league) == valuate_player(active, league)

    def test_suspended_between_doubtful_and_ir(self, league):
        suspended = make_player("s", Position.RB, avg_points=20, injury_status=InjuryStatus.SUSPENDED)
        # 200 * 0.2 * 16/17 * 1.3
        assert valuate_player(suspended, league) == round_value(200 * 0.2 * 16 / 17 * 1.3)

    def test_scarcity_ordering(self, league):
        values = {
            pos: valuate_player(make_player(pos.value, pos, avg_points=20), league)
            for pos in Position
        }
        assert values[Position.RB] > values[Position.QB] > values[Position.TE]
        assert values[Position.TE] > values[Position.WR] > values[Position.FLEX]
        assert values[Position.DEF] > values[Position.K]

    def test_ppr_bonus_for_pass_catchers(self, league, ppr_league):
        wr = make_player("wr", Position.WR, avg_points=15)
        assert valuate_player(wr, ppr_league) == round_value(150 * 16 / 17 * 1.1)
        assert valuate_player(wr, league) == round_value(150 * 16 / 17)

    def test_ppr_bonus_skips_quarterbacks(self, league, ppr_league):
        qb = make_player("qb", Position.QB, avg_points=20)
        assert valuate_player(qb, ppr_league) == valuate_player(qb, league)

    def test_half_ppr_has_no_bonus(self, league):
        half = league.model_copy(update={"scoring_type": ScoringType.HALF_PPR})
        rb = make_player("rb", Position.RB, avg_points=14)
        assert valuate_player(rb, half) == valuate_player(rb, league)

    def test_value_reaches_zero_at_season_end(self, league):
        late = league.model_copy(update={"current_week": 17})
        assert valuate_player(make_player("qb", Position.QB, avg_points=25), late) == 0

    def test_value_never_negative_past_season_end(self, league):
        late = league.model_copy(update={"current_week": 18})
        assert remaining_season_fraction(18) == 0
        assert valuate_player(make_player("qb", Position.QB, avg_points=25), late) == 0


class TestDraftPickValuation:
    def test_first_round_current_year_after_midseason(self, league):
        week_ten = league.model_copy(update={"current_week": 10})
        assert valuate_pick(DraftPick(round=1, year=SEASON), week_ten) == 1200

    def test_first_round_next_year_early_season(self, league):
        assert valuate_pick(DraftPick(round=1, year=SEASON + 1), league) == 850

    def test_discount_compounds_per_year(self, league):
        assert valuate_pick(DraftPick(round=1, year=SEASON + 2), league) == round_value(1000 * 0.85**2)

    def test_week_eight_has_no_premium(self, league):
        week_eight = league.model_copy(update={"current_week": 8})
        assert valuate_pick(DraftPick(round=2, year=SEASON), week_eight) == 700

    @pytest.mark.parametrize("round_, expected", [(3, 500), (10, 40), (16, 1), (17, 1), (25, 1)])
    def test_round_table(self, league, round_, expected):
        assert valuate_pick(DraftPick(round=round_, year=SEASON), league) == expected

    def test_pick_values_decrease_by_round(self, league):
        values = [valuate_pick(DraftPick(round=r, year=SEASON), league) for r in range(1, 17)]
        assert values == sorted(values, reverse=True)


class TestBundles:
    def test_asset_dispatch(self, league):
        pick = DraftPick(round=1, year=SEASON)
        qb = make_player("qb", Position.QB, avg_points=20)
        assert valuate_asset(pick, league) == 1000
        assert valuate_asset(qb, league) == 226

    def test_bundle_sums_players_and_picks(self, league):
        bundle = TradeBundle(
            players=[make_player("qb", Position.QB, avg_points=20)],
            picks=[DraftPick(round=2, year=SEASON)],
        )
        assert valuate_bundle(bundle, league) == 226 + 700

    def test_empty_bundle(self, league):
        assert valuate_bundle(TradeBundle(), league) == 0

    def test_describe_bundle(self, league):
        bundle = TradeBundle(
            players=[make_player("qb", Position.QB, avg_points=20)],
            picks=[DraftPick(round=1, year=SEASON + 1)],
        )
        valuation = describe_bundle(bundle, league)
        assert [a.asset_type for a in valuation.assets] == ["player", "pick"]
        assert valuation.total_value == 226 + 850
        assert valuation.assets[1].name == f"{SEASON + 1} Round 1 Pick"

    def test_roster_strength_sums_player_values(self, league, initiator_roster):
        expected = sum(valuate_player(p, league) for p in initiator_roster)
        assert roster_strength(initiator_roster, league) == expected
