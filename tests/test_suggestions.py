"""Tests for roster needs and trade suggestions."""

from astral_draft.models.player import Position
from astral_draft.services.suggestions import (
    MAX_SUGGESTIONS,
    analyze_team_needs,
    generate_trade_suggestions,
    is_starter,
    tradeable_players,
)

from conftest import make_player


def _roster(prefix, counts, overrides=None):
    """Roster with default players per position; overrides replace by position."""
    overrides = overrides or {}
    roster = []
    for position, count in counts.items():
        if position in overrides:
            roster.extend(overrides[position])
            continue
        for n in range(count):
            roster.append(
                make_player(
                    f"{prefix}-{position.value.lower()}{n + 1}",
                    position,
                    10,
                    projected_points=200 - n * 20,
                )
            )
    return roster


def _my_roster(weak_te_avg=13):
    tes = [
        make_player("m-te1", Position.TE, 12, projected_points=150),
        make_player("m-te2", Position.TE, 12, projected_points=90),
        make_player("m-te3", Position.TE, weak_te_avg, projected_points=60),
    ]
    return _roster(
        "m",
        {Position.QB: 2, Position.RB: 2, Position.WR: 4, Position.TE: 3, Position.K: 1, Position.DEF: 1},
        overrides={Position.TE: tes},
    )


def _target_roster(weak_rb_avg=11.5):
    rbs = [
        make_player("t-rb1", Position.RB, 18, projected_points=200),
        make_player("t-rb2", Position.RB, 16, projected_points=180),
        make_player("t-rb3", Position.RB, 12, projected_points=120),
        make_player("t-rb4", Position.RB, 12, projected_points=100),
        make_player("t-rb5", Position.RB, weak_rb_avg, projected_points=80),
    ]
    return _roster(
        "t",
        {Position.QB: 2, Position.RB: 5, Position.WR: 4, Position.TE: 1, Position.K: 1, Position.DEF: 1},
        overrides={Position.RB: rbs},
    )


class TestTeamNeeds:
    def test_needs_follow_position_minimums(self):
        assert analyze_team_needs(_my_roster()) == [Position.RB]
        assert analyze_team_needs(_target_roster()) == [Position.TE]

    def test_empty_roster_needs_everything(self):
        assert analyze_team_needs([]) == [
            Position.QB,
            Position.RB,
            Position.WR,
            Position.TE,
            Position.K,
            Position.DEF,
        ]


class TestStarters:
    def test_top_projections_start(self):
        roster = _target_roster()
        by_id = {p.id: p for p in roster}
        assert is_starter(by_id["t-rb1"], roster)
        assert is_starter(by_id["t-rb2"], roster)
        assert not is_starter(by_id["t-rb3"], roster)

    def test_ties_keep_roster_order(self):
        first = make_player("first", Position.QB, 10, projected_points=100)
        second = make_player("second", Position.QB, 10, projected_points=100)
        roster = [first, second]
        assert is_starter(first, roster)
        assert not is_starter(second, roster)

    def test_missing_projection_ranks_last(self):
        projected = make_player("proj", Position.TE, 5, projected_points=50)
        unknown = make_player("unknown", Position.TE, 15)
        assert is_starter(projected, [unknown, projected])
        assert not is_starter(unknown, [unknown, projected])

    def test_tradeable_players_are_bench_weakest_first(self):
        roster = _target_roster()
        assert [p.id for p in tradeable_players(roster, Position.RB)] == [
            "t-rb5",
            "t-rb4",
            "t-rb3",
        ]
        assert tradeable_players(roster, Position.TE) == []


class TestSuggestions:
    def test_swaps_depth_for_need(self, league):
        suggestions = generate_trade_suggestions(_my_roster(), _target_roster(), league)

        assert len(suggestions) == 1
        suggestion = suggestions[0]
        assert [p.id for p in suggestion.give] == ["m-te3"]
        assert [p.id for p in suggestion.receive] == ["t-rb5"]
        assert suggestion.reasoning == "Trade depth at TE for need at RB"
        assert suggestion.fairness_score == 100

    def test_unfair_swaps_are_dropped(self, league):
        suggestions = generate_trade_suggestions(
            _my_roster(), _target_roster(weak_rb_avg=2), league
        )
        assert suggestions == []

    def test_no_needs_no_suggestions(self, league):
        full = _roster(
            "f",
            {Position.QB: 2, Position.RB: 4, Position.WR: 4, Position.TE: 2, Position.K: 1, Position.DEF: 1},
        )
        assert generate_trade_suggestions(full, _target_roster(), league) == []

    def test_no_bench_depth_no_suggestions(self, league):
        # My only TE starts, so there is nothing to offer for the target's TE need
        target = _target_roster()
        mine = [p for p in _my_roster() if p.id not in ("m-te2", "m-te3")]
        assert generate_trade_suggestions(mine, target, league) == []

    def test_results_are_capped_and_sorted(self, league):
        # Each roster has bench depth only where the other is short
        mine = _roster("m", {Position.QB: 3, Position.WR: 6, Position.TE: 4})
        target = _roster("t", {Position.RB: 6, Position.K: 3, Position.DEF: 3})

        suggestions = generate_trade_suggestions(mine, target, league)

        assert len(suggestions) <= MAX_SUGGESTIONS
        scores = [s.fairness_score for s in suggestions]
        assert scores == sorted(scores, reverse=True)
        assert all(score > 40 for score in scores)
