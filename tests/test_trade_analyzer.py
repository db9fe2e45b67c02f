"""Tests for the end-to-end trade analysis."""

import pytest

from astral_draft.models.player import DraftPick, Position, TradeBundle
from astral_draft.models.trade import TradeGrade
from astral_draft.services.aggregator import calculate_grade, fairness_score
from astral_draft.services.trade_analyzer import analyze_trade
from astral_draft.services.valuation import valuate_bundle

from conftest import SEASON, make_player


def _bundle(roster, *ids, picks=()):
    return TradeBundle(players=[p for p in roster if p.id in ids], picks=list(picks))


def test_even_trade_is_perfectly_fair(league):
    mine = make_player("mine", Position.WR, 10)
    theirs = make_player("theirs", Position.WR, 10)

    analysis = analyze_trade(
        TradeBundle(players=[mine]),
        TradeBundle(players=[theirs]),
        [mine],
        [theirs],
        league,
    )

    assert analysis.initiator_value == analysis.partner_value == 94
    assert analysis.fairness_score == 100
    assert analysis.initiator_grade == TradeGrade.B
    assert analysis.partner_grade == TradeGrade.B
    assert analysis.warnings == []
    assert analysis.recommendations == [
        "This appears to be a fair trade that could benefit both teams"
    ]


def test_values_and_grades_follow_each_side(league, initiator_roster, partner_roster):
    gives = _bundle(initiator_roster, "i-wr1")
    receives = _bundle(partner_roster, "p-rb1")

    analysis = analyze_trade(gives, receives, initiator_roster, partner_roster, league)

    assert analysis.initiator_value == valuate_bundle(receives, league)
    assert analysis.partner_value == valuate_bundle(gives, league)
    assert analysis.fairness_score == pytest.approx(
        fairness_score(analysis.initiator_value, analysis.partner_value)
    )
    assert analysis.initiator_grade == calculate_grade(
        analysis.initiator_value, analysis.partner_value
    )
    assert analysis.partner_grade == calculate_grade(
        analysis.partner_value, analysis.initiator_value
    )
    assert 0 <= analysis.fairness_score <= 100


def test_impact_and_advice(league, initiator_roster, partner_roster):
    analysis = analyze_trade(
        _bundle(initiator_roster, "i-wr1"),
        _bundle(partner_roster, "p-rb1"),
        initiator_roster,
        partner_roster,
        league,
    )

    initiator = analysis.position_impact.initiator
    partner = analysis.position_impact.partner
    assert initiator.improved == [Position.RB]
    assert initiator.weakened == [Position.WR]
    assert partner.improved == [Position.WR]
    assert partner.weakened == [Position.RB]
    assert initiator.depth[Position.WR] == 3
    assert partner.depth[Position.RB] == 3

    assert "Trade leaves initiator thin at WR position" in analysis.warnings
    assert "Trade improves RB depth, a critical position" in analysis.recommendations
    assert analysis.win_probability_impact.initiator > 0
    assert analysis.win_probability_impact.partner < 0


def test_swapping_perspective_mirrors_the_analysis(league, initiator_roster, partner_roster):
    gives = _bundle(initiator_roster, "i-wr1", "i-rb3")
    receives = _bundle(partner_roster, "p-rb1")

    forward = analyze_trade(gives, receives, initiator_roster, partner_roster, league)
    reverse = analyze_trade(receives, gives, partner_roster, initiator_roster, league)

    assert forward.initiator_value == reverse.partner_value
    assert forward.partner_value == reverse.initiator_value
    assert forward.fairness_score == reverse.fairness_score
    assert forward.initiator_grade == reverse.partner_grade
    assert forward.partner_grade == reverse.initiator_grade
    assert forward.position_impact.initiator == reverse.position_impact.partner
    assert forward.position_impact.partner == reverse.position_impact.initiator
    assert forward.win_probability_impact.initiator == pytest.approx(
        reverse.win_probability_impact.partner
    )


def test_picks_count_toward_value_but_not_depth(league, initiator_roster, partner_roster):
    receives = TradeBundle(picks=[DraftPick(round=1, year=SEASON + 1)])

    analysis = analyze_trade(
        _bundle(initiator_roster, "i-wr4"),
        receives,
        initiator_roster,
        partner_roster,
        league,
    )

    assert analysis.initiator_value == 850
    assert analysis.position_impact.initiator.improved == []
    assert analysis.position_impact.partner.improved == [Position.WR]
    assert "Acquiring draft capital for future team building" in analysis.recommendations


def test_empty_trade(league, initiator_roster, partner_roster):
    analysis = analyze_trade(
        TradeBundle(), TradeBundle(), initiator_roster, partner_roster, league
    )
    assert analysis.initiator_value == 0
    assert analysis.partner_value == 0
    assert analysis.fairness_score == 100
    assert analysis.initiator_grade == TradeGrade.F
    assert analysis.win_probability_impact.initiator == 0


def test_lopsided_trade_is_flagged(league, initiator_roster, partner_roster):
    analysis = analyze_trade(
        _bundle(initiator_roster, "i-k1"),
        _bundle(partner_roster, "p-qb1", "p-rb1"),
        initiator_roster,
        partner_roster,
        league,
    )
    assert analysis.fairness_score < 30
    assert analysis.initiator_grade == TradeGrade.A_PLUS
    assert analysis.partner_grade == TradeGrade.F
    assert analysis.warnings[0] == (
        "This trade appears very lopsided and may be vetoed by league members"
    )
