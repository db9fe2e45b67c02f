"""
Astral Draft CLI

Command-line interface for valuing assets and analyzing trades from
JSON files, without running the API server.
"""

import argparse
import sys
import webbrowser
from pathlib import Path

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from astral_draft.logging_config import setup_logging
from astral_draft.models.league import LeagueSettings, ScoringType
from astral_draft.models.player import Player, TradeBundle
from astral_draft.services.advisor import validate_trade_constraints
from astral_draft.services.suggestions import generate_trade_suggestions
from astral_draft.services.trade_analyzer import analyze_trade
from astral_draft.services.valuation import describe_bundle, valuate_player
from astral_draft.visualization import charts

_roster_adapter = TypeAdapter(list[Player])


class TradeFile(BaseModel):
    """Contents of a trade JSON file."""

    initiator_gives: TradeBundle = Field(default_factory=TradeBundle)
    initiator_receives: TradeBundle = Field(default_factory=TradeBundle)
    initiator_roster: list[Player] = Field(default_factory=list)
    partner_roster: list[Player] = Field(default_factory=list)
    league: LeagueSettings | None = None


def load_roster(path: str) -> list[Player]:
    """Load a list of players from a JSON file."""
    return _roster_adapter.validate_json(Path(path).read_text())


def load_trade(path: str) -> TradeFile:
    """Load a trade description from a JSON file."""
    return TradeFile.model_validate_json(Path(path).read_text())


def resolve_league(args: argparse.Namespace, trade: TradeFile | None = None) -> LeagueSettings:
    """
    Build the league snapshot for a command.

    Precedence: --league file, then the trade file's league block, then
    defaults. --scoring and --week override whichever was chosen.
    """
    if args.league:
        league = LeagueSettings.model_validate_json(Path(args.league).read_text())
    elif trade is not None and trade.league is not None:
        league = trade.league
    else:
        league = LeagueSettings()

    update = {}
    if args.scoring is not None:
        update["scoring_type"] = ScoringType(args.scoring)
    if args.week is not None:
        update["current_week"] = args.week
    if update:
        # Revalidate so overrides obey the same bounds as the JSON input
        league = LeagueSettings.model_validate({**league.model_dump(), **update})
    return league


def _print_bundle(label: str, bundle: TradeBundle, league: LeagueSettings) -> None:
    valuation = describe_bundle(bundle, league)
    print(f"  {label}: {valuation.total_value}")
    for asset in valuation.assets:
        print(f"    - {asset.name:<28} {asset.value:>6}")


def cmd_value(args: argparse.Namespace) -> int:
    roster = load_roster(args.roster)
    league = resolve_league(args)

    print(f"📊 Player Values (Week {league.current_week}, {league.scoring_type.value})\n")
    print(f"{'Rank':<5} {'Player':<28} {'Pos':<5} {'Status':<13} {'Value':>6}")
    print("-" * 60)

    ranked = sorted(
        ((p, valuate_player(p, league)) for p in roster),
        key=lambda x: x[1],
        reverse=True,
    )
    for i, (player, value) in enumerate(ranked, 1):
        status = player.injury_status.value if player.injury_status else "ACTIVE"
        print(
            f"{i:<5} {player.display_name:<28} {player.position.value:<5} "
            f"{status:<13} {value:>6}"
        )
    return 0


def cmd_analyze(args: argparse.Namespace) -> int:
    trade = load_trade(args.trade)
    league = resolve_league(args, trade)

    analysis = analyze_trade(
        trade.initiator_gives,
        trade.initiator_receives,
        trade.initiator_roster,
        trade.partner_roster,
        league,
    )

    print("📊 Trade Analysis\n")
    _print_bundle("Initiator receives", trade.initiator_receives, league)
    _print_bundle("Partner receives", trade.initiator_gives, league)
    print()
    print(f"Fairness: {analysis.fairness_score:.1f}/100")
    print(
        f"Grades:   initiator {analysis.initiator_grade.value}, "
        f"partner {analysis.partner_grade.value}"
    )
    print(
        f"Strength: initiator {analysis.win_probability_impact.initiator:+.1f}%, "
        f"partner {analysis.win_probability_impact.partner:+.1f}%"
    )

    for side, impact in (
        ("Initiator", analysis.position_impact.initiator),
        ("Partner", analysis.position_impact.partner),
    ):
        improved = ", ".join(p.value for p in impact.improved) or "-"
        weakened = ", ".join(p.value for p in impact.weakened) or "-"
        print(f"{side}: improved {improved}; weakened {weakened}")

    if analysis.warnings:
        print("\n⚠️  Warnings:")
        for warning in analysis.warnings:
            print(f"  - {warning}")
    if analysis.recommendations:
        print("\n✅ Recommendations:")
        for rec in analysis.recommendations:
            print(f"  - {rec}")
    return 0


def cmd_validate(args: argparse.Namespace) -> int:
    trade = load_trade(args.trade)
    league = resolve_league(args, trade)

    result = validate_trade_constraints(
        trade.initiator_roster,
        trade.partner_roster,
        trade.initiator_gives.player_ids,
        trade.initiator_receives.player_ids,
        league.trade_constraints(),
    )

    if result.valid:
        print("✅ Trade satisfies all league rules")
        return 0

    print("❌ Trade is not allowed:")
    for error in result.errors:
        print(f"  - {error}")
    return 1


def cmd_suggest(args: argparse.Namespace) -> int:
    my_roster = load_roster(args.my_roster)
    target_roster = load_roster(args.target_roster)
    league = resolve_league(args)

    suggestions = generate_trade_suggestions(my_roster, target_roster, league)
    if not suggestions:
        print("No trade suggestions found.")
        return 0

    print(f"Found {len(suggestions)} suggestion(s):\n")
    for i, s in enumerate(suggestions, 1):
        give = ", ".join(p.display_name for p in s.give)
        receive = ", ".join(p.display_name for p in s.receive)
        print(f"  {i}. Give {give} for {receive}")
        print(f"     {s.reasoning} (fairness {s.fairness_score:.1f})")
    return 0


def cmd_chart(args: argparse.Namespace) -> int:
    trade = load_trade(args.trade)
    league = resolve_league(args, trade)

    analysis = analyze_trade(
        trade.initiator_gives,
        trade.initiator_receives,
        trade.initiator_roster,
        trade.partner_roster,
        league,
    )
    html = charts.trade_value_chart(
        trade.initiator_gives, trade.initiator_receives, analysis, league
    )
    html += charts.position_depth_chart(
        analysis, trade.initiator_roster, trade.partner_roster
    )

    output_path = Path(args.output)
    output_path.write_text(html)
    print(f"📊 Chart saved to: {output_path}")

    if args.open:
        webbrowser.open(f"file://{output_path.absolute()}")
    return 0


COMMANDS = {
    "value": cmd_value,
    "analyze": cmd_analyze,
    "validate": cmd_validate,
    "suggest": cmd_suggest,
    "chart": cmd_chart,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="astral-trades",
        description="Astral Draft trade analysis CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Rank a roster by trade value
  astral-trades --week 6 --scoring PPR value roster.json

  # Analyze a trade
  astral-trades analyze trade.json

  # Check league rules for a trade
  astral-trades --league league.json validate trade.json

  # Suggest swaps between two rosters
  astral-trades suggest mine.json theirs.json

  # Save a trade chart and open it
  astral-trades chart trade.json --output trade.html --open
        """,
    )

    parser.add_argument("--league", help="League settings JSON file")
    parser.add_argument(
        "--scoring",
        choices=[s.value for s in ScoringType],
        help="Override league scoring type",
    )
    parser.add_argument("--week", type=int, help="Override current week")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    value_parser = subparsers.add_parser("value", help="Rank players by trade value")
    value_parser.add_argument("roster", help="Roster JSON file")

    analyze_parser = subparsers.add_parser("analyze", help="Analyze a trade")
    analyze_parser.add_argument("trade", help="Trade JSON file")

    validate_parser = subparsers.add_parser("validate", help="Validate a trade")
    validate_parser.add_argument("trade", help="Trade JSON file")

    suggest_parser = subparsers.add_parser("suggest", help="Suggest trades")
    suggest_parser.add_argument("my_roster", help="Your roster JSON file")
    suggest_parser.add_argument("target_roster", help="Trade partner roster JSON file")

    chart_parser = subparsers.add_parser("chart", help="Generate HTML trade chart")
    chart_parser.add_argument("trade", help="Trade JSON file")
    chart_parser.add_argument("--output", "-o", default="trade.html", help="Output file path")
    chart_parser.add_argument("--open", action="store_true", help="Open chart in browser")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.log_level)

    try:
        return COMMANDS[args.command](args)
    except (OSError, ValidationError) as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 2


def run_cli():
    """Entry point for CLI."""
    sys.exit(main())


if __name__ == "__main__":
    run_cli()
