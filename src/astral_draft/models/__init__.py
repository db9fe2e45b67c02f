"""Pydantic models and schemas."""

from astral_draft.models.league import LeagueSettings, ScoringType, TradeConstraints
from astral_draft.models.player import (
    DraftPick,
    InjuryStatus,
    Player,
    PlayerProjection,
    PlayerStat,
    Position,
    RecentPerformance,
    RosterAsset,
    TradeBundle,
    Trend,
)
from astral_draft.models.trade import (
    AssetValue,
    BundleValuation,
    PositionImpact,
    SideImpact,
    TradeAnalysis,
    TradeGrade,
    TradeSuggestion,
    TradeValidationResult,
    WinProbabilityImpact,
)
from astral_draft.models.trade_review import (
    CounterOffer,
    OverrideAction,
    RosterUpdate,
    TradeAssets,
    TradeProposal,
    TradeStatus,
    TradeVote,
    VoteType,
)

__all__ = [
    # League
    "LeagueSettings",
    "ScoringType",
    "TradeConstraints",
    # Player
    "DraftPick",
    "InjuryStatus",
    "Player",
    "PlayerProjection",
    "PlayerStat",
    "Position",
    "RecentPerformance",
    "RosterAsset",
    "TradeBundle",
    "Trend",
    # Trade
    "AssetValue",
    "BundleValuation",
    "PositionImpact",
    "SideImpact",
    "TradeAnalysis",
    "TradeGrade",
    "TradeSuggestion",
    "TradeValidationResult",
    "WinProbabilityImpact",
    # Trade review
    "CounterOffer",
    "OverrideAction",
    "RosterUpdate",
    "TradeAssets",
    "TradeProposal",
    "TradeStatus",
    "TradeVote",
    "VoteType",
]
