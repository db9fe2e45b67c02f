"""
Trade analysis Pydantic models.
"""

from enum import Enum

from pydantic import BaseModel, Field

from astral_draft.models.player import Player, Position


class TradeGrade(str, Enum):
    """Letter grade for one side of a trade, best to worst."""

    A_PLUS = "A+"
    A = "A"
    A_MINUS = "A-"
    B_PLUS = "B+"
    B = "B"
    B_MINUS = "B-"
    C_PLUS = "C+"
    C = "C"
    C_MINUS = "C-"
    D = "D"
    F = "F"


class PositionImpact(BaseModel):
    """Positional depth change for one side of a trade."""

    improved: list[Position] = Field(default_factory=list)
    weakened: list[Position] = Field(default_factory=list)
    depth: dict[Position, int] = Field(
        default_factory=dict, description="Position -> post-trade player count"
    )


class SideImpact(BaseModel):
    """Per-side container for trade impacts."""

    initiator: PositionImpact
    partner: PositionImpact


class WinProbabilityImpact(BaseModel):
    """
    Relative roster strength change, in percent.

    An approximation based on summed player values, not a calibrated
    probability model.
    """

    initiator: float = 0.0
    partner: float = 0.0


class TradeAnalysis(BaseModel):
    """Complete analysis of a proposed trade."""

    initiator_value: int = Field(description="Value the initiator receives")
    partner_value: int = Field(description="Value the partner receives")
    fairness_score: float = Field(ge=0, le=100, description="100 is perfectly balanced")
    initiator_grade: TradeGrade
    partner_grade: TradeGrade
    win_probability_impact: WinProbabilityImpact
    position_impact: SideImpact
    recommendations: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class TradeValidationResult(BaseModel):
    """Outcome of structural trade validation."""

    valid: bool
    errors: list[str] = Field(default_factory=list)


class TradeSuggestion(BaseModel):
    """A proposed one-for-one swap between two rosters."""

    give: list[Player]
    receive: list[Player]
    reasoning: str
    fairness_score: float


class AssetValue(BaseModel):
    """Trade value of one roster asset."""

    asset_type: str = Field(description="'player' or 'pick'")
    name: str
    value: int = Field(ge=0)


class BundleValuation(BaseModel):
    """Per-asset and total value of a trade bundle."""

    assets: list[AssetValue] = Field(default_factory=list)
    total_value: int = 0
