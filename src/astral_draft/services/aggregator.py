"""
Trade Aggregation

Fairness score and letter grades derived from each side's total value.
"""

from astral_draft.models.trade import TradeGrade

# (minimum receive/give ratio, grade), best first
GRADE_THRESHOLDS: list[tuple[float, TradeGrade]] = [
    (1.5, TradeGrade.A_PLUS),
    (1.3, TradeGrade.A),
    (1.15, TradeGrade.A_MINUS),
    (1.05, TradeGrade.B_PLUS),
    (0.95, TradeGrade.B),
    (0.85, TradeGrade.B_MINUS),
    (0.75, TradeGrade.C_PLUS),
    (0.65, TradeGrade.C),
    (0.55, TradeGrade.C_MINUS),
    (0.45, TradeGrade.D),
]


def fairness_score(receive_value: float, give_value: float) -> float:
    """
    Score how balanced a trade is, 0-100.

    The value gap is measured against the mean of both sides. A trade where
    neither side has any value is treated as perfectly balanced.
    """
    average = (receive_value + give_value) / 2
    if average == 0:
        return 100.0

    difference = abs(receive_value - give_value)
    return max(0.0, 100 - (difference / average) * 100)


def calculate_grade(received_value: float, given_value: float) -> TradeGrade:
    """Grade one side of a trade by what it receives relative to what it gives."""
    ratio = received_value / max(given_value, 1)

    for threshold, grade in GRADE_THRESHOLDS:
        if ratio >= threshold:
            return grade
    return TradeGrade.F
