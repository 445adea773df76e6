"""Tunable scoring parameters.

The defaults reproduce the coaching app's established rule weights. They are
heuristics chosen for the product, not validated financial research, so every
one of them can be overridden per call.
"""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ScoringTuning:
    """Constants used by the context aggregator, scorer and classifier"""

    # Context aggregation
    unbudgeted_remaining: Decimal = Decimal("1000000")
    ratio_epsilon: Decimal = Decimal("0.01")
    ratio_ceiling: float = 10.0
    goal_horizon_weeks: int = 20
    default_regret_rate: float = 0.3

    # Scorer
    base_score: int = 50
    low_urgency_max: int = 3
    low_urgency_bonus: int = 15
    high_urgency_min: int = 8
    high_urgency_bonus: int = 10
    mid_urgency_penalty: int = -5
    rational_ratio_above: float = 1.2
    rational_bonus: int = 20
    impulsive_ratio_below: float = 0.7
    impulsive_penalty: int = -15
    over_budget_penalty: int = -25
    large_share_above: float = 0.30
    large_share_penalty: int = -10
    small_share_below: float = 0.10
    small_share_bonus: int = 5
    goal_impact_percent_above: float = 10.0
    goal_penalty: int = -15
    regret_gap_weight: int = 5
    regret_threshold: float = 60.0
    regret_penalty: int = -10
    negative_mood_penalty: int = -15
    positive_mood_bonus: int = 5

    # Classifier
    buy_threshold: int = 70
    wait_threshold: int = 40

    # Explainer
    wait_period_days: int = 3


DEFAULT_TUNING = ScoringTuning()
