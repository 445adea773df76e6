"""Smartness scoring engine - core business logic for purchase decisions"""

from typing import List, Tuple
from purchase_coach.domain.models import (
    Adjustment,
    DecisionContext,
    EmotionId,
    Factor,
    GoalPriority,
    PurchaseRequest,
    Recommendation,
    ScoreBreakdown,
)
from purchase_coach.domain.tuning import DEFAULT_TUNING, ScoringTuning
from purchase_coach.utils.money import clamp

NEGATIVE_MOODS = (EmotionId.STRESSED, EmotionId.BORED)
POSITIVE_MOODS = (EmotionId.HAPPY, EmotionId.CALM)


def score_purchase(
    request: PurchaseRequest,
    context: DecisionContext,
    tuning: ScoringTuning = DEFAULT_TUNING,
) -> ScoreBreakdown:
    """
    Calculate smartness score from 0 (clearly a bad idea) to 100 (clearly fine).

    Starts from the base score and applies each rule at most once:
    - Urgency: low urgency rewards patience, high urgency suggests real need,
      the ambiguous middle is penalized slightly
    - Rationality: usefulness relative to desire
    - Budget: overrun, large share or small share of remaining budget
    - Goals: any high-priority goal set back by more than 10%
    - Regret: category history plus how far desire exceeds usefulness
    - Emotion: stressed/bored penalized, happy/calm rewarded

    Every fired rule is recorded so the explainer works from the same facts.
    """
    adjustments: List[Adjustment] = []

    def apply(factor: Factor, points: int) -> None:
        adjustments.append(Adjustment(factor=factor, points=points))

    # Urgency
    if request.urgency <= tuning.low_urgency_max:
        apply(Factor.PATIENT_URGENCY, tuning.low_urgency_bonus)
    elif request.urgency >= tuning.high_urgency_min:
        apply(Factor.GENUINE_URGENCY, tuning.high_urgency_bonus)
    else:
        apply(Factor.AMBIGUOUS_URGENCY, tuning.mid_urgency_penalty)

    # Desire vs usefulness
    ratio = rationality_ratio(request)
    if ratio > tuning.rational_ratio_above:
        apply(Factor.HIGH_UTILITY, tuning.rational_bonus)
    elif ratio < tuning.impulsive_ratio_below:
        apply(Factor.DESIRE_OVER_UTILITY, tuning.impulsive_penalty)

    # Budget
    if request.cost > context.remaining_budget:
        apply(Factor.OVER_BUDGET, tuning.over_budget_penalty)
    elif context.budget_impact_ratio > tuning.large_share_above:
        apply(Factor.LARGE_BUDGET_SHARE, tuning.large_share_penalty)
    elif context.budget_impact_ratio < tuning.small_share_below:
        apply(Factor.SMALL_BUDGET_SHARE, tuning.small_share_bonus)

    # Goals: penalize once, however many goals are hit
    if any(
        g.priority == GoalPriority.HIGH and g.impact_percent > tuning.goal_impact_percent_above
        for g in context.per_goal_impact
    ):
        apply(Factor.GOAL_DELAY, tuning.goal_penalty)

    # Regret
    regret_signal = regret_signal_for(request, context, tuning)
    if regret_signal > tuning.regret_threshold:
        apply(Factor.REGRET_RISK, tuning.regret_penalty)

    # Emotional state
    if request.emotional_state in NEGATIVE_MOODS:
        apply(Factor.NEGATIVE_MOOD, tuning.negative_mood_penalty)
    elif request.emotional_state in POSITIVE_MOODS:
        apply(Factor.POSITIVE_MOOD, tuning.positive_mood_bonus)

    raw_total = tuning.base_score + sum(a.points for a in adjustments)

    return ScoreBreakdown(
        base=tuning.base_score,
        adjustments=tuple(adjustments),
        regret_probability=clamp(regret_signal, 0.0, 100.0),
        score=clamp(raw_total, 0, 100),
    )


def score(
    request: PurchaseRequest,
    context: DecisionContext,
    tuning: ScoringTuning = DEFAULT_TUNING,
) -> int:
    """Smartness score only, clamped to [0, 100]"""
    return score_purchase(request, context, tuning).score


def rationality_ratio(request: PurchaseRequest) -> float:
    return request.usefulness / max(request.desire, 1)


def regret_signal_for(
    request: PurchaseRequest,
    context: DecisionContext,
    tuning: ScoringTuning = DEFAULT_TUNING,
) -> float:
    """Historical regret (as a percentage) plus the desire/usefulness gap"""
    gap = request.desire - request.usefulness
    # Rounded so 0.3 * 100 compares as exactly 30 against the threshold
    return round(context.category_regret_rate * 100 + gap * tuning.regret_gap_weight, 6)


def classify_score(score: int, tuning: ScoringTuning = DEFAULT_TUNING) -> Tuple[Recommendation, int]:
    """
    Map smartness score to a recommendation.

    Bands (lower bound inclusive):
    - 70+:     buy,  confidence = score
    - 40 - 69: wait, confidence = 100 - score
    - 0 - 39:  skip, confidence = 100 - score

    Returns: (recommendation, confidence)
    """
    if score >= tuning.buy_threshold:
        return Recommendation.BUY, score
    elif score >= tuning.wait_threshold:
        return Recommendation.WAIT, 100 - score
    else:
        return Recommendation.SKIP, 100 - score
