"""Explanation generation - reasoning text derived from the fired scoring rules"""

from typing import Dict, Optional, Tuple
from purchase_coach.domain.catalog import alternatives_for, category_label, emotion_label
from purchase_coach.domain.models import (
    Adjustment,
    ConfigurationGap,
    DecisionContext,
    Explanation,
    Factor,
    GoalPriority,
    PurchaseRequest,
    Recommendation,
    ScoreBreakdown,
)
from purchase_coach.domain.tuning import DEFAULT_TUNING, ScoringTuning
from purchase_coach.utils.money import format_money

HEADLINES: Dict[Recommendation, str] = {
    Recommendation.BUY: "This purchase aligns well with your financial priorities",
    Recommendation.WAIT: "Consider waiting 24-48 hours before deciding",
    Recommendation.SKIP: "This purchase may not serve your financial goals",
}

LARGE_SHARE_WARNING = 0.5


def explain(
    request: PurchaseRequest,
    context: DecisionContext,
    breakdown: ScoreBreakdown,
    recommendation: Recommendation,
    tuning: ScoringTuning = DEFAULT_TUNING,
) -> Explanation:
    """
    Build reasoning, insights and suggestions for a scored purchase.

    Reasoning lists one bullet per rule the scorer fired, strongest first,
    so the text can never claim a factor that did not affect the score.
    """
    reasoning = [HEADLINES[recommendation]]
    ordered = sorted(breakdown.adjustments, key=lambda a: abs(a.points), reverse=True)
    reasoning.extend(_describe(adjustment, request, context, breakdown) for adjustment in ordered)

    if ConfigurationGap.NO_BUDGET in context.gaps:
        reasoning.append(f"No budget set for {category_label(request.category)}, so budget impact is not limiting")

    alternatives: Tuple[str, ...] = ()
    if recommendation != Recommendation.BUY:
        alternatives = alternatives_for(request.category)

    return Explanation(
        reasoning=tuple(reasoning),
        emotional_insight=emotional_insight(request),
        financial_impact=financial_impact(request, context),
        alternatives=alternatives,
        wait_suggestion=wait_suggestion(request, recommendation, tuning),
    )


def emotional_insight(request: PurchaseRequest) -> str:
    risk = request.impulsiveness * 10
    if request.emotional_state is None:
        return f"No mood recorded, so impulse purchase risk is assumed to be average ({risk}%)."
    mood = emotion_label(request.emotional_state).lower()
    return f"Your current {mood} mood puts impulse purchase risk at {risk}%."


def financial_impact(request: PurchaseRequest, context: DecisionContext) -> str:
    label = category_label(request.category)
    cost = format_money(request.cost)

    if not context.has_budget:
        return f"No budget set for {label}; this {cost} purchase isn't tracked against a limit."

    if request.cost > context.remaining_budget:
        if context.remaining_budget <= 0:
            return f"Your {label} budget is already used up this month; this would add {cost} of overspend."
        overrun = request.cost - context.remaining_budget
        return (
            f"This would exceed your remaining {label} budget of "
            f"{format_money(context.remaining_budget)} by {format_money(overrun)}."
        )

    percent = round(context.budget_impact_ratio * 100)
    if context.budget_impact_ratio > LARGE_SHARE_WARNING:
        return f"This would consume {percent}% of your remaining monthly {label} budget."
    return f"This fits comfortably in your {label} budget ({percent}% of remaining)."


def wait_suggestion(
    request: PurchaseRequest,
    recommendation: Recommendation,
    tuning: ScoringTuning = DEFAULT_TUNING,
) -> Optional[str]:
    """Only offered for non-urgent purchases that aren't a clear buy"""
    if request.is_time_sensitive or recommendation == Recommendation.BUY:
        return None
    return (
        f"Add {request.item_name} to your wish list and revisit in {tuning.wait_period_days} days. "
        "Often the desire fades, saving you money!"
    )


def _describe(
    adjustment: Adjustment,
    request: PurchaseRequest,
    context: DecisionContext,
    breakdown: ScoreBreakdown,
) -> str:
    factor = adjustment.factor
    label = category_label(request.category)
    percent = round(context.budget_impact_ratio * 100)

    if factor == Factor.PATIENT_URGENCY:
        return f"Low urgency ({request.urgency}/10) means there's no pressure to buy right now"
    if factor == Factor.GENUINE_URGENCY:
        return f"High urgency ({request.urgency}/10) suggests a genuine need"
    if factor == Factor.AMBIGUOUS_URGENCY:
        return f"Moderate urgency ({request.urgency}/10) makes it unclear whether this is needed now"
    if factor == Factor.HIGH_UTILITY:
        return "High utility relative to emotional desire"
    if factor == Factor.DESIRE_OVER_UTILITY:
        return (
            f"Desire ({request.desire}/10) is outweighing practical usefulness "
            f"({request.usefulness}/10)"
        )
    if factor in (Factor.OVER_BUDGET, Factor.LARGE_BUDGET_SHARE, Factor.SMALL_BUDGET_SHARE) and not context.has_budget:
        if factor == Factor.SMALL_BUDGET_SHARE:
            return f"{label} spending isn't tracked against a budget, so there's no budget pressure"
        return f"Large {label} purchase that isn't tracked against a budget"
    if factor == Factor.OVER_BUDGET:
        return f"Would exceed your remaining {label} budget"
    if factor == Factor.LARGE_BUDGET_SHARE:
        return f"Would use {percent}% of your remaining {label} budget"
    if factor == Factor.SMALL_BUDGET_SHARE:
        return f"Small impact on your {label} budget ({percent}% of remaining)"
    if factor == Factor.GOAL_DELAY:
        return _goal_delay_text(context)
    if factor == Factor.REGRET_RISK:
        return f"High regret risk ({round(breakdown.regret_probability)}%) based on similar purchases and your desire/usefulness gap"
    if factor == Factor.NEGATIVE_MOOD:
        return f"Feeling {emotion_label(request.emotional_state).lower()} tends to drive impulse purchases"
    if factor == Factor.POSITIVE_MOOD:
        return f"A {emotion_label(request.emotional_state).lower()} state of mind supports a considered decision"
    raise ValueError(f"Unknown factor: {factor}")


def _goal_delay_text(context: DecisionContext) -> str:
    high_priority = [g for g in context.per_goal_impact if g.priority == GoalPriority.HIGH]
    worst = max(high_priority, key=lambda g: g.impact_percent)
    return (
        f"Delays your high-priority goal '{worst.goal_name}' by about "
        f"{worst.delay_weeks_estimate:g} weeks"
    )
