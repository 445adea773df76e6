"""Decision record assembly and the end-to-end purchase analysis entry point"""

from decimal import Decimal
from typing import Any, Mapping, Sequence
from purchase_coach.domain.context import build_context
from purchase_coach.domain.explainer import explain
from purchase_coach.domain.models import (
    BudgetSnapshot,
    Decision,
    DecisionContext,
    Explanation,
    GoalSnapshot,
    PurchaseRequest,
    Recommendation,
    ScoreBreakdown,
    SpendingRecord,
)
from purchase_coach.domain.normalizer import normalize
from purchase_coach.domain.scoring import classify_score, score_purchase
from purchase_coach.domain.tuning import DEFAULT_TUNING, ScoringTuning

OPPORTUNITY_COST_RATE = Decimal("1.05")
MAX_VALUE_SCORE = 100.0


def build_decision(
    request: PurchaseRequest,
    context: DecisionContext,
    breakdown: ScoreBreakdown,
    recommendation: Recommendation,
    confidence: int,
    explanation: Explanation,
) -> Decision:
    """
    Assemble the final Decision.

    Alternatives are always empty for a buy, and a wait suggestion only
    survives for non-urgent purchases that aren't a buy.
    """
    is_buy = recommendation == Recommendation.BUY

    return Decision(
        recommendation=recommendation,
        confidence=confidence,
        reasoning=explanation.reasoning,
        emotional_insight=explanation.emotional_insight,
        financial_impact=explanation.financial_impact,
        alternatives=() if is_buy else explanation.alternatives,
        wait_suggestion=None if (is_buy or request.is_time_sensitive) else explanation.wait_suggestion,
        smartness_score=breakdown.score,
        goal_impacts=context.per_goal_impact,
        regret_probability=breakdown.regret_probability,
        value_score=value_score(request),
        opportunity_cost=request.cost * OPPORTUNITY_COST_RATE,
        budget_impact_ratio=context.budget_impact_ratio,
    )


def value_score(request: PurchaseRequest) -> float:
    """Usefulness per unit of cost, capped at 100"""
    if request.cost <= 0:
        return MAX_VALUE_SCORE
    return min(float(request.usefulness * 20 / request.cost), MAX_VALUE_SCORE)


def evaluate_purchase(
    request: PurchaseRequest,
    budgets: Sequence[BudgetSnapshot] = (),
    goals: Sequence[GoalSnapshot] = (),
    recent_spending: Sequence[SpendingRecord] = (),
    tuning: ScoringTuning = DEFAULT_TUNING,
) -> Decision:
    """Run context, scoring, classification and explanation for a validated request"""
    context = build_context(request, budgets, goals, recent_spending, tuning)
    breakdown = score_purchase(request, context, tuning)
    recommendation, confidence = classify_score(breakdown.score, tuning)
    explanation = explain(request, context, breakdown, recommendation, tuning)

    return build_decision(request, context, breakdown, recommendation, confidence, explanation)


def make_purchase_decision(
    raw: Mapping[str, Any],
    budgets: Sequence[BudgetSnapshot] = (),
    goals: Sequence[GoalSnapshot] = (),
    recent_spending: Sequence[SpendingRecord] = (),
    tuning: ScoringTuning = DEFAULT_TUNING,
) -> Decision:
    """
    Main entry point: validate raw input and produce a purchase Decision.

    Raises:
        PurchaseValidationError: Before any scoring, if the input is invalid
    """
    request = normalize(raw)
    return evaluate_purchase(request, budgets, goals, recent_spending, tuning)
