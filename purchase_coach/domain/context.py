"""Context aggregation - reduces caller snapshots to what the scorer needs"""

from decimal import Decimal
from typing import List, Optional, Sequence
from purchase_coach.domain.models import (
    BudgetSnapshot,
    ConfigurationGap,
    DecisionContext,
    GoalImpact,
    GoalSnapshot,
    PurchaseRequest,
    SpendingRecord,
)
from purchase_coach.domain.tuning import DEFAULT_TUNING, ScoringTuning


def build_context(
    request: PurchaseRequest,
    budgets: Sequence[BudgetSnapshot],
    goals: Sequence[GoalSnapshot],
    recent_spending: Sequence[SpendingRecord],
    tuning: ScoringTuning = DEFAULT_TUNING,
) -> DecisionContext:
    """
    Build a fresh DecisionContext for one purchase.

    Missing data never fails the call:
    - No budget for the category: remaining budget is a large sentinel
    - No history for the category: regret rate defaults to 0.3
    Both cases are recorded in context.gaps.
    """
    gaps = set()

    budget = find_budget(budgets, request)
    if budget is None:
        remaining = tuning.unbudgeted_remaining
        gaps.add(ConfigurationGap.NO_BUDGET)
    else:
        remaining = budget.remaining

    ratio = budget_impact_ratio(request.cost, remaining, tuning)
    impacts = tuple(goal_impact(request.cost, goal, tuning) for goal in goals)

    regret_rate = category_regret_rate(request, recent_spending)
    if regret_rate is None:
        regret_rate = tuning.default_regret_rate
        gaps.add(ConfigurationGap.NO_SPENDING_HISTORY)

    return DecisionContext(
        remaining_budget=remaining,
        budget_impact_ratio=ratio,
        per_goal_impact=impacts,
        category_regret_rate=regret_rate,
        budget=budget,
        gaps=frozenset(gaps),
    )


def find_budget(budgets: Sequence[BudgetSnapshot], request: PurchaseRequest) -> Optional[BudgetSnapshot]:
    """First budget matching the purchase category"""
    return next((b for b in budgets if b.category == request.category), None)


def budget_impact_ratio(cost: Decimal, remaining: Decimal, tuning: ScoringTuning = DEFAULT_TUNING) -> float:
    """
    Cost as a fraction of remaining budget.

    Remaining budget is floored at epsilon so an exhausted or overspent budget
    yields the ceiling instead of infinity.
    """
    denominator = max(remaining, tuning.ratio_epsilon)
    return min(float(cost / denominator), tuning.ratio_ceiling)


def goal_impact(cost: Decimal, goal: GoalSnapshot, tuning: ScoringTuning = DEFAULT_TUNING) -> GoalImpact:
    """
    Project how much the purchase sets a goal back.

    impact_percent is cost relative to what is still needed for the goal.
    delay_weeks_estimate divides cost by the weekly contribution, which
    defaults to spreading the remaining amount over the goal horizon.
    """
    still_needed = goal.remaining
    if still_needed <= 0:
        return GoalImpact(goal.name, goal.priority, 0.0, 0.0)

    impact_percent = float(cost / still_needed * 100)

    weekly_rate = goal.weekly_contribution
    if weekly_rate is None:
        weekly_rate = still_needed / tuning.goal_horizon_weeks
    delay_weeks = float(cost / weekly_rate) if weekly_rate > 0 else 0.0

    return GoalImpact(
        goal_name=goal.name,
        priority=goal.priority,
        delay_weeks_estimate=round(delay_weeks, 1),
        impact_percent=impact_percent,
    )


def category_regret_rate(request: PurchaseRequest, recent_spending: Sequence[SpendingRecord]) -> Optional[float]:
    """Mean regret (0-1) of past purchases in the category, None without history"""
    levels: List[int] = [s.regret_level for s in recent_spending if s.category == request.category]
    if not levels:
        return None
    return sum(levels) / (10 * len(levels))
