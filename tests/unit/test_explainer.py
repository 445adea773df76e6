"""Unit tests for reasoning and suggestion generation"""

import pytest
from decimal import Decimal
from purchase_coach.domain.catalog import ALTERNATIVES
from purchase_coach.domain.context import build_context
from purchase_coach.domain.explainer import explain, financial_impact
from purchase_coach.domain.models import (
    BudgetSnapshot,
    CategoryId,
    EmotionId,
    Factor,
    Recommendation,
)
from purchase_coach.domain.scoring import classify_score, score_purchase


def _explain(request, budgets=(), goals=(), history=()):
    context = build_context(request, budgets, goals, history)
    breakdown = score_purchase(request, context)
    recommendation, _ = classify_score(breakdown.score)
    return explain(request, context, breakdown, recommendation), breakdown, recommendation


def test_reasoning_orders_fired_rules_by_weight(make_request, food_budget):
    request = make_request(
        cost=Decimal("120"),
        category=CategoryId.FOOD,
        desire=9,
        urgency=8,
        usefulness=3,
        emotional_state=EmotionId.STRESSED,
    )

    explanation, breakdown, recommendation = _explain(request, budgets=[food_budget])

    assert recommendation == Recommendation.SKIP
    assert explanation.reasoning == (
        "This purchase may not serve your financial goals",
        "Would exceed your remaining Food & Dining budget",
        "Desire (9/10) is outweighing practical usefulness (3/10)",
        "Feeling stressed tends to drive impulse purchases",
        "High urgency (8/10) suggests a genuine need",
    )
    # Headline plus one bullet per fired rule
    assert len(explanation.reasoning) == 1 + len(breakdown.adjustments)


def test_reasoning_only_mentions_fired_rules(make_request):
    """Utility bullet appears only when the rationality bonus fired"""
    balanced, breakdown, _ = _explain(make_request(desire=5, usefulness=5))
    assert not breakdown.fired(Factor.HIGH_UTILITY)
    assert "High utility relative to emotional desire" not in balanced.reasoning

    useful, breakdown, _ = _explain(make_request(desire=3, usefulness=9))
    assert breakdown.fired(Factor.HIGH_UTILITY)
    assert "High utility relative to emotional desire" in useful.reasoning


def test_reasoning_notes_missing_budget(make_request):
    explanation, _, _ = _explain(make_request(category=CategoryId.HEALTH))

    assert explanation.reasoning[-1] == "No budget set for Health & Fitness, so budget impact is not limiting"
    assert explanation.financial_impact == (
        "No budget set for Health & Fitness; this £50 purchase isn't tracked against a limit."
    )


def test_budget_bullets_without_budget(make_request):
    """Untracked categories never claim a share of a budget that doesn't exist"""
    small, breakdown, _ = _explain(make_request(category=CategoryId.HOME))
    assert breakdown.fired(Factor.SMALL_BUDGET_SHARE)
    assert "Home & Garden spending isn't tracked against a budget, so there's no budget pressure" in small.reasoning
    assert not any("of remaining" in line for line in small.reasoning)

    large, breakdown, _ = _explain(make_request(cost=Decimal("2000000"), category=CategoryId.HOME))
    assert breakdown.fired(Factor.OVER_BUDGET)
    assert "Large Home & Garden purchase that isn't tracked against a budget" in large.reasoning
    assert not any("Would exceed" in line for line in large.reasoning)


def test_reasoning_describes_goal_delay(make_request, holiday_goal):
    explanation, _, _ = _explain(make_request(cost=Decimal("100")), goals=[holiday_goal])

    assert "Delays your high-priority goal 'Holiday' by about 4 weeks" in explanation.reasoning


def test_alternatives_empty_for_buy(make_request, transport_budget):
    request = make_request(
        cost=Decimal("15"),
        category=CategoryId.TRANSPORT,
        desire=4,
        urgency=2,
        usefulness=8,
        emotional_state=EmotionId.CALM,
    )

    explanation, _, recommendation = _explain(request, budgets=[transport_budget])

    assert recommendation == Recommendation.BUY
    assert explanation.alternatives == ()
    assert explanation.wait_suggestion is None


@pytest.mark.parametrize(
    "category, expected",
    [
        (CategoryId.FOOD, ALTERNATIVES[CategoryId.FOOD]),
        (CategoryId.CLOTHING, ALTERNATIVES[CategoryId.CLOTHING]),
        (CategoryId.HOME, ALTERNATIVES[CategoryId.OTHER]),
        (CategoryId.HEALTH, ALTERNATIVES[CategoryId.OTHER]),
    ],
)
def test_alternatives_by_category(make_request, category, expected):
    # Mid urgency and even desire/usefulness: 50 - 5 + 5 = 50, a wait
    explanation, _, recommendation = _explain(make_request(category=category))

    assert recommendation == Recommendation.WAIT
    assert explanation.alternatives == expected


def test_clothing_alternatives_mention_second_hand():
    assert "Check the second-hand market first" in ALTERNATIVES[CategoryId.CLOTHING]
    assert "Cook a special meal at home" in ALTERNATIVES[CategoryId.FOOD]


def test_wait_suggestion_only_when_not_time_sensitive(make_request):
    relaxed, _, _ = _explain(make_request(item_name="Smart watch"))
    assert relaxed.wait_suggestion == (
        "Add Smart watch to your wish list and revisit in 3 days. Often the desire fades, saving you money!"
    )

    urgent, _, recommendation = _explain(make_request(is_time_sensitive=True))
    assert recommendation != Recommendation.BUY
    assert urgent.wait_suggestion is None


@pytest.mark.parametrize(
    "emotion, expected",
    [
        (EmotionId.STRESSED, "Your current stressed mood puts impulse purchase risk at 80%."),
        (EmotionId.CALM, "Your current calm & rational mood puts impulse purchase risk at 30%."),
        (None, "No mood recorded, so impulse purchase risk is assumed to be average (50%)."),
    ],
)
def test_emotional_insight(make_request, emotion, expected):
    explanation, _, _ = _explain(make_request(emotional_state=emotion))
    assert explanation.emotional_insight == expected


@pytest.mark.parametrize(
    "cost, spent, expected",
    [
        ("120", "150", "This would exceed your remaining Food & Dining budget of £50 by £70."),
        ("20", "200", "Your Food & Dining budget is already used up this month; this would add £20 of overspend."),
        ("30", "150", "This would consume 60% of your remaining monthly Food & Dining budget."),
        ("10", "150", "This fits comfortably in your Food & Dining budget (20% of remaining)."),
    ],
)
def test_financial_impact(make_request, cost, spent, expected):
    request = make_request(cost=Decimal(cost), category=CategoryId.FOOD)
    budgets = [BudgetSnapshot(CategoryId.FOOD, Decimal("200"), Decimal(spent))]

    assert financial_impact(request, build_context(request, budgets, [], [])) == expected
