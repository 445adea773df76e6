"""Unit tests for mascot mood and phrasing"""

from purchase_coach.domain.engine import evaluate_purchase
from purchase_coach.domain.models import Recommendation
from purchase_coach.domain.presentation import MESSAGES, smartie_message, smartie_mood


def test_smartie_mood_per_recommendation():
    assert smartie_mood(Recommendation.BUY) == "celebrating"
    assert smartie_mood(Recommendation.WAIT) == "thinking"
    assert smartie_mood(Recommendation.SKIP) == "concerned"


def test_smartie_message_is_seeded(make_request):
    decision = evaluate_purchase(make_request())

    first = smartie_message(decision, seed=7)

    assert first in MESSAGES[decision.recommendation]
    assert all(smartie_message(decision, seed=7) == first for _ in range(5))


def test_smartie_message_defaults_to_item_name_seed(make_request):
    decision = evaluate_purchase(make_request())

    assert smartie_message(decision, item_name="Headphones") == smartie_message(decision, item_name="Headphones")


def test_smartie_message_does_not_change_decision(make_request):
    decision = evaluate_purchase(make_request())
    before = decision

    smartie_message(decision, seed=1)

    assert decision == before == evaluate_purchase(make_request())
