"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from typing import Any, Callable, Dict
from fastapi.testclient import TestClient
from purchase_coach.api.main import create_app
from purchase_coach.domain.models import (
    BudgetSnapshot,
    CategoryId,
    EmotionId,
    GoalPriority,
    GoalSnapshot,
    PurchaseRequest,
    SpendingRecord,
)


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def make_request() -> Callable[..., PurchaseRequest]:
    """Factory for validated purchase requests with neutral defaults"""

    def _make(**overrides: Any) -> PurchaseRequest:
        fields: Dict[str, Any] = dict(
            item_name="Headphones",
            cost=Decimal("50"),
            category=CategoryId.TECH,
            desire=5,
            urgency=5,
            usefulness=5,
            emotional_state=None,
            is_time_sensitive=False,
        )
        fields.update(overrides)
        return PurchaseRequest(**fields)

    return _make


@pytest.fixture
def impulse_purchase_raw() -> Dict[str, Any]:
    """Expensive, low-usefulness meal bought while stressed"""
    return {
        "item_name": "Tasting menu",
        "cost": 120,
        "category": "food",
        "desire": 9,
        "urgency": 8,
        "usefulness": 3,
        "emotional_state": "stressed",
        "is_time_sensitive": False,
    }


@pytest.fixture
def food_budget() -> BudgetSnapshot:
    """Food budget with £50 left"""
    return BudgetSnapshot(category=CategoryId.FOOD, monthly_limit=Decimal("200"), spent=Decimal("150"))


@pytest.fixture
def sensible_purchase_raw() -> Dict[str, Any]:
    """Cheap, useful bus pass bought while calm"""
    return {
        "item_name": "Bus pass",
        "cost": 15,
        "category": "transport",
        "desire": 4,
        "urgency": 2,
        "usefulness": 8,
        "emotional_state": EmotionId.CALM.value,
        "is_time_sensitive": False,
    }


@pytest.fixture
def transport_budget() -> BudgetSnapshot:
    """Transport budget with plenty left"""
    return BudgetSnapshot(category=CategoryId.TRANSPORT, monthly_limit=Decimal("500"), spent=Decimal("100"))


@pytest.fixture
def holiday_goal() -> GoalSnapshot:
    """High-priority goal with £500 still to save"""
    return GoalSnapshot(
        name="Holiday",
        target_amount=Decimal("1000"),
        current_amount=Decimal("500"),
        priority=GoalPriority.HIGH,
    )


@pytest.fixture
def regretted_food_history() -> list[SpendingRecord]:
    """Recent food purchases the user mostly regretted"""
    return [
        SpendingRecord(category=CategoryId.FOOD, amount=Decimal("30"), regret_level=9),
        SpendingRecord(category=CategoryId.FOOD, amount=Decimal("45"), regret_level=9),
        SpendingRecord(category=CategoryId.TECH, amount=Decimal("200"), regret_level=0),
    ]
