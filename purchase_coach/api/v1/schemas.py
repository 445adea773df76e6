"""Pydantic schemas for API request/response validation"""

from decimal import Decimal
from typing import Any, List, Optional
from pydantic import BaseModel, Field
from purchase_coach.domain.models import (
    BudgetSnapshot,
    CategoryId,
    Decision,
    GoalPriority,
    GoalSnapshot,
    SpendingRecord,
)


class PurchaseInput(BaseModel):
    """
    Raw purchase fields as entered in the app.

    Kept loose on purpose: the domain normalizer owns validation so that the
    API and any other caller reject the same inputs with the same messages.
    """

    item_name: Optional[Any] = None
    cost: Optional[Any] = None
    category: Optional[Any] = None
    desire: Optional[Any] = None
    urgency: Optional[Any] = None
    usefulness: Optional[Any] = None
    emotional_state: Optional[Any] = None
    is_time_sensitive: Optional[Any] = None


class BudgetSchema(BaseModel):
    """Monthly budget for one category"""

    category: CategoryId
    monthly_limit: Decimal = Field(..., ge=0)
    spent: Decimal = Field(Decimal("0"), ge=0)

    def to_domain(self) -> BudgetSnapshot:
        return BudgetSnapshot(category=self.category, monthly_limit=self.monthly_limit, spent=self.spent)


class GoalSchema(BaseModel):
    """Savings goal"""

    name: str = Field(..., min_length=1)
    target_amount: Decimal = Field(..., ge=0)
    current_amount: Decimal = Field(Decimal("0"), ge=0)
    priority: GoalPriority = GoalPriority.MEDIUM
    weekly_contribution: Optional[Decimal] = Field(None, ge=0)

    def to_domain(self) -> GoalSnapshot:
        return GoalSnapshot(
            name=self.name,
            target_amount=self.target_amount,
            current_amount=self.current_amount,
            priority=self.priority,
            weekly_contribution=self.weekly_contribution,
        )


class SpendingSchema(BaseModel):
    """Past purchase with self-reported regret"""

    category: CategoryId
    amount: Decimal = Field(..., ge=0)
    regret_level: int = Field(..., ge=0, le=10)

    def to_domain(self) -> SpendingRecord:
        return SpendingRecord(category=self.category, amount=self.amount, regret_level=self.regret_level)


class PurchaseDecisionRequest(BaseModel):
    """Request body for POST /v1/purchase-decision"""

    purchase: PurchaseInput
    budgets: List[BudgetSchema] = Field(default_factory=list)
    goals: List[GoalSchema] = Field(default_factory=list)
    recent_spending: List[SpendingSchema] = Field(default_factory=list)
    seed: Optional[int] = Field(None, description="Seed for mascot phrasing")


class GoalImpactSchema(BaseModel):
    goal_name: str
    priority: GoalPriority
    delay_weeks_estimate: float
    impact_percent: float


class SmartieSchema(BaseModel):
    mood: str
    message: str


class PurchaseDecisionResponse(BaseModel):
    """Response for POST /v1/purchase-decision"""

    recommendation: str
    confidence: int
    reasoning: List[str]
    emotional_insight: str
    financial_impact: str
    alternatives: List[str]
    wait_suggestion: Optional[str] = None
    smartness_score: int
    goal_impacts: List[GoalImpactSchema]
    regret_probability: float
    value_score: float
    opportunity_cost: float
    budget_impact_ratio: float
    smartie: SmartieSchema

    @classmethod
    def from_decision(cls, decision: Decision, smartie: SmartieSchema) -> "PurchaseDecisionResponse":
        return cls(
            recommendation=decision.recommendation.value,
            confidence=decision.confidence,
            reasoning=list(decision.reasoning),
            emotional_insight=decision.emotional_insight,
            financial_impact=decision.financial_impact,
            alternatives=list(decision.alternatives),
            wait_suggestion=decision.wait_suggestion,
            smartness_score=decision.smartness_score,
            goal_impacts=[
                GoalImpactSchema(
                    goal_name=g.goal_name,
                    priority=g.priority,
                    delay_weeks_estimate=g.delay_weeks_estimate,
                    impact_percent=round(g.impact_percent, 1),
                )
                for g in decision.goal_impacts
            ],
            regret_probability=decision.regret_probability,
            value_score=round(decision.value_score, 1),
            opportunity_cost=round(float(decision.opportunity_cost), 2),
            budget_impact_ratio=round(decision.budget_impact_ratio, 3),
            smartie=smartie,
        )


class CategorySuggestionResponse(BaseModel):
    """Response for GET /v1/categories/suggest"""

    item_name: str
    category: Optional[CategoryId] = None
    label: Optional[str] = None
