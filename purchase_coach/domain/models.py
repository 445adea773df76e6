"""Domain models - pure Python dataclasses representing purchase decisions"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple


class CategoryId(str, Enum):
    """Closed set of spending categories"""

    FOOD = "food"
    TECH = "tech"
    ENTERTAINMENT = "entertainment"
    CLOTHING = "clothing"
    HEALTH = "health"
    TRANSPORT = "transport"
    HOME = "home"
    OTHER = "other"


class EmotionId(str, Enum):
    """Closed set of emotional states a user can report"""

    HAPPY = "happy"
    STRESSED = "stressed"
    BORED = "bored"
    EXCITED = "excited"
    SAD = "sad"
    CALM = "calm"


class GoalPriority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Recommendation(str, Enum):
    BUY = "buy"
    WAIT = "wait"
    SKIP = "skip"


class ConfigurationGap(str, Enum):
    """Soft, non-fatal data gaps filled with documented defaults"""

    NO_BUDGET = "no_budget"
    NO_SPENDING_HISTORY = "no_spending_history"


class Factor(str, Enum):
    """Scoring rules that can fire for a purchase"""

    PATIENT_URGENCY = "patient_urgency"
    GENUINE_URGENCY = "genuine_urgency"
    AMBIGUOUS_URGENCY = "ambiguous_urgency"
    HIGH_UTILITY = "high_utility"
    DESIRE_OVER_UTILITY = "desire_over_utility"
    OVER_BUDGET = "over_budget"
    LARGE_BUDGET_SHARE = "large_budget_share"
    SMALL_BUDGET_SHARE = "small_budget_share"
    GOAL_DELAY = "goal_delay"
    REGRET_RISK = "regret_risk"
    NEGATIVE_MOOD = "negative_mood"
    POSITIVE_MOOD = "positive_mood"


# Impulsiveness weight (1-10) per emotion; absence of emotion counts as 5
IMPULSIVENESS: Dict[EmotionId, int] = {
    EmotionId.HAPPY: 6,
    EmotionId.STRESSED: 8,
    EmotionId.BORED: 7,
    EmotionId.EXCITED: 9,
    EmotionId.SAD: 8,
    EmotionId.CALM: 3,
}
NEUTRAL_IMPULSIVENESS = 5


@dataclass(frozen=True)
class PurchaseRequest:
    """Validated purchase the user is considering"""

    item_name: str
    cost: Decimal
    category: CategoryId
    desire: int
    urgency: int
    usefulness: int
    emotional_state: Optional[EmotionId] = None
    is_time_sensitive: bool = False

    @property
    def impulsiveness(self) -> int:
        if self.emotional_state is None:
            return NEUTRAL_IMPULSIVENESS
        return IMPULSIVENESS[self.emotional_state]


@dataclass(frozen=True)
class BudgetSnapshot:
    """Monthly budget for one category, as supplied by the caller"""

    category: CategoryId
    monthly_limit: Decimal
    spent: Decimal

    @property
    def remaining(self) -> Decimal:
        return self.monthly_limit - self.spent


@dataclass(frozen=True)
class GoalSnapshot:
    """Savings goal, as supplied by the caller"""

    name: str
    target_amount: Decimal
    current_amount: Decimal
    priority: GoalPriority
    weekly_contribution: Optional[Decimal] = None  # derived from a 20-week horizon when absent

    @property
    def remaining(self) -> Decimal:
        return self.target_amount - self.current_amount


@dataclass(frozen=True)
class SpendingRecord:
    """Past purchase with the user's self-reported regret (0-10)"""

    category: CategoryId
    amount: Decimal
    regret_level: int


@dataclass(frozen=True)
class GoalImpact:
    """Projected effect of the purchase on one savings goal"""

    goal_name: str
    priority: GoalPriority
    delay_weeks_estimate: float
    impact_percent: float


@dataclass(frozen=True)
class DecisionContext:
    """Per-call reduction of budgets, goals and spending history"""

    remaining_budget: Decimal
    budget_impact_ratio: float
    per_goal_impact: Tuple[GoalImpact, ...]
    category_regret_rate: float
    budget: Optional[BudgetSnapshot] = None
    gaps: FrozenSet[ConfigurationGap] = frozenset()

    @property
    def has_budget(self) -> bool:
        return ConfigurationGap.NO_BUDGET not in self.gaps


@dataclass(frozen=True)
class Adjustment:
    """Points contributed by a single triggered rule"""

    factor: Factor
    points: int


@dataclass(frozen=True)
class ScoreBreakdown:
    """Smartness score together with the rules that produced it"""

    base: int
    adjustments: Tuple[Adjustment, ...]
    regret_probability: float
    score: int

    @property
    def raw_total(self) -> int:
        return self.base + sum(a.points for a in self.adjustments)

    def fired(self, factor: Factor) -> bool:
        return any(a.factor == factor for a in self.adjustments)


@dataclass(frozen=True)
class Explanation:
    """Human-readable output of the explainer"""

    reasoning: Tuple[str, ...]
    emotional_insight: str
    financial_impact: str
    alternatives: Tuple[str, ...]
    wait_suggestion: Optional[str]


@dataclass(frozen=True)
class Decision:
    """Output of purchase analysis, owned by the caller"""

    recommendation: Recommendation
    confidence: int
    reasoning: Tuple[str, ...]
    emotional_insight: str
    financial_impact: str
    alternatives: Tuple[str, ...] = ()
    wait_suggestion: Optional[str] = None
    smartness_score: int = 0
    goal_impacts: Tuple[GoalImpact, ...] = ()
    regret_probability: float = 0.0
    value_score: float = 0.0
    opportunity_cost: Decimal = field(default=Decimal("0"))
    budget_impact_ratio: float = 0.0
