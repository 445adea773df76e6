"""Fixed lookup tables for categories and emotional states"""

from typing import Dict, Optional, Tuple
from purchase_coach.domain.models import CategoryId, EmotionId

CATEGORY_LABELS: Dict[CategoryId, str] = {
    CategoryId.FOOD: "Food & Dining",
    CategoryId.TECH: "Technology",
    CategoryId.ENTERTAINMENT: "Entertainment",
    CategoryId.CLOTHING: "Clothing & Fashion",
    CategoryId.HEALTH: "Health & Fitness",
    CategoryId.TRANSPORT: "Transport",
    CategoryId.HOME: "Home & Garden",
    CategoryId.OTHER: "Other",
}

CATEGORY_KEYWORDS: Dict[CategoryId, Tuple[str, ...]] = {
    CategoryId.FOOD: ("food", "restaurant", "coffee", "lunch", "dinner"),
    CategoryId.TECH: ("phone", "laptop", "gadget", "app", "software"),
    CategoryId.ENTERTAINMENT: ("movie", "game", "book", "music", "streaming"),
    CategoryId.CLOTHING: ("shirt", "shoes", "jacket", "dress", "clothes"),
    CategoryId.HEALTH: ("gym", "supplements", "health", "fitness", "medicine"),
    CategoryId.TRANSPORT: ("uber", "taxi", "bus", "train", "car", "fuel"),
    CategoryId.HOME: ("furniture", "decor", "kitchen", "garden", "tools"),
}

EMOTION_LABELS: Dict[EmotionId, str] = {
    EmotionId.HAPPY: "Happy",
    EmotionId.STRESSED: "Stressed",
    EmotionId.BORED: "Bored",
    EmotionId.EXCITED: "Excited",
    EmotionId.SAD: "Sad",
    EmotionId.CALM: "Calm & Rational",
}

# Categories without an entry fall back to OTHER
ALTERNATIVES: Dict[CategoryId, Tuple[str, ...]] = {
    CategoryId.FOOD: (
        "Cook a special meal at home",
        "Try a new recipe instead",
        "Have a picnic",
    ),
    CategoryId.CLOTHING: (
        "Check the second-hand market first",
        "Check if you already own something similar",
        "Wait for a sale",
    ),
    CategoryId.TECH: (
        "Look for a refurbished or second-hand model",
        "Check whether your current device can be repaired or upgraded",
        "Wait for a sale",
    ),
    CategoryId.ENTERTAINMENT: (
        "Find free events in your area",
        "Try a free trial instead",
        "Enjoy nature or exercise",
    ),
    CategoryId.TRANSPORT: (
        "Walk or cycle if possible",
        "Use public transport",
        "Combine errands into one trip",
    ),
    CategoryId.OTHER: (
        "Find a DIY solution",
        "Borrow from a friend",
        "Look for free alternatives",
    ),
}


def category_label(category: CategoryId) -> str:
    return CATEGORY_LABELS[category]


def emotion_label(emotion: EmotionId) -> str:
    return EMOTION_LABELS[emotion]


def alternatives_for(category: CategoryId) -> Tuple[str, ...]:
    return ALTERNATIVES.get(category, ALTERNATIVES[CategoryId.OTHER])


def lookup_category(value: str) -> Optional[CategoryId]:
    """Resolve a category by id or display label, case-insensitive"""
    key = value.strip().lower()
    for category in CategoryId:
        if key == category.value or key == CATEGORY_LABELS[category].lower():
            return category
    return None


def suggest_category(item_name: str) -> Optional[CategoryId]:
    """Guess a category from keywords in the item name"""
    item_lower = item_name.lower()
    for category, keywords in CATEGORY_KEYWORDS.items():
        if any(keyword in item_lower for keyword in keywords):
            return category
    return None
