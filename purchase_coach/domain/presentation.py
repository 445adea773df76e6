"""Smartie presentation layer - mascot mood and varied phrasing for a finished Decision.

Runs strictly after the Decision is built. Randomness here is seeded and never
feeds back into scoring or classification.
"""

import random
import zlib
from typing import Dict, Optional, Tuple
from purchase_coach.domain.models import Decision, Recommendation

MOODS: Dict[Recommendation, str] = {
    Recommendation.BUY: "celebrating",
    Recommendation.WAIT: "thinking",
    Recommendation.SKIP: "concerned",
}

MESSAGES: Dict[Recommendation, Tuple[str, ...]] = {
    Recommendation.BUY: (
        "Go for it! This one fits your plan.",
        "Smart choice - you've thought this through.",
        "This looks like money well spent.",
    ),
    Recommendation.WAIT: (
        "Let's sleep on this one before deciding.",
        "Not a bad idea, just maybe not today.",
        "Give it a day or two and see if you still want it.",
    ),
    Recommendation.SKIP: (
        "I'd skip this one - your future self will thank you!",
        "This could go a lot further in your savings.",
        "Let's put this money to work on your goals instead.",
    ),
}


def smartie_mood(recommendation: Recommendation) -> str:
    return MOODS[recommendation]


def smartie_message(decision: Decision, seed: Optional[int] = None, item_name: str = "") -> str:
    """
    Pick a message for the mascot.

    Without an explicit seed the item name is hashed, so the same purchase
    always gets the same phrasing.
    """
    if seed is None:
        seed = zlib.crc32(item_name.encode("utf-8"))
    rng = random.Random(seed)
    return rng.choice(MESSAGES[decision.recommendation])
