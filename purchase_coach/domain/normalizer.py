"""Input normalization - turns raw purchase input into a PurchaseRequest"""

import math
from typing import Any, List, Mapping, Optional
from purchase_coach.domain.catalog import lookup_category
from purchase_coach.domain.exceptions import FieldError, PurchaseValidationError
from purchase_coach.domain.models import CategoryId, EmotionId, PurchaseRequest
from purchase_coach.utils.money import clamp, parse_amount

SLIDER_MIN = 1
SLIDER_MAX = 10
SLIDERS = ("desire", "urgency", "usefulness")


def normalize(raw: Mapping[str, Any]) -> PurchaseRequest:
    """
    Validate and coerce raw purchase input.

    Field problems are collected and raised together so the caller can show
    all of them at once. Slider values outside 1-10 are clamped rather than
    rejected; a missing emotional state means neutral.

    Raises:
        PurchaseValidationError: If any field is missing or malformed
    """
    errors: List[FieldError] = []

    item_name = raw.get("item_name")
    if not isinstance(item_name, str) or not item_name.strip():
        errors.append(FieldError("item_name", "must be a non-empty string"))
        item_name = ""

    cost = None
    try:
        cost = parse_amount(raw.get("cost"))
    except ValueError:
        errors.append(FieldError("cost", "must be a number"))
    else:
        if cost < 0:
            errors.append(FieldError("cost", "must not be negative"))

    category = _parse_category(raw.get("category"), errors)

    sliders = {}
    for name in SLIDERS:
        sliders[name] = _parse_slider(name, raw.get(name), errors)

    emotional_state = _parse_emotion(raw.get("emotional_state"), errors)

    is_time_sensitive = raw.get("is_time_sensitive")
    if is_time_sensitive is None:
        is_time_sensitive = False
    elif not isinstance(is_time_sensitive, bool):
        errors.append(FieldError("is_time_sensitive", "must be true or false"))

    if errors:
        raise PurchaseValidationError(errors)

    return PurchaseRequest(
        item_name=item_name.strip(),
        cost=cost,
        category=category,
        desire=sliders["desire"],
        urgency=sliders["urgency"],
        usefulness=sliders["usefulness"],
        emotional_state=emotional_state,
        is_time_sensitive=is_time_sensitive,
    )


def _parse_category(value: Any, errors: List[FieldError]) -> Optional[CategoryId]:
    if isinstance(value, CategoryId):
        return value
    if not isinstance(value, str) or not value.strip():
        errors.append(FieldError("category", "is required"))
        return None

    category = lookup_category(value)
    if category is None:
        errors.append(FieldError("category", f"unknown category '{value}'"))
    return category


def _parse_slider(name: str, value: Any, errors: List[FieldError]) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        errors.append(FieldError(name, "must be a number from 1 to 10"))
        return None

    try:
        number = float(value)
    except ValueError:
        errors.append(FieldError(name, "must be a number from 1 to 10"))
        return None

    if not math.isfinite(number):
        errors.append(FieldError(name, "must be a number from 1 to 10"))
        return None

    return clamp(int(round(number)), SLIDER_MIN, SLIDER_MAX)


def _parse_emotion(value: Any, errors: List[FieldError]) -> Optional[EmotionId]:
    if value is None or isinstance(value, EmotionId):
        return value
    if not isinstance(value, str):
        errors.append(FieldError("emotional_state", "must be a string"))
        return None
    if not value.strip():
        return None

    try:
        return EmotionId(value.strip().lower())
    except ValueError:
        errors.append(FieldError("emotional_state", f"unknown emotional state '{value}'"))
        return None
