"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from purchase_coach.config import settings
from purchase_coach.domain.tuning import ScoringTuning


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_scoring_tuning() -> ScoringTuning:
    """Provide engine tuning built from settings"""
    return settings.scoring_tuning()
