"""POST /v1/purchase-decision - purchase recommendation endpoint"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from purchase_coach.api.v1.schemas import PurchaseDecisionRequest, PurchaseDecisionResponse, SmartieSchema
from purchase_coach.api.dependencies import get_request_id, get_scoring_tuning
from purchase_coach.domain.engine import evaluate_purchase
from purchase_coach.domain.exceptions import PurchaseValidationError
from purchase_coach.domain.normalizer import normalize
from purchase_coach.domain.presentation import smartie_message, smartie_mood
from purchase_coach.domain.tuning import ScoringTuning
from purchase_coach.infrastructure.observability.metrics import record_decision, record_validation_failure
from purchase_coach.infrastructure.observability.logging import log_decision

router = APIRouter()


@router.post("/purchase-decision", response_model=PurchaseDecisionResponse)
def create_purchase_decision(
    request_body: PurchaseDecisionRequest,
    request: Request,
    tuning: ScoringTuning = Depends(get_scoring_tuning),
):
    """
    Analyze a prospective purchase against the user's budgets, goals and history.

    Flow:
    1. Validate the raw purchase fields
    2. Build context, score, classify and explain
    3. Pick mascot mood and phrasing from the finished decision
    4. Return the decision (the caller decides whether to save it)
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        purchase = normalize(request_body.purchase.model_dump())

        decision = evaluate_purchase(
            purchase,
            budgets=[b.to_domain() for b in request_body.budgets],
            goals=[g.to_domain() for g in request_body.goals],
            recent_spending=[s.to_domain() for s in request_body.recent_spending],
            tuning=tuning,
        )

    except PurchaseValidationError as e:
        record_validation_failure([err.field for err in e.errors])
        logging.warning(f"Invalid purchase: {e}", extra={"request_id": request_id})
        raise HTTPException(
            status_code=422,
            detail={
                "message": "Invalid purchase request",
                "errors": [{"field": err.field, "message": err.message} for err in e.errors],
            },
        )

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    smartie = SmartieSchema(
        mood=smartie_mood(decision.recommendation),
        message=smartie_message(decision, seed=request_body.seed, item_name=purchase.item_name),
    )

    # Record metrics and logs
    duration_ms = (time.time() - start_time) * 1000
    record_decision(decision.recommendation.value, purchase.category.value, decision.confidence)
    log_decision(
        request_id,
        purchase.category.value,
        decision.recommendation.value,
        decision.confidence,
        decision.smartness_score,
        duration_ms,
    )

    return PurchaseDecisionResponse.from_decision(decision, smartie)
