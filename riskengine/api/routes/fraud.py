"""Fraud scoring endpoints."""

from datetime import UTC, datetime
from functools import lru_cache

import structlog
from fastapi import APIRouter, Depends

from riskengine.config import settings
from riskengine.domains.fraud.config import FraudConfig
from riskengine.domains.fraud.models import (
    FraudScoreResponse,
    Transaction,
    TrendRequest,
    TrendSummary,
)
from riskengine.domains.fraud.scorer import FraudScorer

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1/fraud", tags=["fraud"])

MODEL_VERSION = "rules-v1"


@lru_cache(maxsize=1)
def get_scorer() -> FraudScorer:
    """The process-wide scorer; its velocity tracker lives as long as the app."""
    config = FraudConfig.from_env()
    if settings.fraud_catalog_path:
        config.catalog_path = settings.fraud_catalog_path
    if settings.fraud_local_timezone:
        config.timing.timezone = settings.fraud_local_timezone
    return FraudScorer(config=config)


@router.post("/score", response_model=FraudScoreResponse)
async def score_fraud(
    transaction: Transaction,
    scorer: FraudScorer = Depends(get_scorer),  # noqa: B008
) -> FraudScoreResponse:
    analysis = scorer.score(transaction)
    return FraudScoreResponse(
        transaction_id=transaction.id,
        risk_score=analysis.risk_score,
        risk_level=analysis.risk_level,
        is_fraud=analysis.is_fraud,
        indicators=list(analysis.indicators),
        recommendation=analysis.recommendation,
        confidence=analysis.confidence,
        model_version=MODEL_VERSION,
        computed_at=datetime.now(UTC),
    )


@router.post("/trends", response_model=TrendSummary)
async def analyze_trends(
    request: TrendRequest,
    scorer: FraudScorer = Depends(get_scorer),  # noqa: B008
) -> TrendSummary:
    return scorer.analyze_trends(request.transactions)


@router.get("/rules")
async def list_rules(scorer: FraudScorer = Depends(get_scorer)) -> dict:  # noqa: B008
    """Return the rules in evaluation order, classification thresholds and catalog sizes."""
    config = scorer.config
    rules = scorer.rules_engine.rules
    return {
        "model_version": MODEL_VERSION,
        "rule_count": len(rules),
        "rules": [rule.describe() for rule in rules],
        "classification_thresholds": {
            "critical": config.classification.critical_min,
            "high": config.classification.high_min,
            "medium": config.classification.medium_min,
        },
        "velocity": {
            "window_seconds": config.velocity.window_seconds,
            "history_capacity": config.velocity.history_capacity,
            "max_recent_count": config.velocity.max_recent_count,
        },
        "catalog": scorer.catalog.summary(),
    }
