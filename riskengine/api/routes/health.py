"""Health and readiness endpoints."""

from fastapi import APIRouter, Depends

from riskengine.api.routes.fraud import get_scorer
from riskengine.config import settings
from riskengine.domains.fraud.scorer import FraudScorer

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    from riskengine.main import get_uptime

    return {
        "status": "healthy",
        "version": settings.app_version,
        "uptime_seconds": get_uptime(),
    }


@router.get("/ready")
async def ready(scorer: FraudScorer = Depends(get_scorer)) -> dict:  # noqa: B008
    return {
        "status": "ready",
        "rule_count": len(scorer.rules_engine.rules),
        "tracked_customers": len(scorer.velocity),
    }
