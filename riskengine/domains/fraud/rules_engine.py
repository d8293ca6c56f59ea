"""Rule-based fraud detection engine with additive score aggregation."""

from collections.abc import Iterable, Sequence

import structlog

from .config import ClassificationThresholds, FraudConfig, default_config
from .models import FraudAnalysis, Indicator, RiskLevel, Transaction
from .rules import ALL_RULES, EvaluationContext, FraudRule

logger = structlog.get_logger()

MAX_RISK_SCORE = 100

_FRAUD_LEVELS = frozenset({RiskLevel.HIGH, RiskLevel.CRITICAL})

_LEVEL_RECOMMENDATIONS = {
    RiskLevel.LOW: "approve, low fraud risk",
    RiskLevel.MEDIUM: "additional verification, monitor closely",
    RiskLevel.HIGH: "manual review required, multiple indicators present",
    RiskLevel.CRITICAL: "block transaction, high fraud probability",
}

# Fixed per level, not derived from the indicators.
_LEVEL_CONFIDENCE = {
    RiskLevel.LOW: 60,
    RiskLevel.MEDIUM: 70,
    RiskLevel.HIGH: 85,
    RiskLevel.CRITICAL: 95,
}


def classify_risk_level(
    score: int, thresholds: ClassificationThresholds | None = None
) -> RiskLevel:
    thresholds = thresholds or default_config.classification
    if score >= thresholds.critical_min:
        return RiskLevel.CRITICAL
    if score >= thresholds.high_min:
        return RiskLevel.HIGH
    if score >= thresholds.medium_min:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def aggregate(indicators: Iterable[Indicator], config: FraudConfig | None = None) -> FraudAnalysis:
    """Turn a list of indicators into the final verdict.

    The score is the capped sum of indicator scores; level, verdict,
    recommendation and confidence all follow from the score alone.
    """
    cfg = config or default_config
    indicators = tuple(indicators)
    risk_score = min(MAX_RISK_SCORE, sum(i.score for i in indicators))
    risk_level = classify_risk_level(risk_score, cfg.classification)

    return FraudAnalysis(
        risk_score=risk_score,
        risk_level=risk_level,
        is_fraud=risk_level in _FRAUD_LEVELS,
        indicators=indicators,
        recommendation=_LEVEL_RECOMMENDATIONS[risk_level],
        confidence=_LEVEL_CONFIDENCE[risk_level],
    )


class RulesEngine:
    """Evaluates a transaction against the ordered fraud rules.

    Every rule runs; none short-circuits another. Indicators are kept in rule
    order, then handed to ``aggregate``. Thresholds come from the evaluation
    context, so one engine can serve scorers with different configs.
    """

    def __init__(self, rules: Sequence[FraudRule] | None = None) -> None:
        self._rules = list(ALL_RULES if rules is None else rules)
        logger.info("rules_engine_initialized", rule_count=len(self._rules), version="rules-v1")

    @property
    def rules(self) -> list[FraudRule]:
        return list(self._rules)

    def collect_indicators(
        self, transaction: Transaction, context: EvaluationContext
    ) -> list[Indicator]:
        indicators: list[Indicator] = []
        for rule in self._rules:
            try:
                indicator = rule.evaluate(transaction, context)
            except Exception:
                logger.exception(
                    "rule_evaluation_error",
                    rule_id=rule.rule_id,
                    transaction_id=transaction.id,
                )
                continue
            if indicator is not None:
                indicators.append(indicator)
        return indicators

    def evaluate(self, transaction: Transaction, context: EvaluationContext) -> FraudAnalysis:
        """Evaluate a transaction against all rules and aggregate the result."""
        indicators = self.collect_indicators(transaction, context)
        analysis = aggregate(indicators, context.config)

        logger.info(
            "rules_evaluated",
            transaction_id=transaction.id,
            risk_score=analysis.risk_score,
            risk_level=analysis.risk_level.value,
            indicator_count=len(indicators),
            indicator_types=[i.type.value for i in indicators],
        )
        return analysis
