"""Fraud scoring service: transaction -> rules -> analysis, and batch trends."""

from collections.abc import Callable, Iterable
from datetime import UTC, datetime

import structlog

from .catalog import RuleCatalog, load_catalog
from .config import FraudConfig, default_config
from .models import FraudAnalysis, Transaction, TrendSummary
from .rules import EvaluationContext
from .rules_engine import RulesEngine
from .trends import summarize_trends
from .velocity import VelocityTracker

logger = structlog.get_logger()

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class FraudScorer:
    """Owns the rule catalog, the velocity tracker and the clock.

    One scorer per service instance; every ``score`` call shares its velocity
    tracker, which is safe to use from several threads.
    """

    def __init__(
        self,
        config: FraudConfig | None = None,
        catalog: RuleCatalog | None = None,
        velocity: VelocityTracker | None = None,
        clock: Clock | None = None,
        rules_engine: RulesEngine | None = None,
    ) -> None:
        self._config = config if config is not None else default_config
        # Fail fast on an unknown zone name rather than on the first scored transaction
        self._config.timing.zone()
        self._catalog = catalog if catalog is not None else load_catalog(self._config.catalog_path)
        if velocity is None:
            velocity = VelocityTracker(
                capacity=self._config.velocity.history_capacity,
                window=self._config.velocity.window,
            )
        self._velocity = velocity
        self._clock = clock if clock is not None else utc_now
        self._rules_engine = rules_engine if rules_engine is not None else RulesEngine()

    @property
    def config(self) -> FraudConfig:
        return self._config

    @property
    def catalog(self) -> RuleCatalog:
        return self._catalog

    @property
    def velocity(self) -> VelocityTracker:
        return self._velocity

    @property
    def rules_engine(self) -> RulesEngine:
        return self._rules_engine

    def score(self, transaction: Transaction, now: datetime | None = None) -> FraudAnalysis:
        """Score one transaction. ``now`` overrides the scorer's clock for this call."""
        context = EvaluationContext(
            now=now if now is not None else self._clock(),
            catalog=self._catalog,
            config=self._config,
            velocity=self._velocity,
        )
        analysis = self._rules_engine.evaluate(transaction, context)

        logger.info(
            "transaction_scored",
            transaction_id=transaction.id,
            risk_score=analysis.risk_score,
            risk_level=analysis.risk_level.value,
            is_fraud=analysis.is_fraud,
            recommendation=analysis.recommendation,
        )
        return analysis

    def analyze_trends(self, transactions: Iterable[Transaction]) -> TrendSummary:
        """Score a batch in order and summarize it.

        Scoring is sequential: velocity state is updated in batch order, so
        reordering the batch can change the result.
        """
        batch = list(transactions)
        if not batch:
            logger.warning("trend_analysis_empty_batch")

        analyses = [self.score(t) for t in batch]
        summary = summarize_trends(batch, analyses)

        logger.info(
            "trend_analysis_completed",
            transaction_count=summary.transaction_count,
            fraud_count=summary.fraud_count,
            fraud_rate=summary.fraud_rate,
        )
        return summary
