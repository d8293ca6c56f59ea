"""Batch-level fraud statistics over a sequence of scored transactions."""

from collections import Counter
from collections.abc import Sequence
from decimal import Decimal

from .models import FraudAnalysis, IndicatorCount, RiskBucket, RiskLevel, Transaction, TrendSummary

TOP_INDICATORS = 5


def _percentage(count: int, total: int) -> float:
    # An empty batch reports 0% everywhere instead of dividing by zero.
    if total == 0:
        return 0.0
    return 100 * count / total


def summarize_trends(
    transactions: Sequence[Transaction],
    analyses: Sequence[FraudAnalysis],
) -> TrendSummary:
    """Summarize analyses that were produced pairwise from ``transactions``."""
    if len(transactions) != len(analyses):
        raise ValueError(
            f"Got {len(analyses)} analyses for {len(transactions)} transactions"
        )

    total = len(transactions)
    fraud_count = 0
    fraud_amount = Decimal("0")
    indicator_counts: Counter[str] = Counter()
    level_counts = {level: 0 for level in RiskLevel}

    for transaction, analysis in zip(transactions, analyses):
        if analysis.is_fraud:
            fraud_count += 1
            fraud_amount += transaction.amount
        indicator_counts.update(i.type.value for i in analysis.indicators)
        level_counts[analysis.risk_level] += 1

    # most_common keeps first-seen order among equal counts
    common = [
        IndicatorCount(type=indicator_type, count=count)
        for indicator_type, count in indicator_counts.most_common(TOP_INDICATORS)
    ]
    distribution = [
        RiskBucket(level=level, count=count, percentage=_percentage(count, total))
        for level, count in level_counts.items()
    ]

    return TrendSummary(
        transaction_count=total,
        fraud_count=fraud_count,
        fraud_rate=_percentage(fraud_count, total),
        total_fraud_amount=fraud_amount,
        common_indicators=common,
        risk_distribution=distribution,
    )
