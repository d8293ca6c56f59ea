"""Unit tests for batch trend analysis."""

from datetime import timedelta
from decimal import Decimal

import pytest

from riskengine.domains.fraud.models import IndicatorType, RiskLevel
from riskengine.domains.fraud.rules import ALL_RULES, EvaluationContext
from riskengine.domains.fraud.rules_engine import aggregate
from riskengine.domains.fraud.trends import summarize_trends
from tests.conftest import AFTERNOON, make_transaction


def _batch_with_two_frauds():
    batch = [
        make_transaction(id=f"txn-{i}", customer_email=f"user{i}@gmail.com", amount="40")
        for i in range(10)
    ]
    # Blacklisted IP (35) + high-risk location (25) = 60: high, fraud
    batch[3] = make_transaction(
        id="txn-3",
        customer_email="user3@gmail.com",
        amount="700",
        ip_address="203.0.113.1",
        location="Lagos, Nigeria",
    )
    batch[7] = make_transaction(
        id="txn-7",
        customer_email="user7@gmail.com",
        amount="300.50",
        ip_address="198.51.100.1",
        location="Accra, Ghana",
    )
    return batch


def _analyze(transactions):
    """Score without velocity state."""
    context = EvaluationContext(now=AFTERNOON)
    analyses = []
    for txn in transactions:
        indicators = [rule.evaluate(txn, context) for rule in ALL_RULES]
        analyses.append(aggregate(i for i in indicators if i is not None))
    return analyses


class TestAnalyzeTrends:
    def test_fraud_rate(self, scorer):
        summary = scorer.analyze_trends(_batch_with_two_frauds())
        assert summary.transaction_count == 10
        assert summary.fraud_count == 2
        assert summary.fraud_rate == 20.0

    def test_total_fraud_amount_uses_flagged_transactions(self, scorer):
        summary = scorer.analyze_trends(_batch_with_two_frauds())
        assert summary.total_fraud_amount == Decimal("1000.50")

    def test_risk_distribution(self, scorer):
        summary = scorer.analyze_trends(_batch_with_two_frauds())
        distribution = {b.level: b for b in summary.risk_distribution}
        assert list(distribution) == [
            RiskLevel.LOW,
            RiskLevel.MEDIUM,
            RiskLevel.HIGH,
            RiskLevel.CRITICAL,
        ]
        assert sum(b.count for b in summary.risk_distribution) == 10
        assert distribution[RiskLevel.LOW].count == 8
        assert distribution[RiskLevel.LOW].percentage == 80.0
        assert distribution[RiskLevel.HIGH].count == 2
        assert distribution[RiskLevel.CRITICAL].count == 0
        assert distribution[RiskLevel.CRITICAL].percentage == 0.0

    def test_common_indicators(self, scorer):
        summary = scorer.analyze_trends(_batch_with_two_frauds())
        assert [(c.type, c.count) for c in summary.common_indicators] == [
            (IndicatorType.HIGH_RISK_LOCATION.value, 2),
            (IndicatorType.BLACKLISTED_IP.value, 2),
        ]

    def test_batch_order_drives_velocity(self, scorer, clock):
        batch = [make_transaction(id=f"txn-{i}") for i in range(6)]
        summary = scorer.analyze_trends(batch)
        velocity = [
            c for c in summary.common_indicators if c.type == IndicatorType.HIGH_VELOCITY.value
        ]
        # Attempts 5 and 6 see 4 and 5 prior attempts
        assert velocity[0].count == 2

    def test_empty_batch(self, scorer):
        summary = scorer.analyze_trends([])
        assert summary.transaction_count == 0
        assert summary.fraud_rate == 0.0
        assert summary.total_fraud_amount == Decimal("0")
        assert summary.common_indicators == []
        assert [b.count for b in summary.risk_distribution] == [0, 0, 0, 0]
        assert all(b.percentage == 0.0 for b in summary.risk_distribution)


class TestSummarizeTrends:
    def test_top_five_with_first_seen_tie_break(self):
        # Six different single-indicator transactions, each type seen once
        variants = [
            {"customer_email": "a@temp-mail.org"},
            {"amount": "2500"},
            {"location": "Romania"},
            {"ip_address": "192.0.2.1"},
            {"device_fingerprint": "fp_fraud123"},
            {"payment_method": "Credit Card", "amount": "1500"},
        ]
        transactions = [make_transaction(**v) for v in variants]
        summary = summarize_trends(transactions, _analyze(transactions))
        assert [c.type for c in summary.common_indicators] == [
            IndicatorType.SUSPICIOUS_EMAIL_DOMAIN.value,
            IndicatorType.HIGH_TRANSACTION_AMOUNT.value,
            IndicatorType.HIGH_RISK_LOCATION.value,
            IndicatorType.BLACKLISTED_IP.value,
            IndicatorType.SUSPICIOUS_DEVICE.value,
        ]

    def test_more_frequent_type_ranks_first(self):
        transactions = [
            make_transaction(location="Unknown"),
            make_transaction(location="Unknown", amount="2500"),
            make_transaction(
                location="Unknown", timestamp=(AFTERNOON - timedelta(hours=11)).isoformat()
            ),
        ]
        summary = summarize_trends(transactions, _analyze(transactions))
        assert summary.common_indicators[0].type == IndicatorType.UNKNOWN_LOCATION.value
        assert summary.common_indicators[0].count == 3

    def test_mismatched_lengths(self):
        with pytest.raises(ValueError):
            summarize_trends([make_transaction()], [])
