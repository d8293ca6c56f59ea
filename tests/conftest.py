"""Shared test fixtures for the fraud risk engine tests."""

import os
from datetime import datetime

import pytest

from riskengine.domains.fraud.config import FraudConfig
from riskengine.domains.fraud.models import Transaction
from riskengine.domains.fraud.scorer import FraudScorer
from riskengine.domains.fraud.velocity import VelocityTracker

os.environ.setdefault("LOG_LEVEL", "WARNING")

# Naive timestamps are read as local wall-clock time, which keeps
# hour-of-day assertions independent of the machine's zone.
AFTERNOON = datetime(2026, 1, 15, 14, 0, 0)


class FixedClock:
    """Clock returning a settable instant."""

    def __init__(self, now: datetime = AFTERNOON) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def make_transaction(**kwargs) -> Transaction:
    defaults = {
        "id": "txn-1",
        "order_id": "ORD-1",
        "customer_email": "alice@gmail.com",
        "customer_name": "Alice Smith",
        "amount": "50.00",
        "payment_method": "Debit Card",
        "ip_address": "10.0.1.50",
        "device_fingerprint": "fp_clean001",
        "timestamp": AFTERNOON.isoformat(),
        "location": "California, USA",
        "merchant_id": "merchant_001",
    }
    defaults.update(kwargs)
    return Transaction(**defaults)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def config() -> FraudConfig:
    return FraudConfig()


@pytest.fixture
def tracker() -> VelocityTracker:
    return VelocityTracker()


@pytest.fixture
def scorer(config, tracker, clock) -> FraudScorer:
    return FraudScorer(config=config, velocity=tracker, clock=clock)


@pytest.fixture
def clean_transaction() -> Transaction:
    return make_transaction()


@pytest.fixture
def sample_transaction_payload() -> dict:
    return {
        "id": "txn_001",
        "order_id": "ORD-2024-001",
        "customer_email": "x@temp-mail.org",
        "customer_name": "Xavier Unknown",
        "amount": "6000",
        "currency": "USD",
        "payment_method": "Bank Transfer",
        "ip_address": "203.0.113.1",
        "device_fingerprint": "fp_abc",
        "timestamp": AFTERNOON.isoformat(),
        "location": "Bucharest, Romania",
        "merchant_id": "merchant_001",
        "status": "pending",
        "risk_score": 0,
    }
