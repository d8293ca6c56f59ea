"""Integration tests for the fraud scoring API contracts."""

import pytest
from httpx import ASGITransport, AsyncClient

from riskengine.api.routes.fraud import get_scorer
from riskengine.domains.fraud.scorer import FraudScorer
from riskengine.main import app
from tests.conftest import AFTERNOON, FixedClock

pytestmark = pytest.mark.integration


@pytest.fixture
def scorer():
    scorer = FraudScorer(clock=FixedClock())
    app.dependency_overrides[get_scorer] = lambda: scorer
    yield scorer
    app.dependency_overrides.clear()


@pytest.fixture
def client(scorer):
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


def _clean(**overrides):
    payload = {
        "id": "txn_clean",
        "customer_email": "maria@gmail.com",
        "customer_name": "Maria Lopez",
        "amount": "80.00",
        "payment_method": "Debit Card",
        "ip_address": "10.1.2.3",
        "device_fingerprint": "fp_home",
        "timestamp": AFTERNOON.isoformat(),
        "location": "Texas, USA",
    }
    payload.update(overrides)
    return payload


class TestFraudScoreContract:
    @pytest.mark.asyncio
    async def test_response_shape(self, client, sample_transaction_payload):
        async with client:
            response = await client.post("/api/v1/fraud/score", json=sample_transaction_payload)
        assert response.status_code == 200
        data = response.json()
        for field in (
            "transaction_id",
            "risk_score",
            "risk_level",
            "is_fraud",
            "indicators",
            "recommendation",
            "confidence",
            "model_version",
            "computed_at",
        ):
            assert field in data
        assert data["transaction_id"] == "txn_001"
        assert data["model_version"] == "rules-v1"

    @pytest.mark.asyncio
    async def test_critical_transaction(self, client, sample_transaction_payload):
        async with client:
            response = await client.post("/api/v1/fraud/score", json=sample_transaction_payload)
        data = response.json()
        # email 25 + amount 30 + location 25 + ip 35, capped
        assert data["risk_score"] == 100
        assert data["risk_level"] == "critical"
        assert data["is_fraud"] is True
        assert data["confidence"] == 95
        assert data["recommendation"] == "block transaction, high fraud probability"
        assert [i["type"] for i in data["indicators"]] == [
            "Suspicious Email Domain",
            "High Transaction Amount",
            "High-Risk Geographic Location",
            "Blacklisted IP Address",
        ]
        assert data["indicators"][1]["severity"] == "critical"

    @pytest.mark.asyncio
    async def test_clean_transaction(self, client):
        async with client:
            response = await client.post("/api/v1/fraud/score", json=_clean())
        data = response.json()
        assert data["risk_score"] == 0
        assert data["risk_level"] == "low"
        assert data["is_fraud"] is False
        assert data["indicators"] == []
        assert data["recommendation"] == "approve, low fraud risk"

    @pytest.mark.asyncio
    async def test_velocity_across_requests(self, client):
        async with client:
            for _ in range(4):
                response = await client.post("/api/v1/fraud/score", json=_clean())
                assert response.json()["risk_score"] == 0
            response = await client.post("/api/v1/fraud/score", json=_clean())
        data = response.json()
        assert data["risk_score"] == 25
        assert data["indicators"][0]["description"] == "4 transactions in the last hour"

    @pytest.mark.asyncio
    async def test_camel_case_payload(self, client):
        payload = {
            "id": "txn_camel",
            "customerEmail": "z@mailinator.com",
            "amount": "50",
            "ipAddress": "198.51.100.1",
            "deviceFingerprint": "fp_suspicious456",
            "timestamp": AFTERNOON.isoformat(),
            "location": "Texas, USA",
        }
        async with client:
            response = await client.post("/api/v1/fraud/score", json=payload)
        data = response.json()
        assert data["transaction_id"] == "txn_camel"
        assert [i["type"] for i in data["indicators"]] == [
            "Suspicious Email Domain",
            "Blacklisted IP Address",
            "Suspicious Device",
        ]
        assert data["risk_score"] == 90

    @pytest.mark.asyncio
    async def test_negative_amount_rejected(self, client):
        async with client:
            response = await client.post("/api/v1/fraud/score", json=_clean(amount="-1"))
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_empty_body_scores_unknown_location(self, client):
        async with client:
            response = await client.post("/api/v1/fraud/score", json={})
        assert response.status_code == 200
        assert response.json()["risk_score"] == 15


class TestTrendsContract:
    @pytest.mark.asyncio
    async def test_batch_summary(self, client):
        batch = [
            _clean(id="t1", customer_email="a@gmail.com"),
            _clean(
                id="t2",
                customer_email="b@gmail.com",
                ip_address="192.0.2.1",
                location="Jakarta, Indonesia",
            ),
            _clean(id="t3", customer_email="c@gmail.com"),
            _clean(id="t4", customer_email="d@gmail.com", amount="2500"),
        ]
        async with client:
            response = await client.post("/api/v1/fraud/trends", json={"transactions": batch})
        assert response.status_code == 200
        data = response.json()
        assert data["transaction_count"] == 4
        assert data["fraud_count"] == 1
        assert data["fraud_rate"] == 25.0
        assert float(data["total_fraud_amount"]) == 80.0
        assert {b["level"]: b["count"] for b in data["risk_distribution"]} == {
            "low": 3,
            "medium": 0,
            "high": 1,
            "critical": 0,
        }
        assert [c["type"] for c in data["common_indicators"]] == [
            "High-Risk Geographic Location",
            "Blacklisted IP Address",
            "High Transaction Amount",
        ]

    @pytest.mark.asyncio
    async def test_empty_batch(self, client):
        async with client:
            response = await client.post("/api/v1/fraud/trends", json={"transactions": []})
        assert response.status_code == 200
        data = response.json()
        assert data["transaction_count"] == 0
        assert data["fraud_rate"] == 0.0
        assert [b["percentage"] for b in data["risk_distribution"]] == [0.0] * 4


class TestRulesContract:
    @pytest.mark.asyncio
    async def test_rules_listing(self, client):
        async with client:
            response = await client.get("/api/v1/fraud/rules")
        assert response.status_code == 200
        data = response.json()
        assert data["rule_count"] == 9
        assert [r["rule_id"] for r in data["rules"]][0] == "suspicious_email_domain"
        assert data["classification_thresholds"] == {"critical": 80, "high": 60, "medium": 30}
        assert data["velocity"]["max_recent_count"] == 3
        assert data["catalog"]["blacklisted_ips"] == 3
