"""Payment transaction generator with fraud-pattern injection."""

import random
from datetime import UTC, datetime, timedelta
from typing import Any

from riskengine.domains.fraud.catalog import DEFAULT_CATALOG

from .base import BaseGenerator
from .utils.distributions import (
    generate_device_fingerprint,
    generate_ip_address,
    log_normal_sample,
)
from .utils.geography import (
    UNKNOWN_LOCATION,
    random_high_risk_location,
    random_low_risk_location,
)
from .utils.names import random_email, random_name

DEFAULT_PAYMENT_METHODS = {
    "Credit Card": 0.30,
    "Debit Card": 0.20,
    "UPI": 0.20,
    "Net Banking": 0.10,
    "PayPal": 0.10,
    "Google Pay": 0.10,
}


class TransactionGenerator(BaseGenerator):
    """Generates transaction dicts in the shape the scoring engine accepts.

    Config keys (all optional):
        num_customers, num_merchants, time_span_days, payment_method_weights,
        amount_distribution {log_normal_mean, log_normal_std},
        disposable_email_rate, high_risk_location_rate, blacklisted_ip_rate,
        blacklisted_device_rate, unknown_location_rate, velocity_anomaly_rate.
    """

    def generate(self, num_transactions: int = 100) -> list[dict[str, Any]]:
        config = self.config
        num_customers = config.get("num_customers", 50)
        num_merchants = config.get("num_merchants", 5)
        time_span = config.get("time_span_days", 30)
        base_time = datetime(2026, 1, 1, tzinfo=UTC)
        end_time = base_time + timedelta(days=time_span)

        payment_weights = config.get("payment_method_weights", DEFAULT_PAYMENT_METHODS)
        amount_dist = config.get(
            "amount_distribution", {"log_normal_mean": 5.5, "log_normal_std": 1.1}
        )

        customers = [self._make_customer() for _ in range(num_customers)]
        merchants = [f"merchant_{i:03d}" for i in range(1, num_merchants + 1)]

        transactions: list[dict[str, Any]] = []
        while len(transactions) < num_transactions:
            customer = random.choice(customers)
            txn_time = self._random_datetime(base_time, end_time)
            amount = log_normal_sample(
                amount_dist["log_normal_mean"],
                amount_dist["log_normal_std"],
                min_val=1.0,
                max_val=10_000.0,
            )
            txn = self._make_transaction(
                customer,
                amount,
                txn_time,
                self._weighted_choice(payment_weights),
                random.choice(merchants),
            )
            self._inject_fraud(txn)
            transactions.append(txn)

            # Fraud injection: velocity burst from the same customer inside an hour
            if self._chance("velocity_anomaly_rate"):
                for _burst in range(random.randint(4, 7)):
                    if len(transactions) >= num_transactions:
                        break
                    burst_time = txn_time + timedelta(minutes=random.randint(1, 55))
                    burst_amount = log_normal_sample(
                        amount_dist["log_normal_mean"],
                        amount_dist["log_normal_std"],
                        min_val=1.0,
                        max_val=2_000.0,
                    )
                    transactions.append(
                        self._make_transaction(
                            customer,
                            burst_amount,
                            burst_time,
                            txn["payment_method"],
                            txn["merchant_id"],
                        )
                    )

        transactions.sort(key=lambda t: t["timestamp"])
        return transactions

    def _make_customer(self) -> dict[str, str]:
        first, last = random_name()
        return {
            "customer_name": f"{first} {last}",
            "customer_email": random_email(first, last),
            "location": random_low_risk_location(),
            "ip_address": generate_ip_address(),
            "device_fingerprint": generate_device_fingerprint(),
        }

    def _make_transaction(
        self,
        customer: dict[str, str],
        amount: float,
        txn_time: datetime,
        payment_method: str,
        merchant_id: str,
    ) -> dict[str, Any]:
        txn_id = self._uuid()
        return {
            "id": f"txn_{txn_id[:12]}",
            "order_id": f"ORD-{txn_id[-8:].upper()}",
            "customer_email": customer["customer_email"],
            "customer_name": customer["customer_name"],
            "amount": self._decimal_str(amount),
            "currency": "USD",
            "payment_method": payment_method,
            "ip_address": customer["ip_address"],
            "device_fingerprint": customer["device_fingerprint"],
            "timestamp": txn_time.isoformat(),
            "location": customer["location"],
            "merchant_id": merchant_id,
        }

    def _inject_fraud(self, txn: dict[str, Any]) -> None:
        catalog = DEFAULT_CATALOG
        if self._chance("disposable_email_rate"):
            local_part = txn["customer_email"].split("@")[0]
            domain = random.choice(sorted(catalog.disposable_email_domains))
            txn["customer_email"] = f"{local_part}@{domain}"
        if self._chance("high_risk_location_rate"):
            txn["location"] = random_high_risk_location()
        elif self._chance("unknown_location_rate"):
            txn["location"] = UNKNOWN_LOCATION
        if self._chance("blacklisted_ip_rate"):
            txn["ip_address"] = random.choice(sorted(catalog.blacklisted_ips))
        if self._chance("blacklisted_device_rate"):
            txn["device_fingerprint"] = random.choice(sorted(catalog.blacklisted_devices))
