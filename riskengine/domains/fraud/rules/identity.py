"""Identity-based rules: email domain, IP address and device fingerprint."""

from ..models import Indicator, IndicatorType, Severity, Transaction
from .base import EvaluationContext, FraudRule


class SuspiciousEmailDomainRule(FraudRule):
    """Triggers when the email domain matches a disposable-mail provider."""

    rule_id = "suspicious_email_domain"
    category = "identity"
    indicator_type = IndicatorType.SUSPICIOUS_EMAIL_DOMAIN
    severity = Severity.HIGH
    score = 25

    def evaluate(self, transaction: Transaction, context: EvaluationContext) -> Indicator | None:
        email = transaction.customer_email
        if not email or "@" not in email:
            return None

        domain = email.split("@")[1].lower()
        if not domain or not context.catalog.is_disposable_domain(domain):
            return None

        return self._triggered(
            f"Email domain {domain} is associated with temporary email services"
        )


class BlacklistedIPRule(FraudRule):
    """Triggers when the IP address is on the blacklist."""

    rule_id = "blacklisted_ip"
    category = "identity"
    indicator_type = IndicatorType.BLACKLISTED_IP
    severity = Severity.CRITICAL
    score = 35

    def evaluate(self, transaction: Transaction, context: EvaluationContext) -> Indicator | None:
        ip_address = transaction.ip_address
        if not ip_address or not context.catalog.is_blacklisted_ip(ip_address):
            return None

        return self._triggered(f"IP address {ip_address} is on fraud blacklist")


class SuspiciousDeviceRule(FraudRule):
    """Triggers when the device fingerprint has been flagged before."""

    rule_id = "suspicious_device"
    category = "identity"
    indicator_type = IndicatorType.SUSPICIOUS_DEVICE
    severity = Severity.HIGH
    score = 30

    def evaluate(self, transaction: Transaction, context: EvaluationContext) -> Indicator | None:
        fingerprint = transaction.device_fingerprint
        if not fingerprint or not context.catalog.is_blacklisted_device(fingerprint):
            return None

        return self._triggered(
            f"Device fingerprint {fingerprint} has been flagged for fraudulent activity"
        )
