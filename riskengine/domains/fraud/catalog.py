"""Static fraud-pattern reference data consulted by the indicator rules."""

from dataclasses import dataclass, fields
from pathlib import Path

import structlog
import yaml

logger = structlog.get_logger()


class CatalogError(ValueError):
    """Raised when a catalog file cannot be turned into a RuleCatalog."""


@dataclass(frozen=True)
class RuleCatalog:
    disposable_email_domains: frozenset[str]
    high_risk_locations: frozenset[str]
    blacklisted_ips: frozenset[str]
    blacklisted_devices: frozenset[str]
    # Reference only; no rule consumes card numbers.
    fraudulent_cards: frozenset[str] = frozenset()

    def is_disposable_domain(self, domain: str) -> bool:
        domain = domain.lower()
        return any(pattern.lower() in domain for pattern in self.disposable_email_domains)

    def is_high_risk_location(self, location: str) -> bool:
        location = location.lower()
        return any(place.lower() in location for place in self.high_risk_locations)

    def is_blacklisted_ip(self, ip_address: str) -> bool:
        return ip_address in self.blacklisted_ips

    def is_blacklisted_device(self, fingerprint: str) -> bool:
        return fingerprint in self.blacklisted_devices

    def summary(self) -> dict[str, int]:
        return {f.name: len(getattr(self, f.name)) for f in fields(self)}

    @classmethod
    def from_mapping(cls, data: dict) -> "RuleCatalog":
        """Build a catalog from a mapping of list values.

        Missing sections fall back to the built-in defaults so a file only has
        to list what it changes.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise CatalogError(f"Unknown catalog sections: {', '.join(sorted(unknown))}")

        values = {}
        for name in known:
            if name not in data:
                values[name] = getattr(DEFAULT_CATALOG, name)
                continue
            entries = data[name]
            if not isinstance(entries, list) or not all(isinstance(e, str) for e in entries):
                raise CatalogError(f"Catalog section '{name}' must be a list of strings")
            values[name] = frozenset(e.strip() for e in entries if e.strip())
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuleCatalog":
        with open(path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                raise CatalogError(f"Catalog file {path} is not valid YAML: {exc}") from exc
        if not isinstance(data, dict):
            raise CatalogError(f"Catalog file {path} must contain a mapping")
        catalog = cls.from_mapping(data)
        logger.info("rule_catalog_loaded", path=str(path), **catalog.summary())
        return catalog


DEFAULT_CATALOG = RuleCatalog(
    disposable_email_domains=frozenset(
        {
            "temp-mail.org",
            "10minutemail.com",
            "guerrillamail.com",
            "mailinator.com",
            "throwaway.email",
            "tempmail.net",
        }
    ),
    high_risk_locations=frozenset({"Nigeria", "Romania", "Ghana", "Indonesia", "Philippines"}),
    blacklisted_ips=frozenset({"203.0.113.1", "198.51.100.1", "192.0.2.1"}),
    blacklisted_devices=frozenset({"fp_fraud123", "fp_suspicious456"}),
    fraudulent_cards=frozenset({"4111111111111111", "5555555555554444"}),
)


def load_catalog(path: str | None = None) -> RuleCatalog:
    """Return the catalog at ``path``, or the built-in one when no path is given."""
    if not path:
        return DEFAULT_CATALOG
    return RuleCatalog.from_yaml(path)
