"""Command-line scoring of transaction files.

Usage:
    riskengine score transaction.json
    riskengine trends transactions.jsonl --catalog catalog.yaml --timezone America/New_York
    cat batch.json | riskengine trends -
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfoNotFoundError

from pydantic import ValidationError

from riskengine.domains.fraud.catalog import CatalogError
from riskengine.domains.fraud.config import FraudConfig
from riskengine.domains.fraud.models import Transaction
from riskengine.domains.fraud.scorer import FraudScorer
from riskengine.shared.logging import setup_logging


def read_transactions(text: str) -> list[dict[str, Any]]:
    """Parse a JSON object, a JSON array, or JSON Lines into transaction dicts."""
    stripped = text.strip()
    if not stripped:
        return []
    if stripped[0] in "[{":
        try:
            data = json.loads(stripped)
        except json.JSONDecodeError:
            data = None
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            return [data]
    return [json.loads(line) for line in stripped.splitlines() if line.strip()]


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="riskengine", description="Rule-based fraud risk scoring"
    )
    parser.add_argument(
        "command",
        choices=["score", "trends"],
        help="score each transaction, or summarize the whole batch",
    )
    parser.add_argument("input", help="JSON, JSON array or JSONL file ('-' for stdin)")
    parser.add_argument("--catalog", type=str, default=None, help="YAML rule catalog override")
    parser.add_argument("--timezone", type=str, default=None, help="IANA zone for hour rules")
    parser.add_argument("--log-level", type=str, default="WARNING")
    parser.add_argument("--indent", type=int, default=2)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, json_logs=False)

    config = FraudConfig.from_env()
    if args.catalog:
        config.catalog_path = args.catalog
    if args.timezone:
        config.timing.timezone = args.timezone

    try:
        scorer = FraudScorer(config=config)
        raw = read_transactions(_read_input(args.input))
        transactions = [Transaction.model_validate(item) for item in raw]
    except (
        OSError,
        CatalogError,
        ValidationError,
        ZoneInfoNotFoundError,
        json.JSONDecodeError,
    ) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.command == "score":
        output: Any = [
            {"transaction_id": t.id, **scorer.score(t).model_dump(mode="json")}
            for t in transactions
        ]
        if len(output) == 1:
            output = output[0]
    else:
        output = scorer.analyze_trends(transactions).model_dump(mode="json")

    print(json.dumps(output, indent=args.indent))
    return 0


if __name__ == "__main__":
    sys.exit(main())
