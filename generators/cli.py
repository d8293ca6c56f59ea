"""CLI entry point for synthetic data generators.

Usage:
    python -m generators transaction --seed 42 --count 100
    python -m generators transaction --config configs/fraud_mix.yaml --count 10000 --output file
"""

import argparse
import json
import sys
from pathlib import Path

import yaml

from .transaction_generator import TransactionGenerator


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Synthetic payment transaction generator")
    parser.add_argument("generator", choices=["transaction"], help="Which generator to run")
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config file")
    parser.add_argument("--seed", type=int, default=42, help="Random seed for reproducibility")
    parser.add_argument("--count", type=int, default=100, help="Number of transactions")
    parser.add_argument(
        "--output",
        type=str,
        default="stdout",
        choices=["stdout", "file"],
        help="Output destination",
    )
    parser.add_argument("--output-file", type=str, default=None, help="Output file path")

    args = parser.parse_args(argv)

    config = {}
    if args.config:
        with open(args.config) as f:
            config = yaml.safe_load(f) or {}

    gen = TransactionGenerator(config=config, seed=args.seed)
    transactions = gen.generate(num_transactions=args.count)

    if args.output == "stdout":
        for txn in transactions:
            print(json.dumps(txn))
    else:
        output_path = args.output_file or f"output/{args.generator}s.jsonl"
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            for txn in transactions:
                f.write(json.dumps(txn) + "\n")
        print(f"Wrote {len(transactions)} transactions to {output_path}", file=sys.stderr)

    print(f"Generated {len(transactions)} transactions", file=sys.stderr)
    return 0
