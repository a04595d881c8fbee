#!/usr/bin/env python3
"""Evaluation script for reply extraction.

Loads JSONL records of the form {"email": ..., "visible": ...}, runs the
parser on each email and compares the visible text with the expected one.

Usage:
    python scripts/evaluate.py data/replies.jsonl
    python scripts/evaluate.py data/replies.jsonl --verbose
    python scripts/evaluate.py data/replies.jsonl --limit 100
"""

import argparse
import json
import sys
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from quotestrip import EmailParser


@dataclass
class ReplyEvaluation:
    """Evaluation result for a single email."""

    email: str
    expected: str
    visible: str
    exact_match: bool
    content_match: bool
    fragment_kinds: tuple[str, ...]


@dataclass
class EvaluationResults:
    """Aggregated evaluation results."""

    total: int = 0
    exact_matches: int = 0
    content_matches: int = 0  # Matches after whitespace normalization

    # Fragment kinds seen across all emails
    kinds: Counter = field(default_factory=Counter)

    # Failed examples for analysis
    failures: list[ReplyEvaluation] = field(default_factory=list)

    @property
    def exact_match_rate(self) -> float:
        return self.exact_matches / self.total if self.total > 0 else 0.0

    @property
    def content_match_rate(self) -> float:
        return self.content_matches / self.total if self.total > 0 else 0.0


def normalize_whitespace(text: str) -> str:
    """Normalize whitespace for content comparison."""
    lines = [line.strip() for line in text.strip().split("\n")]
    return "\n".join(line for line in lines if line)


def fragment_kind(quoted: bool, signature: bool, forwarded: bool) -> str:
    if forwarded:
        return "forwarded"
    if quoted:
        return "quoted"
    if signature:
        return "signature"
    return "plain"


def load_test_data(path: Path) -> list[dict]:
    """Load test data from JSONL file."""
    examples = []
    with open(path, encoding="utf-8") as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                data = json.loads(line)
            except json.JSONDecodeError as e:
                print(f"Warning: Skipping invalid JSON at line {line_num}: {e}")
                continue
            if "email" not in data or "visible" not in data:
                print(f"Warning: Skipping record without email/visible at line {line_num}")
                continue
            examples.append(data)
    return examples


def evaluate_single(
    parser: EmailParser,
    example: dict,
    results: EvaluationResults,
    verbose: bool = False,
) -> ReplyEvaluation:
    """Evaluate the parser on a single example."""
    email_text = example["email"]
    expected = example["visible"]

    email = parser.parse(email_text)
    visible = email.visible_text

    exact_match = visible == expected.strip("\n")
    content_match = normalize_whitespace(visible) == normalize_whitespace(expected)
    kinds = tuple(
        fragment_kind(fragment.quoted, fragment.signature, fragment.forwarded) for fragment in email
    )

    results.kinds.update(kinds)
    if exact_match:
        results.exact_matches += 1
    if content_match:
        results.content_matches += 1

    evaluation = ReplyEvaluation(
        email=email_text,
        expected=expected,
        visible=visible,
        exact_match=exact_match,
        content_match=content_match,
        fragment_kinds=kinds,
    )

    if not content_match:
        results.failures.append(evaluation)

        if verbose:
            print(f"\n--- Failure (fragments: {', '.join(kinds) or 'none'}) ---")
            print(f"Expected ({len(expected)} chars):")
            print(expected[:200] + "..." if len(expected) > 200 else expected)
            print(f"\nVisible ({len(visible)} chars):")
            print(visible[:200] + "..." if len(visible) > 200 else visible)
            print()

    return evaluation


def print_results(results: EvaluationResults) -> None:
    """Print evaluation results summary."""
    print("\n" + "=" * 60)
    print("EVALUATION RESULTS")
    print("=" * 60)

    print("\n--- Primary Metrics ---")
    print(f"Total examples:      {results.total}")
    print(f"Content match rate:  {100 * results.content_match_rate:.2f}% ({results.content_matches}/{results.total})")
    print(f"Exact match rate:    {100 * results.exact_match_rate:.2f}% ({results.exact_matches}/{results.total})")

    if results.kinds:
        print("\n--- Fragment Kinds ---")
        for kind, count in results.kinds.most_common():
            print(f"  {kind}: {count}")

    if results.failures:
        print("\n--- Failures by Fragment Layout ---")
        layouts = Counter(" / ".join(f.fragment_kinds) or "(empty)" for f in results.failures)
        for layout, count in layouts.most_common(10):
            print(f"  {layout}: {count}")

    print("\n" + "=" * 60)


def main() -> None:
    parser = argparse.ArgumentParser(description="Evaluate reply extraction")
    parser.add_argument(
        "test_data",
        type=Path,
        help="Path to JSONL test data file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print details for each failure",
    )
    parser.add_argument(
        "--limit",
        "-n",
        type=int,
        default=None,
        help="Limit number of examples to evaluate",
    )

    args = parser.parse_args()

    if not args.test_data.exists():
        print(f"Error: Test data file not found: {args.test_data}")
        sys.exit(1)

    print(f"Loading test data from {args.test_data}...")
    examples = load_test_data(args.test_data)
    print(f"Loaded {len(examples)} test examples")

    if args.limit:
        examples = examples[:args.limit]
        print(f"Limiting to {len(examples)} examples")

    email_parser = EmailParser()

    print("Evaluating...")
    results = EvaluationResults()

    for i, example in enumerate(examples):
        results.total += 1
        evaluate_single(email_parser, example, results, verbose=args.verbose)

        # Progress indicator
        if (i + 1) % 500 == 0:
            print(f"  Processed {i + 1}/{len(examples)}")

    print_results(results)


if __name__ == "__main__":
    main()
