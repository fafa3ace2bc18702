"""Golden-corpus regression runner for the dollar validator."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass, field
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dollar import DollarError, validate
from dollar.settings import Settings

GOLDEN_FILE = Path(__file__).parent / "golden_v1.jsonl"


@dataclass(slots=True)
class GoldenCase:
    name: str
    text: str
    nodes: list[tuple[str, str]] = field(default_factory=list)
    error: str | None = None


def load_golden(path: Path) -> list[GoldenCase]:
    cases: list[GoldenCase] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        if not line.strip():
            continue
        record = json.loads(line)
        cases.append(
            GoldenCase(
                name=record["name"],
                text=record["text"],
                nodes=[(kind, text) for kind, text in record.get("nodes", [])],
                error=record.get("error"),
            )
        )
    return cases


def run_golden_suite(path: Path = GOLDEN_FILE, *, settings: Settings | None = None) -> list[str]:
    """Validate every golden case and return a description of each mismatch."""

    settings = settings or Settings(METRICS_ENABLED=False)
    failures: list[str] = []

    for case in load_golden(path):
        try:
            document = validate(case.text, settings=settings)
        except DollarError as exc:
            if case.error is None:
                failures.append(f"{case.name}: unexpected error {exc.message!r}")
            elif exc.message != case.error:
                failures.append(f"{case.name}: error {exc.message!r} != {case.error!r}")
            continue

        if case.error is not None:
            failures.append(f"{case.name}: expected error {case.error!r}, got success")
            continue

        actual = [(node.kind.value, node.text) for node in document.nodes]
        if actual != case.nodes:
            failures.append(f"{case.name}: nodes {actual!r} != {case.nodes!r}")

    return failures


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the golden regression corpus.")
    parser.add_argument("--golden", type=Path, default=GOLDEN_FILE, help="Path to the golden JSONL file.")
    args = parser.parse_args()

    if not args.golden.exists():
        raise SystemExit(f"Golden file {args.golden} not found.")

    failures = run_golden_suite(args.golden)
    if failures:
        print("Regression failures detected:")
        for failure in failures:
            print(f" - {failure}")
        raise SystemExit(1)
    print(f"All {len(load_golden(args.golden))} golden cases passed.")


if __name__ == "__main__":
    main()
