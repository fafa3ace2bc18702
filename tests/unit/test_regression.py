from __future__ import annotations

from tests.regression.runner import GOLDEN_FILE, load_golden, run_golden_suite


def test_golden_corpus_loads() -> None:
    names = [case.name for case in load_golden(GOLDEN_FILE)]
    assert "canonical" in names
    assert len(names) == len(set(names))


def test_golden_corpus_passes() -> None:
    assert run_golden_suite(GOLDEN_FILE) == []
