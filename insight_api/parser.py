# insight_api/parser.py
from __future__ import annotations

import re
from typing import List, Optional, Sequence

from insight_api.models import ScenarioRecord

# Guard for the "first number is the target" fallback: bigger first numbers
# are more likely a year or a total than a chase target
RUNS_FALLBACK_MAX = 500

BATTING_KEYWORDS = ("needs", "need", "chasing", "require", "target")
HIGH_PRESSURE_KEYWORDS = ("final", "last over", "super over", "final ball", "must win")
MOMENTUM_KEYWORDS = ("on fire", "momentum", "six off every", "smashing", "dominant")
COLLAPSE_KEYWORDS = ("collapse", "panic", "tail", "last wicket", "last pair")

_NUMBER_RE = re.compile(r"\d+")


def extract_numbers(text: str) -> List[int]:
    """All maximal digit runs, in order of appearance."""
    return [int(m) for m in _NUMBER_RE.findall(text)]


def contains_any(text: str, keywords: Sequence[str]) -> bool:
    lower = text.lower()
    return any(kw in lower for kw in keywords)


def _first_with_suffix(text: str, numbers: List[int], suffixes: Sequence[str]) -> Optional[int]:
    """
    First number n for which "<n> <suffix>" appears somewhere in text.

    Plain substring check: "120 runs" also satisfies "20 run".
    """
    for n in numbers:
        for suffix in suffixes:
            if f"{n} {suffix}" in text:
                return n
    return None


def _pick_runs(text: str, numbers: List[int]) -> Optional[int]:
    explicit = _first_with_suffix(text, numbers, ("run",))
    if explicit is not None:
        return explicit

    # No "<n> run" anywhere: assume a small leading number is the target
    if numbers and numbers[0] < RUNS_FALLBACK_MAX:
        return numbers[0]
    return None


def parse_scenario(text: str) -> ScenarioRecord:
    """
    Turn free scenario text into a ScenarioRecord.

    Does no validation; callers are expected to have rejected blank input.
    """
    normalized = text.lower()
    numbers = extract_numbers(normalized)

    return ScenarioRecord(
        runs=_pick_runs(normalized, numbers),
        balls=_first_with_suffix(normalized, numbers, ("ball", "delivery")),
        wickets=_first_with_suffix(normalized, numbers, ("wicket", "wkt")),
        overs=_first_with_suffix(normalized, numbers, ("over",)),
        is_batting=contains_any(normalized, BATTING_KEYWORDS),
        is_high_pressure=contains_any(normalized, HIGH_PRESSURE_KEYWORDS),
        has_momentum=contains_any(normalized, MOMENTUM_KEYWORDS),
        is_collapse_risk=contains_any(normalized, COLLAPSE_KEYWORDS),
        normalized_text=normalized,
    )
