# insight_api/win_probability.py
from __future__ import annotations

from typing import Literal, Optional

from insight_api.models import ScenarioRecord
from insight_api.run_rate import required_run_rate

ProbabilityBand = Literal["HIGH", "MID", "LOW", "CRITICAL"]

BASE_PROBABILITY = 50
MIN_PROBABILITY = 3
MAX_PROBABILITY = 97

# Context modifiers, applied after the batting/bowling flip
HIGH_PRESSURE_DELTA = -5
MOMENTUM_DELTA = 8
COLLAPSE_RISK_DELTA = -12

PROBABILITY_LABELS = {
    "HIGH": "Strong Favourite",
    "MID": "Slight Edge",
    "LOW": "Under Pressure",
    "CRITICAL": "Long Shot",
}


def _base_from_required_rate(rrr: float) -> int:
    if rrr <= 6:
        return 78
    if rrr <= 9:
        return 62
    if rrr <= 12:
        return 44
    if rrr <= 15:
        return 28
    if rrr <= 18:
        return 16
    return 8


def _wickets_adjustment(wickets: Optional[int]) -> int:
    # 0 and 3 wickets are deliberately left unadjusted
    if wickets is None:
        return 0
    if wickets >= 7:
        return 12
    if wickets >= 4:
        return 5
    if wickets == 2:
        return -10
    if wickets == 1:
        return -18
    return 0


def estimate_win_probability(scenario: ScenarioRecord) -> int:
    """
    Heuristic win probability (percent) for the side named in the scenario.

    Steps:
    1) base from required run rate when both runs and balls are known (else 50)
    2) wickets-in-hand adjustment
    3) flip to 100 - score when the text is framed from the bowling side
    4) pressure / momentum / collapse modifiers (after the flip)
    5) clamp to [3, 97]
    """
    score: float = BASE_PROBABILITY

    if scenario.runs is not None and scenario.balls is not None:
        score = _base_from_required_rate(required_run_rate(scenario.runs, scenario.balls))

    score += _wickets_adjustment(scenario.wickets)

    if not scenario.is_batting:
        score = 100 - score

    if scenario.is_high_pressure:
        score += HIGH_PRESSURE_DELTA
    if scenario.has_momentum:
        score += MOMENTUM_DELTA
    if scenario.is_collapse_risk:
        score += COLLAPSE_RISK_DELTA

    return int(max(MIN_PROBABILITY, min(MAX_PROBABILITY, round(score))))


def probability_band(win_probability: int) -> ProbabilityBand:
    if win_probability >= 70:
        return "HIGH"
    if win_probability >= 50:
        return "MID"
    if win_probability >= 30:
        return "LOW"
    return "CRITICAL"


def probability_label(win_probability: int) -> str:
    return PROBABILITY_LABELS[probability_band(win_probability)]
