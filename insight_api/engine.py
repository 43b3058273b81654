# insight_api/engine.py
from __future__ import annotations

import logging
from typing import Optional

from insight_api.config import MIN_SCENARIO_CHARS
from insight_api.models import AnalysisResult
from insight_api.narrative import generate_analysis
from insight_api.parser import parse_scenario
from insight_api.win_probability import estimate_win_probability

logger = logging.getLogger(__name__)

INSUFFICIENT_INPUT_MESSAGE = "Please enter a match scenario with enough detail to analyze."


def analyze_scenario(text: Optional[str]) -> AnalysisResult:
    """
    Parse -> estimate -> narrate.

    Never raises: input that is missing or too short comes back as
    AnalysisResult.failure(...) with a user-facing message.
    """
    if not text or len(text.strip()) < MIN_SCENARIO_CHARS:
        logger.info("Rejected scenario: %d chars after trim", len((text or "").strip()))
        return AnalysisResult.failure(INSUFFICIENT_INPUT_MESSAGE)

    scenario = parse_scenario(text)
    win_probability = estimate_win_probability(scenario)
    analysis = generate_analysis(scenario, win_probability)

    logger.debug(
        "Scenario runs=%s balls=%s wickets=%s batting=%s -> %d%%",
        scenario.runs,
        scenario.balls,
        scenario.wickets,
        scenario.is_batting,
        win_probability,
    )
    return AnalysisResult.success(analysis, win_probability)
