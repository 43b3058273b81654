# insight_api/narrative.py
from __future__ import annotations

from typing import List, Sequence

from insight_api.models import ScenarioRecord
from insight_api.run_rate import format_rate, required_run_rate
from insight_api.win_probability import probability_band

OPENING_LINES = (
    "This is a knife-edge finish.",
    "The pressure is absolutely immense right now.",
    "All eyes are on the middle — this is what cricket is made of.",
    "The crowd is on its feet. Every delivery could be the last.",
    "We're in the business end of this match, and nerves will decide it.",
)

CLOSING_LINES = (
    "Experience and composure will be the deciding factors.",
    "Expect fireworks — or heartbreak — in these final moments.",
    "History is waiting to be written on this pitch.",
    "Cricket's magic lives in exactly these moments.",
    "One moment of brilliance could change everything.",
)

HIGH_PRESSURE_LINE = (
    "The high-stakes nature of this game amplifies every error — a misfield, "
    "a dropped catch, or a wide could swing the momentum catastrophically."
)

MOMENTUM_LINE = (
    "Momentum is firmly with the batting side right now. A batter in this kind "
    "of form can make the required rate feel irrelevant — momentum is its own weapon."
)


def pick(lines: Sequence[str], seed: int) -> str:
    """Deterministic pick from a fixed pool (same seed, same line)."""
    return lines[seed % len(lines)]


def scenario_seed(scenario: ScenarioRecord) -> int:
    return len(scenario.normalized_text) + (scenario.runs or 0) + (scenario.balls or 0)


def _run_rate_line(runs: int, balls: int) -> str:
    rrr = format_rate(required_run_rate(runs, balls))

    if balls <= 6:
        # "ball" for 0 and 1
        ball_word = "balls" if balls > 1 else "ball"
        return (
            f"With just {balls} {ball_word} remaining and {runs} runs needed, "
            f"the required rate is a staggering {rrr} per over — a near-impossible ask "
            f"that will demand back-to-back maximums."
        )

    # Band on the displayed (one decimal) rate so text and number agree
    shown = float(rrr)
    if shown > 12:
        verdict = "a Herculean target that even the best finishers would struggle with"
    elif shown > 9:
        verdict = "challenging but achievable with clean hitting and no panic"
    else:
        verdict = "a gettable target if the batting side keeps their heads"

    return f"{runs} runs off {balls} balls translates to a required run rate of {rrr} — {verdict}."


def _runs_only_line(runs: int) -> str:
    return (
        f"With {runs} runs on the board, the context of the match defines everything — "
        f"pitch conditions, match format, and batting depth all play critical roles."
    )


def _wickets_line(wickets: int, is_collapse_risk: bool) -> str:
    if wickets <= 1:
        if is_collapse_risk:
            tail = (
                "A late-order collapse has already exposed the tail, and the pressure "
                "on the last pair will be immense."
            )
        else:
            tail = (
                "The last wicket partnership is a volatile commodity — one good delivery "
                "ends it all."
            )
        wicket_word = "wicket" if wickets == 1 else "wickets"
        return (
            f"Crucially, the batting side has only {wickets} {wicket_word} "
            f"remaining. {tail}"
        )

    if wickets <= 3:
        return (
            f"{wickets} wickets in hand gives them some buffer, but a quick breakthrough "
            f"could send the tail crumbling. The fielding side will be hunting for the "
            f"danger batter aggressively."
        )

    return (
        f"With {wickets} wickets available, the batting side has the luxury of intent — "
        f"they can play their shots without fear of immediate collapse."
    )


def _probability_line(win_probability: int) -> str:
    band = probability_band(win_probability)

    if band == "HIGH":
        return (
            f"At {win_probability}% win probability, the batting side are clear favourites — "
            f"but in cricket, nothing is guaranteed until that final run is scored."
        )
    if band == "MID":
        return (
            f"The {win_probability}% win probability reflects a genuine contest. This match "
            f"is on a razor's edge, and both sides have real reasons to believe."
        )
    if band == "LOW":
        return (
            f"A {win_probability}% chance is daunting, but cricket has seen bigger upsets. "
            f"They'll need something extraordinary — a big over, or a rapid collapse from "
            f"the opposition."
        )
    return (
        f"At just {win_probability}%, this is a long shot — but sport loves a miracle. "
        f"Stranger things have happened on a cricket pitch."
    )


def generate_analysis(scenario: ScenarioRecord, win_probability: int) -> str:
    """
    Build the commentary paragraph.

    Clause order is fixed: opening, run rate, wickets, pressure, momentum,
    win probability, closing. Conditional clauses that don't apply are
    simply left out.
    """
    seed = scenario_seed(scenario)
    lines: List[str] = [pick(OPENING_LINES, seed)]

    if scenario.runs is not None and scenario.balls is not None:
        lines.append(_run_rate_line(scenario.runs, scenario.balls))
    elif scenario.runs is not None:
        lines.append(_runs_only_line(scenario.runs))

    if scenario.wickets is not None:
        lines.append(_wickets_line(scenario.wickets, scenario.is_collapse_risk))

    if scenario.is_high_pressure:
        lines.append(HIGH_PRESSURE_LINE)

    if scenario.has_momentum:
        lines.append(MOMENTUM_LINE)

    lines.append(_probability_line(win_probability))
    lines.append(pick(CLOSING_LINES, seed + 1))

    return " ".join(lines)
