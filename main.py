# main.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from insight_api.config import (
    APP_TITLE,
    MAX_SCENARIO_CHARS,
    configure_logging,
    validate_config,
)
from insight_api.engine import analyze_scenario
from insight_api.parser import parse_scenario
from insight_api.win_probability import probability_band, probability_label

logger = logging.getLogger(__name__)

DISCLAIMER = "AI-generated insight for entertainment purposes only. Predictions are not guarantees."

EXAMPLE_SCENARIOS: List[str] = [
    "India needs 20 runs in 6 balls, 2 wickets left",
    "Australia chasing 280, 220/4 after 40 overs",
    "Last over thriller, 12 runs needed, 1 wicket left",
    "England vs NZ, final 5 overs, 45 to win, 6 wickets in hand",
]

# -----------------------
# App
# -----------------------
app = FastAPI(
    title=APP_TITLE,
    version="0.1.0",
    description="Turns a free-text cricket match situation into a win probability and match commentary",
)


@app.on_event("startup")
def on_startup():
    validate_config()
    configure_logging()


@app.get("/health")
def health_check():
    return {"status": "ok", "time": datetime.utcnow().isoformat() + "Z"}


@app.get("/api/examples")
def list_examples():
    return {"examples": EXAMPLE_SCENARIOS}


# -----------------------
# Analysis Endpoint
# -----------------------
class AnalyzeRequest(BaseModel):
    scenario: Optional[str] = Field(
        None,
        max_length=MAX_SCENARIO_CHARS,
        description="e.g. India needs 20 runs in 6 balls, 2 wickets left",
    )


@app.post("/api/analyze")
def analyze(req: AnalyzeRequest):
    result = analyze_scenario(req.scenario)
    if not result.ok:
        raise HTTPException(status_code=400, detail=result.error)

    # Re-parse only for the echo; the engine itself stays a single call
    parsed = parse_scenario(req.scenario).to_dict()
    parsed.pop("normalized_text", None)

    resp: Dict[str, Any] = {
        "scenario": req.scenario,
        **result.to_dict(),
        "band": probability_band(result.win_probability),
        "label": probability_label(result.win_probability),
        "disclaimer": DISCLAIMER,
        "parsed": parsed,
    }
    logger.info("Analyzed scenario (%d chars) -> %d%%", len(req.scenario), result.win_probability)
    return resp
