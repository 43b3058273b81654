from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# -----------------------------
# Parsed scenario
# -----------------------------
@dataclass(frozen=True)
class ScenarioRecord:
    # Numbers pulled from the text; None means "not mentioned", never 0
    runs: Optional[int] = None
    balls: Optional[int] = None
    wickets: Optional[int] = None
    overs: Optional[int] = None  # informational only

    # Keyword flags (independent, several may be set at once)
    is_batting: bool = False
    is_high_pressure: bool = False
    has_momentum: bool = False
    is_collapse_risk: bool = False

    normalized_text: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# -----------------------------
# Engine result
# -----------------------------
@dataclass(frozen=True)
class AnalysisResult:
    """
    Either a success (analysis + win_probability) or a failure (error).
    Use the success()/failure() constructors; there are no partial states.
    """
    analysis: Optional[str] = None
    win_probability: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, analysis: str, win_probability: int) -> "AnalysisResult":
        return cls(analysis=analysis, win_probability=win_probability, error=None)

    @classmethod
    def failure(cls, error: str) -> "AnalysisResult":
        return cls(analysis=None, win_probability=None, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "analysis": self.analysis,
            "winProbability": self.win_probability,
            "error": self.error,
        }
