"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, Field

from adapters.evaluator.postfix_evaluator import format_number

DEFAULT_SESSION = "default"


def json_value(value: float) -> Optional[float]:
    """JSON nie ma inf/nan — takie wyniki idą tylko w polu `display`."""
    return value if math.isfinite(value) else None


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expression: str = Field(max_length=10_000)
    session_id: str = Field(DEFAULT_SESSION, min_length=1, max_length=128)


class EvaluateResponse(BaseModel):
    session_id: str
    expression: str
    value: Optional[float]     # None dla inf/nan
    display: str               # np. "14", "0.5", "inf"
    assigned: Optional[str] = None

    @classmethod
    def build(cls, session_id: str, expression: str, value: float,
              assigned: Optional[str] = None) -> EvaluateResponse:
        return cls(
            session_id=session_id,
            expression=expression,
            value=json_value(value),
            display=format_number(value),
            assigned=assigned,
        )


# ─────────────────────────── /explain ────────────────────────────

class ExplainResponse(EvaluateResponse):
    postfix: list[str]
    steps: list[str]


# ─────────────────────────── /sessions ───────────────────────────

class VariablesResponse(BaseModel):
    session_id: str
    variables: dict[str, Optional[float]]


class DropSessionResponse(BaseModel):
    session_id: str
    dropped: bool


# ─────────────────────────── errors / health ─────────────────────

class ErrorResponse(BaseModel):
    detail: str
    kind: str


class HealthResponse(BaseModel):
    status: str
    version: str
    sessions: int
