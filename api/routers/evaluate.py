"""
Router: POST /evaluate, POST /explain
Oblicza wyrażenie w kontekście sesji (zmienne żyją tak długo jak sesja).
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from adapters.evaluator.postfix_evaluator import format_number
from api.dependencies import get_session_store
from api.schemas import (
    ErrorResponse,
    EvaluateRequest,
    EvaluateResponse,
    ExplainResponse,
    json_value,
)

router = APIRouter(tags=["evaluate"])

_ERRORS = {
    400: {"model": ErrorResponse, "description": "Syntax error (unbalanced parentheses)"},
    422: {"model": ErrorResponse, "description": "Evaluation error"},
}


@router.post("/evaluate", response_model=EvaluateResponse, responses=_ERRORS)
async def evaluate(
    body: EvaluateRequest,
    store=Depends(get_session_store),
) -> EvaluateResponse:
    with store.acquire(body.session_id) as calc:
        result = calc.explain(body.expression)

    return EvaluateResponse.build(
        body.session_id, body.expression, result.value, assigned=result.assigned
    )


@router.post("/explain", response_model=ExplainResponse, responses=_ERRORS)
async def explain(
    body: EvaluateRequest,
    store=Depends(get_session_store),
) -> ExplainResponse:
    with store.acquire(body.session_id) as calc:
        result = calc.explain(body.expression)

    return ExplainResponse(
        session_id=body.session_id,
        expression=result.expression,
        value=json_value(result.value),
        display=format_number(result.value),
        assigned=result.assigned,
        postfix=result.postfix,
        steps=result.steps,
    )
