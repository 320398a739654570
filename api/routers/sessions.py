"""
Router: GET /sessions/{session_id}/variables, DELETE /sessions/{session_id}
Podgląd i usuwanie stanu zmiennych sesji.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from api.dependencies import get_session_store
from api.schemas import DropSessionResponse, VariablesResponse, json_value

router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("/{session_id}/variables", response_model=VariablesResponse)
async def list_variables(
    session_id: str,
    store=Depends(get_session_store),
) -> VariablesResponse:
    calc = store.get(session_id)  # KeyError → 404
    return VariablesResponse(
        session_id=session_id,
        variables={name: json_value(v) for name, v in calc.variables.items()},
    )


@router.delete("/{session_id}", response_model=DropSessionResponse)
async def drop_session(
    session_id: str,
    store=Depends(get_session_store),
) -> DropSessionResponse:
    return DropSessionResponse(session_id=session_id, dropped=store.drop(session_id))
