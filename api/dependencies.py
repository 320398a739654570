"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.session_store.memory_session_store import InMemorySessionStore


def get_session_store(request: Request) -> InMemorySessionStore:
    return request.app.state.session_store
