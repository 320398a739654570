"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Tworzy InMemorySessionStore (jeden Calculator na session_id)
  - Przy zamknięciu loguje liczbę porzucanych sesji

Błędy kalkulatora są mapowane na odpowiedzi HTTP:
  ExpressionSyntaxError / LexError → 400
  EvaluationError                  → 422
  KeyError (brak sesji)            → 404

Uruchomienie: uvicorn api.main:app
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.session_store.memory_session_store import InMemorySessionStore
from api.routers import evaluate, sessions
from api.schemas import HealthResponse
from config import Settings
from contracts import CalculatorError, EvaluationError

logger = logging.getLogger("shunt_calc")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    app.state.session_store = InMemorySessionStore(max_sessions=settings.max_sessions)

    logger.info("ShuntCalc API ready.")
    yield

    logger.info("Shutting down — dropping %d session(s).", len(app.state.session_store))


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)
    app.include_router(sessions.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health(request: Request):
        return HealthResponse(
            status="ok",
            version=settings.app_version,
            sessions=len(request.app.state.session_store),
        )

    # Globalne handlery błędów
    @app.exception_handler(CalculatorError)
    async def calculator_error_handler(request: Request, exc: CalculatorError):
        status = 422 if isinstance(exc, EvaluationError) else 400
        logger.warning("Rejected expression (%s): %s", exc.kind, exc.message)
        return JSONResponse(status_code=status, content={"detail": exc.message, "kind": exc.kind})

    @app.exception_handler(KeyError)
    async def key_error_handler(request: Request, exc: KeyError):
        return JSONResponse(status_code=404, content={"detail": str(exc.args[0]) if exc.args else str(exc)})

    return app


app = create_app()
