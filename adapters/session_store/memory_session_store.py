"""
Adapter: InMemorySessionStore
Implementuje port SessionStore — słownik session_id → Calculator w pamięci procesu.

Dwa poziomy blokad:
  - _lock       chroni sam słownik (tworzenie/usuwanie sesji)
  - _Session.lock serializuje obliczenia w obrębie jednej sesji
Po przekroczeniu max_sessions najstarsza nieużywana sesja jest usuwana (LRU).
"""
from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from calculator import Calculator

logger = logging.getLogger("shunt_calc.sessions")


@dataclass
class _Session:
    calculator: Calculator = field(default_factory=Calculator)
    lock: threading.Lock = field(default_factory=threading.Lock)


class InMemorySessionStore:
    def __init__(self, max_sessions: int = 1_000) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be >= 1")
        self._max = max_sessions
        self._sessions: OrderedDict[str, _Session] = OrderedDict()
        self._lock = threading.Lock()

    # -- SessionStore protocol ---------------------------------------------

    @contextmanager
    def acquire(self, session_id: str) -> Iterator[Calculator]:
        session = self._get_or_create(session_id)
        with session.lock:
            yield session.calculator

    def get(self, session_id: str) -> Calculator:
        with self._lock:
            if session_id not in self._sessions:
                raise KeyError(f"Session not found: {session_id}")
            return self._sessions[session_id].calculator

    def drop(self, session_id: str) -> bool:
        with self._lock:
            removed = self._sessions.pop(session_id, None) is not None
        if removed:
            logger.info("Session dropped: %s", session_id)
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    # -- Prywatne ----------------------------------------------------------

    def _get_or_create(self, session_id: str) -> _Session:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                self._sessions.move_to_end(session_id)
                return session

            session = _Session()
            self._sessions[session_id] = session
            logger.info("Session created: %s", session_id)
            while len(self._sessions) > self._max:
                evicted, _ = self._sessions.popitem(last=False)
                logger.info("Session evicted (max_sessions=%d): %s", self._max, evicted)
            return session
