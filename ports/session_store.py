"""
Port: SessionStore
Odpowiedzialność: przechowywanie instancji Calculator per sesja (HTTP API).
"""
from __future__ import annotations

from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from calculator import Calculator


@runtime_checkable
class SessionStore(Protocol):
    def acquire(self, session_id: str) -> AbstractContextManager[Calculator]:
        """
        Returns a context manager yielding the session's Calculator (created on
        first use) while holding the session lock. Callers evaluate inside the
        `with` block; concurrent callers on the same session are serialized.
        """
        ...

    def get(self, session_id: str) -> Calculator:
        """Returns an existing session. Raises KeyError if it does not exist."""
        ...

    def drop(self, session_id: str) -> bool:
        """Removes a session. Returns False if it did not exist."""
        ...

    def __len__(self) -> int:
        ...
