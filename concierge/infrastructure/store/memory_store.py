from __future__ import annotations

import threading
from dataclasses import replace

from concierge.application.ports.session_store import SessionStorePort
from concierge.domain.entities.session_state import SessionState


class MemorySessionStore(SessionStorePort):
    def __init__(self, history_limit: int = 200) -> None:
        self._sessions: dict[str, SessionState] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()
        self._history_limit = history_limit

    def get(self, session_id: str) -> SessionState | None:
        return self._sessions.get(session_id)

    def put(self, state: SessionState) -> None:
        if len(state.messages) > self._history_limit:
            state = replace(state, messages=state.messages[-self._history_limit :])
        self._sessions[state.session_id] = state

    def delete(self, session_id: str) -> bool:
        with self._lock_lock:
            self._locks.pop(session_id, None)
            return self._sessions.pop(session_id, None) is not None

    def session_lock(self, session_id: str) -> threading.Lock:
        with self._lock_lock:
            if session_id in self._locks:
                return self._locks[session_id]
            lock = threading.Lock()
            # Only live sessions keep a lock; callers re-read the session under it.
            if session_id in self._sessions:
                self._locks[session_id] = lock
            return lock

    def session_ids(self) -> list[str]:
        return list(self._sessions)
