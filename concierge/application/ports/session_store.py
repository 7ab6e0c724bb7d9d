import threading
from abc import ABC, abstractmethod

from concierge.domain.entities.session_state import SessionState


class SessionStorePort(ABC):
    @abstractmethod
    def get(self, session_id: str) -> SessionState | None:
        raise NotImplementedError

    @abstractmethod
    def put(self, state: SessionState) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def session_lock(self, session_id: str) -> threading.Lock:
        """Lock that serializes turns for one session; unknown ids get a lock that is not kept."""
        raise NotImplementedError
