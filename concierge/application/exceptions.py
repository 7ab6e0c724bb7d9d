class ConciergeError(RuntimeError):
    """Base class for errors raised outside the dialogue core."""
    pass


class SessionNotFoundError(ConciergeError):
    """Raised when a turn or snapshot targets a session that does not exist."""

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Unknown session: {session_id}")
        self.session_id = session_id


class EmptyTurnError(ConciergeError):
    """Raised when the host submits a turn with no text."""
    pass
