from typing import Dict, List

from interviewace.core.models import PersistedSession


class SessionStorage:
    def __init__(self):
        self._sessions: Dict[str, PersistedSession] = {}

    def save(self, session: PersistedSession) -> None:
        if self.exists(session["id"]):
            raise ValueError(f"Session {session['id']} already stored")
        self._sessions[session["id"]] = session

    def get(self, session_id: str) -> PersistedSession | None:
        return self._sessions.get(session_id)

    def get_for_user(self, user_email: str, session_id: str) -> PersistedSession | None:
        session = self.get(session_id)
        if session is None or session["user_email"] != user_email:
            return None
        return session

    def list_by_user(self, user_email: str) -> List[PersistedSession]:
        sessions = [s for s in self._sessions.values() if s["user_email"] == user_email]
        return sorted(sessions, key=lambda s: s["started_at"], reverse=True)

    def exists(self, session_id: str) -> bool:
        return session_id in self._sessions
