"""
In-memory registry of terminal sessions served over HTTP.
"""

import logging
import threading
import uuid
from collections import OrderedDict
from typing import Callable, Optional

from terminal_blog.exceptions import SessionNotFoundError
from terminal_blog.use_cases.terminal.session import TerminalSession


class SessionRegistry:
    """Thread-safe map of session id -> TerminalSession.

    Clients are not required to close their sessions, so the map is
    bounded: once ``max_sessions`` is reached, creating a session evicts
    the one used least recently.
    """

    def __init__(
        self,
        factory: Callable[[], TerminalSession],
        max_sessions: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        if max_sessions is not None and max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._factory = factory
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, TerminalSession] = OrderedDict()
        self._lock = threading.Lock()
        self._logger = logger or logging.getLogger(__name__)

    def create(self) -> tuple[str, TerminalSession]:
        session = self._factory()
        session_id = uuid.uuid4().hex
        evicted: list[str] = []
        with self._lock:
            self._sessions[session_id] = session
            while self._max_sessions is not None and len(self._sessions) > self._max_sessions:
                old_id, _ = self._sessions.popitem(last=False)
                evicted.append(old_id)
        for old_id in evicted:
            self._logger.info(f"Evicted idle session {old_id}")
        self._logger.info(f"Created session {session_id}")
        return session_id, session

    def get(self, session_id: str) -> TerminalSession:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is not None:
                self._sessions.move_to_end(session_id)
        if session is None:
            raise SessionNotFoundError(f"Unknown session: {session_id}")
        return session

    def remove(self, session_id: str) -> None:
        with self._lock:
            if self._sessions.pop(session_id, None) is None:
                raise SessionNotFoundError(f"Unknown session: {session_id}")
        self._logger.info(f"Closed session {session_id}")

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
