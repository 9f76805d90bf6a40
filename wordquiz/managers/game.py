from __future__ import annotations
import logging
from typing import Dict, Optional

from ..dictionary import Dictionary, bootstrap_dictionary
from ..game_logic import GameSession, TeacherSession
from ..schemas import QuizState
from ..storage import KeyValueStore, build_store

logger = logging.getLogger(__name__)


class QuizManager:
    """
    Holds the shared dictionary and one GameSession per connected player.

    Scores belong to a connection and vanish with it; dictionary edits made
    through `teacher` are seen by every player immediately.
    """

    def __init__(
        self,
        dictionary: Dictionary,
        store: KeyValueStore,
        *,
        enforce_format: bool,
        load_error: Optional[str] = None,
    ):
        self.dictionary = dictionary
        self.store = store
        self.enforce_format = enforce_format
        self.load_error = load_error
        self.teacher = TeacherSession(dictionary, store)
        self.sessions: Dict[str, GameSession] = {}

    def open(self, sid: str) -> GameSession:
        if sid not in self.sessions:
            self.sessions[sid] = GameSession(self.dictionary, enforce_format=self.enforce_format)
            logger.debug("Session opened for %s", sid)
        return self.sessions[sid]

    def get(self, sid: str) -> GameSession:
        return self.open(sid)

    def close(self, sid: str) -> None:
        if self.sessions.pop(sid, None) is not None:
            logger.debug("Session closed for %s", sid)

    def state(self, sid: str) -> QuizState:
        return QuizState(
            score=self.get(sid).score.current(),
            word_count=len(self.dictionary),
            load_error=self.load_error,
        )


def build_manager(settings) -> QuizManager:
    store = build_store(settings)
    dictionary, load_error = bootstrap_dictionary(store, settings.word_list_path)
    return QuizManager(
        dictionary,
        store,
        enforce_format=settings.enforce_format_on_check,
        load_error=load_error,
    )
