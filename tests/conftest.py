import os

import pytest

from wordquiz.config import get_settings
from wordquiz.dictionary import Dictionary
from wordquiz.game_logic import GameSession, TeacherSession
from wordquiz.managers.game import QuizManager
from wordquiz.storage import MemoryStore

SAMPLE_WORDS = ["كتب", "قلم", "باب"]

# wordquiz.main builds its settings on import; keep the host environment out of it
SETTINGS_ENV = (
    "WORD_LIST_PATH", "STORAGE_PATH", "ENFORCE_FORMAT_ON_CHECK", "ALLOWED_ORIGINS",
    "LOG_LEVEL", "DEBUG", "HOST", "PORT",
)
for name in SETTINGS_ENV:
    os.environ.pop(name, None)
get_settings.cache_clear()


class FailingStore(MemoryStore):
    """Store whose writes always fail, as when local storage is full."""

    def set(self, key, value):
        raise OSError("quota exceeded")


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
def dictionary():
    return Dictionary(SAMPLE_WORDS)


@pytest.fixture
def game(dictionary):
    return GameSession(dictionary, enforce_format=False)


@pytest.fixture
def strict_game(dictionary):
    return GameSession(dictionary, enforce_format=True)


@pytest.fixture
def teacher(dictionary, store):
    return TeacherSession(dictionary, store)


@pytest.fixture
def manager(dictionary, store):
    return QuizManager(dictionary, store, enforce_format=False)
