from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import AlreadyExists, PersistFailure, ResourceLoadFailure
from .storage import KeyValueStore

logger = logging.getLogger(__name__)

STORAGE_KEY = 'arabicDictionary'

# Used when neither a saved dictionary nor the word list file is available.
DEFAULT_WORDS = [
    'كتب', 'قرأ', 'درس', 'علم', 'فهم', 'سمع', 'جلس', 'خرج', 'دخل', 'شرب',
    'أكل', 'ذهب', 'رسم', 'لعب', 'نام', 'قلم', 'باب', 'بيت', 'نور', 'شمس',
    'قمر', 'بحر', 'نهر', 'جبل', 'ورد', 'حبر', 'صبر', 'عمل', 'حلم', 'سلم',
]


class Dictionary:
    """Ordered list of accepted words. Matching is exact and case-sensitive."""

    def __init__(self, words: Optional[Iterable[str]] = None):
        self._words: List[str] = []
        if words is not None:
            self.replace_all(words)

    @property
    def words(self) -> List[str]:
        return list(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._words))

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def contains(self, word: str) -> bool:
        return word in self._words

    def add(self, word: str) -> None:
        # format is the caller's concern
        if self.contains(word):
            raise AlreadyExists(word)
        self._words.append(word)

    def replace_all(self, words: Iterable[str]) -> None:
        self._words = [w.strip() for w in words if w.strip()]

    def to_text(self) -> str:
        return '\n'.join(self._words)

    @staticmethod
    def load_from_text(text: str) -> List[str]:
        """Parse one-word-per-line text, dropping blank lines and surrounding whitespace."""
        return [line.strip() for line in text.split('\n') if line.strip()]

    def save(self, store: KeyValueStore) -> None:
        try:
            store.set(STORAGE_KEY, json.dumps(self._words, ensure_ascii=False))
        except Exception as e:
            raise PersistFailure() from e

    @classmethod
    def load(cls, store: KeyValueStore) -> Optional[Dictionary]:
        """Restore a saved dictionary, or None if nothing usable is stored."""
        blob = store.get(STORAGE_KEY)
        if blob is None:
            return None
        try:
            words = json.loads(blob)
        except ValueError as e:
            logger.warning("Saved dictionary is not valid JSON, ignoring it: %s", e)
            return None
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            logger.warning("Saved dictionary is not a list of strings, ignoring it")
            return None
        return cls(words)


def read_word_list(path: Path | str) -> List[str]:
    try:
        text = Path(path).read_text(encoding='utf-8-sig')
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceLoadFailure() from e
    return Dictionary.load_from_text(text)


def bootstrap_dictionary(
    store: KeyValueStore,
    word_list_path: Optional[Path | str],
) -> Tuple[Dictionary, Optional[str]]:
    """
    Build the startup dictionary.

    Order: saved blob, then the word list file, then DEFAULT_WORDS. Returns the
    dictionary and a display message when the word list could not be loaded.
    """
    saved = Dictionary.load(store)
    if saved is not None:
        logger.info("Dictionary loaded from storage (%d words)", len(saved))
        return saved, None

    if word_list_path is not None:
        try:
            words = read_word_list(word_list_path)
        except ResourceLoadFailure as e:
            logger.error("Error loading word list %s: %s", word_list_path, e.__cause__)
            load_error = e.message
        else:
            logger.info("Dictionary loaded from %s (%d words)", word_list_path, len(words))
            return Dictionary(words), None
    else:
        load_error = None

    logger.info("Using built-in default dictionary (%d words)", len(DEFAULT_WORDS))
    return Dictionary(DEFAULT_WORDS), load_error
