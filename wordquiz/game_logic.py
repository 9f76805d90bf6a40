from __future__ import annotations
import logging
import random
from typing import Optional, Tuple

from .dictionary import Dictionary
from .errors import (
    AlreadyExists,
    EmptyInput,
    ExportFailure,
    FileReadFailure,
    InvalidFormat,
    MSG_EXPORTED,
    PersistFailure,
)
from .schemas import CheckResult, Outcome, TeacherResult
from .scoring import ScoreTracker
from .storage import KeyValueStore
from .validator import is_valid_format

logger = logging.getLogger(__name__)

EXPORT_FILENAME = 'words_updated.txt'

ENCOURAGEMENT_MESSAGES = [
    'أحسنت! 🌟',
    'ممتاز! 👍',
    'رائع جداً! 🎉',
    'عمل جميل! ✨',
    'أنت ذكي! 🧠',
]


def read_input(raw_input: str, *, enforce_format: bool) -> str:
    """Strip a submitted word, raising EmptyInput or InvalidFormat."""
    word = raw_input.strip()
    if not word:
        raise EmptyInput()
    if enforce_format and not is_valid_format(word):
        raise InvalidFormat()
    return word


class GameSession:
    """One player's quiz: checks answers against the dictionary and keeps score."""

    def __init__(self, dictionary: Dictionary, *, enforce_format: bool, score: Optional[ScoreTracker] = None):
        self.dictionary = dictionary
        self.enforce_format = enforce_format
        self.score = score or ScoreTracker()

    def _result(self, outcome: Outcome, message: str, word: str = '', clear_input: bool = False) -> CheckResult:
        return CheckResult(
            outcome=outcome,
            message=message,
            word=word,
            score=self.score.current(),
            clear_input=clear_input,
        )

    def check_word(self, raw_input: str) -> CheckResult:
        try:
            word = read_input(raw_input, enforce_format=self.enforce_format)
        except EmptyInput as e:
            return self._result(Outcome.EMPTY, e.message)
        except InvalidFormat as e:
            return self._result(Outcome.INVALID_FORMAT, e.message, raw_input.strip())

        if self.dictionary.contains(word):
            self.score.add(1)
            cheer = random.choice(ENCOURAGEMENT_MESSAGES)
            return self._result(Outcome.CORRECT, f'{cheer} الكلمة "{word}" صحيحة.', word, clear_input=True)

        return self._result(
            Outcome.INCORRECT,
            f'الكلمة "{word}" غير موجودة في القاموس. حاول مرة أخرى!',
            word,
            clear_input=True,
        )


class TeacherSession:
    """Maintains the shared dictionary: add, export and import."""

    def __init__(self, dictionary: Dictionary, store: KeyValueStore):
        self.dictionary = dictionary
        self.store = store

    def _saved(self, outcome: Outcome, message: str, **fields) -> TeacherResult:
        # the in-memory change stands even when saving fails
        try:
            self.dictionary.save(self.store)
        except PersistFailure as e:
            logger.error("Error saving dictionary: %s", e.__cause__)
            return TeacherResult(outcome=outcome, message=f'{message} {e.message}', persisted=False, **fields)
        logger.debug("Dictionary saved (%d words)", len(self.dictionary))
        return TeacherResult(outcome=outcome, message=message, **fields)

    def add_word(self, raw_input: str) -> TeacherResult:
        try:
            word = read_input(raw_input, enforce_format=True)
            self.dictionary.add(word)
        except EmptyInput as e:
            return TeacherResult(outcome=Outcome.EMPTY, message=e.message)
        except InvalidFormat as e:
            return TeacherResult(outcome=Outcome.INVALID_FORMAT, message=e.message, word=raw_input.strip())
        except AlreadyExists as e:
            return TeacherResult(outcome=Outcome.ALREADY_EXISTS, message=e.message, word=e.word)

        logger.info("Added word %r (%d words)", word, len(self.dictionary))
        return self._saved(Outcome.ADDED, f'تمت إضافة الكلمة "{word}" بنجاح إلى القاموس!', word=word)

    def export_dictionary(self) -> bytes:
        try:
            return self.dictionary.to_text().encode('utf-8')
        except UnicodeEncodeError as e:
            raise ExportFailure() from e

    def export_file(self) -> Tuple[Optional[bytes], TeacherResult]:
        """Export contents for download plus the result to show the teacher."""
        try:
            data = self.export_dictionary()
        except ExportFailure as e:
            logger.error("Error exporting dictionary: %s", e.__cause__)
            return None, TeacherResult(outcome=Outcome.EXPORT_ERROR, message=e.message)
        return data, TeacherResult(outcome=Outcome.EXPORTED, message=MSG_EXPORTED, count=len(self.dictionary))

    def import_dictionary(self, contents: str) -> TeacherResult:
        words = Dictionary.load_from_text(contents)
        self.dictionary.replace_all(words)
        logger.info("Imported %d words", len(words))
        return self._saved(Outcome.IMPORTED, f'تم استيراد {len(words)} كلمة بنجاح!', count=len(words))

    def import_file(self, data: bytes) -> TeacherResult:
        try:
            contents = decode_import_file(data)
        except FileReadFailure as e:
            logger.warning("Import file unreadable: %s", e.__cause__)
            return TeacherResult(outcome=Outcome.READ_ERROR, message=e.message)
        return self.import_dictionary(contents)


def decode_import_file(data: bytes) -> str:
    try:
        return data.decode('utf-8-sig')
    except UnicodeDecodeError as e:
        raise FileReadFailure() from e
