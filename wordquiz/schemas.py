from __future__ import annotations
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Outcome(str, Enum):
    EMPTY = 'empty'
    INVALID_FORMAT = 'invalid_format'
    CORRECT = 'correct'
    INCORRECT = 'incorrect'
    ALREADY_EXISTS = 'already_exists'
    ADDED = 'added'
    IMPORTED = 'imported'
    EXPORTED = 'exported'
    EXPORT_ERROR = 'export_error'
    READ_ERROR = 'read_error'


class WordInput(BaseModel):
    word: str = ''


class CheckResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    outcome: Outcome
    message: str
    word: str = ''
    score: int = 0
    # correct/incorrect answers clear and refocus the input box
    clear_input: bool = Field(default=False, alias='clearInput')


class TeacherResult(BaseModel):
    outcome: Outcome
    message: str
    word: Optional[str] = None
    count: Optional[int] = None
    persisted: bool = True

    @property
    def ok(self) -> bool:
        return self.outcome in (Outcome.ADDED, Outcome.IMPORTED, Outcome.EXPORTED)

    def payload(self) -> dict:
        return {**self.model_dump(mode='json', exclude_none=True), 'ok': self.ok}


class QuizState(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    score: int
    word_count: int = Field(alias='wordCount')
    load_error: Optional[str] = Field(default=None, alias='loadError')


class ValidateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    word: str
    valid_format: bool = Field(alias='validFormat')
    chars_allowed: bool = Field(alias='charsAllowed')
    in_dictionary: bool = Field(alias='inDictionary')
