from __future__ import annotations
import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Request, Response, UploadFile
from fastapi.responses import JSONResponse

from ..errors import MSG_FILE_READ
from ..game_logic import EXPORT_FILENAME
from ..managers.game import QuizManager
from ..schemas import Outcome, TeacherResult, ValidateResponse, WordInput
from ..validator import is_allowed_char, is_valid_format

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dict", tags=["dictionary"])


def get_manager(request: Request) -> QuizManager:
    return request.app.state.quiz


@router.get("/validate")
async def validate_word(word: str, quiz: QuizManager = Depends(get_manager)):
    word = word.strip()
    result = ValidateResponse(
        word=word,
        valid_format=is_valid_format(word),
        chars_allowed=all(is_allowed_char(c) for c in word),
        in_dictionary=quiz.dictionary.contains(word),
    )
    return result.model_dump(by_alias=True)


@router.post("/words")
async def add_word(body: WordInput, quiz: QuizManager = Depends(get_manager)):
    return quiz.teacher.add_word(body.word).payload()


@router.get("/export")
async def export_dictionary(quiz: QuizManager = Depends(get_manager)):
    data, result = quiz.teacher.export_file()
    if data is None:
        return JSONResponse(result.payload(), status_code=500)
    # header values are latin-1, so the Arabic message travels percent-encoded
    return Response(
        content=data,
        media_type="text/plain; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"',
            "X-Result-Outcome": result.outcome.value,
            "X-Result-Message": quote(result.message),
        },
    )


@router.post("/import")
async def import_dictionary(file: UploadFile = File(...), quiz: QuizManager = Depends(get_manager)):
    try:
        data = await file.read()
    except OSError as e:
        logger.warning("Could not read uploaded file %s: %s", file.filename, e)
        return TeacherResult(outcome=Outcome.READ_ERROR, message=MSG_FILE_READ).payload()
    finally:
        await file.close()
    return quiz.teacher.import_file(data).payload()
