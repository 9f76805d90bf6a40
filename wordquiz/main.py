from __future__ import annotations
import logging
from typing import Any, Optional

import socketio
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from .config import Settings, get_settings
from .managers.game import QuizManager, build_manager
from .routers.dictionary import router as dictionary_router
from .schemas import WordInput

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


settings = get_settings()
setup_logging(settings)

# Socket.IO server (ASGI)
sio = socketio.AsyncServer(
    async_mode='asgi',
    cors_allowed_origins='*' if settings.origins == ['*'] else settings.origins,
)
app = FastAPI(title="Arabic Word Quiz", version="0.1.0")

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# CORS for REST
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

app.state.quiz = build_manager(settings)
app.include_router(dictionary_router)


def _quiz() -> QuizManager:
    return app.state.quiz


def _parse_word(payload: Any) -> Optional[str]:
    # clients may send the bare string or {"word": ...}
    if isinstance(payload, str):
        return payload
    try:
        return WordInput.model_validate(payload).word
    except ValidationError as e:
        logger.warning("Ignoring malformed word payload %r: %s", payload, e)
        return None


@app.get('/health')
async def health():
    return {'status': 'ok'}


# Socket.IO Events
@sio.event
async def connect(sid, environ, auth=None):
    quiz = _quiz()
    quiz.open(sid)
    logger.info("Player connected: %s", sid)
    await sio.emit('quiz:state', quiz.state(sid).model_dump(by_alias=True), to=sid)


@sio.event
async def disconnect(sid):
    _quiz().close(sid)
    logger.info("Player disconnected: %s", sid)


@sio.on('ping')
async def on_ping(sid):
    await sio.emit('pong', to=sid)


@sio.on('word:check')
async def word_check(sid, payload):
    word = _parse_word(payload)
    if word is None:
        return
    result = _quiz().get(sid).check_word(word)
    await sio.emit('word:result', result.model_dump(mode='json', by_alias=True), to=sid)


@sio.on('teacher:addWord')
async def teacher_add_word(sid, payload):
    word = _parse_word(payload)
    if word is None:
        return
    quiz = _quiz()
    result = quiz.teacher.add_word(word)
    await sio.emit('teacher:result', result.payload(), to=sid)
    if result.ok:
        await sio.emit('dictionary:updated', {'wordCount': len(quiz.dictionary)})


# Export ASGI app for uvicorn
application = asgi_app


def run() -> None:
    uvicorn.run(application, host=settings.host, port=settings.port)

# For local running: uvicorn wordquiz.main:application --reload --host 0.0.0.0 --port 8000
