from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import CORS_ALLOW_ORIGINS, LOG_LEVEL, Settings, get_settings
from .errors import ExtractionError, MethodNotAllowed, TimetableError, UnknownError
from .extract import extract_json
from .llm_client import ChatCompletionClient
from .parser import normalize_timetable
from .prompts import build_prompts
from .schema import ErrorResponse, TimetableResponse
from .validate import decode_body, validate_request

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
log = logging.getLogger(__name__)

app = FastAPI(title="Timetable Generator (Backend)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TimetableError)
async def _timetable_error(request: Request, exc: TimetableError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # keep router errors (404/405) in the same {"error": ...} shape
    if exc.status_code == 405:
        message = MethodNotAllowed().message
    else:
        message = str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)


def _generate(settings: Settings, body) -> TimetableResponse:
    req = validate_request(body)
    system_prompt, user_prompt = build_prompts(req.focus, req.duration, req.constraints)

    content = ChatCompletionClient(settings).complete(system_prompt, user_prompt)
    parsed = extract_json(content)
    timetable = normalize_timetable(parsed, req.slots)
    if timetable is None:
        log.warning("[LLM] could not extract a timetable from reply: %.200r", content)
        raise ExtractionError()
    return TimetableResponse(timetable=timetable)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post(
    "/api/generate-timetable",
    response_model=TimetableResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
@app.post("/generate-timetable", response_model=TimetableResponse, include_in_schema=False)
async def generate_timetable(request: Request, settings: Settings = Depends(get_settings)):
    body = decode_body(await request.body())
    try:
        return await run_in_threadpool(_generate, settings, body)
    except TimetableError:
        raise
    except Exception as exc:
        log.exception("unexpected failure while generating timetable")
        raise UnknownError(str(exc) or None) from exc
