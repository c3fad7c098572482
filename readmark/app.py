# -*- coding: utf-8 -*-
"""HTTP surface: POST an article, get it back tagged with vocabulary status.

Run with ``uvicorn readmark.app:app --reload``.
"""

import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import List

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from readmark.errors import AnnotationError, ResolverError
from readmark.pipeline import Annotator
from readmark.resolver import ExpressionRecord, InMemoryVocabulary
from readmark.settings import settings
from readmark.style_config import STYLE_BLOCK

logger = logging.getLogger(__name__)


class AnalyzeRequest(BaseModel):
    text: str = Field(..., description="Raw article text to annotate")


class AnalyzeResponse(BaseModel):
    html: str


class CountResponse(BaseModel):
    unknown: int
    learning: int
    ignored: int


class ExpressionsResponse(BaseModel):
    expressions: List[ExpressionRecord]


@lru_cache(maxsize=1)
def get_annotator() -> Annotator:
    if settings.vocabulary_path:
        vocabulary = InMemoryVocabulary.from_json(settings.vocabulary_path)
        logger.info("loaded %d expressions from %s", len(vocabulary), settings.vocabulary_path)
    else:
        vocabulary = InMemoryVocabulary()
    return Annotator(vocabulary)


@asynccontextmanager
async def lifespan(_: FastAPI):
    logging.basicConfig(level=settings.log_level)
    yield


app = FastAPI(title="readmark", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _require_text(req: AnalyzeRequest) -> str:
    if req.text is None or not req.text.strip():
        raise HTTPException(status_code=400, detail="Text is required")
    return req.text


def _failure(exc: AnnotationError) -> HTTPException:
    if isinstance(exc, ResolverError):
        return HTTPException(status_code=502, detail=f"Vocabulary lookup failed: {exc}")
    return HTTPException(status_code=500, detail=f"Annotation failed: {exc}")


@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze(req: AnalyzeRequest, annotator: Annotator = Depends(get_annotator)):
    text = _require_text(req)
    try:
        fragment = await annotator.parse(text)
    except AnnotationError as exc:
        raise _failure(exc) from exc
    if settings.include_style:
        fragment = STYLE_BLOCK + fragment
    return AnalyzeResponse(html=fragment)


@app.post("/count", response_model=CountResponse)
async def count(req: AnalyzeRequest, annotator: Annotator = Depends(get_annotator)):
    text = _require_text(req)
    try:
        unknown, learning, ignored = await annotator.count_words(text)
    except AnnotationError as exc:
        raise _failure(exc) from exc
    return CountResponse(unknown=unknown, learning=learning, ignored=ignored)


@app.post("/expressions", response_model=ExpressionsResponse)
async def expressions(req: AnalyzeRequest, annotator: Annotator = Depends(get_annotator)):
    text = _require_text(req)
    try:
        found = await annotator.get_words_phrases(text)
    except AnnotationError as exc:
        raise _failure(exc) from exc
    return ExpressionsResponse(expressions=found)


@app.get("/health")
async def health():
    return {"status": "ok"}
