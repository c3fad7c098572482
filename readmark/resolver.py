# -*- coding: utf-8 -*-
"""Vocabulary lookup contract, its records, and an in-memory store."""

import abc
import json
import re
from enum import IntEnum
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, Field


class Status(IntEnum):
    IGNORE = 0
    LEARNING = 1
    FAMILIAR = 2
    KNOWN = 3
    LEARNED = 4


# index = stored status integer
STATUS_NAMES = ["ignore", "learning", "familiar", "known", "learned"]
NEW = "new"


def status_name(status: Optional[int], default: str = NEW) -> str:
    if status is None or not 0 <= status < len(STATUS_NAMES):
        return default
    return STATUS_NAMES[status]


class WordRecord(BaseModel):
    text: str
    status: int


class PhraseSpec(BaseModel):
    offset: int = Field(..., ge=0, description="Start offset in the lowercased article")
    text: str
    status: int


class StoredWords(BaseModel):
    words: List[WordRecord] = Field(default_factory=list)
    phrases: List[PhraseSpec] = Field(default_factory=list)


class ExpressionRecord(BaseModel):
    text: str
    status: int
    meaning: str = ""


class VocabularyResolver(abc.ABC):
    """What the pipeline needs from a vocabulary store.

    Implementations may fail with any exception; the pipeline turns it into
    a ``ResolverError``.
    """

    @abc.abstractmethod
    async def lookup_by_article(self, article: str) -> StoredWords:
        """Every known phrase occurring in ``article``, by ascending offset."""

    @abc.abstractmethod
    async def lookup_by_words(self, words: Iterable[str]) -> StoredWords:
        """Records for those of ``words`` that are stored."""

    async def lookup(self, article: str, words: Iterable[str]) -> StoredWords:
        by_article = await self.lookup_by_article(article) if article else StoredWords()
        by_words = await self.lookup_by_words(words)
        return StoredWords(words=by_words.words, phrases=by_article.phrases)

    @abc.abstractmethod
    async def get_expressions(self, texts: Iterable[str]) -> List[ExpressionRecord]:
        """Full records (with meaning) for the stored ``texts``."""


class InMemoryVocabulary(VocabularyResolver):
    """Dict-backed store; multi-word entries are phrases, the rest words."""

    def __init__(self, expressions: Iterable[ExpressionRecord] = ()):
        self._expressions: Dict[str, ExpressionRecord] = {}
        for expr in expressions:
            self.add(expr)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "InMemoryVocabulary":
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(ExpressionRecord(**item) for item in data.get("expressions", []))

    def add(self, expr: ExpressionRecord) -> None:
        key = expr.text.lower()
        self._expressions[key] = expr.model_copy(update={"text": key})

    def __len__(self) -> int:
        return len(self._expressions)

    @property
    def phrases(self) -> List[ExpressionRecord]:
        return [e for e in self._expressions.values() if " " in e.text]

    async def lookup_by_article(self, article: str) -> StoredWords:
        found: List[PhraseSpec] = []
        for expr in self.phrases:
            pattern = re.compile(r"(?<!\w)" + re.escape(expr.text) + r"(?!\w)")
            for m in pattern.finditer(article):
                found.append(PhraseSpec(offset=m.start(), text=expr.text, status=expr.status))
        found.sort(key=lambda p: p.offset)
        return StoredWords(phrases=_drop_overlaps(found))

    async def lookup_by_words(self, words: Iterable[str]) -> StoredWords:
        records = []
        for word in words:
            expr = self._expressions.get(word.lower())
            if expr is not None:
                records.append(WordRecord(text=expr.text, status=expr.status))
        return StoredWords(words=records)

    async def get_expressions(self, texts: Iterable[str]) -> List[ExpressionRecord]:
        return [self._expressions[t] for t in texts if t in self._expressions]


def _drop_overlaps(phrases: List[PhraseSpec]) -> List[PhraseSpec]:
    # earliest start wins, longer phrase first on ties
    phrases = sorted(phrases, key=lambda p: (p.offset, -len(p.text)))
    kept: List[PhraseSpec] = []
    end = -1
    for p in phrases:
        if p.offset >= end:
            kept.append(p)
            end = p.offset + len(p.text)
    return kept
