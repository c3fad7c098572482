import asyncio
from typing import Dict, Iterable, List

import pytest

from readmark.nodes import PARAGRAPH, ROOT, SENTENCE, TEXT, WHITESPACE, WORD, TextNode
from readmark.resolver import (
    ExpressionRecord,
    InMemoryVocabulary,
    PhraseSpec,
    Status,
    StoredWords,
    VocabularyResolver,
    WordRecord,
)

ARTICLE = "I like apples. I eat bananas."


class FakeResolver(VocabularyResolver):
    def __init__(self, phrases: List[PhraseSpec] = (), words: Dict[str, int] = None):
        self.phrases = list(phrases)
        self.words = words or {}
        self.articles: List[str] = []
        self.word_lookups: List[List[str]] = []

    async def lookup_by_article(self, article: str) -> StoredWords:
        await asyncio.sleep(0)
        self.articles.append(article)
        return StoredWords(phrases=self.phrases)

    async def lookup_by_words(self, words: Iterable[str]) -> StoredWords:
        words = list(words)
        await asyncio.sleep(0)
        self.word_lookups.append(words)
        return StoredWords(
            words=[WordRecord(text=w, status=self.words[w]) for w in words if w in self.words]
        )

    async def get_expressions(self, texts: Iterable[str]) -> List[ExpressionRecord]:
        known = {p.text: p.status for p in self.phrases}
        known.update(self.words)
        return [ExpressionRecord(text=t, status=known[t]) for t in texts if t in known]


class BrokenResolver(VocabularyResolver):
    async def lookup_by_article(self, article: str) -> StoredWords:
        raise ConnectionError("store unreachable")

    async def lookup_by_words(self, words: Iterable[str]) -> StoredWords:
        raise ConnectionError("store unreachable")

    async def get_expressions(self, texts: Iterable[str]) -> List[ExpressionRecord]:
        raise ConnectionError("store unreachable")


@pytest.fixture
def article_resolver():
    return FakeResolver(
        phrases=[PhraseSpec(offset=2, text="like apples", status=2)],
        words={"i": Status.LEARNED, "eat": Status.FAMILIAR, "bananas": Status.IGNORE},
    )


@pytest.fixture
def vocabulary():
    return InMemoryVocabulary([
        ExpressionRecord(text="like apples", status=2, meaning="enjoy the fruit"),
        ExpressionRecord(text="I", status=4),
        ExpressionRecord(text="eat", status=2, meaning="consume"),
        ExpressionRecord(text="bananas", status=0),
    ])


def word(text: str, start: int) -> TextNode:
    end = start + len(text)
    return TextNode(WORD, start, end, [TextNode(TEXT, start, end, value=text)])


def space(start: int) -> TextNode:
    return TextNode(WHITESPACE, start, start + 1, value=" ")


def sentence(*children: TextNode) -> TextNode:
    return TextNode(SENTENCE, children[0].start, children[-1].end, list(children))


def document(*sentences: TextNode) -> TextNode:
    paragraph = TextNode(PARAGRAPH, sentences[0].start, sentences[-1].end, list(sentences))
    return TextNode(ROOT, paragraph.start, paragraph.end, [paragraph])
