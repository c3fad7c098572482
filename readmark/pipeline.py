# -*- coding: utf-8 -*-
"""tokenize -> merge phrases -> resolve vocabulary -> render."""

import logging
import re
from typing import Awaitable, List, Set, Tuple, TypeVar

from readmark.errors import AnnotationError, ResolverError, TokenizationError
from readmark.merger import merge_phrases
from readmark.nodes import WORD, TextNode, to_string
from readmark.renderer import StatusRenderer, is_other
from readmark.resolver import ExpressionRecord, VocabularyResolver
from readmark.tokenizer import tokenize

logger = logging.getLogger(__name__)

T = TypeVar("T")

# lines holding nothing but inline whitespace (incl. NBSP)
BLANKISH_LINE_RE = re.compile(r"^[ \t\r\f\v\u00a0]+$", re.MULTILINE)


def normalize(text: str) -> str:
    """Trim, and empty whitespace-only lines so blank lines split paragraphs."""
    if not isinstance(text, str):
        raise TokenizationError(f"expected str, got {type(text).__name__}")
    return BLANKISH_LINE_RE.sub("", text.strip())


def word_set(tree: TextNode, exclude_other: bool = False) -> Set[str]:
    words = set()
    for node in tree.find_all(WORD):
        text = to_string(node).lower()
        if exclude_other and is_other(text):
            continue
        words.add(text)
    return words


class Annotator:
    """Annotate articles against one vocabulary.

    All working state (phrase cursor, word map) lives in the call, so a
    single instance can serve concurrent calls.
    """

    def __init__(self, resolver: VocabularyResolver):
        self.resolver = resolver

    async def _resolve(self, call: Awaitable[T]) -> T:
        try:
            return await call
        except AnnotationError:
            raise
        except Exception as exc:
            raise ResolverError(f"vocabulary lookup failed: {exc}") from exc

    async def parse(self, data: str) -> str:
        text = normalize(data)
        logger.debug("parsing %d chars: %r", len(text), text[:200])
        html = await self.text_to_html(text)
        logger.debug("rendered %d chars", len(html))
        return html

    async def text_to_html(self, text: str) -> str:
        phrases = (await self._resolve(self.resolver.lookup_by_article(text.lower()))).phrases
        tree = tokenize(text)
        stored = await self._resolve(self.resolver.lookup_by_words(sorted(word_set(tree))))
        merge_phrases(tree, phrases)
        return StatusRenderer.from_records(stored.words, phrases).render(tree)

    async def count_words(self, text: str) -> Tuple[int, int, int]:
        """``(unknown, learning, ignored)`` over the distinct words of ``text``."""
        words = word_set(tokenize(text), exclude_other=True)
        stored = await self._resolve(self.resolver.lookup_by_words(sorted(words)))
        ignored = sum(1 for w in stored.words if w.status == 0)
        learning = len(stored.words) - ignored
        unknown = len(words) - len(stored.words)
        return unknown, learning, ignored

    async def get_words_phrases(self, text: str) -> List[ExpressionRecord]:
        words = word_set(tokenize(text))
        stored = await self._resolve(self.resolver.lookup(text.lower(), sorted(words)))
        payload = [p.text for p in stored.phrases if p.status > 0]
        payload += [w.text for w in stored.words if w.status > 0]
        return await self._resolve(self.resolver.get_expressions(list(dict.fromkeys(payload))))
