# -*- coding: utf-8 -*-
"""Fold runs of sentence children into phrase nodes by offset."""

import logging
from typing import List, Optional, Sequence

from readmark.nodes import PARAGRAPH, PHRASE, ROOT, SENTENCE, TextNode
from readmark.resolver import PhraseSpec

logger = logging.getLogger(__name__)


def _index_where(children: Sequence[TextNode], attr: str, offset: int) -> Optional[int]:
    for i, child in enumerate(children):
        if getattr(child, attr) == offset:
            return i
    return None


def merge_sentence(sentence: TextNode, phrases: Sequence[PhraseSpec], cursor: int) -> int:
    """Wrap every phrase that starts inside ``sentence``; return the new cursor.

    Phrases must be sorted by offset. A phrase whose start or end does not
    fall on a child boundary is skipped.
    """
    if cursor >= len(phrases) or sentence.end <= phrases[cursor].offset:
        return cursor

    children: List[TextNode] = list(sentence.children)
    while cursor < len(phrases) and phrases[cursor].offset < sentence.end:
        phrase = phrases[cursor]
        cursor += 1
        p = _index_where(children, "start", phrase.offset)
        if p is None:
            logger.debug("phrase %r at %d: no token starts there", phrase.text, phrase.offset)
            continue
        q = _index_where(children, "end", phrase.offset + len(phrase.text))
        if q is None:
            logger.debug("phrase %r at %d: no token ends there", phrase.text, phrase.offset)
            continue
        if q < p:
            logger.debug("phrase %r at %d: ends before it starts", phrase.text, phrase.offset)
            continue
        run = children[p:q + 1]
        node = TextNode(PHRASE, run[0].start, run[-1].end, run)
        children = children[:p] + [node] + children[q + 1:]

    sentence.children = children
    return cursor


def merge_phrases(root: TextNode, phrases: Sequence[PhraseSpec], cursor: int = 0) -> int:
    """Apply ``phrases`` to all sentences of ``root`` in document order."""
    for node in root.children:
        if cursor >= len(phrases):
            break
        if node.kind == SENTENCE:
            cursor = merge_sentence(node, phrases, cursor)
        elif node.kind in (PARAGRAPH, ROOT):
            cursor = merge_phrases(node, phrases, cursor)
    return cursor
