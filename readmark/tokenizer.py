# -*- coding: utf-8 -*-
"""Paragraph -> sentence -> word tree with character offsets.

The tree covers every character of the input: whitespace and punctuation
survive as literal nodes so rendering never drops or alters text.
"""

import re
from typing import Iterator, List, Tuple

from nltk.tokenize.punkt import PunktSentenceTokenizer

from readmark.errors import TokenizationError
from readmark.nodes import (
    PARAGRAPH,
    PUNCTUATION,
    ROOT,
    SENTENCE,
    TEXT,
    WHITESPACE,
    WORD,
    TextNode,
    literal,
)

# whitespace | number not running into a word | word with inner hyphen/apostrophe | any other single char
TOKEN_REGEX = re.compile(
    r"""
    (?:\s+)
    |(?:\d+(?:[\.,]\d+)*(?!\w))
    |(?:\w+(?:[-']\w+)*)
    |(?:.)
    """,
    re.VERBOSE | re.UNICODE,
)

WORD_LIKE_RE = re.compile(r"\w+(?:[-']\w+)*\Z", re.UNICODE)
NUMBER_RE = re.compile(r"\d+(?:[\.,]\d+)*\Z", re.UNICODE)

# a blank line, with any surrounding whitespace
PARAGRAPH_BREAK_RE = re.compile(r"\s*\n\s*\n\s*")

# Untrained parameters: no abbreviation list, no model download.
_sentence_splitter = PunktSentenceTokenizer()


def _classify_segment(seg: str) -> str:
    if seg.isspace():
        return WHITESPACE
    if NUMBER_RE.fullmatch(seg) or WORD_LIKE_RE.fullmatch(seg):
        return WORD
    return PUNCTUATION


def _trim(text: str, start: int, end: int) -> Tuple[int, int]:
    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    return start, end


def _with_gaps(text: str, spans: List[Tuple[int, int]], start: int, end: int) -> Iterator[Tuple[int, int, bool]]:
    """Yield ``(s, e, is_span)`` covering ``[start, end)`` without holes."""
    cursor = start
    for s, e in spans:
        if s > cursor:
            yield cursor, s, False
        yield s, e, True
        cursor = e
    if cursor < end:
        yield cursor, end, False


def tokenize_sentence(text: str, start: int, end: int) -> TextNode:
    children: List[TextNode] = []
    for m in TOKEN_REGEX.finditer(text, start, end):
        kind = _classify_segment(m.group())
        if kind == WORD:
            children.append(
                TextNode(WORD, m.start(), m.end(), [literal(TEXT, text, m.start(), m.end())])
            )
        else:
            children.append(literal(kind, text, m.start(), m.end()))
    return TextNode(SENTENCE, start, end, children)


def _sentence_spans(text: str, start: int, end: int) -> List[Tuple[int, int]]:
    spans = []
    for s, e in _sentence_splitter.span_tokenize(text[start:end]):
        s, e = _trim(text, start + s, start + e)
        if e > s:
            spans.append((s, e))
    return spans


def tokenize_paragraph(text: str, start: int, end: int) -> TextNode:
    children: List[TextNode] = []
    for s, e, is_sentence in _with_gaps(text, _sentence_spans(text, start, end), start, end):
        if is_sentence or not text[s:e].isspace():
            children.append(tokenize_sentence(text, s, e))
        else:
            children.append(literal(WHITESPACE, text, s, e))
    return TextNode(PARAGRAPH, start, end, children)


def _paragraph_spans(text: str) -> List[Tuple[int, int]]:
    spans = []
    last = 0
    for m in PARAGRAPH_BREAK_RE.finditer(text):
        spans.append(_trim(text, last, m.start()))
        last = m.end()
    spans.append(_trim(text, last, len(text)))
    return [(s, e) for s, e in spans if e > s]


def tokenize(text: str) -> TextNode:
    """Build the document tree for ``text``; offsets index into ``text``."""
    if not isinstance(text, str):
        raise TokenizationError(f"expected str, got {type(text).__name__}")
    children: List[TextNode] = []
    for s, e, is_paragraph in _with_gaps(text, _paragraph_spans(text), 0, len(text)):
        if is_paragraph:
            children.append(tokenize_paragraph(text, s, e))
        else:
            children.append(literal(WHITESPACE, text, s, e))
    return TextNode(ROOT, 0, len(text), children)
