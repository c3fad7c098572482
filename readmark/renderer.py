# -*- coding: utf-8 -*-
"""Render a (phrase-merged) tree as status-tagged HTML."""

import html
import re
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from readmark.nodes import PARAGRAPH, PHRASE, SENTENCE, WORD, TextNode, to_string
from readmark.resolver import NEW, PhraseSpec, WordRecord, status_name

# digits or CJK ideographs: never a vocabulary word
OTHER_RE = re.compile(r"[0-9\u4e00-\u9fa5]")


def is_other(text: str) -> bool:
    return OTHER_RE.search(text) is not None


def escape(text: str) -> str:
    return html.escape(text, quote=False)


class StatusRenderer:
    def __init__(self, words: Mapping[str, WordRecord], phrases: Sequence[PhraseSpec] = ()):
        self.words = words
        self.phrases = phrases

    @classmethod
    def from_records(cls, words: Iterable[WordRecord], phrases: Sequence[PhraseSpec] = ()) -> "StatusRenderer":
        return cls({w.text: w for w in words}, phrases)

    def word_status(self, text: str) -> str:
        record = self.words.get(text.lower())
        return status_name(record.status) if record is not None else NEW

    def phrase_status(self, text: str) -> str:
        key = text.lower()
        match: Optional[PhraseSpec] = next((p for p in self.phrases if p.text == key), None)
        return status_name(match.status, "ignore") if match is not None else "ignore"

    def render(self, node: Union[TextNode, List[TextNode]]) -> str:
        if isinstance(node, list):
            return "".join(self.render(child) for child in node)
        if node.is_literal:
            return escape(node.value)

        if node.kind == WORD:
            text = to_string(node)
            if is_other(text):
                return f'<span class="other">{escape(text)}</span>'
            return f'<span class="word {self.word_status(text)}">{escape(text)}</span>'
        if node.kind == PHRASE:
            inner = self.render(node.children)
            return f'<span class="phrase {self.phrase_status(to_string(node))}">{inner}</span>'
        if node.kind == SENTENCE:
            return f'<span class="stns">{self.render(node.children)}</span>'
        if node.kind == PARAGRAPH:
            if not node.children:
                return ""
            return f"<p>{self.render(node.children)}</p>"
        # root, or any container kind we do not know
        return f'<div class="article">{self.render(node.children)}</div>'


def render(node: Union[TextNode, List[TextNode]], words: Optional[Mapping[str, WordRecord]] = None,
           phrases: Sequence[PhraseSpec] = ()) -> str:
    return StatusRenderer(words or {}, phrases).render(node)
