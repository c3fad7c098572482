# -*- coding: utf-8 -*-
"""Offset-carrying text tree produced by the tokenizer."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Union

ROOT = "RootNode"
PARAGRAPH = "ParagraphNode"
SENTENCE = "SentenceNode"
WORD = "WordNode"
PHRASE = "PhraseNode"

# literal kinds
TEXT = "TextNode"
WHITESPACE = "WhiteSpaceNode"
PUNCTUATION = "PunctuationNode"

LITERAL_KINDS = frozenset({TEXT, WHITESPACE, PUNCTUATION})


@dataclass
class TextNode:
    kind: str
    start: int
    end: int
    children: List["TextNode"] = field(default_factory=list)
    value: Optional[str] = None  # literals only

    @property
    def is_literal(self) -> bool:
        return self.value is not None

    def walk(self) -> Iterator["TextNode"]:
        """Pre-order traversal, self included."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find_all(self, kind: str) -> Iterator["TextNode"]:
        return (node for node in self.walk() if node.kind == kind)


def literal(kind: str, text: str, start: int, end: int) -> TextNode:
    return TextNode(kind=kind, start=start, end=end, value=text[start:end])


def to_string(node: Union[TextNode, Iterable[TextNode]]) -> str:
    """Concatenate the literal content below ``node`` (or a list of siblings)."""
    if isinstance(node, TextNode):
        if node.is_literal:
            return node.value
        return "".join(to_string(child) for child in node.children)
    return "".join(to_string(child) for child in node)
