# -*- coding: utf-8 -*-
"""Vocabulary-status markup for reading practice."""

from readmark.errors import AnnotationError, ResolverError, TokenizationError
from readmark.nodes import TextNode, to_string
from readmark.pipeline import Annotator, normalize
from readmark.resolver import (
    ExpressionRecord,
    InMemoryVocabulary,
    PhraseSpec,
    Status,
    StoredWords,
    VocabularyResolver,
    WordRecord,
)

__all__ = [
    "AnnotationError",
    "Annotator",
    "ExpressionRecord",
    "InMemoryVocabulary",
    "PhraseSpec",
    "ResolverError",
    "Status",
    "StoredWords",
    "TextNode",
    "TokenizationError",
    "VocabularyResolver",
    "WordRecord",
    "normalize",
    "to_string",
]
