# -*- coding: utf-8 -*-


class AnnotationError(Exception):
    """Base class for failures surfaced by the annotation pipeline."""


class TokenizationError(AnnotationError):
    """The tokenizer rejected its input."""


class ResolverError(AnnotationError):
    """A vocabulary lookup failed; the current call is aborted."""
