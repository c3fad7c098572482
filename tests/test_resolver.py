import json

import pytest

from readmark.resolver import (
    ExpressionRecord,
    InMemoryVocabulary,
    Status,
    StoredWords,
    VocabularyResolver,
    status_name,
)


def test_status_names():
    assert [status_name(s) for s in Status] == ["ignore", "learning", "familiar", "known", "learned"]
    assert status_name(None) == "new"
    assert status_name(-1, "ignore") == "ignore"


async def test_lookup_by_article_finds_every_occurrence_in_order():
    vocab = InMemoryVocabulary([
        ExpressionRecord(text="Red apples", status=1),
        ExpressionRecord(text="green pears", status=3),
    ])
    found = await vocab.lookup_by_article("green pears and red apples, more red apples")
    assert [(p.offset, p.text, p.status) for p in found.phrases] == [
        (0, "green pears", 3),
        (16, "red apples", 1),
        (33, "red apples", 1),
    ]


async def test_lookup_by_article_requires_word_boundaries():
    vocab = InMemoryVocabulary([ExpressionRecord(text="red apples", status=1)])
    found = await vocab.lookup_by_article("shred applesauce")
    assert found.phrases == []


async def test_overlapping_phrases_keep_the_earliest():
    vocab = InMemoryVocabulary([
        ExpressionRecord(text="look up", status=1),
        ExpressionRecord(text="up to date", status=2),
    ])
    found = await vocab.lookup_by_article("look up to date")
    assert [p.text for p in found.phrases] == ["look up"]


async def test_lookup_by_words_returns_stored_entries_only():
    vocab = InMemoryVocabulary([
        ExpressionRecord(text="Apple", status=2),
        ExpressionRecord(text="red apples", status=1),
    ])
    found = await vocab.lookup_by_words(["apple", "pear", "red apples"])
    assert [(w.text, w.status) for w in found.words] == [("apple", 2), ("red apples", 1)]


def test_from_json(tmp_path):
    path = tmp_path / "vocab.json"
    path.write_text(json.dumps({"expressions": [
        {"text": "take off", "status": 1, "meaning": "leave the ground"},
        {"text": "plane", "status": 3},
    ]}), encoding="utf-8")
    vocab = InMemoryVocabulary.from_json(path)
    assert len(vocab) == 2
    assert [p.text for p in vocab.phrases] == ["take off"]


def test_resolver_must_provide_expressions():
    class WordsOnly(VocabularyResolver):
        async def lookup_by_article(self, article):
            return StoredWords()

        async def lookup_by_words(self, words):
            return StoredWords()

    with pytest.raises(TypeError):
        WordsOnly()
