"""Pytest configuration and fixtures."""

import os
from typing import Any

import pytest

from esanalysis import (
    Analysis,
    AnalyzerDefinition,
    Language,
    LowercaseFilter,
    Ngram,
    NgramTokenizer,
    Shingle,
    ShingleFilter,
    SnowballFilter,
    TokenChar,
)


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Isolate environment variables and config lookup for each test."""
    original_env = os.environ.copy()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("ESANALYSIS_INDENT", raising=False)
    monkeypatch.delenv("ESANALYSIS_LOG_LEVEL", raising=False)

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def settings_json() -> dict[str, Any]:
    """Analysis settings as an index-settings API would return them.

    Numbers and booleans are partly sent as strings, as search engines do
    when echoing settings back.
    """
    return {
        "analyzer": {
            "autocomplete": {
                "tokenizer": "autocomplete_ngram",
                "filter": ["lowercase_filter", "stop_filter"],
            },
            "stemmed": {
                "tokenizer": "standard",
                "filter": ["lowercase", "english_stemmer"],
            },
            "phrases": {"filter": ["shingles"]},
        },
        "tokenizer": {
            "autocomplete_ngram": {
                "type": "ngram",
                "min_gram": "2",
                "max_gram": "3",
                "token_chars": ["letter", "digit"],
            }
        },
        "filter": {
            "lowercase_filter": {"type": "lowercase"},
            "english_stemmer": {"type": "snowball", "language": "english"},
            "shingles": {
                "type": "shingle",
                "max_shingle_size": "3",
                "output_unigrams": "false",
            },
        },
    }


@pytest.fixture
def sample_analysis() -> Analysis:
    """The structured value corresponding to ``settings_json``."""
    return Analysis(
        analyzer={
            "autocomplete": AnalyzerDefinition(
                tokenizer="autocomplete_ngram",
                filter=("lowercase_filter", "stop_filter"),
            ),
            "stemmed": AnalyzerDefinition(
                tokenizer="standard",
                filter=("lowercase", "english_stemmer"),
            ),
            "phrases": AnalyzerDefinition(filter=("shingles",)),
        },
        tokenizer={
            "autocomplete_ngram": NgramTokenizer(
                ngram=Ngram(
                    min_gram=2,
                    max_gram=3,
                    token_chars=(TokenChar.LETTER, TokenChar.DIGIT),
                )
            )
        },
        token_filter={
            "lowercase_filter": LowercaseFilter(),
            "english_stemmer": SnowballFilter(language=Language.ENGLISH),
            "shingles": ShingleFilter(
                shingle=Shingle(max_size=3, output_unigrams=False)
            ),
        },
    )
