import pytest

from tweetnorm.core import run_pipeline
from tweetnorm.errors import ConstructionError
from tweetnorm.models import PipelineRequest
from tweetnorm.normalizers import (
    EMOTICONS,
    PUNCTUATION,
    ChainNormalizer,
    LowerCaseNormalizer,
    StringReplacementNormalizer,
    UnicodeRangeNormalizer,
    build_chain,
    url_normalizer,
)
from tweetnorm.tokenize import BIGRAM, NGramTokenizer

EXPECTED = "die bedcon ist die großartigste konferenz des jahres "


def _demo_chain() -> ChainNormalizer:
    return ChainNormalizer(
        LowerCaseNormalizer(),
        UnicodeRangeNormalizer.from_range(EMOTICONS, ""),
        url_normalizer(""),
        StringReplacementNormalizer(PUNCTUATION, ""),
    )


def test_end_to_end_tweet(tweet: str) -> None:
    normalized = _demo_chain().normalize(tweet)

    assert normalized == EXPECTED
    assert normalized == normalized.lower()
    assert "http" not in normalized
    assert "bedcon.org" not in normalized
    assert not any(literal in normalized for literal in PUNCTUATION)
    assert not any(EMOTICONS.start <= ord(char) <= EMOTICONS.end for char in normalized)

    ngrams = NGramTokenizer(BIGRAM, "character").tokenize(normalized)
    assert len(ngrams) == len(normalized) - 1
    assert ngrams[0] == "di"
    assert ngrams[-1] == "s "
    assert "oß" in ngrams


def test_end_to_end_with_emoticon(tweet: str) -> None:
    with_emoji = tweet.replace("Jahres.", "Jahres. 😁")

    assert _demo_chain().normalize(with_emoji) == "die bedcon ist die großartigste konferenz des jahres  "


def test_registry_chain_matches_explicit_chain(tweet: str) -> None:
    assert build_chain().normalize(tweet) == _demo_chain().normalize(tweet)


def test_normalize_is_deterministic_and_idempotent(tweet: str) -> None:
    chain = build_chain()
    once = chain.normalize(tweet)

    assert chain.normalize(tweet) == once
    assert chain.normalize(once) == once


def test_run_pipeline_defaults(tweet: str) -> None:
    response = run_pipeline(PipelineRequest(text=tweet))

    assert response.original == tweet
    assert response.normalized == EXPECTED
    assert response.metadata.normalizer_id == "chain(lowercase,emoticons,urls,punctuation)"
    assert response.metadata.normalizers == ["lowercase", "emoticons", "urls", "punctuation"]
    assert response.metadata.window_size == 2
    assert response.metadata.level == "character"
    assert response.metadata.ngram_count == len(EXPECTED) - 1
    assert response.ngrams[:3] == ["di", "ie", "e "]


def test_run_pipeline_word_level() -> None:
    response = run_pipeline(
        PipelineRequest(
            text="Hello #World http://example.org",
            normalizers=["lowercase", "urls", "hashtags"],
            window_size=2,
            level="word",
        )
    )

    assert response.normalized == "hello world "
    assert response.ngrams == ["hello world", "world "]
    assert response.metadata.ngram_count == 2


def test_run_pipeline_without_normalizers() -> None:
    response = run_pipeline(PipelineRequest(text="A B", normalizers=[], window_size=3))

    assert response.normalized == "A B"
    assert response.ngrams == ["A B"]
    assert response.metadata.normalizer_id == "chain()"


def test_run_pipeline_unknown_normalizer() -> None:
    with pytest.raises(ConstructionError):
        run_pipeline(PipelineRequest(text="x", normalizers=["stemmer"]))


def test_request_rejects_invalid_window() -> None:
    with pytest.raises(ValueError):
        PipelineRequest(text="x", window_size=0)
