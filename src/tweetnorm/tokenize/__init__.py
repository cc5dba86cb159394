"""N-gram tokenization."""

from tweetnorm.tokenize.ngram import BIGRAM, TRIGRAM, UNIGRAM, NGramTokenizer, TokenLevel

__all__ = ["BIGRAM", "TRIGRAM", "UNIGRAM", "NGramTokenizer", "TokenLevel"]
