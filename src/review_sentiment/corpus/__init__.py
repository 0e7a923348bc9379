"""
Corpus loading and sampling.

- loader: fetch + parse the TSV review file (pandas)
- sampler: uniform random pick of one Review
"""

from review_sentiment.corpus.loader import fetch_corpus_text, load_corpus, parse_corpus
from review_sentiment.corpus.sampler import sample

__all__ = [
    "fetch_corpus_text",
    "load_corpus",
    "parse_corpus",
    "sample",
]
