"""Corpus loading and plain-text term files."""

from .corpus import load_corpus, corpus_texts, keyword_fields, read_lines, write_lines  # noqa: F401
