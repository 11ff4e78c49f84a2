"""Text normalization and tokenization utilities."""

import re
from typing import List

# Word tokens keep inner hyphens and apostrophes ("black-backed", "crohn's")
_TOKEN_RE = re.compile(r"\w+(?:['\-]\w+)*")
# Punctuation that ends a clause; phrases and n-grams never span it
_FRAGMENT_RE = re.compile(r"[.,;:!?()\[\]{}\"“”|/\\]+|\s[-–—]+\s")


def normalize_term(term: str) -> str:
    """Lower-case a term, collapse whitespace and strip surrounding punctuation."""
    if not term:
        return ""
    term = " ".join(term.lower().split())
    return term.strip(" \t\n.,;:!?\"'()[]{}")


def tokenize(text: str) -> List[str]:
    """Split text into lower-cased word tokens."""
    if not text:
        return []
    return _TOKEN_RE.findall(text.lower())


def split_fragments(text: str) -> List[List[str]]:
    """Split text at clause punctuation and tokenize each fragment."""
    if not text:
        return []
    fragments = []
    for chunk in _FRAGMENT_RE.split(text):
        tokens = tokenize(chunk)
        if tokens:
            fragments.append(tokens)
    return fragments


def normalize_title(title: str) -> str:
    """Normalize a title for comparison."""
    if not title:
        return ""
    title = title.lower()
    title = re.sub(r'[^\w\s]', '', title)
    title = ' '.join(title.split())
    return title


def has_letter(token: str) -> bool:
    return any(ch.isalpha() for ch in token)
