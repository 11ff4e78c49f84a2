"""Stemming backed by NLTK's Snowball stemmer."""

from functools import lru_cache

from nltk.stem.snowball import SnowballStemmer

from ..core.errors import UnsupportedLanguageError
from .languages import STEMMED_LANGUAGES, resolve_language


@lru_cache(maxsize=None)
def _stemmer(language: str) -> SnowballStemmer:
    return SnowballStemmer(language)


def should_stem(language: str) -> bool:
    """Whether rendered queries truncate terms for this language."""
    return resolve_language(language, UnsupportedLanguageError) in STEMMED_LANGUAGES


def stem(token: str, language: str = "english") -> str:
    """Return the stem of a single token."""
    language = resolve_language(language, UnsupportedLanguageError)
    if language not in STEMMED_LANGUAGES:
        raise UnsupportedLanguageError(f"Stemming is only available for English, not {language!r}")
    return _stemmer(language).stem(token.lower())
