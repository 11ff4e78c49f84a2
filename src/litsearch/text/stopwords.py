"""Stopword lookup backed by the NLTK stopword corpus."""

from functools import lru_cache
from typing import FrozenSet, Iterable, Optional

from nltk.corpus import stopwords as nltk_stopwords

from ..core.errors import ConfigurationError
from ..utils.logging import get_logger
from .languages import resolve_language

logger = get_logger(__name__)


@lru_cache(maxsize=None)
def _load(language: str) -> FrozenSet[str]:
    try:
        words = nltk_stopwords.words(language)
    except LookupError as exc:
        raise ConfigurationError(
            "NLTK stopword corpus is not installed; run "
            "`python -m nltk.downloader stopwords` or pass stopwords explicitly"
        ) from exc
    logger.debug(f"Loaded {len(words)} {language} stopwords")
    return frozenset(w.lower() for w in words)


def get_stopwords(language: str = "english", extra: Optional[Iterable[str]] = None) -> FrozenSet[str]:
    """Return the stopword set for a language, plus any custom stopwords."""
    words = _load(resolve_language(language))
    if extra:
        words = words | frozenset(w.strip().lower() for w in extra if w.strip())
    return words


def resolve_stopwords(language: str, stopwords: Optional[Iterable[str]] = None) -> FrozenSet[str]:
    """Use caller-supplied stopwords when given, otherwise look them up.

    The language is validated either way so an unsupported selector always
    fails the same way.
    """
    language = resolve_language(language)
    if stopwords is not None:
        return frozenset(w.strip().lower() for w in stopwords if w.strip())
    return get_stopwords(language)
