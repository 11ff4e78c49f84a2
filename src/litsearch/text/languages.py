"""Language names accepted by the stopword provider, stemmer and query writer."""

from typing import Dict, Type

from ..core.errors import ConfigurationError

# Languages with both an NLTK stopword list and a Snowball stemmer
ISO_CODES: Dict[str, str] = {
    "ar": "arabic",
    "da": "danish",
    "nl": "dutch",
    "en": "english",
    "fi": "finnish",
    "fr": "french",
    "de": "german",
    "hu": "hungarian",
    "it": "italian",
    "no": "norwegian",
    "pt": "portuguese",
    "ro": "romanian",
    "ru": "russian",
    "es": "spanish",
    "sv": "swedish",
}

SUPPORTED_LANGUAGES = frozenset(ISO_CODES.values())

# Only English terms are truncated to stems in rendered queries
STEMMED_LANGUAGES = frozenset({"english"})


def resolve_language(language: str, error: Type[ConfigurationError] = ConfigurationError) -> str:
    """Return the canonical language name for a name or ISO-639-1 code."""
    key = (language or "").strip().lower()
    key = ISO_CODES.get(key, key)
    if key not in SUPPORTED_LANGUAGES:
        supported = ", ".join(sorted(SUPPORTED_LANGUAGES))
        raise error(f"Unsupported language {language!r}; expected one of: {supported}")
    return key
