"""Boolean search string rendering.

Concept groups are OR-joined inside parentheses and the groups are AND-joined
in the order given. Each term is rendered with these rules:

- ``exactphrase`` wraps multi-word terms in double quotes. Single words are
  never quoted.
- With ``stemming`` (English only), a single word becomes its stem followed
  by ``*``. A phrase only has its last word stemmed, and only when the
  closure allows a trailing wildcard (``right`` or ``full``).
- ``closure`` places wildcards: ``left`` puts ``*`` before the first word,
  ``right`` after the last word, ``full`` both, ``none`` neither (a stemmed
  single word still ends in ``*``).

Other languages are rendered without stemming; their wildcards still follow
the closure.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Union

from ..core.errors import ConfigurationError, UnsupportedLanguageError
from ..core.models import Closure, QueryConfig, build_config, parse_option
from ..core.normalization import normalize_term
from ..text.languages import ISO_CODES, resolve_language
from ..text.stemming import should_stem, stem
from ..utils.logging import get_logger

logger = get_logger(__name__)

WILDCARD = "*"


def _group_terms(group: Iterable[str]) -> List[str]:
    # Sets carry no order of their own, so render them alphabetically
    if isinstance(group, (set, frozenset)):
        group = sorted(group)
    terms: Dict[str, None] = {}
    for term in group:
        key = normalize_term(term)
        if key:
            terms.setdefault(key, None)
    return list(terms)


def render_term(
    term: str,
    language: str = "english",
    stemming: bool = False,
    closure: Union[str, Closure] = Closure.NONE,
    exactphrase: bool = False,
) -> str:
    """Render one term for a Boolean query."""
    closure = parse_option(Closure, closure, "closure")
    words = term.split()
    if not words:
        return ""
    stem_words = stemming and should_stem(language)
    left = closure in (Closure.LEFT, Closure.FULL)
    right = closure in (Closure.RIGHT, Closure.FULL)

    if len(words) == 1:
        word = words[0]
        if stem_words:
            word = stem(word, language)
            right = True
        return f"{WILDCARD if left else ''}{word}{WILDCARD if right else ''}"

    if right:
        last = stem(words[-1], language) if stem_words else words[-1]
        words[-1] = last + WILDCARD
    if left:
        words[0] = WILDCARD + words[0]
    phrase = " ".join(words)
    if exactphrase:
        return f'"{phrase}"'
    return phrase


def _render_group(rendered: Sequence[str]) -> str:
    return "(" + " OR ".join(rendered) + ")"


def write_search(
    groups: Sequence[Iterable[str]],
    languages: Optional[Iterable[str]] = None,
    stemming: Optional[bool] = None,
    closure: Union[str, Closure, None] = None,
    exactphrase: Optional[bool] = None,
    translations: Optional[Mapping[str, Mapping[str, str]]] = None,
) -> Dict[str, str]:
    """Write a Boolean search string for every requested language.

    Args:
        groups: Concept groups in query order; a term may appear in several.
            Terms keep the order of a list or tuple. A set has no order of
            its own and is rendered alphabetically, so pass lists when the
            order inside a group matters.
        languages: Language names or ISO-639-1 codes.
        stemming: Truncate English terms to stems with a wildcard.
        closure: ``none``, ``left``, ``right`` or ``full``.
        exactphrase: Quote multi-word terms.
        translations: Optional ``{language: {term: translated term}}``
            supplied by an external translation step. Terms without an entry
            are used as given. Entries for languages that were not
            requested are ignored.

    Returns:
        Mapping of canonical language name to search string.

    Raises:
        ConfigurationError: If no groups (or an empty group) are given, or an
            option is invalid.
        UnsupportedLanguageError: For an unknown language.
    """
    config = build_config(
        QueryConfig,
        languages=list(languages) if languages is not None else None,
        stemming=stemming,
        closure=closure,
        exactphrase=exactphrase,
    )
    if not groups:
        raise ConfigurationError("At least one concept group is required")
    term_groups = [_group_terms(group) for group in groups]
    for idx, terms in enumerate(term_groups):
        if not terms:
            raise ConfigurationError(f"Concept group {idx + 1} has no terms")

    resolved = [resolve_language(lang, UnsupportedLanguageError) for lang in config.languages]
    requested = set(resolved)
    lookup: Dict[str, Mapping[str, str]] = {}
    for lang, table in (translations or {}).items():
        key = ISO_CODES.get(lang.strip().lower(), lang.strip().lower())
        if key in requested:
            lookup[key] = table

    searches: Dict[str, str] = {}
    for language in dict.fromkeys(resolved):
        table = {normalize_term(k): v for k, v in lookup.get(language, {}).items()}
        blocks = []
        for terms in term_groups:
            rendered = [
                render_term(
                    normalize_term(table.get(term, term)) or term,
                    language=language,
                    stemming=config.stemming,
                    closure=config.closure,
                    exactphrase=config.exactphrase,
                )
                for term in terms
            ]
            blocks.append(_render_group(rendered))
        searches[language] = " AND ".join(blocks)
        logger.debug(f"Rendered {language} search: {searches[language]}")
    logger.info(
        f"Wrote searches for {len(searches)} language(s) from {len(term_groups)} concept groups "
        f"(stemming={config.stemming}, closure={config.closure.value})"
    )
    return searches


def write_title_search(titles: Iterable[str]) -> str:
    """Write an OR-joined exact-phrase search for known article titles.

    Used to check whether a database indexes the gold-standard articles.
    """
    cleaned: Dict[str, None] = {}
    for title in titles:
        text = " ".join((title or "").replace('"', " ").split())
        if text:
            cleaned.setdefault(text, None)
    if not cleaned:
        raise ConfigurationError("At least one title is required")
    rendered = [render_term(title, closure=Closure.NONE, exactphrase=True) for title in cleaned]
    logger.info(f"Wrote title search for {len(rendered)} titles")
    return _render_group(rendered)


def remove_redundancies(groups: Sequence[Iterable[str]], language: str = "english") -> List[List[str]]:
    """Drop terms already matched by another term's stemmed wildcard form.

    Within each group a single word is redundant when an earlier kept single
    word's stem is a prefix of it (``fire*`` already finds ``fires``), and a
    phrase is redundant when an earlier kept phrase has the same stemmed
    words. Only English is stemmed; other languages drop exact duplicates.
    """
    stem_words = should_stem(language)

    def stems(term: str) -> tuple:
        return tuple(stem(w, language) if stem_words else w for w in term.split())

    reduced: List[List[str]] = []
    for group in groups:
        kept: List[str] = []
        prefixes: List[str] = []
        phrases = set()
        for term in _group_terms(group):
            key = stems(term)
            if len(key) == 1 and stem_words:
                if any(term.startswith(prefix) for prefix in prefixes):
                    continue
                prefixes.append(key[0])
            else:
                if key in phrases:
                    continue
                phrases.add(key)
            kept.append(term)
        reduced.append(kept)
    return reduced
