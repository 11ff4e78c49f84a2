"""Candidate search-term extraction.

Four strategies turn corpus text into candidate terms:

- ``tagged``: author/database keyword fields split on a separator.
- ``ngram``: every n-gram whose first and last tokens are content words.
- ``rake``: Rapid Automatic Keyword Extraction phrases.
- ``fakerake``: RAKE phrases scored with a bounded co-occurrence window.

Each strategy is a plain function selected from ``STRATEGIES``. Every
strategy returns a score table and the corpus-wide frequency table it was
built from; the ``min_freq`` floor and ordering are applied in one place.
"""

from collections import Counter
from typing import AbstractSet, Callable, Dict, Iterable, List, Optional, Tuple, Union

from ..core.models import (
    ExtractionConfig,
    ExtractionMethod,
    ScoredTerm,
    build_config,
)
from ..core.normalization import has_letter, normalize_term, split_fragments
from ..text.languages import resolve_language
from ..text.stopwords import resolve_stopwords
from ..utils.logging import get_logger
from .rake import candidate_phrases, rake_word_scores, score_phrases, windowed_word_scores

logger = get_logger(__name__)

# term -> (score, corpus frequency)
ScoreTable = Dict[str, Tuple[float, int]]
Strategy = Callable[[List[str], ExtractionConfig, AbstractSet[str]], ScoreTable]


def _length_ok(n_words: int, config: ExtractionConfig) -> bool:
    if not config.ngrams:
        return True
    return config.min_n <= n_words <= config.max_n


def _extract_tagged(texts: List[str], config: ExtractionConfig, stopwords: AbstractSet[str]) -> ScoreTable:
    counts: Counter = Counter()
    for field in texts:
        keywords = {normalize_term(k) for k in field.split(config.keyword_separator)}
        keywords.discard("")
        counts.update(k for k in keywords if _length_ok(len(k.split()), config))
    return {term: (float(count), count) for term, count in counts.items()}


def _extract_ngrams(texts: List[str], config: ExtractionConfig, stopwords: AbstractSet[str]) -> ScoreTable:
    counts: Counter = Counter()

    def is_content(token: str) -> bool:
        return token not in stopwords and has_letter(token)

    for text in texts:
        for fragment in split_fragments(text):
            for n in range(config.min_n, config.max_n + 1):
                for i in range(len(fragment) - n + 1):
                    gram = fragment[i:i + n]
                    if is_content(gram[0]) and is_content(gram[-1]):
                        counts[" ".join(gram)] += 1
    return {term: (float(count), count) for term, count in counts.items()}


def _extract_rake(texts: List[str], config: ExtractionConfig, stopwords: AbstractSet[str]) -> ScoreTable:
    phrases = list(candidate_phrases(texts, stopwords))
    word_scores = rake_word_scores(phrases)
    counts = Counter(p for p in phrases if _length_ok(len(p), config))
    return score_phrases(phrases, word_scores, counts)


def _extract_fakerake(texts: List[str], config: ExtractionConfig, stopwords: AbstractSet[str]) -> ScoreTable:
    phrases = list(candidate_phrases(texts, stopwords))
    word_scores = windowed_word_scores(phrases, config.window)
    counts = Counter(p for p in phrases if _length_ok(len(p), config))
    return score_phrases(phrases, word_scores, counts)


STRATEGIES: Dict[ExtractionMethod, Strategy] = {
    ExtractionMethod.TAGGED: _extract_tagged,
    ExtractionMethod.NGRAM: _extract_ngrams,
    ExtractionMethod.RAKE: _extract_rake,
    ExtractionMethod.FAKERAKE: _extract_fakerake,
}


def _as_texts(texts: Union[str, Iterable[Optional[str]], None]) -> List[str]:
    if texts is None:
        return []
    if isinstance(texts, str):
        texts = [texts]
    return [t for t in texts if t and t.strip()]


def extract_scored_terms(
    texts: Union[str, Iterable[Optional[str]], None],
    method: Union[str, ExtractionMethod, None] = None,
    min_freq: Optional[int] = None,
    ngrams: Optional[bool] = None,
    min_n: Optional[int] = None,
    max_n: Optional[int] = None,
    language: Optional[str] = None,
    stopwords: Optional[Iterable[str]] = None,
    keyword_separator: Optional[str] = None,
    window: Optional[int] = None,
) -> List[ScoredTerm]:
    """Extract candidate terms with their scores and corpus frequencies.

    Args:
        texts: Raw text per document, or keyword fields in ``tagged`` mode.
        method: One of ``rake``, ``fakerake``, ``tagged`` or ``ngram``.
        min_freq: Minimum corpus-wide occurrence count of a returned term.
            In ``tagged`` mode a keyword counts once per document.
        ngrams: Restrict terms to ``min_n``..``max_n`` words (``ngram``
            mode always uses the bounds).
        min_n: Smallest term length in words.
        max_n: Largest term length in words.
        language: Stopword-list selector (name or ISO-639-1 code).
        stopwords: Explicit stopwords; replaces the language lookup.
        keyword_separator: Field separator for ``tagged`` mode.
        window: Co-occurrence window used by ``fakerake``.

    Returns:
        Unique terms, RAKE-style methods ranked by score and the others by
        frequency, ties broken alphabetically.

    Raises:
        ConfigurationError: For an unknown method or language, or
            out-of-range numeric options.
    """
    config = build_config(
        ExtractionConfig,
        method=method,
        min_freq=min_freq,
        ngrams=ngrams,
        min_n=min_n,
        max_n=max_n,
        language=language,
        keyword_separator=keyword_separator,
        window=window,
    )
    resolve_language(config.language)
    corpus = _as_texts(texts)
    if not corpus:
        logger.info("No text supplied; returning no candidate terms")
        return []
    if config.method == ExtractionMethod.TAGGED:
        stopword_set: AbstractSet[str] = frozenset()
    else:
        stopword_set = resolve_stopwords(config.language, stopwords)

    table = STRATEGIES[config.method](corpus, config, stopword_set)
    kept = [
        ScoredTerm(term=term, score=score, frequency=count)
        for term, (score, count) in table.items()
        if count >= config.min_freq
    ]
    if config.method in (ExtractionMethod.RAKE, ExtractionMethod.FAKERAKE):
        kept.sort(key=lambda t: (-t.score, t.term))
    else:
        kept.sort(key=lambda t: (-t.frequency, t.term))
    logger.info(
        f"Extracted {len(kept)} of {len(table)} candidate terms "
        f"(method={config.method.value}, min_freq={config.min_freq})",
        extra={"fields": {"stage": "extraction", "candidates": len(table), "terms": len(kept)}},
    )
    return kept


def extract_terms(texts: Union[str, Iterable[Optional[str]], None], **options) -> List[str]:
    """Extract candidate terms; see ``extract_scored_terms`` for options."""
    return [t.term for t in extract_scored_terms(texts, **options)]


def merge_terms(*term_lists: Iterable[str]) -> List[str]:
    """Union several extraction runs, normalized and in first-seen order."""
    merged: Dict[str, None] = {}
    for terms in term_lists:
        for term in terms:
            key = normalize_term(term)
            if key:
                merged.setdefault(key, None)
    return list(merged)
