"""Rapid Automatic Keyword Extraction and its windowed approximation.

Both scorers work on candidate phrases: maximal runs of content words between
stopwords, numbers and clause punctuation. Canonical RAKE scores a word by
``degree(word) / frequency(word)``, where the degree counts every word that
shares a candidate phrase with it (the word itself included). The fakerake
approximation only counts neighbours within a fixed window, so long phrases
are no longer rewarded quadratically and the cost per token is bounded.

A phrase's score is the sum of its word scores.
"""

from collections import Counter
from typing import AbstractSet, Dict, Iterable, Iterator, List, Tuple

from ..core.normalization import has_letter, split_fragments

Phrase = Tuple[str, ...]


def candidate_phrases(texts: Iterable[str], stopwords: AbstractSet[str]) -> Iterator[Phrase]:
    """Yield candidate phrases split at stopwords, numbers and punctuation."""
    for text in texts:
        for fragment in split_fragments(text):
            current: List[str] = []
            for token in fragment:
                if token in stopwords or not has_letter(token):
                    if current:
                        yield tuple(current)
                    current = []
                else:
                    current.append(token)
            if current:
                yield tuple(current)


def rake_word_scores(phrases: List[Phrase]) -> Dict[str, float]:
    frequency: Counter = Counter()
    degree: Counter = Counter()
    for phrase in phrases:
        for word in phrase:
            frequency[word] += 1
            degree[word] += len(phrase)
    return {word: degree[word] / frequency[word] for word in frequency}


def windowed_word_scores(phrases: List[Phrase], window: int) -> Dict[str, float]:
    frequency: Counter = Counter()
    neighbours: Counter = Counter()
    for phrase in phrases:
        size = len(phrase)
        for i, word in enumerate(phrase):
            frequency[word] += 1
            lo = max(0, i - window)
            hi = min(size, i + window + 1)
            neighbours[word] += hi - lo
    return {word: neighbours[word] / frequency[word] for word in frequency}


def score_phrases(
    phrases: List[Phrase],
    word_scores: Dict[str, float],
    phrase_counts: Counter,
) -> Dict[str, Tuple[float, int]]:
    """Map each distinct phrase to its (score, corpus frequency)."""
    scored: Dict[str, Tuple[float, int]] = {}
    for phrase, count in phrase_counts.items():
        scored[" ".join(phrase)] = (sum(word_scores[w] for w in phrase), count)
    return scored
