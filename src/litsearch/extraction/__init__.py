"""Candidate term extraction from naive-search text and keyword fields.

Modules:

  extractor: strategy selection, frequency floor and ordering
      (``extract_terms``, ``extract_scored_terms``, ``merge_terms``).
  rake: candidate-phrase splitting and the RAKE / windowed word scorers.
"""

from .extractor import extract_terms, extract_scored_terms, merge_terms  # noqa: F401
