"""Keyword co-occurrence networks and Boolean search strategies for literature reviews.

The pipeline runs left to right:

    terms = extract_terms(texts, method="fakerake")
    matrix = build_feature_matrix(documents, terms)
    graph = create_network(matrix, min_studies=2, min_occ=2)
    cutoff = find_cutoff(graph, method="cumulative", percent=0.8)[0]
    keywords = get_keywords(reduce_graph(graph, cutoff))
    searches = write_search([group_a, group_b], languages=["english"])
"""

from .core.errors import (  # noqa: F401
    LitSearchError,
    ConfigurationError,
    EmptyGraphError,
    UnsupportedLanguageError,
)
from .core.models import Document, ScoredTerm  # noqa: F401
from .extraction import extract_terms, extract_scored_terms, merge_terms  # noqa: F401
from .network import (  # noqa: F401
    build_feature_matrix,
    create_network,
    node_importance,
    importance_table,
    find_cutoff,
    reduce_graph,
    get_keywords,
)
from .search import write_search, write_title_search, remove_redundancies, check_recall  # noqa: F401

__version__ = "0.1.0"
