"""End-to-end integration tests for the search strategy workflow.

These tests exercise the full chain: extracting candidate terms,
building the document-feature matrix and co-occurrence network, finding a
cutoff, reducing the network and writing the Boolean searches.
"""

from typing import FrozenSet, List

import pytest

from litsearch import (
    build_feature_matrix,
    create_network,
    extract_terms,
    find_cutoff,
    get_keywords,
    merge_terms,
    reduce_graph,
    write_search,
)
from litsearch.network import importance_table


@pytest.mark.integration
def test_woodpecker_scenario(woodpecker_corpus: List[str], stopwords: FrozenSet[str]) -> None:
    """Test the two-document corpus from extraction to reduction."""
    terms = extract_terms(woodpecker_corpus, method="ngram", min_freq=1, min_n=1, max_n=1, stopwords=stopwords)
    assert set(terms) == {"woodpecker", "fire", "ecology", "severity", "affects", "occupancy", "black-backed"}

    matrix = build_feature_matrix(woodpecker_corpus, terms)
    assert matrix.shape == (2, 7)
    G = create_network(matrix, min_studies=1, min_occ=1)
    assert G["fire"]["woodpecker"]["weight"] == 2

    for cutoff in (0, 1, 2):
        reduced = reduce_graph(G, cutoff)
        assert "fire" in reduced and "woodpecker" in reduced
        assert reduced.has_edge("fire", "woodpecker")


@pytest.mark.integration
def test_query_scenario() -> None:
    """Test two concept groups written without stemming or quoting."""
    searches = write_search([["fire"], ["woodpecker", "owl"]], closure="none", exactphrase=False)
    assert searches["english"] == "(fire) AND (woodpecker OR owl)"


@pytest.mark.integration
@pytest.mark.parametrize("method", ["cumulative", "changepoint", "knee", "spline"])
def test_fire_corpus_pipeline(fire_corpus: List[str], stopwords: FrozenSet[str], method: str) -> None:
    """Test every cutoff method yields a non-empty keyword list and a search."""
    phrases = extract_terms(fire_corpus, method="fakerake", min_freq=2, min_n=1, max_n=3, stopwords=stopwords)
    assert "burned forests" in phrases
    words = extract_terms(fire_corpus, method="ngram", min_freq=2, min_n=1, max_n=1, stopwords=stopwords)
    assert "woodpecker" in words
    terms = merge_terms(phrases, words)

    matrix = build_feature_matrix(fire_corpus, terms)
    G = create_network(matrix, min_studies=2, min_occ=2)
    assert G.number_of_nodes() > 0

    cutoff = find_cutoff(G, method=method, knot_num=1)[0]
    reduced = reduce_graph(G, cutoff)
    keywords = get_keywords(reduced)
    assert keywords
    assert set(keywords) <= set(G.nodes)

    table = importance_table(reduced)
    assert list(table["term"]) == keywords

    groups = [[k for k in keywords if "fire" in k] or ["fire"], [k for k in keywords if "fire" not in k] or ["bird"]]
    query = write_search(groups, stemming=True, closure="right")["english"]
    assert query.count(" AND ") == 1
    assert query.startswith("(") and query.endswith(")")


@pytest.mark.integration
def test_reduced_network_reused(fire_corpus: List[str], stopwords: FrozenSet[str]) -> None:
    """Test a reduced network can be reduced again without losing nodes."""
    terms = extract_terms(fire_corpus, method="ngram", min_freq=2, min_n=1, max_n=2, stopwords=stopwords)
    G = create_network(build_feature_matrix(fire_corpus, terms), min_studies=2, min_occ=1)
    cutoff = find_cutoff(G, method="cumulative", percent=0.8)[0]
    reduced = reduce_graph(G, cutoff)
    assert find_cutoff(reduced, method="cumulative", percent=1.0)[0] == cutoff
    assert sorted(reduce_graph(reduced, cutoff).nodes) == sorted(reduced.nodes)
