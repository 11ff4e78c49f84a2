"""Shared fixtures for litsearch tests."""

from typing import Dict, FrozenSet, Iterable, List, Tuple

import networkx as nx
import pytest

# Small English stopword list so tests never need the NLTK corpus download
STOPWORDS: FrozenSet[str] = frozenset(
    """
    a an the of in on and or for to with by is are was were from at as be
    this that we our its into than across after during between under
    """.split()
)


@pytest.fixture
def stopwords() -> FrozenSet[str]:
    return STOPWORDS


@pytest.fixture
def woodpecker_corpus() -> List[str]:
    """Two-document corpus used by the end-to-end scenario."""
    return [
        "black-backed woodpecker fire ecology",
        "fire severity affects woodpecker occupancy",
    ]


@pytest.fixture
def fire_corpus() -> List[str]:
    """A slightly larger naive-search corpus about fire and birds."""
    return [
        "Fire severity and black-backed woodpecker occupancy in burned forests",
        "Post-fire salvage logging reduces woodpecker nesting in burned forests",
        "Wildfire effects on cavity-nesting birds: woodpecker occupancy after fire",
        "Prescribed fire and bird communities in ponderosa pine forests",
        "Black-backed woodpecker habitat selection in burned forests",
        "Fire severity shapes bird communities across burned forests",
    ]


def weighted_graph(edges: Iterable[Tuple[str, str, float]]) -> nx.Graph:
    G = nx.Graph()
    for u, v, w in edges:
        G.add_edge(u, v, weight=w, count=w)
    return G


def graph_with_scores(values: Iterable[float]) -> nx.Graph:
    """Edgeless graph whose nodes carry precomputed importance scores.

    Nodes are named so that alphabetical order matches the given order.
    """
    G = nx.Graph()
    for i, value in enumerate(values):
        G.add_node(f"n{i:03d}", strength=float(value), degree=float(value))
    return G


@pytest.fixture
def simple_graph() -> nx.Graph:
    """Strengths a=8, b=6, c=5, d=1; degrees a=2, b=2, c=3, d=1."""
    return weighted_graph([("a", "b", 5), ("a", "c", 3), ("b", "c", 1), ("c", "d", 1)])


def edge_list(G: nx.Graph) -> List[Tuple[str, str, Dict]]:
    """Edges with their data, endpoints and rows in sorted order."""
    edges = [(min(u, v), max(u, v), dict(data)) for u, v, data in G.edges(data=True)]
    return sorted(edges, key=lambda e: (e[0], e[1]))
