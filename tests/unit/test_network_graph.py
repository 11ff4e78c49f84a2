"""Unit tests for co-occurrence network construction and importance."""

import networkx as nx
import pandas as pd
import pytest

from litsearch.core.errors import ConfigurationError
from litsearch.network import build_feature_matrix, create_network, importance_table, node_importance
from tests.conftest import edge_list


@pytest.fixture
def matrix() -> pd.DataFrame:
    """Studies a=3, b=2, c=2, d=1; shared documents ab=2, ac=2, bc=1."""
    return pd.DataFrame(
        [
            [1, 1, 1, 0],
            [1, 1, 0, 0],
            [1, 0, 1, 0],
            [0, 0, 0, 1],
        ],
        columns=["a", "b", "c", "d"],
    )


class TestCreateNetwork:
    """Tests for thresholds and edge weights."""

    def test_nodes_respect_min_studies(self, matrix: pd.DataFrame) -> None:
        G = create_network(matrix, min_studies=2, min_occ=1)
        assert list(G.nodes) == ["a", "b", "c"]
        assert G.nodes["a"]["studies"] == 3

    def test_edges_respect_min_occ(self, matrix: pd.DataFrame) -> None:
        loose = create_network(matrix, min_studies=2, min_occ=1)
        assert sorted((u, v, d["weight"]) for u, v, d in loose.edges(data=True)) == [
            ("a", "b", 2), ("a", "c", 2), ("b", "c", 1),
        ]
        strict = create_network(matrix, min_studies=2, min_occ=2)
        assert sorted(strict.edges()) == [("a", "b"), ("a", "c")]

    def test_every_edge_meets_threshold(self, matrix: pd.DataFrame) -> None:
        """Test each edge's co-occurrence count is at least min_occ."""
        for min_occ in (1, 2, 3):
            G = create_network(matrix, min_studies=1, min_occ=min_occ)
            for _, _, data in G.edges(data=True):
                assert data["count"] >= min_occ

    def test_isolated_nodes(self, matrix: pd.DataFrame) -> None:
        """Test terms passing min_studies stay unless isolated nodes are dropped."""
        G = create_network(matrix, min_studies=1, min_occ=1)
        assert "d" in G
        assert G.degree("d") == 0
        dropped = create_network(matrix, min_studies=1, min_occ=1, drop_isolated=True)
        assert "d" not in dropped

    def test_no_self_loops(self, matrix: pd.DataFrame) -> None:
        G = create_network(matrix, min_studies=1, min_occ=1)
        assert nx.number_of_selfloops(G) == 0

    def test_normalized_weights(self, matrix: pd.DataFrame) -> None:
        """Test Jaccard weights keep the raw count alongside."""
        G = create_network(matrix, min_studies=2, min_occ=1, normalize=True)
        assert G["a"]["b"]["weight"] == pytest.approx(2 / 3)
        assert G["a"]["b"]["count"] == 2

    def test_count_matrix_treated_as_presence(self, matrix: pd.DataFrame) -> None:
        counts = matrix * 3
        assert edge_list(create_network(counts, min_studies=2, min_occ=1)) == edge_list(
            create_network(matrix, min_studies=2, min_occ=1)
        )

    def test_deterministic_rebuild(self, matrix: pd.DataFrame) -> None:
        """Test column order does not change node order, edges or weights."""
        shuffled = matrix[["c", "a", "d", "b"]]
        first = create_network(matrix, min_studies=1, min_occ=1)
        second = create_network(shuffled, min_studies=1, min_occ=1)
        assert list(first.nodes(data=True)) == list(second.nodes(data=True))
        assert edge_list(first) == edge_list(second)

    def test_invalid_thresholds(self, matrix: pd.DataFrame) -> None:
        with pytest.raises(ConfigurationError):
            create_network(matrix, min_studies=0, min_occ=1)
        with pytest.raises(ConfigurationError):
            create_network(matrix, min_studies=1, min_occ=0)

    def test_empty_matrix(self) -> None:
        G = create_network(pd.DataFrame(), min_studies=1, min_occ=1)
        assert G.number_of_nodes() == 0

    def test_woodpecker_scenario(self, woodpecker_corpus) -> None:
        """Test terms co-occurring in both documents form an edge of weight 2."""
        matrix = build_feature_matrix(woodpecker_corpus, ["fire", "woodpecker", "ecology", "occupancy"])
        G = create_network(matrix, min_studies=1, min_occ=1)
        assert G["fire"]["woodpecker"]["weight"] == 2
        assert G["fire"]["ecology"]["weight"] == 1


class TestNodeImportance:
    """Tests for strength and degree scores."""

    def test_strength_and_degree(self, matrix: pd.DataFrame) -> None:
        G = create_network(matrix, min_studies=2, min_occ=1)
        assert node_importance(G, "strength") == {"a": 4.0, "b": 3.0, "c": 3.0}
        assert node_importance(G, "degree") == {"a": 2.0, "b": 2.0, "c": 2.0}

    def test_invalid_importance_method(self, matrix: pd.DataFrame) -> None:
        G = create_network(matrix, min_studies=2, min_occ=1)
        with pytest.raises(ConfigurationError):
            node_importance(G, "pagerank")

    def test_importance_table(self, matrix: pd.DataFrame) -> None:
        """Test the table is sorted by strength with ties alphabetical."""
        G = create_network(matrix, min_studies=2, min_occ=1)
        df = importance_table(G)
        assert list(df.columns) == ["term", "strength", "degree", "studies", "rank"]
        assert df["term"].tolist() == ["a", "b", "c"]
        assert df["rank"].tolist() == [1, 2, 3]
        assert df.loc[0, "studies"] == 3
