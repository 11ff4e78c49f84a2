"""Keyword co-occurrence network construction."""

from typing import Optional

import networkx as nx
import numpy as np
import pandas as pd

from ..core.models import NetworkConfig, build_config
from ..utils.logging import get_logger

logger = get_logger(__name__)


def create_network(
    matrix: pd.DataFrame,
    min_studies: Optional[int] = None,
    min_occ: Optional[int] = None,
    normalize: bool = False,
    drop_isolated: bool = False,
) -> nx.Graph:
    """Build an undirected, weighted co-occurrence graph from a feature matrix.

    Nodes are terms present in at least ``min_studies`` documents, added in
    alphabetical order and carrying their document count as ``studies``.
    Two nodes are joined when they co-occur in at least ``min_occ``
    documents; the edge ``count`` is that number of documents and ``weight``
    is either the count or, with ``normalize``, the Jaccard index of the two
    terms' document sets. There are no self-loops.

    Args:
        matrix: Documents x terms presence or count matrix.
        min_studies: Minimum number of documents a term must appear in.
        min_occ: Minimum number of shared documents for an edge.
        normalize: Use Jaccard-normalized edge weights.
        drop_isolated: Remove nodes left without any edge.

    Returns:
        A ``networkx.Graph``; rebuilding from the same inputs yields the
        same node order, edge order and weights.
    """
    config = build_config(
        NetworkConfig,
        min_studies=min_studies,
        min_occ=min_occ,
        normalize=normalize,
        drop_isolated=drop_isolated,
    )
    matrix = matrix.reindex(sorted(matrix.columns), axis=1)
    presence = (matrix.to_numpy() > 0).astype(np.int64)
    studies = presence.sum(axis=0)
    keep = np.flatnonzero(studies >= config.min_studies)
    terms = [matrix.columns[i] for i in keep]

    G = nx.Graph(min_studies=config.min_studies, min_occ=config.min_occ, normalized=config.normalize)
    for term, idx in zip(terms, keep):
        G.add_node(term, studies=int(studies[idx]))

    kept = presence[:, keep]
    cooccurrence = kept.T @ kept
    rows, cols = np.triu_indices(len(terms), k=1)
    for i, j in zip(rows, cols):
        count = int(cooccurrence[i, j])
        if count < config.min_occ:
            continue
        if config.normalize:
            union = int(studies[keep[i]] + studies[keep[j]]) - count
            weight = count / union
        else:
            weight = count
        G.add_edge(terms[i], terms[j], weight=weight, count=count)

    if config.drop_isolated:
        G.remove_nodes_from([n for n in list(G.nodes) if G.degree(n) == 0])

    logger.info(
        f"Created network with {G.number_of_nodes()} nodes and {G.number_of_edges()} edges "
        f"(min_studies={config.min_studies}, min_occ={config.min_occ})",
        extra={"fields": {"stage": "network", "nodes": G.number_of_nodes(), "edges": G.number_of_edges()}},
    )
    return G
