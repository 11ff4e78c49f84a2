"""Graph reduction and keyword retrieval."""

from typing import List, Union

import networkx as nx

from ..core.models import ImportanceMethod, parse_option
from ..utils.logging import get_logger
from .importance import node_importance, ranked_scores

logger = get_logger(__name__)


def reduce_graph(
    G: nx.Graph,
    cutoff: float,
    imp_method: Union[str, ImportanceMethod] = "strength",
) -> nx.Graph:
    """Keep the nodes scoring at or above ``cutoff`` and the edges among them.

    The source graph is not modified. Retained nodes are stamped with the
    ``strength`` and ``degree`` they had in the source graph, so reducing the
    result again with the same or a looser cutoff returns the same graph.
    """
    method = parse_option(ImportanceMethod, imp_method, "imp_method")
    strength = node_importance(G, ImportanceMethod.STRENGTH)
    degree = node_importance(G, ImportanceMethod.DEGREE)
    scores = strength if method == ImportanceMethod.STRENGTH else degree

    keep = [node for node in G.nodes if scores[node] >= cutoff]
    reduced = G.subgraph(keep).copy()
    nx.set_node_attributes(reduced, {node: strength[node] for node in keep}, "strength")
    nx.set_node_attributes(reduced, {node: degree[node] for node in keep}, "degree")
    logger.info(
        f"Reduced graph from {G.number_of_nodes()} to {reduced.number_of_nodes()} nodes "
        f"(cutoff={cutoff}, imp_method={method.value})",
        extra={"fields": {"stage": "reduce", "nodes": reduced.number_of_nodes(), "edges": reduced.number_of_edges()}},
    )
    return reduced


def get_keywords(G: nx.Graph, imp_method: Union[str, ImportanceMethod] = "strength") -> List[str]:
    """Node labels ordered by importance, highest first, ties alphabetical."""
    return [node for node, _ in ranked_scores(G, imp_method)]
