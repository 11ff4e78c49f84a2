"""Per-node importance scores."""

from typing import Dict, List, Tuple, Union

import networkx as nx
import pandas as pd

from ..core.models import ImportanceMethod, parse_option


def node_importance(G: nx.Graph, imp_method: Union[str, ImportanceMethod] = "strength") -> Dict[str, float]:
    """Score every node by strength (summed edge weight) or degree.

    Graphs produced by ``reduce_graph`` carry the scores of the graph they
    were reduced from as node attributes; those are returned unchanged.
    """
    method = parse_option(ImportanceMethod, imp_method, "imp_method")
    stamped = nx.get_node_attributes(G, method.value)
    if G.number_of_nodes() and len(stamped) == G.number_of_nodes():
        return {node: float(score) for node, score in stamped.items()}
    if method == ImportanceMethod.STRENGTH:
        return {node: float(score) for node, score in G.degree(weight="weight")}
    return {node: float(score) for node, score in G.degree()}


def ranked_scores(G: nx.Graph, imp_method: Union[str, ImportanceMethod] = "strength") -> List[Tuple[str, float]]:
    """Nodes with scores, highest first, ties alphabetical."""
    scores = node_importance(G, imp_method)
    return sorted(scores.items(), key=lambda item: (-item[1], item[0]))


def importance_table(G: nx.Graph, imp_method: Union[str, ImportanceMethod] = "strength") -> pd.DataFrame:
    """Tabulate strength, degree and document count for every node.

    Rows are ranked by ``imp_method``, highest first, ties alphabetical, so
    the order matches ``get_keywords`` for the same method.
    """
    method = parse_option(ImportanceMethod, imp_method, "imp_method")
    strength = node_importance(G, ImportanceMethod.STRENGTH)
    degree = node_importance(G, ImportanceMethod.DEGREE)
    records = [
        {
            "term": node,
            "strength": strength[node],
            "degree": int(degree[node]),
            "studies": int(G.nodes[node].get("studies", 0)),
        }
        for node in G.nodes
    ]
    df = pd.DataFrame(records, columns=["term", "strength", "degree", "studies"])
    df = df.sort_values(by=[method.value, "term"], ascending=[False, True]).reset_index(drop=True)
    df["rank"] = df.index + 1
    return df
