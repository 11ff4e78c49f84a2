"""Feature matrix, co-occurrence network, importance cutoffs and reduction."""

from .matrix import build_feature_matrix  # noqa: F401
from .graph import create_network  # noqa: F401
from .importance import node_importance, importance_table  # noqa: F401
from .cutoff import find_cutoff  # noqa: F401
from .reduce import reduce_graph, get_keywords  # noqa: F401
