"""Importance cutoff detection.

Every method works on the node importance scores sorted from highest to
lowest and returns candidate cutoff values, strictest first. Nodes scoring at
or above a cutoff are kept by ``reduce_graph``.

- ``cumulative``: the score at which the running total of importance first
  reaches ``percent`` of the whole.
- ``changepoint``: binary segmentation of the curve into segments of
  constant mean, at most ``knot_num`` breaks. Each candidate is the lowest
  score of the segment above a break.
- ``knee``: the point furthest from the chord joining the ends of the
  normalized curve.
- ``spline``: inflection points of a least-squares cubic spline with
  ``knot_num`` evenly spaced interior knots.

The curve-fitting methods fall back to the knee when they find nothing.
"""

import math
from typing import Callable, Dict, List, Optional, Union

import networkx as nx
import numpy as np
from scipy.interpolate import LSQUnivariateSpline

from ..core.errors import EmptyGraphError
from ..core.models import CutoffConfig, CutoffMethod, ImportanceMethod, build_config
from ..utils.logging import get_logger
from .importance import ranked_scores

logger = get_logger(__name__)

# Minimum number of points on each side of a change point
MIN_SEGMENT = 2
SPLINE_DEGREE = 3


def _cumulative(scores: np.ndarray, config: CutoffConfig) -> List[float]:
    total = float(scores.sum())
    if total <= 0:
        return [float(scores[0])]
    running = np.cumsum(scores)
    target = config.percent * total - 1e-9 * total
    idx = int(np.argmax(running >= target))
    return [float(scores[idx])]


def _knee(scores: np.ndarray, config: CutoffConfig) -> List[float]:
    n = len(scores)
    if n < 3 or scores[0] == scores[-1]:
        return [float(scores[-1])]
    x = np.linspace(0.0, 1.0, n)
    y = (scores - scores[-1]) / (scores[0] - scores[-1])
    # Distance to the chord from (0, 1) to (1, 0), up to a constant factor
    distance = np.abs(1.0 - x - y)
    return [float(scores[int(np.argmax(distance))])]


def _segment_cost(csum: np.ndarray, csum2: np.ndarray, start: int, stop: int) -> float:
    size = stop - start
    total = csum[stop] - csum[start]
    return float(csum2[stop] - csum2[start] - total * total / size)


def _noise_variance(scores: np.ndarray) -> float:
    # Robust estimate from successive differences; steps in the curve barely move it
    diffs = np.diff(scores)
    mad = float(np.median(np.abs(diffs - np.median(diffs))))
    sigma = 1.4826 * mad / math.sqrt(2.0)
    return max(sigma * sigma, 1e-8 * float(scores.var()))


def _change_points(scores: np.ndarray, max_changes: int) -> List[int]:
    n = len(scores)
    if n < 2 * MIN_SEGMENT or float(scores.var()) == 0:
        return []
    penalty = 2.0 * math.log(n) * _noise_variance(scores)
    csum = np.concatenate([[0.0], np.cumsum(scores)])
    csum2 = np.concatenate([[0.0], np.cumsum(scores * scores)])

    segments = [(0, n)]
    changes: List[int] = []
    while len(changes) < max_changes:
        best: Optional[tuple] = None
        for start, stop in segments:
            if stop - start < 2 * MIN_SEGMENT:
                continue
            whole = _segment_cost(csum, csum2, start, stop)
            for split in range(start + MIN_SEGMENT, stop - MIN_SEGMENT + 1):
                gain = whole - _segment_cost(csum, csum2, start, split) - _segment_cost(csum, csum2, split, stop)
                if best is None or gain > best[0]:
                    best = (gain, start, stop, split)
        if best is None or best[0] <= penalty:
            break
        _, start, stop, split = best
        segments.remove((start, stop))
        segments.extend([(start, split), (split, stop)])
        changes.append(split)
    return sorted(changes)


def _changepoint(scores: np.ndarray, config: CutoffConfig) -> List[float]:
    changes = _change_points(scores, config.knot_num)
    if not changes:
        logger.debug("No change point found; using the knee instead")
        return _knee(scores, config)
    return [float(scores[split - 1]) for split in changes]


def _spline(scores: np.ndarray, config: CutoffConfig) -> List[float]:
    n = len(scores)
    if n < 4 * (config.knot_num + 1) or scores[0] == scores[-1]:
        logger.debug(f"Too few points ({n}) for a spline with {config.knot_num} knots; using the knee")
        return _knee(scores, config)
    x = np.arange(n, dtype=float)
    knots = np.linspace(0.0, n - 1.0, config.knot_num + 2)[1:-1]
    try:
        spline = LSQUnivariateSpline(x, scores, knots, k=SPLINE_DEGREE)
    except ValueError as e:
        logger.warning(f"Spline fit failed: {e}; using the knee")
        return _knee(scores, config)

    curvature = spline.derivative(2)(x)
    tolerance = 1e-9 * max(1.0, float(np.abs(scores).max()))
    signed = [(i, np.sign(c)) for i, c in enumerate(curvature) if abs(c) > tolerance]
    cutoffs = [
        float(scores[i])
        for (i, sign), (_, next_sign) in zip(signed, signed[1:])
        if sign != next_sign
    ]
    if not cutoffs:
        logger.debug("Spline has no inflection point; using the knee")
        return _knee(scores, config)
    return cutoffs


CUTOFF_METHODS: Dict[CutoffMethod, Callable[[np.ndarray, CutoffConfig], List[float]]] = {
    CutoffMethod.CUMULATIVE: _cumulative,
    CutoffMethod.CHANGEPOINT: _changepoint,
    CutoffMethod.KNEE: _knee,
    CutoffMethod.SPLINE: _spline,
}


def find_cutoff(
    G: nx.Graph,
    method: Union[str, CutoffMethod, None] = None,
    imp_method: Union[str, ImportanceMethod, None] = None,
    percent: Optional[float] = None,
    knot_num: Optional[int] = None,
) -> List[float]:
    """Find candidate importance cutoffs for a co-occurrence graph.

    Args:
        G: Co-occurrence graph.
        method: ``cumulative``, ``changepoint``, ``knee`` or ``spline``.
        imp_method: ``strength`` or ``degree``.
        percent: Share of total importance to keep, in (0, 1]
            (``cumulative`` only).
        knot_num: Maximum number of change points, or spline knots.

    Returns:
        Distinct cutoff values, strictest first. Callers usually take the
        first.

    Raises:
        EmptyGraphError: If the graph has no nodes.
        ConfigurationError: For unknown methods or out-of-range options.
    """
    config = build_config(CutoffConfig, method=method, imp_method=imp_method, percent=percent, knot_num=knot_num)
    if G.number_of_nodes() == 0:
        raise EmptyGraphError("Cannot find a cutoff for a graph with no nodes")
    scores = np.array([score for _, score in ranked_scores(G, config.imp_method)], dtype=float)

    candidates = CUTOFF_METHODS[config.method](scores, config)
    cutoffs = sorted(set(candidates), reverse=True)
    logger.info(
        f"Found {len(cutoffs)} cutoff(s) {cutoffs} "
        f"(method={config.method.value}, imp_method={config.imp_method.value})",
        extra={"fields": {"stage": "cutoff", "nodes": len(scores), "cutoffs": cutoffs}},
    )
    return cutoffs
