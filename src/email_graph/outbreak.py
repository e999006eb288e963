from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
from scipy import sparse
from scipy.sparse.csgraph import breadth_first_order
from tqdm.auto import tqdm

from .config import SECONDS_PER_HOUR

if TYPE_CHECKING:
    from .graph import InteractionGraph

logger = logging.getLogger(__name__)


def _window_digraph(src: np.ndarray, dst: np.ndarray) -> tuple[np.ndarray, sparse.csr_matrix]:
    """Compact (nodes, csr) digraph over the actors of one window."""
    nodes, inv = np.unique(np.concatenate([src, dst]), return_inverse=True)
    k = len(src)
    m = len(nodes)
    csg = sparse.csr_matrix(
        (np.ones(k, dtype=np.float64), (inv[:k], inv[k:])), shape=(m, m)
    )
    return nodes, csg


def max_breached_user_count(graph: InteractionGraph, hours: int, *, progress: bool = False) -> int:
    """Worst-case number of actors a malicious email can reach within `hours`.

    For every distinct timestamp t_i, the emails sent in [t_i, t_i + hours*3600]
    form the blast radius. Each sender of an email at exactly t_i is a
    candidate patient zero; the infection follows every email of the window
    transitively, ignoring ordering inside the window. The count includes
    patient zero. Returns the maximum over all (t_i, candidate) pairs, and 0
    for negative `hours` or an empty graph.

    Records are sorted once and window bounds found by binary search.

    Parameters
    ----------
    graph:
        Graph whose records are replayed.
    hours:
        Time budget after the first email; timestamps are seconds.
    progress:
        Show a tqdm bar over origin timestamps.

    Returns
    -------
    count: int
        Largest number of distinct actors reached, patient zero included.
    """
    if hours < 0:
        return 0
    records = graph.records
    if len(records) == 0:
        return 0

    span = int(hours * SECONDS_PER_HOUR)
    rec = records.sorted_by_time()
    t = rec.t

    best = 0
    best_origin = None
    for t_i in tqdm(np.unique(t), desc="Outbreak: origin timestamps", disable=not progress):
        t_i = int(t_i)
        lo = int(np.searchsorted(t, t_i, side="left"))
        at_origin = int(np.searchsorted(t, t_i, side="right"))
        hi = int(np.searchsorted(t, t_i + span, side="right"))

        nodes, csg = _window_digraph(rec.src[lo:hi], rec.dst[lo:hi])
        if best >= len(nodes):
            continue

        for origin in np.unique(rec.src[lo:at_origin]):
            start = int(np.searchsorted(nodes, origin))
            reached = breadth_first_order(csg, start, directed=True, return_predecessors=False)
            if len(reached) > best:
                best = len(reached)
                best_origin = (int(origin), t_i)

    logger.debug("Max breach %d actors within %s h (origin, time)=%s", best, hours, best_origin)
    return int(best)
