"""Reachability between actors over outgoing email edges.

Both searches return the actors in the order they were first visited
(discovery order), starting with `start` and ending as soon as `target`
is discovered. Neighbours are explored in ascending actor id. BFS and DFS
always agree on whether a path exists; the sequences they return differ.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, List, Optional

import numpy as np

from .config import NO_PATH

if TYPE_CHECKING:
    from .graph import InteractionGraph


def _endpoints(graph: InteractionGraph, start: int, target: int):
    adj = graph.adjacency
    return adj, adj.index_of(start), adj.index_of(target)


def bfs_path(graph: InteractionGraph, start: int, target: int) -> Optional[List[int]]:
    """Breadth-first discovery order from `start` until `target` is seen.

    Parameters
    ----------
    graph:
        Graph to search.
    start, target:
        Actor ids.

    Returns
    -------
    order: list[int] or None
        Actors in the order they were discovered, from `start` to `target`
        inclusive. NO_PATH (None) if either actor is absent or `target` is
        unreachable.
    """
    adj, s, g = _endpoints(graph, start, target)
    if s is None or g is None:
        return NO_PATH

    visited = np.zeros(adj.n, dtype=bool)
    visited[s] = True
    order = [s]
    queue = deque([s])

    while queue and not visited[g]:
        u = queue.popleft()
        for v in adj.neighbors(u):
            v = int(v)
            if visited[v]:
                continue
            visited[v] = True
            order.append(v)
            if v == g:
                break
            queue.append(v)

    if not visited[g]:
        return NO_PATH
    return adj.node_ids[order].tolist()


def dfs_path(graph: InteractionGraph, start: int, target: int) -> Optional[List[int]]:
    """Depth-first discovery order from `start` until `target` is entered.

    Iterative, with (node, next-neighbour) frames so the visiting order
    matches the recursive formulation without its depth limit. Same
    parameters and NO_PATH result as `bfs_path`.
    """
    adj, s, g = _endpoints(graph, start, target)
    if s is None or g is None:
        return NO_PATH

    visited = np.zeros(adj.n, dtype=bool)
    visited[s] = True
    order = [s]
    if s == g:
        return adj.node_ids[order].tolist()

    stack = [(s, 0)]
    while stack:
        u, i = stack[-1]
        nbrs = adj.neighbors(u)
        if i >= len(nbrs):
            stack.pop()
            continue
        v = int(nbrs[i])
        stack[-1] = (u, i + 1)
        if visited[v]:
            continue
        visited[v] = True
        order.append(v)
        if v == g:
            return adj.node_ids[order].tolist()
        stack.append((v, 0))

    return NO_PATH
