from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

import numpy as np
from scipy import sparse

from .edges import WeightedEdge, WeightedEdges


@dataclass(frozen=True, eq=False)
class AdjacencyIndex:
    """Outgoing weighted edges grouped by sender, in compact node-index space.

    Node `i` is actor `node_ids[i]`; row `i` of the CSR matrix holds its
    outgoing edges, columns ascending by receiver id.
    """

    node_ids: np.ndarray          # sorted actor ids
    id_to_idx: Mapping[int, int]  # actor id -> [0..n-1]
    _out: sparse.csr_matrix       # out[u, v] = weight(u -> v), int64

    @property
    def n(self) -> int:
        return int(self.node_ids.shape[0])

    @property
    def csr(self) -> sparse.csr_matrix:
        """Copy of the weighted adjacency matrix in node-index space."""
        return self._out.copy()

    def actor_exists(self, actor: int) -> bool:
        return int(actor) in self.id_to_idx

    def index_of(self, actor: int) -> Optional[int]:
        """Node index of `actor`, or None if it is not in this graph."""
        return self.id_to_idx.get(int(actor))

    def neighbors(self, idx: int) -> np.ndarray:
        """Successor indices of node `idx`, ascending by actor id."""
        lo, hi = self._out.indptr[idx], self._out.indptr[idx + 1]
        view = self._out.indices[lo:hi]
        view.setflags(write=False)
        return view

    def outgoing_edges(self, actor: int) -> Tuple[WeightedEdge, ...]:
        """Outgoing weighted edges of `actor`; empty if unknown or a pure receiver."""
        u = self.index_of(actor)
        if u is None:
            return ()
        lo, hi = self._out.indptr[u], self._out.indptr[u + 1]
        dsts = self.node_ids[self._out.indices[lo:hi]]
        wts = self._out.data[lo:hi]
        return tuple(
            WeightedEdge(int(actor), int(v), int(w)) for v, w in zip(dsts.tolist(), wts.tolist())
        )

    def out_strength(self) -> np.ndarray:
        """Total outgoing weight per node (aligned with node_ids)."""
        return np.asarray(self._out.sum(axis=1), dtype=np.int64).reshape(-1)

    def in_strength(self) -> np.ndarray:
        """Total incoming weight per node (aligned with node_ids)."""
        return np.asarray(self._out.sum(axis=0), dtype=np.int64).reshape(-1)


def build_adjacency(edges: WeightedEdges, node_ids: Iterable[int]) -> AdjacencyIndex:
    """Group weighted edges by sender into a CSR index over `node_ids`.

    `node_ids` must contain every edge endpoint; actors without outgoing
    edges get an empty row.
    """
    nodes = np.unique(np.fromiter((int(v) for v in node_ids), dtype=np.int64))
    nodes.setflags(write=False)
    n = len(nodes)
    id_to_idx = {int(v): i for i, v in enumerate(nodes.tolist())}

    rows = np.searchsorted(nodes, edges.src)
    cols = np.searchsorted(nodes, edges.dst)
    out = sparse.csr_matrix(
        (np.array(edges.w, dtype=np.int64), (rows, cols)), shape=(n, n), dtype=np.int64
    )
    out.sort_indices()

    return AdjacencyIndex(node_ids=nodes, id_to_idx=MappingProxyType(id_to_idx), _out=out)
