from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple

import numpy as np
import pandas as pd

from .records import InteractionRecords


class WeightedEdge(NamedTuple):
    sender: int
    receiver: int
    weight: int


@dataclass(frozen=True, eq=False)
class WeightedEdges:
    """Directed dyadic counts, one row per distinct (src, dst) pair.

    Rows are sorted by (src, dst); `w[k]` is the number of raw records
    with that exact ordered pair and is always >= 1.
    """

    src: np.ndarray
    dst: np.ndarray
    w: np.ndarray

    def __len__(self) -> int:
        return int(self.w.shape[0])

    def __iter__(self) -> Iterator[WeightedEdge]:
        for s, d, c in zip(self.src.tolist(), self.dst.tolist(), self.w.tolist()):
            yield WeightedEdge(s, d, c)

    def weight(self, sender: int, receiver: int) -> int:
        """Count of emails sender -> receiver; 0 if the pair never occurs."""
        # rows are lexsorted, so locate the sender block first
        lo = int(np.searchsorted(self.src, sender, side="left"))
        hi = int(np.searchsorted(self.src, sender, side="right"))
        if lo == hi:
            return 0
        k = lo + int(np.searchsorted(self.dst[lo:hi], receiver, side="left"))
        if k < hi and int(self.dst[k]) == receiver:
            return int(self.w[k])
        return 0

    def total_weight(self) -> int:
        return int(self.w.sum())

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"src": self.src.copy(), "dst": self.dst.copy(), "c": self.w.copy()})


def aggregate_edges(records: InteractionRecords) -> WeightedEdges:
    """Collapse raw records into weighted directed edges.

    (A, B) and (B, A) are counted independently. The result only depends
    on the multiset of records, not on their order.
    """
    df = pd.DataFrame({"src": records.src, "dst": records.dst})
    grp = df.groupby(["src", "dst"], sort=True).size().reset_index(name="c")

    src = grp["src"].to_numpy(dtype=np.int64, copy=True)
    dst = grp["dst"].to_numpy(dtype=np.int64, copy=True)
    w = grp["c"].to_numpy(dtype=np.int64, copy=True)
    for arr in (src, dst, w):
        arr.setflags(write=False)
    return WeightedEdges(src=src, dst=dst, w=w)
