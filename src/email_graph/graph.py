"""Directed, weighted email-interaction graph.

An `InteractionGraph` is an immutable snapshot built from raw
(sender, receiver, time) records:

    raw records -> weighted edges (dyadic counts) -> CSR adjacency index

Filtering by time window or by actor set re-runs that pipeline over the
reduced record set and returns a new, independent graph.
"""

from __future__ import annotations

import logging
from os import PathLike
from typing import Iterable, List, Optional, Union

from .adjacency import AdjacencyIndex, build_adjacency
from .edges import WeightedEdge, WeightedEdges, aggregate_edges
from .loader import load_interactions
from .outbreak import max_breached_user_count
from .queries import (
    ActivityReport,
    ActorReport,
    SendOrReceive,
    nth_most_active,
    report_activity_in_window,
    report_on_actor,
)
from .records import InteractionRecords, filter_by_actors, filter_by_time
from .traversal import bfs_path, dfs_path

logger = logging.getLogger(__name__)


class InteractionGraph:
    """Immutable weighted digraph over one set of email records.

    Owns its records, the aggregated edges and the adjacency index; every
    accessor returns a copy or a read-only view. Accepts an
    `InteractionRecords` or any iterable of (sender, receiver, time) triples.
    """

    def __init__(self, records: InteractionRecords):
        if not isinstance(records, InteractionRecords):
            records = InteractionRecords.from_triples(records)
        self._records = records
        self._edges: WeightedEdges = aggregate_edges(records)
        self._actors = frozenset(records.actor_ids())
        self._adj: AdjacencyIndex = build_adjacency(self._edges, self._actors)
        logger.debug(
            "Built graph: %d records, %d actors, %d weighted edges",
            len(records), len(self._actors), len(self._edges),
        )

    # ---- construction ---------------------------------------------------------

    @classmethod
    def from_triples(cls, triples: Iterable[Iterable[int]]) -> "InteractionGraph":
        return cls(InteractionRecords.from_triples(triples))

    @classmethod
    def from_file(cls, path: Union[str, PathLike]) -> "InteractionGraph":
        """Load a whitespace-separated `src dst t` file (plain or .gz)."""
        return cls(load_interactions(path))

    def filter_by_time(self, t0: int, t1: int) -> "InteractionGraph":
        """New graph with only the emails sent in [t0, t1]."""
        return InteractionGraph(filter_by_time(self._records, t0, t1))

    def filter_by_actors(self, actor_ids: Iterable[int]) -> "InteractionGraph":
        """New graph with only the emails sent or received by `actor_ids`."""
        return InteractionGraph(filter_by_actors(self._records, actor_ids))

    # ---- read-only views ------------------------------------------------------

    @property
    def records(self) -> InteractionRecords:
        return self._records

    @property
    def edges(self) -> WeightedEdges:
        return self._edges

    @property
    def adjacency(self) -> AdjacencyIndex:
        return self._adj

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(records={len(self._records)}, "
            f"actors={len(self._actors)}, edges={len(self._edges)})"
        )

    def actor_ids(self) -> set[int]:
        """Every actor appearing as sender or receiver (a fresh set)."""
        return set(self._actors)

    def actor_exists(self, actor: int) -> bool:
        return self._adj.actor_exists(actor)

    def outgoing_edges(self, actor: int) -> tuple[WeightedEdge, ...]:
        return self._adj.outgoing_edges(actor)

    def email_count(self, sender: int, receiver: int) -> int:
        """Number of emails sender -> receiver; 0 if none (or unknown actors)."""
        return self._edges.weight(sender, receiver)

    # ---- queries --------------------------------------------------------------

    def report_activity_in_window(self, t0: int, t1: int) -> ActivityReport:
        return report_activity_in_window(self, t0, t1)

    def report_on_actor(self, actor: int) -> ActorReport:
        return report_on_actor(self, actor)

    def nth_most_active(self, n: int, direction: SendOrReceive) -> int:
        return nth_most_active(self, n, direction)

    def bfs_path(self, start: int, target: int) -> Optional[List[int]]:
        return bfs_path(self, start, target)

    def dfs_path(self, start: int, target: int) -> Optional[List[int]]:
        return dfs_path(self, start, target)

    def max_breached_user_count(self, hours: int, *, progress: bool = False) -> int:
        return max_breached_user_count(self, hours, progress=progress)
