"""Temporal email-interaction graphs.

This package provides:
- an immutable record store of (sender, receiver, time) emails with time and actor filters,
- weighted directed edges (dyadic email counts) and a CSR adjacency index,
- activity reports, per-actor reports and Nth-most-active ranking,
- BFS/DFS reachability between actors,
- worst-case outbreak size within a sliding time budget.
"""

from .config import NOT_FOUND, NO_PATH
from .errors import EmailGraphError, RecordFormatError
from .records import InteractionRecord, InteractionRecords, filter_by_time, filter_by_actors
from .edges import WeightedEdge, WeightedEdges, aggregate_edges
from .adjacency import AdjacencyIndex, build_adjacency
from .queries import (
    ActivityReport,
    ActorReport,
    SendOrReceive,
    activity_ranking,
    nth_most_active,
    report_activity_in_window,
    report_on_actor,
)
from .traversal import bfs_path, dfs_path
from .outbreak import max_breached_user_count
from .loader import load_interactions, parse_line, parse_lines
from .graph import InteractionGraph

__all__ = [
    "NOT_FOUND",
    "NO_PATH",
    "EmailGraphError",
    "RecordFormatError",
    "InteractionRecord",
    "InteractionRecords",
    "filter_by_time",
    "filter_by_actors",
    "WeightedEdge",
    "WeightedEdges",
    "aggregate_edges",
    "AdjacencyIndex",
    "build_adjacency",
    "ActivityReport",
    "ActorReport",
    "SendOrReceive",
    "activity_ranking",
    "nth_most_active",
    "report_activity_in_window",
    "report_on_actor",
    "bfs_path",
    "dfs_path",
    "max_breached_user_count",
    "load_interactions",
    "parse_line",
    "parse_lines",
    "InteractionGraph",
]
