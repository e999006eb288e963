from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

import numpy as np
import pandas as pd

from .config import NOT_FOUND
from .records import filter_by_time

if TYPE_CHECKING:
    from .graph import InteractionGraph


class SendOrReceive(Enum):
    SEND = "send"
    RECEIVE = "receive"


class ActivityReport(NamedTuple):
    senders: int
    receivers: int
    transactions: int


class ActorReport(NamedTuple):
    sent: int
    received: int
    unique_counterparts: int


def report_activity_in_window(graph: InteractionGraph, t0: int, t1: int) -> ActivityReport:
    """Distinct senders, distinct receivers and email count with t0 <= t <= t1.

    Counts raw records, so repeated emails between the same pair each count.
    """
    window = filter_by_time(graph.records, t0, t1)
    if len(window) == 0:
        return ActivityReport(0, 0, 0)
    return ActivityReport(
        senders=int(np.unique(window.src).size),
        receivers=int(np.unique(window.dst).size),
        transactions=len(window),
    )


def report_on_actor(graph: InteractionGraph, actor: int) -> ActorReport:
    """Emails sent, emails received and distinct counterparts of `actor`.

    Sent/received are weight sums (every email counts). Unknown actors
    yield (0, 0, 0).
    """
    if not graph.actor_exists(actor):
        return ActorReport(0, 0, 0)

    edges = graph.edges
    out_mask = edges.src == actor
    in_mask = edges.dst == actor
    counterparts = set(edges.dst[out_mask].tolist()) | set(edges.src[in_mask].tolist())
    return ActorReport(
        sent=int(edges.w[out_mask].sum()),
        received=int(edges.w[in_mask].sum()),
        unique_counterparts=len(counterparts),
    )


def activity_ranking(graph: InteractionGraph, direction: SendOrReceive) -> pd.DataFrame:
    """Actors with positive send (or receive) totals, most active first.

    Ties are broken by ascending actor id. Columns: actor, total.
    """
    if not isinstance(direction, SendOrReceive):
        raise ValueError(f"direction must be a SendOrReceive member, got {direction!r}")

    adj = graph.adjacency
    if direction is SendOrReceive.SEND:
        totals = adj.out_strength()
    else:
        totals = adj.in_strength()

    node_ids = np.asarray(adj.node_ids)
    keep = totals > 0
    ids, vals = node_ids[keep], totals[keep]
    order = np.lexsort((ids, -vals))
    return pd.DataFrame({"actor": ids[order], "total": vals[order]}).reset_index(drop=True)


def nth_most_active(graph: InteractionGraph, n: int, direction: SendOrReceive) -> int:
    """Actor id ranked `n` (1-based) by send or receive volume.

    Parameters
    ----------
    graph:
        Graph to rank.
    n:
        Rank; n=1 is the most active actor.
    direction:
        SendOrReceive.SEND ranks by outgoing weight, RECEIVE by incoming.

    Returns
    -------
    actor: int
        The ranked actor id (ties go to the smaller id), or NOT_FOUND (-1)
        when n < 1 or fewer than `n` actors have a positive total.
    """
    ranking = activity_ranking(graph, direction)
    if n < 1 or n > len(ranking):
        return NOT_FOUND
    return int(ranking["actor"].iloc[n - 1])
