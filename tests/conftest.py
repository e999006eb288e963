"""Shared pytest fixtures for email_graph tests.

sample_triples describes two components:

    10 -> 11 (x2, t=0 and t=9000), 10 -> 12, 11 -> 13, 13 -> 14, 12 -> 10,
    14 -> 15, 15 -> 16, 16 -> 10
    20 -> 21 -> 22 -> 23 (all at t=50)
"""

from __future__ import annotations

from typing import List, Tuple

import pytest

from email_graph import InteractionGraph

Triple = Tuple[int, int, int]


@pytest.fixture(scope="session")
def scenario_triples() -> List[Triple]:
    """Three edges: 0->1 weight 2, 1->2 weight 1, 2->0 weight 1."""
    return [(0, 1, 0), (0, 1, 0), (1, 2, 1), (2, 0, 2)]


@pytest.fixture(scope="session")
def sample_triples() -> List[Triple]:
    return [
        (10, 11, 0),
        (10, 12, 0),
        (20, 21, 50),
        (21, 22, 50),
        (22, 23, 50),
        (11, 13, 100),
        (13, 14, 3600),
        (12, 10, 3600),
        (14, 15, 7200),
        (15, 16, 7300),
        (10, 11, 9000),
        (16, 10, 20000),
    ]


@pytest.fixture
def scenario_graph(scenario_triples) -> InteractionGraph:
    return InteractionGraph.from_triples(scenario_triples)


@pytest.fixture
def sample_graph(sample_triples) -> InteractionGraph:
    return InteractionGraph.from_triples(sample_triples)


@pytest.fixture
def empty_graph() -> InteractionGraph:
    return InteractionGraph.from_triples([])
