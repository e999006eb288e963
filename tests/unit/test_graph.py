"""Unit tests for email_graph.graph.InteractionGraph.

Covers construction invariants, time/actor filtering and independence
of derived graphs.
"""

from __future__ import annotations

from collections import Counter

import pytest

from email_graph import InteractionGraph, SendOrReceive
from email_graph.errors import RecordFormatError
from email_graph.records import InteractionRecords


class TestConstruction:
    def test_scenario(self, scenario_graph):
        """Concrete four-email scenario."""
        assert scenario_graph.email_count(0, 1) == 2
        assert scenario_graph.report_on_actor(0) == (2, 1, 2)
        assert scenario_graph.bfs_path(0, 2) is not None
        assert scenario_graph.nth_most_active(1, SendOrReceive.SEND) == 0

    def test_weight_conservation(self, sample_graph, sample_triples):
        assert sample_graph.edges.total_weight() == len(sample_triples) == len(sample_graph)

    def test_email_count_matches_records(self, sample_graph, sample_triples):
        counts = Counter((s, d) for s, d, _ in sample_triples)
        actors = sorted(sample_graph.actor_ids()) + [999]

        for a in actors:
            for b in actors:
                assert sample_graph.email_count(a, b) == counts.get((a, b), 0)

    def test_actor_ids_are_all_endpoints(self, sample_graph, sample_triples):
        expected = {s for s, _, _ in sample_triples} | {d for _, d, _ in sample_triples}

        assert sample_graph.actor_ids() == expected

    def test_accepts_plain_triples(self, scenario_triples):
        graph = InteractionGraph(scenario_triples)

        assert graph.email_count(0, 1) == 2

    def test_accepts_record_store(self, scenario_triples):
        graph = InteractionGraph(InteractionRecords.from_triples(scenario_triples))

        assert len(graph) == 4

    def test_malformed_records_fail(self):
        with pytest.raises(RecordFormatError):
            InteractionGraph.from_triples([(0, 1)])

    def test_empty(self, empty_graph):
        assert empty_graph.actor_ids() == set()
        assert empty_graph.email_count(0, 1) == 0
        assert empty_graph.report_on_actor(0) == (0, 0, 0)
        assert empty_graph.bfs_path(0, 1) is None

    def test_outgoing_edges(self, scenario_graph):
        assert scenario_graph.outgoing_edges(0) == ((0, 1, 2),)
        assert scenario_graph.actor_exists(2)
        assert not scenario_graph.actor_exists(3)

    def test_repr(self, scenario_graph):
        assert repr(scenario_graph) == "InteractionGraph(records=4, actors=3, edges=3)"


class TestImmutability:
    def test_actor_ids_returns_copy(self, sample_graph):
        ids = sample_graph.actor_ids()
        ids.add(12345)
        ids.discard(10)

        assert 12345 not in sample_graph.actor_ids()
        assert 10 in sample_graph.actor_ids()

    def test_records_are_read_only(self, sample_graph):
        with pytest.raises(ValueError):
            sample_graph.records.t[0] = 1

    def test_edges_are_read_only(self, sample_graph):
        with pytest.raises(ValueError):
            sample_graph.edges.w[0] = 100


class TestFilterByTime:
    def test_full_window_reproduces_edges(self, sample_graph):
        t = sample_graph.records.t
        filtered = sample_graph.filter_by_time(int(t.min()), int(t.max()))

        assert list(filtered.edges) == list(sample_graph.edges)
        assert filtered.actor_ids() == sample_graph.actor_ids()

    def test_empty_window(self, sample_graph):
        t1 = int(sample_graph.records.t.max())
        filtered = sample_graph.filter_by_time(t1 + 1, t1 + 1)

        assert filtered.actor_ids() == set()
        assert len(filtered) == 0
        assert filtered.max_breached_user_count(10) == 0
        assert filtered.nth_most_active(1, SendOrReceive.RECEIVE) == -1

    def test_reversed_window_is_empty(self, sample_graph):
        assert len(sample_graph.filter_by_time(10, 0)) == 0

    def test_partial_window(self, sample_graph):
        filtered = sample_graph.filter_by_time(0, 100)

        assert filtered.actor_ids() == {10, 11, 12, 13, 20, 21, 22, 23}
        assert filtered.email_count(10, 11) == 1
        assert sample_graph.email_count(10, 11) == 2
        assert filtered.edges.total_weight() == len(filtered) == 6

    def test_parent_is_untouched(self, sample_graph, sample_triples):
        sample_graph.filter_by_time(0, 0)

        assert len(sample_graph) == len(sample_triples)
        assert sample_graph.email_count(10, 11) == 2


class TestFilterByActors:
    def test_keeps_emails_touching_the_set(self, sample_graph):
        filtered = sample_graph.filter_by_actors([10])

        assert len(filtered) == 5
        assert filtered.actor_ids() == {10, 11, 12, 16}
        assert filtered.email_count(10, 11) == 2
        assert filtered.email_count(11, 13) == 0

    def test_duplicates_are_kept(self, scenario_graph):
        filtered = scenario_graph.filter_by_actors([0])

        assert filtered.email_count(0, 1) == 2
        assert len(filtered) == 3

    def test_unknown_actors_give_empty_graph(self, sample_graph):
        assert sample_graph.filter_by_actors([999]).actor_ids() == set()

    def test_derived_graphs_are_independent(self, sample_graph):
        a = sample_graph.filter_by_actors([20])
        b = a.filter_by_time(0, 0)

        assert a.actor_ids() == {20, 21}
        assert b.actor_ids() == set()
        assert a.email_count(20, 21) == 1
