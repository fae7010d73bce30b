"""
Tests for neutron_cluster.entropy module.
"""
import numpy as np
import pytest

from neutron_cluster.entropy import ClusteringMonitor
from neutron_cluster.particle import Snapshot


def make_snapshot(x, y, tag, alive=None):
    x = np.asarray(x, dtype=float)
    if alive is None:
        alive = np.ones(len(x), dtype=bool)
    return Snapshot(
        x=x,
        y=np.asarray(y, dtype=float),
        z=np.zeros(len(x)),
        tag=np.asarray(tag, dtype=np.int64),
        alive=np.asarray(alive, dtype=bool),
    )


class TestClusteringMonitor:
    def test_single_cluster_zero_entropy(self, domain):
        monitor = ClusteringMonitor(domain)
        snap = make_snapshot([10.0, 11.0, 12.0], [10.0, 10.0, 11.0], [0, 0, 0])
        assert monitor.compute(snap) == pytest.approx(0.0)

    def test_one_per_bin_is_maximal(self, domain):
        monitor = ClusteringMonitor(domain, n_x=4, n_y=2)
        xs = [(i + 0.5) * domain.width / 4 for i in range(4)] * 2
        ys = [domain.height / 4] * 4 + [3 * domain.height / 4] * 4
        H = monitor.compute(make_snapshot(xs, ys, range(8)))
        assert H == pytest.approx(monitor.max_entropy)
        assert monitor.relative_entropy == pytest.approx(1.0)

    def test_empty_population(self, domain):
        monitor = ClusteringMonitor(domain)
        snap = make_snapshot([1.0], [1.0], [0], alive=[False])
        assert monitor.compute(snap) == 0.0
        assert monitor.n_lineages == 0

    def test_dead_slots_ignored(self, domain):
        monitor = ClusteringMonitor(domain)
        snap = make_snapshot([10.0, 1900.0], [10.0, 1000.0], [0, 1], alive=[True, False])
        assert monitor.compute(snap) == pytest.approx(0.0)
        assert monitor.n_lineages == 1

    def test_lineage_count(self, domain):
        monitor = ClusteringMonitor(domain)
        monitor.compute(make_snapshot([1.0, 2.0, 3.0, 4.0], [1.0] * 4, [5, 5, 9, 2]))
        assert monitor.n_lineages == 3

    def test_history_grows(self, domain, store):
        monitor = ClusteringMonitor(domain)
        for _ in range(3):
            monitor.compute(store.snapshot())
        assert len(monitor.history) == 3
        assert len(monitor.lineage_history) == 3

    def test_initial_lattice_is_spread(self, domain, store):
        monitor = ClusteringMonitor(domain)
        monitor.compute(store.snapshot())
        assert monitor.relative_entropy > 0.7
