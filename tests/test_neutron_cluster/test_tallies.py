"""
Tests for neutron_cluster.tallies module.
"""
import pytest

from neutron_cluster.tallies import StepTally, RunTally


class TestStepTally:
    def test_balance(self):
        t = StepTally(n_before=10, n_after=11, captures=2, fissions=2, scatters=5, secondaries=3)
        assert t.expected_after == 11
        assert t.is_balanced
        assert t.collisions == 9

    def test_imbalance_detected(self):
        t = StepTally(n_before=10, n_after=10, captures=1)
        assert not t.is_balanced


class TestRunTally:
    def test_accumulate(self):
        run = RunTally()
        run.accumulate(StepTally(n_before=4, n_after=5, fissions=1, secondaries=1))
        run.accumulate(StepTally(n_before=5, n_after=4, captures=1, scatters=2))
        assert run.population == [5, 4]
        assert run.captures == 1
        assert run.collisions == 4
        assert run.mean_secondaries_per_fission == pytest.approx(1.0)

    def test_no_fissions(self):
        assert RunTally().mean_secondaries_per_fission == 0.0
