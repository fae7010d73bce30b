"""
Neutron clustering driver.

Each tick:
1. Transport every live neutron by dt (collisions, fission, streaming, wrap)
2. Record the step tally and clustering diagnostics
3. Expose a read-only snapshot for the renderer

The driver exclusively owns the particle store and the sampler; nothing
reads the store while a step is in progress.
"""
import time
from dataclasses import dataclass
from typing import List, Optional

from .constants import TICK_DURATION
from .cross_sections import CrossSections, build_default_cross_sections
from .entropy import ClusteringMonitor
from .geometry import ToroidalDomain
from .particle import ParticleStore
from .physics import transport_step
from .sampling import RandomSampler
from .tallies import RunTally


@dataclass
class SimulationResult:
    """Complete results from a clustering run."""
    population_history: List[int]
    entropy_history: List[float]
    lineage_history: List[int]
    captures: int
    fissions: int
    scatters: int
    secondaries: int
    n_initial: int
    n_ticks: int
    dt: float
    seed: Optional[int]
    total_time: float               # seconds

    @property
    def final_population(self):
        return self.population_history[-1] if self.population_history else self.n_initial

    def summary(self):
        """Print human-readable summary."""
        print("=" * 60)
        print("  Neutron Clustering Result")
        print("=" * 60)
        print(f"  Ticks: {self.n_ticks} x {self.dt:.3e} s")
        print(f"  Population: {self.n_initial:,} -> {self.final_population:,}")
        print(f"  Collisions: {self.captures + self.fissions + self.scatters:,} "
              f"(capture {self.captures:,}, fission {self.fissions:,}, "
              f"scatter {self.scatters:,})")
        print(f"  Secondaries spawned: {self.secondaries:,}")
        if self.entropy_history:
            print(f"  Final entropy H: {self.entropy_history[-1]:.3f}")
        if self.lineage_history:
            print(f"  Surviving lineages: {self.lineage_history[-1]:,}")
        print(f"  Wall time: {self.total_time:.1f} s")
        print("=" * 60)

    def to_dict(self):
        """Convert to JSON-serializable dict."""
        return {
            'population_history': [int(n) for n in self.population_history],
            'entropy_history': [float(h) for h in self.entropy_history],
            'lineage_history': [int(n) for n in self.lineage_history],
            'captures': int(self.captures),
            'fissions': int(self.fissions),
            'scatters': int(self.scatters),
            'secondaries': int(self.secondaries),
            'n_initial': int(self.n_initial),
            'n_ticks': int(self.n_ticks),
            'dt': float(self.dt),
            'seed': self.seed,
            'total_time': float(self.total_time),
        }


class ClusteringSimulation:
    """Time-stepped neutron population driver.

    Configuration is validated before any state is built: a bad particle
    count or cross-section set raises ConfigurationError and leaves
    nothing half-initialised.
    """

    def __init__(
        self,
        n_particles: int,
        cross_sections: CrossSections = None,
        domain: ToroidalDomain = None,
        seed: Optional[int] = 1,
    ):
        self.cross_sections = cross_sections or build_default_cross_sections()
        self.domain = domain or ToroidalDomain()
        self.seed = seed
        self.sampler = RandomSampler(seed)
        self.store = ParticleStore.initialize(n_particles, self.domain, self.sampler)
        self.n_initial = self.store.n_alive
        self.tally = RunTally()
        self.monitor = ClusteringMonitor(self.domain)
        self.n_ticks = 0

    @property
    def n_alive(self):
        return self.store.n_alive

    def step(self, dt=TICK_DURATION):
        """Advance one tick and return its StepTally."""
        step_tally = transport_step(
            self.store, self.cross_sections, self.domain, self.sampler, dt
        )
        self.tally.accumulate(step_tally)
        self.n_ticks += 1
        return step_tally

    def snapshot(self):
        """Read-only per-slot positions, tags and alive flags."""
        return self.store.snapshot()

    def run(self, n_ticks, dt=TICK_DURATION, verbose=True, callback=None):
        """Run n_ticks steps, tracking clustering after each one.

        Args:
            n_ticks: number of ticks
            dt: tick duration (s)
            verbose: print progress lines
            callback: optional callable(tick, snapshot) invoked after each step

        Returns:
            SimulationResult
        """
        if verbose:
            print(f"Starting neutron clustering run")
            print(f"  Neutrons: {self.n_initial:,} (slots: {self.store.size:,})")
            print(f"  Ticks: {n_ticks} x {dt:.3e} s")
            print(f"  Domain: {self.domain.width:.0f} x {self.domain.height:.0f} cm")
            print(f"  Sigma_t = {self.cross_sections.total:.4f} /cm, "
                  f"k_inf = {self.cross_sections.k_infinity:.4f}")
            print()

        t_start = time.time()

        for tick in range(1, n_ticks + 1):
            t_tick = time.time()
            step_tally = self.step(dt)
            snapshot = self.snapshot()
            entropy = self.monitor.compute(snapshot)

            if callback is not None:
                callback(tick, snapshot)

            if verbose and (tick % 100 == 0 or tick <= 5):
                elapsed = time.time() - t_tick
                print(f"  Tick {tick:6d}/{n_ticks} "
                      f"n={step_tally.n_after:7d}  "
                      f"cap={step_tally.captures:5d}  "
                      f"fis={step_tally.fissions:5d}  "
                      f"new={step_tally.secondaries:5d}  "
                      f"H={entropy:.3f}  "
                      f"lineages={self.monitor.n_lineages:6d}  "
                      f"dt={elapsed:.3f}s")

        total_time = time.time() - t_start

        result = SimulationResult(
            population_history=list(self.tally.population),
            entropy_history=list(self.monitor.history),
            lineage_history=list(self.monitor.lineage_history),
            captures=self.tally.captures,
            fissions=self.tally.fissions,
            scatters=self.tally.scatters,
            secondaries=self.tally.secondaries,
            n_initial=self.n_initial,
            n_ticks=self.n_ticks,
            dt=dt,
            seed=self.seed,
            total_time=total_time,
        )

        if verbose:
            print()
            result.summary()

        return result
