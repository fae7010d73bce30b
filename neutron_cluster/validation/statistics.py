"""
Statistical self-check of the sampling laws.

Drives the real sampler and collision resolver N times and compares the
observed statistics against their analytic values:

  free-flight mean        1 / Sigma_t
  capture fraction        Sigma_c / Sigma_t
  fission fraction        Sigma_f / Sigma_t
  new neutrons / fission  nu - 1

Fractions use an exact binomial test; means use a normal z-test on the
sample standard error. A law passes when its p-value is above the
two-sided tail of n_sigma standard deviations.
"""
import json
import math
from dataclasses import dataclass, asdict

import numpy as np
from scipy import stats

from ..constants import NEEDS_FLIGHT
from ..cross_sections import build_default_cross_sections
from ..particle import Particle, ParticleStore
from ..physics import resolve_collision, CAPTURE, FISSION
from ..sampling import RandomSampler
from ..tallies import StepTally


@dataclass
class LawCheck:
    """Outcome of one statistical comparison."""
    name: str
    expected: float
    observed: float
    std_error: float
    p_value: float
    passed: bool

    @property
    def n_sigma(self):
        if self.std_error <= 0.0:
            return 0.0
        return abs(self.observed - self.expected) / self.std_error


def _mean_check(name, samples, expected, alpha):
    samples = np.asarray(samples, dtype=np.float64)
    observed = float(np.mean(samples))
    std_error = float(np.std(samples, ddof=1) / np.sqrt(len(samples)))
    if std_error > 0.0:
        p_value = float(2.0 * stats.norm.sf(abs(observed - expected) / std_error))
    else:
        p_value = 1.0 if observed == expected else 0.0
    return LawCheck(name, expected, observed, std_error, p_value, p_value >= alpha)


def _fraction_check(name, k, n, expected, alpha):
    observed = k / n
    std_error = math.sqrt(expected * (1.0 - expected) / n)
    p_value = float(stats.binomtest(k, n, expected).pvalue)
    return LawCheck(name, expected, observed, std_error, p_value, p_value >= alpha)


def check_sampling_laws(xs=None, n_samples=20000, seed=42, n_sigma=3.0):
    """Run every sampling-law check.

    Args:
        xs: CrossSections (default demo set)
        n_samples: draws per law
        seed: sampler seed
        n_sigma: two-sided tolerance in standard errors

    Returns:
        list of LawCheck
    """
    xs = xs or build_default_cross_sections()
    sampler = RandomSampler(seed)
    alpha = float(2.0 * stats.norm.sf(n_sigma))

    flights = [sampler.free_flight(xs.total) for _ in range(n_samples)]

    # Forced collisions on one neutron; captured neutrons are revived
    template = Particle(0.0, 0.0, 0.0, 0.0, 0.0, 1.0, NEEDS_FLIGHT, True, 0)
    store = ParticleStore()
    index = store.acquire_slot(template)
    tally = StepTally()
    yields = []
    for _ in range(n_samples):
        store.distance[index] = NEEDS_FLIGHT
        before = tally.secondaries
        outcome = resolve_collision(store, index, xs, sampler, tally)
        if outcome == FISSION:
            yields.append(tally.secondaries - before)
        elif outcome == CAPTURE:
            index = store.acquire_slot(template)

    checks = [
        _mean_check("free-flight mean", flights, xs.mean_free_path, alpha),
        _fraction_check("capture fraction", tally.captures, n_samples,
                        xs.capture_probability, alpha),
        _fraction_check("fission fraction", tally.fissions, n_samples,
                        xs.fission_probability, alpha),
    ]
    if len(yields) > 1:
        checks.append(_mean_check("new neutrons per fission", yields, xs.nu - 1.0, alpha))
    return checks


def run_validation(n_samples=20000, seed=42, n_sigma=3.0, output=None):
    """Print a sampling-law report.

    Returns
    -------
    int
        Exit status: 0 when every law passes, 1 otherwise.
    """
    xs = build_default_cross_sections()

    print("=" * 70)
    print("  Sampling Law Validation")
    print("=" * 70)
    print(f"  Sigma_s = {xs.scatter:.4f}, Sigma_c = {xs.capture:.4f}, "
          f"Sigma_f = {xs.fission:.4f}, nu = {xs.nu:.3f}")
    print(f"  Samples per law: {n_samples:,}, seed: {seed}, tolerance: {n_sigma:.1f} sigma")
    print()

    checks = check_sampling_laws(xs, n_samples=n_samples, seed=seed, n_sigma=n_sigma)

    print(f"  {'Law':<26} {'Expected':>10} {'Observed':>10} {'Dev':>7} {'p':>8}  Result")
    print(f"  {'-'*26} {'-'*10} {'-'*10} {'-'*7} {'-'*8}  {'-'*6}")
    for c in checks:
        result = "PASS" if c.passed else "FAIL"
        print(f"  {c.name:<26} {c.expected:>10.5f} {c.observed:>10.5f} "
              f"{c.n_sigma:>6.2f}s {c.p_value:>8.4f}  {result}")
    print("=" * 70)

    status = 0 if all(c.passed for c in checks) else 1

    if output:
        report = {
            'n_samples': n_samples,
            'seed': seed,
            'n_sigma': n_sigma,
            'checks': [asdict(c) for c in checks],
            'status': status,
        }
        with open(output, 'w') as f:
            json.dump(report, f, indent=2)
        print(f"\n  Validation report saved to {output}")

    return status
