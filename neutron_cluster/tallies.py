"""
Event tallies for the neutron population.

Per tick:
  - captures, fissions, scatters (one per resolved collision)
  - secondaries: new slots filled by fission (nu_sampled - 1 each)

Population balance over a tick:
  n_after = n_before - captures + secondaries
"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class StepTally:
    """Collision counts for one transport step."""
    n_before: int = 0
    n_after: int = 0
    captures: int = 0
    fissions: int = 0
    scatters: int = 0
    secondaries: int = 0

    @property
    def collisions(self):
        return self.captures + self.fissions + self.scatters

    @property
    def expected_after(self):
        return self.n_before - self.captures + self.secondaries

    @property
    def is_balanced(self):
        return self.n_after == self.expected_after


@dataclass
class RunTally:
    """Accumulated counts over a whole run."""
    captures: int = 0
    fissions: int = 0
    scatters: int = 0
    secondaries: int = 0
    population: List[int] = field(default_factory=list)

    def accumulate(self, step: StepTally):
        self.captures += step.captures
        self.fissions += step.fissions
        self.scatters += step.scatters
        self.secondaries += step.secondaries
        self.population.append(step.n_after)

    @property
    def collisions(self):
        return self.captures + self.fissions + self.scatters

    @property
    def mean_secondaries_per_fission(self):
        return self.secondaries / self.fissions if self.fissions > 0 else 0.0
