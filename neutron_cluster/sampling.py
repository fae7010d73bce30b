"""
Random sampling service.

All randomness in a run flows through one RandomSampler, which owns a
numpy Generator seeded once by the driver. Identical seeds and identical
call sequences give bit-identical variates; there is no module-level RNG.

Laws:
  - uniform:   xi in [0, 1)
  - isotropic: mu = 2*xi1 - 1, phi = 2*pi*xi2
  - flight:    s = -ln(xi) / Sigma_t, xi in (0, 1)
"""
import math

import numpy as np


class RandomSampler:
    """Seeded source of uniform variates, directions and free flights."""

    def __init__(self, seed=None):
        if isinstance(seed, np.random.Generator):
            self._rng = seed
        else:
            self._rng = np.random.default_rng(seed)

    @property
    def generator(self):
        return self._rng

    def uniform(self):
        """Return one variate in [0, 1)."""
        return float(self._rng.random())

    def uniform_nonzero(self):
        """Return one variate in (0, 1); exact zeros are redrawn."""
        xi = self.uniform()
        while xi == 0.0:
            xi = self.uniform()
        return xi

    def isotropic_direction(self):
        """Return (ux, uy, uz) uniform on the unit sphere."""
        cos_theta = 2.0 * self.uniform() - 1.0
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
        phi = 2.0 * math.pi * self.uniform()
        return sin_theta * math.cos(phi), sin_theta * math.sin(phi), cos_theta

    def free_flight(self, sigma_t):
        """Distance to next collision, exponential with rate sigma_t."""
        return -math.log(self.uniform_nonzero()) / sigma_t
