"""
One-group cross-section set for the whole domain.

Collision probabilities follow directly from the ratios:
  P(capture) = Sigma_c / Sigma_t
  P(fission) = Sigma_f / Sigma_t
  P(scatter) = Sigma_s / Sigma_t
and free flights are exponential with rate Sigma_t.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from .constants import (
    NU, SIGMA_SCATTER, SIGMA_CAPTURE, NEUTRON_SPEED,
)
from .errors import ConfigurationError


@dataclass(frozen=True)
class CrossSections:
    """Immutable macroscopic cross sections (1/cm), nu and particle speed (cm/s)."""

    scatter: float
    capture: float
    fission: float
    nu: float
    speed: float = NEUTRON_SPEED

    def __post_init__(self):
        for name in ("scatter", "capture", "fission", "nu", "speed"):
            value = getattr(self, name)
            try:
                value = float(value)
            except (TypeError, ValueError) as exc:
                raise ConfigurationError(
                    f"{name} must be a real number, got {getattr(self, name)!r}"
                ) from exc
            if not math.isfinite(value) or value <= 0.0:
                raise ConfigurationError(
                    f"{name} must be finite and strictly positive, got {value!r}"
                )
            object.__setattr__(self, name, value)
        if self.nu <= 1.0:
            raise ConfigurationError(f"nu must be greater than 1, got {self.nu!r}")

    @property
    def total(self) -> float:
        return self.scatter + self.capture + self.fission

    @property
    def capture_probability(self) -> float:
        return self.capture / self.total

    @property
    def fission_probability(self) -> float:
        return self.fission / self.total

    @property
    def mean_free_path(self) -> float:
        return 1.0 / self.total

    @property
    def k_infinity(self) -> float:
        """Infinite-medium multiplication nu*Sigma_f / Sigma_a."""
        return self.nu * self.fission / (self.capture + self.fission)

    @classmethod
    def from_multiplication(cls, scatter, capture, nu, speed=NEUTRON_SPEED):
        """Build an exactly critical set: Sigma_f = Sigma_c / (nu - 1)."""
        if not nu > 1.0:
            raise ConfigurationError(f"nu must be greater than 1, got {nu!r}")
        return cls(
            scatter=scatter,
            capture=capture,
            fission=capture / (nu - 1.0),
            nu=nu,
            speed=speed,
        )


def build_default_cross_sections() -> CrossSections:
    """Default demo cross sections (critical, k_inf = 1)."""
    return CrossSections.from_multiplication(
        scatter=SIGMA_SCATTER,
        capture=SIGMA_CAPTURE,
        nu=NU,
        speed=NEUTRON_SPEED,
    )
