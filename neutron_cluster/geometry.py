"""
Toroidal 2-D domain.

  x in [0, width), y in [0, height)

A particle leaving one edge re-enters at the opposite edge. The z
coordinate is carried along but has no boundary: the demo is planar.
"""
import math
from dataclasses import dataclass

from .constants import DOMAIN_WIDTH, DOMAIN_HEIGHT, GRID_ASPECT
from .errors import ConfigurationError


def wrap_coordinate(value, extent):
    """Map value into [0, extent) by periodic translation."""
    wrapped = math.fmod(value, extent)
    if wrapped < 0.0:
        wrapped += extent
    # -tiny + extent rounds to extent in floating point
    if wrapped >= extent:
        wrapped = 0.0
    return wrapped


@dataclass(frozen=True)
class ToroidalDomain:
    """Rectangular periodic domain."""
    width: float = DOMAIN_WIDTH     # cm
    height: float = DOMAIN_HEIGHT   # cm

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0.0:
                raise ConfigurationError(
                    f"domain {name} must be finite and positive, got {value!r}"
                )

    @property
    def area(self):
        return self.width * self.height

    def contains(self, x, y):
        return 0.0 <= x < self.width and 0.0 <= y < self.height

    def wrap(self, x, y):
        """Return (x, y) folded back into the domain."""
        if 0.0 <= x < self.width and 0.0 <= y < self.height:
            return x, y
        return wrap_coordinate(x, self.width), wrap_coordinate(y, self.height)

    @staticmethod
    def grid_shape(n_requested):
        """Nearest (n_rows, n_cols) lattice with a 2:1 column:row aspect.

        At least one row is always kept, so small requests still yield a
        populated lattice.
        """
        n_rows = max(1, int(round(math.sqrt(n_requested / GRID_ASPECT))))
        return n_rows, GRID_ASPECT * n_rows

    def grid_positions(self, n_requested):
        """Cell-centred lattice positions in row-major order.

        Returns:
            list of (x, y) tuples, length n_rows * n_cols
        """
        n_rows, n_cols = self.grid_shape(n_requested)
        dy = self.height / n_rows
        dx = self.width / n_cols
        return [
            ((col + 0.5) * dx, (row + 0.5) * dy)
            for row in range(n_rows)
            for col in range(n_cols)
        ]
