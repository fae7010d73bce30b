"""
Constants for the neutron clustering demo.
Lengths in cm (one unit per pixel of the default window), times in s.
"""

# ---------------------------------------------------------------------------
# Domain
# ---------------------------------------------------------------------------
DOMAIN_WIDTH = 1920.0             # cm
DOMAIN_HEIGHT = 1080.0            # cm
GRID_ASPECT = 2                   # columns per row of the initial lattice

# ---------------------------------------------------------------------------
# One-group cross sections (1/cm)
# ---------------------------------------------------------------------------
NU = 2.5                          # mean neutrons per fission
SIGMA_SCATTER = 0.27
SIGMA_CAPTURE = 0.02
SIGMA_FISSION = SIGMA_CAPTURE / (NU - 1.0)   # exactly critical
NEUTRON_SPEED = 20000.0 * 100.0   # cm/s (epithermal-ish)

# ---------------------------------------------------------------------------
# Transport parameters
# ---------------------------------------------------------------------------
TICK_DURATION = 1.0e-6            # s per rendered frame
NEEDS_FLIGHT = -1.0               # remaining-distance sentinel: resolve before moving

# ---------------------------------------------------------------------------
# Clustering mesh (Shannon entropy of active positions)
# ---------------------------------------------------------------------------
ENTROPY_NX = 16
ENTROPY_NY = 9
