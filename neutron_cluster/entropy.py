"""
Clustering diagnostics for the live neutron population.

Shannon entropy of active positions on a coarse (x, y) mesh:

H = -sum_i (p_i * ln(p_i))

where p_i = (neutrons in bin i) / (live neutrons). A uniform population
sits near ln(n_x * n_y); clustering of fission lineages drives H down.
The number of distinct surviving lineage tags is tracked alongside.
"""
import numpy as np
from .constants import ENTROPY_NX, ENTROPY_NY


class ClusteringMonitor:
    """Shannon entropy and lineage count of the active population."""

    def __init__(self, domain, n_x=ENTROPY_NX, n_y=ENTROPY_NY):
        self.n_x = n_x
        self.n_y = n_y
        self.x_edges = np.linspace(0.0, domain.width, n_x + 1)
        self.y_edges = np.linspace(0.0, domain.height, n_y + 1)

        self.history = []
        self.lineage_history = []
        self.max_entropy = np.log(n_x * n_y)  # maximum possible entropy

    def compute(self, snapshot):
        """Compute Shannon entropy of the live neutrons in a Snapshot.

        Args:
            snapshot: Snapshot from ParticleStore.snapshot()

        Returns:
            H: Shannon entropy value (0.0 for an empty population)
        """
        alive = snapshot.alive
        n_lineages = int(len(np.unique(snapshot.tag[alive])))
        self.lineage_history.append(n_lineages)

        if not np.any(alive):
            self.history.append(0.0)
            return 0.0

        counts, _, _ = np.histogram2d(
            snapshot.x[alive], snapshot.y[alive],
            bins=(self.x_edges, self.y_edges),
        )
        probs = counts.flatten() / np.sum(counts)
        probs = probs[probs > 0]  # remove zeros (log(0) undefined)
        H = float(-np.sum(probs * np.log(probs)))

        self.history.append(H)
        return H

    @property
    def relative_entropy(self):
        """Latest H normalised by ln(n_x * n_y), in [0, 1]."""
        if not self.history:
            return 0.0
        return self.history[-1] / self.max_entropy

    @property
    def n_lineages(self):
        return self.lineage_history[-1] if self.lineage_history else 0
