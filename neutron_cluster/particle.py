"""
Particle store: a growable Structure-of-Arrays arena of neutron slots.

Slots are never removed. A captured neutron is only marked dead and its
slot is handed out again by the next fission. Slot reuse is
lowest-index-first (a min-heap of dead slots), which is the same slot a
linear scan for the first dead neutron would find, in O(log n).

Indices are stable; array objects are not. Appending past capacity
reallocates every field array, so callers hold slot indices, never views.
"""
import heapq
from dataclasses import dataclass

import numpy as np

from .constants import NEEDS_FLIGHT
from .errors import ConfigurationError


@dataclass
class Particle:
    """Value copy of one slot."""
    x: float
    y: float
    z: float
    ux: float
    uy: float
    uz: float
    distance: float    # remaining flight; < 0 means resolve a collision first
    alive: bool
    tag: int           # lineage label, copied to secondaries, never read by physics


@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of every slot, handed to the renderer after a step."""
    x: np.ndarray       # float64[size]
    y: np.ndarray
    z: np.ndarray
    tag: np.ndarray     # int64[size]
    alive: np.ndarray   # bool[size]

    @property
    def n_slots(self):
        return len(self.x)

    @property
    def n_alive(self):
        return int(np.sum(self.alive))

    @property
    def positions(self):
        """Active positions as float64[n_alive, 2]."""
        return np.column_stack((self.x[self.alive], self.y[self.alive]))


class ParticleStore:
    """Dynamically growing particle arena.

    Field arrays are allocated with spare capacity; ``size`` counts the
    slots in use (alive or dead). Capacity doubles when exhausted.
    """

    _FIELDS = ("x", "y", "z", "ux", "uy", "uz", "distance", "alive", "tag")

    def __init__(self, capacity=16):
        capacity = max(1, int(capacity))
        self.x = np.zeros(capacity)
        self.y = np.zeros(capacity)
        self.z = np.zeros(capacity)
        self.ux = np.zeros(capacity)
        self.uy = np.zeros(capacity)
        self.uz = np.ones(capacity)
        self.distance = np.full(capacity, NEEDS_FLIGHT)
        self.alive = np.zeros(capacity, dtype=bool)
        self.tag = np.zeros(capacity, dtype=np.int64)
        self.size = 0
        self._free = []     # min-heap of dead slot indices < size

    @property
    def capacity(self):
        return len(self.x)

    @property
    def n_alive(self):
        return int(np.sum(self.alive[:self.size]))

    def __len__(self):
        return self.size

    @classmethod
    def initialize(cls, n_requested, domain, sampler):
        """Lay out a 2:1 lattice of live neutrons plus equal dead reserve.

        Args:
            n_requested: requested neutron count (rounded to the lattice)
            domain: ToroidalDomain
            sampler: RandomSampler, one direction drawn per neutron in
                row-major order

        Returns:
            ParticleStore with 2 * n_lattice slots, the first half alive
        """
        if isinstance(n_requested, bool) or not isinstance(n_requested, (int, np.integer)):
            raise ConfigurationError(
                f"particle count must be an integer, got {n_requested!r}"
            )
        if n_requested <= 0:
            raise ConfigurationError(
                f"particle count must be positive, got {n_requested}"
            )

        positions = domain.grid_positions(int(n_requested))
        n = len(positions)
        store = cls(capacity=2 * n)

        for i, (x, y) in enumerate(positions):
            ux, uy, uz = sampler.isotropic_direction()
            store._append(Particle(x, y, 0.0, ux, uy, uz, NEEDS_FLIGHT, True, i))

        # Reserve room for early fission growth
        for _ in range(n):
            store._append(Particle(0.0, 0.0, 0.0, 0.0, 0.0, 1.0, NEEDS_FLIGHT, False, -1))

        return store

    def get(self, index):
        """Copy slot ``index`` out as a Particle."""
        if not 0 <= index < self.size:
            raise IndexError(f"slot {index} out of range (size {self.size})")
        return Particle(
            x=float(self.x[index]),
            y=float(self.y[index]),
            z=float(self.z[index]),
            ux=float(self.ux[index]),
            uy=float(self.uy[index]),
            uz=float(self.uz[index]),
            distance=float(self.distance[index]),
            alive=bool(self.alive[index]),
            tag=int(self.tag[index]),
        )

    def acquire_slot(self, template):
        """Copy ``template`` into the lowest dead slot, or append one.

        The acquired slot is always marked alive.

        Returns:
            int slot index
        """
        if self._free:
            index = heapq.heappop(self._free)
        else:
            if self.size == self.capacity:
                self._grow(2 * self.capacity)
            index = self.size
            self.size += 1
        self._write(index, template)
        self.alive[index] = True
        return index

    def deactivate(self, index):
        """Mark slot dead. Field values are left in place."""
        if not 0 <= index < self.size:
            raise IndexError(f"slot {index} out of range (size {self.size})")
        if self.alive[index]:
            self.alive[index] = False
            heapq.heappush(self._free, index)

    def for_each_active(self, fn):
        """Call fn(index) for every live slot in store order.

        Slots appended by fn during the sweep are visited in the same sweep.
        A dead slot revived at an index not yet reached is visited too.
        """
        i = 0
        while i < self.size:
            if self.alive[i]:
                fn(i)
            i += 1

    def snapshot(self):
        """Read-only copy of all slots."""
        n = self.size
        arrays = {}
        for name in ("x", "y", "z", "tag", "alive"):
            arr = getattr(self, name)[:n].copy()
            arr.setflags(write=False)
            arrays[name] = arr
        return Snapshot(**arrays)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _append(self, particle):
        if self.size == self.capacity:
            self._grow(2 * self.capacity)
        index = self.size
        self.size += 1
        self._write(index, particle)
        if not particle.alive:
            heapq.heappush(self._free, index)
        return index

    def _write(self, index, particle):
        for name in self._FIELDS:
            getattr(self, name)[index] = getattr(particle, name)

    def _grow(self, new_capacity):
        for name in self._FIELDS:
            old = getattr(self, name)
            new = np.zeros(new_capacity, dtype=old.dtype)
            new[:len(old)] = old
            setattr(self, name, new)
