"""
matplotlib front end for the clustering demo.

Each lineage tag gets a random saturated colour so that fission families
stay visible as they cluster. The palette draws from its own Generator;
the transport sampler never sees these draws.

Frames are drawn strictly after ClusteringSimulation.step() returns.
"""
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation

from .constants import TICK_DURATION

BACKGROUND = "#F0F0FA"
NEUTRON_SIZE = 3.0        # marker area, points^2
NEUTRON_ALPHA = 180 / 255


def random_color(rng):
    """Random RGB triple (0-255) that contrasts with a light background.

    Colours with every channel above 200 get one channel forced to 10.
    """
    rgb = rng.integers(0, 256, size=3)
    if np.all(rgb > 200):
        rgb[rng.integers(0, 3)] = 10
    return rgb


class LineagePalette:
    """Lazily assigned, stable colour per lineage tag."""

    def __init__(self, seed=1):
        self._rng = np.random.default_rng(seed)
        self._colors = {}

    def __len__(self):
        return len(self._colors)

    def color(self, tag):
        """RGB in [0, 1] for one tag."""
        tag = int(tag)
        if tag not in self._colors:
            self._colors[tag] = random_color(self._rng) / 255.0
        return self._colors[tag]

    def colors_for(self, tags):
        """RGBA float array [len(tags), 4]."""
        rgba = np.empty((len(tags), 4))
        for i, tag in enumerate(tags):
            rgba[i, :3] = self.color(tag)
        rgba[:, 3] = NEUTRON_ALPHA
        return rgba


def _style_axis(ax, domain):
    ax.set_xlim(0.0, domain.width)
    ax.set_ylim(domain.height, 0.0)   # screen orientation, y down
    ax.set_aspect("equal")
    ax.set_facecolor(BACKGROUND)
    ax.set_xticks([])
    ax.set_yticks([])


def draw_snapshot(ax, snapshot, palette, domain):
    """Scatter the live neutrons of one snapshot onto ax.

    Returns:
        matplotlib PathCollection
    """
    _style_axis(ax, domain)
    alive = snapshot.alive
    return ax.scatter(
        snapshot.x[alive], snapshot.y[alive],
        s=NEUTRON_SIZE, marker="s", linewidths=0,
        c=palette.colors_for(snapshot.tag[alive]),
    )


def animate(simulation, dt=TICK_DURATION, palette=None, interval=16, frames=None):
    """Build a live animation that steps the simulation once per frame.

    Args:
        simulation: ClusteringSimulation
        dt: tick duration (s)
        palette: LineagePalette (default seeded from the simulation seed)
        interval: delay between frames (ms)
        frames: number of frames to step and then stop, or None to run
            until the window closes

    Returns:
        (fig, FuncAnimation); keep a reference to the animation alive
    """
    if palette is None:
        palette = LineagePalette(simulation.seed)

    domain = simulation.domain
    fig, ax = plt.subplots(figsize=(domain.width / 160.0, domain.height / 160.0))
    fig.patch.set_facecolor(BACKGROUND)
    scatter = draw_snapshot(ax, simulation.snapshot(), palette, domain)
    title = ax.set_title("")

    def update(_frame):
        simulation.step(dt)
        snapshot = simulation.snapshot()
        alive = snapshot.alive
        scatter.set_offsets(snapshot.positions)
        scatter.set_facecolors(palette.colors_for(snapshot.tag[alive]))
        title.set_text(f"tick {simulation.n_ticks}   neutrons {snapshot.n_alive:,}")
        return scatter, title

    anim = FuncAnimation(fig, update, frames=frames, interval=interval,
                         repeat=frames is None, blit=False,
                         cache_frame_data=False)
    return fig, anim


def plot_history(result, path, dpi=150):
    """Save population and clustering entropy histories to a PNG."""
    ticks = np.arange(1, len(result.population_history) + 1)

    fig, (ax_n, ax_h) = plt.subplots(2, 1, figsize=(7, 5.5), sharex=True)

    ax_n.plot(ticks, result.population_history, color="#1565C0", linewidth=0.8)
    ax_n.axhline(y=result.n_initial, color="#E65100", linewidth=1.0,
                 linestyle="--", alpha=0.7, label=f"initial = {result.n_initial:,}")
    ax_n.set_ylabel("live neutrons")
    ax_n.legend(loc="upper right", fontsize=7, framealpha=0.8)

    if result.entropy_history:
        ax_h.plot(ticks[-len(result.entropy_history):], result.entropy_history,
                  color="#2E7D32", linewidth=0.8)
    ax_h.set_xlabel("tick")
    ax_h.set_ylabel("Shannon entropy H")

    for ax in (ax_n, ax_h):
        ax.spines["top"].set_visible(False)
        ax.spines["right"].set_visible(False)
        ax.grid(True, alpha=0.3, linewidth=0.4, linestyle="--")

    fig.tight_layout()
    fig.savefig(path, dpi=dpi, facecolor="white")
    plt.close(fig)
    return path
