"""
One-group collision physics and time-stepped transport.

Implements:
- Collision type: capture if xi < Sigma_c/Sigma_t,
  fission if xi < (Sigma_c + Sigma_f)/Sigma_t, otherwise scatter
- Fission: nu rounded stochastically to an integer n; the parent carries
  on as one secondary and n - 1 new neutrons are spawned at its position
- After every collision the neutron gets a new flight and direction
- Streaming: s = v * dt per tick, then toroidal wrap of x and y

A collision is resolved at the start of the tick in which the remaining
flight distance has gone negative, not at the exact crossing point.
A neutron therefore overshoots its collision site by less than v * dt.
"""
from .errors import ConfigurationError
from .tallies import StepTally

# Collision outcomes
CAPTURE = 0
FISSION = 1
SCATTER = 2


def sample_fission_yield(nu, sampler):
    """Integer number of fission neutrons with mean exactly nu."""
    n_new = int(nu)
    if sampler.uniform() < nu - n_new:
        n_new += 1
    return n_new


def resolve_collision(store, index, xs, sampler, tally=None):
    """Resolve the pending collision of neutron ``index``.

    Draw order, which fixes the reproducible sequence:
      xi, [fission: yield xi, then per secondary: direction, flight],
      parent flight, parent direction

    A captured neutron still redraws its flight and direction so that
    every outcome consumes the same kind of draws.

    Args:
        store: ParticleStore
        index: slot of a live neutron
        xs: CrossSections
        sampler: RandomSampler
        tally: optional StepTally to count the outcome

    Returns:
        CAPTURE, FISSION or SCATTER
    """
    xi = sampler.uniform()

    if xi < xs.capture / xs.total:
        outcome = CAPTURE
        store.deactivate(index)

    elif xi < (xs.capture + xs.fission) / xs.total:
        outcome = FISSION
        n_new = sample_fission_yield(xs.nu, sampler) - 1
        parent = store.get(index)
        for _ in range(n_new):
            child = store.acquire_slot(parent)
            ux, uy, uz = sampler.isotropic_direction()
            store.ux[child] = ux
            store.uy[child] = uy
            store.uz[child] = uz
            store.distance[child] = sampler.free_flight(xs.total)
        if tally is not None:
            tally.secondaries += n_new

    else:
        outcome = SCATTER

    store.distance[index] = sampler.free_flight(xs.total)
    ux, uy, uz = sampler.isotropic_direction()
    store.ux[index] = ux
    store.uy[index] = uy
    store.uz[index] = uz

    if tally is not None:
        if outcome == CAPTURE:
            tally.captures += 1
        elif outcome == FISSION:
            tally.fissions += 1
        else:
            tally.scatters += 1

    return outcome


def transport_step(store, xs, domain, sampler, dt):
    """Advance every live neutron by one tick of length dt.

    Neutrons spawned during the sweep at slots not yet visited are
    streamed in the same tick.

    Returns:
        StepTally for this tick
    """
    if not dt > 0.0:
        raise ConfigurationError(f"dt must be positive, got {dt!r}")

    tally = StepTally(n_before=store.n_alive)
    step_length = xs.speed * dt

    def advance(i):
        if store.distance[i] < 0.0:
            if resolve_collision(store, i, xs, sampler, tally) == CAPTURE:
                return

        x = store.x[i] + store.ux[i] * step_length
        y = store.y[i] + store.uy[i] * step_length
        store.x[i], store.y[i] = domain.wrap(x, y)
        store.z[i] += store.uz[i] * step_length
        store.distance[i] -= step_length

    store.for_each_active(advance)

    tally.n_after = store.n_alive
    return tally
