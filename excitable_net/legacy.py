"""Excitable network on a random undirected graph plus ring neighbours."""

from __future__ import annotations

from bisect import bisect_right
from enum import Enum

from .rng import Crandom

_INITIAL_CUTS = (0.2, 0.3, 0.4, 0.5, 0.6, 0.65, 0.72, 0.79, 0.86, 0.93)
_MAX_LEVEL = 10


class _State(Enum):
    REST = "rest"
    FIRING = "firing"
    HYPERPOLARIZED = "hyperpolarized"
    REFRACTORY = "refractory"


def _state_for(level):
    if level == 0:
        return _State.REST
    if 1 <= level <= 4:
        return _State.FIRING
    if level == 5:
        return _State.HYPERPOLARIZED
    if 6 <= level <= _MAX_LEVEL:
        return _State.REFRACTORY
    raise ValueError(f"invalid neuron level {level}")


_POTENTIAL = {
    _State.REST: -70.0,
    _State.FIRING: 40.0,
    _State.HYPERPOLARIZED: -90.0,
    _State.REFRACTORY: -75.0,
}


def _random_connections(n, count):
    rng = Crandom(9)
    seen = set()
    connections = []
    while len(connections) < count:
        first = int(rng.r() * n)
        second = int(rng.r() * (n - 1))
        if second >= first:
            second += 1
        key = (min(first, second), max(first, second))
        if key not in seen:
            seen.add(key)
            connections.append((first, second))
    return connections


class LegacyNetwork:
    """Network of ``side**2`` neurons joined by ``q * side**2`` random edges.

    ``connections`` lists the edges in generation order, ``neighbors``
    the neurons each one reaches, ``levels`` the cycle positions (0-10)
    and ``inhibitory`` the per-neuron flags drawn by :meth:`start`.
    """

    State = _State

    def __init__(self, side=40, q=20, t_rest=3.0, t_relative=5.0, alpha=0.1):
        if side < 1:
            raise ValueError(f"side must be positive, got {side}")
        if q < 0:
            raise ValueError(f"q must not be negative, got {q}")
        n = side * side
        count = n * q
        capacity = n * (n - 1) // 2
        if count > capacity:
            raise ValueError(f"{count} connections requested, only {capacity} possible")
        self.side = side
        self.t_rest = t_rest
        self.t_relative = t_relative
        self.alpha = alpha
        self.connections = _random_connections(n, count)
        self.neighbors = [[] for _ in range(n)]
        for first, second in self.connections:
            self.neighbors[first].append(second)
            self.neighbors[second].append(first)
        self.levels = [0] * n
        self.inhibitory = [False] * n

    def start(self, rng):
        """Draw initial levels and inhibitory flags from ``rng``."""
        n = len(self.levels)
        self.levels = [bisect_right(_INITIAL_CUTS, rng.r()) for _ in range(n)]
        self.inhibitory = [rng.r() < 0.5 for _ in range(n)]

    def state(self, ix):
        """Return the state of neuron ``ix``."""
        return _state_for(self.levels[ix])

    def query(self, neu):
        """Return the net drive on neuron ``neu``."""
        excitatory = inhibitory = hyperpolarized = 0
        last = None
        # The inhibitory flag of a graph neighbour is read by its position
        # in the neighbour list; ring neighbours use their own flag.
        for position, other in enumerate(self.neighbors[neu]):
            last = self.state(other)
            if last is _State.FIRING:
                if self.inhibitory[position]:
                    inhibitory += 1
                else:
                    excitatory += 1
            elif last is _State.HYPERPOLARIZED:
                hyperpolarized += 1
        n = len(self.levels)
        for offset in (1, 2):
            for ring_neighbour in ((neu + offset) % n, (neu - offset) % n):
                if self.state(ring_neighbour) is _State.FIRING:
                    if self.inhibitory[ring_neighbour]:
                        inhibitory += 1
                    else:
                        excitatory += 1
                elif last is _State.HYPERPOLARIZED:
                    hyperpolarized += 1
        return excitatory - inhibitory - self.alpha * hyperpolarized

    def potential(self, ix):
        """Return the membrane potential (mV) of neuron ``ix``."""
        return _POTENTIAL[self.state(ix)]

    def temporal_series(self):
        """Return the value recorded at each time step: the firing count."""
        return self.active_neurons()

    def active_neurons(self):
        """Return the number of firing neurons."""
        return sum(1 for ix in range(len(self.levels)) if self.state(ix) is _State.FIRING)

    def evolve(self):
        """Advance every neuron by one synchronous step.

        Resting neurons compare against the most recent drive computed for a
        refractory neuron earlier in the same step (zero if none).
        """
        drive = 0.0
        updated = []
        for ix, level in enumerate(self.levels):
            current = self.state(ix)
            if current is _State.REST:
                updated.append(level + 1 if drive >= self.t_rest else 0)
            elif current in (_State.FIRING, _State.HYPERPOLARIZED):
                updated.append(level + 1)
            else:
                drive = self.query(ix)
                if drive < self.t_relative:
                    updated.append(level)
                else:
                    updated.append(0 if level == _MAX_LEVEL else level + 1)
        self.levels = updated