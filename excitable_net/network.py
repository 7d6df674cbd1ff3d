"""Excitable network driven by a signed connectivity matrix."""

from __future__ import annotations

from bisect import bisect_right
from enum import Enum

from .connectivity import MatrixType, build_matrix, format_matrix
from .rng import MT19937, UniformReal

_INITIAL_CUTS = (0.2, 0.3, 0.4, 0.5, 0.6, 0.65, 0.72, 0.79, 0.86, 0.93)
_MAX_LEVEL = 10


class State(Enum):
    """Phase of a neuron's cycle."""

    REST = "rest"
    FIRING = "firing"
    HYPERPOLARIZED = "hyperpolarized"
    REFRACTORY = "refractory"


def state_of(level):
    """Return the :class:`State` of a neuron at cycle position ``level`` (0-10)."""
    if level == 0:
        return State.REST
    if 1 <= level <= 4:
        return State.FIRING
    if level == 5:
        return State.HYPERPOLARIZED
    if 6 <= level <= _MAX_LEVEL:
        return State.REFRACTORY
    raise ValueError(f"invalid neuron level {level}")


_STATE_POTENTIAL = {
    State.REST: -0.070,
    State.HYPERPOLARIZED: -0.090,
    State.REFRACTORY: -0.075,
}
_FIRING_POTENTIAL = {1: 0.015, 2: 0.030, 3: 0.030, 4: 0.015}

_LEVEL_POTENTIAL = (
    -0.070,
    -0.020,
    0.030,
    0.0,
    -0.040,
    -0.080,
    -0.075,
    -0.072,
    -0.0715,
    -0.0707,
    -0.0705,
)


class PotentialProfile(Enum):
    """How a neuron's level maps to a membrane potential (volts).

    ``STATE`` gives one value per state, with a shaped spike while firing;
    ``LEVEL`` gives a distinct value for every cycle position.
    """

    STATE = "state"
    LEVEL = "level"

    def potential(self, level):
        """Return the potential of a neuron at ``level`` under this profile."""
        current = state_of(level)
        if self is PotentialProfile.LEVEL:
            return _LEVEL_POTENTIAL[level]
        if current is State.FIRING:
            return _FIRING_POTENTIAL[level]
        return _STATE_POTENTIAL[current]


class NeuralNetwork:
    """Synchronous cellular network of ``side**2`` excitable neurons.

    ``matrix`` is the signed connectivity matrix built from ``matrix_type``
    and ``levels`` holds each neuron's cycle position (0-10).
    """

    def __init__(
        self,
        side,
        p,
        inhibitory,
        t_rest,
        t_relative,
        alpha,
        matrix_type=MatrixType.REGULAR,
        profile=PotentialProfile.STATE,
    ):
        if side < 1:
            raise ValueError(f"side must be positive, got {side}")
        self.side = side
        self.p = p
        self.inhibitory = inhibitory
        self.t_rest = t_rest
        self.t_relative = t_relative
        self.alpha = alpha
        self.profile = PotentialProfile(profile)
        self.matrix = build_matrix(matrix_type, side, p, inhibitory)
        self._links = [
            [(j, value) for j, value in enumerate(row) if value in (1, -1)]
            for row in self.matrix
        ]
        self.levels = [0] * (side * side)

    def initialize(self):
        """Draw initial levels from a generator seeded with 1."""
        gen = MT19937(1)
        draw = UniformReal(0.0, 1.0)
        self.levels = [
            bisect_right(_INITIAL_CUTS, draw(gen)) for _ in range(len(self.levels))
        ]

    def state(self, ix):
        """Return the state of neuron ``ix``."""
        return state_of(self.levels[ix])

    def rule(self, ix):
        """Return the net drive on neuron ``ix`` from its linked neurons."""
        excitatory = inhibitory = hyperpolarized = 0
        for other, sign in self._links[ix]:
            other_state = self.state(other)
            if other_state is State.FIRING:
                if sign == -1:
                    inhibitory += 1
                else:
                    excitatory += 1
            elif other_state is State.HYPERPOLARIZED:
                hyperpolarized += 1
        return excitatory - inhibitory - self.alpha * hyperpolarized

    def potential(self, ix):
        """Return the membrane potential of neuron ``ix``."""
        return self.profile.potential(self.levels[ix])

    def total_potential(self):
        """Return the summed potential of all neurons."""
        return sum(self.profile.potential(level) for level in self.levels)

    def snapshot(self):
        """Return ``(firing neurons, total potential)``."""
        active = sum(1 for level in self.levels if state_of(level) is State.FIRING)
        return active, self.total_potential()

    def evolve(self):
        """Advance every neuron by one synchronous step."""
        updated = []
        for ix, level in enumerate(self.levels):
            current = state_of(level)
            if current is State.REST:
                updated.append(level + 1 if self.rule(ix) >= self.t_rest else 0)
            elif current in (State.FIRING, State.HYPERPOLARIZED):
                updated.append(level + 1)
            elif self.rule(ix) >= self.t_relative:
                updated.append(1)
            else:
                updated.append(0 if level == _MAX_LEVEL else level + 1)
        self.levels = updated

    def final_state(self):
        """Render the levels as a ``side`` x ``side`` grid of text."""
        rows = [
            self.levels[i * self.side:(i + 1) * self.side] for i in range(self.side)
        ]
        return format_matrix(rows)