# excitable-net

A small library for simulating excitable neural networks as a cellular
automaton. Each of the `side × side` neurons carries an integer level from
0 to 10:

| level | state              |
|-------|--------------------|
| 0     | rest               |
| 1–4   | firing             |
| 5     | hyperpolarized     |
| 6–10  | refractory         |

All random draws are seeded, so the same arguments always give the same
matrices and the same runs.

## Installation

```
pip install .
```

The package has no runtime dependencies. Install the `test` extra to run the
test suite with pytest.

## Modules

### `excitable_net.connectivity`

Signed `side² × side²` connection matrices as lists of lists: `1` is an
excitatory link, `-1` an inhibitory one, `0` no link.

- `regular(side, inhibitory)` – periodic square lattice, each node linked to
  its four neighbours with randomly drawn signs.
- `small_world_uni(side, p, inhibitory)` and `small_world_bi(side, p, inhibitory)`
  – the lattice with links rewired to random targets with probability `p`,
  one direction or both.
- `random_uni(side, p, inhibitory)` and `random_bi(side, p, inhibitory)` –
  random directed or symmetric graphs with link probability `p`.
- `MatrixType` – the kinds above, numbered 0 to 4 in that order
  (`REGULAR`, `SMALL_WORLD_UNI`, `SMALL_WORLD_BI`, `RANDOM_BI`, `RANDOM_UNI`).
- `build_matrix(kind, side, p, inhibitory)` – builds a matrix from a
  `MatrixType`, an integer code (unknown codes give the regular lattice) or
  one of the names `regular`, `small_word_uni`, `small_word_Bi`, `random_bi`,
  `random_uni` (unknown names raise `ValueError`).
- `format_matrix(matrix)` – renders a matrix as text, each value followed by
  a space, one row per line.

### `excitable_net.network`

`NeuralNetwork(side, p, inhibitory, t_rest, t_relative, alpha, matrix_type, profile)`
builds its matrix with `build_matrix` and simulates it:

- `initialize()` draws the initial levels.
- `rule(ix)` returns `Ce - Ci - alpha * Ch` over the neurons linked to `ix`:
  firing neurons on excitatory links, firing neurons on inhibitory links, and
  hyperpolarized neurons.
- `evolve()` advances all neurons at once. A resting neuron moves to level 1
  when its rule reaches `t_rest` and stays at 0 otherwise; firing and
  hyperpolarized neurons advance one level; a refractory neuron jumps back to
  level 1 when its rule reaches `t_relative`, otherwise it advances, wrapping
  from 10 to 0.
- `snapshot()` returns `(firing neurons, total potential)`,
  `total_potential()` the summed potential alone, and `final_state()` the
  levels as a `side × side` grid of text.

`PotentialProfile.STATE` gives one potential per state with a shaped spike
while firing; `PotentialProfile.LEVEL` gives a distinct value per level.
`State` and `state_of(level)` map levels to states.

```python
from excitable_net.network import NeuralNetwork, PotentialProfile
from excitable_net.connectivity import MatrixType

net = NeuralNetwork(20, 0.1, 0.4, 0.0, 1.0, 0.1,
                    MatrixType.SMALL_WORLD_UNI, PotentialProfile.STATE)
net.initialize()
for _ in range(100):
    print(*net.snapshot())
    net.evolve()
print(net.final_state())
```

### `excitable_net.lattice`

Unsigned 0/1 matrices: `lattice(side)` gives the periodic square grid, and
`add_random_directed(matrix, side, q)` and `add_random_symmetric(matrix, side, q)`
add `q * side²` directed or `q * q` undirected random links in place.

### `excitable_net.legacy`

`LegacyNetwork(side=40, q=20, t_rest=3.0, t_relative=5.0, alpha=0.1)` is a
network on `q * side²` random undirected edges plus ring neighbours, with
potentials in millivolts. Call `start(rng)` with a `Crandom`, then
`temporal_series()` (the number of firing neurons) and `evolve()` each step.

```python
from excitable_net.legacy import LegacyNetwork
from excitable_net.rng import Crandom

net = LegacyNetwork()
net.start(Crandom(1))
for _ in range(10):
    print(net.temporal_series())
    net.evolve()
```

### `excitable_net.rng`

`Crandom` is a 64-bit generator with `int64`, `int32`, `r`, `exponential`
and `gauss`. `MT19937` is the 32-bit Mersenne Twister, and `UniformReal` and
`UniformInt` draw uniform reals and integers from it.

## What the package does not do

There are no command-line tools: simulations are run from Python as shown
above, and nothing reads parameter files. The unsigned matrices from
`excitable_net.lattice` can be built and extended, but no network class in the
package runs on them; `NeuralNetwork` always builds its own signed matrix.