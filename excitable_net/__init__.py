"""Cellular-automaton simulation of excitable neural networks: connectivity matrices, networks and seeded generators."""

__version__ = "0.1.0"