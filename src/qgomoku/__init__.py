"""Quantum Gomoku: a desktop client for five-in-a-row with quantum stones."""

__version__ = "0.1.0"
