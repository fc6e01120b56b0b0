"""Driven two-mass spring chain simulator."""

__version__ = "0.1.0"
