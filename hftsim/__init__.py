"""Toy high-frequency trading simulators: passive market making and pair trading."""

__version__ = "0.1.0"