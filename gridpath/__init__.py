"""Discrete-event simulation of individuals evolving paths across a grid."""

__version__ = "0.1.0"
