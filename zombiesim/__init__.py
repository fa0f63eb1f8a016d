"""Zombie outbreak cellular-automaton simulation on procedurally generated terrain."""

__version__ = "0.1.0"
__all__ = ["simulation", "terrain", "zombie_state"]