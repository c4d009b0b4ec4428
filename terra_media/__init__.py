"""A terminal role-playing game about carrying the ring to Mount Doom."""

__version__ = "1.0.0"
__all__ = ["inventory", "structures", "world", "game"]