"""EventNest: scheduling and friendship state over hand-built containers."""

__version__ = '0.1.0'
