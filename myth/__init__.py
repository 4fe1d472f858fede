"""Ethereum phase 0 constants, fixed-size byte types, SSZ collections, containers and beacon state."""

__version__ = "0.1.0"
__all__ = ["alias", "constants", "ssz", "containers", "state", "cli"]