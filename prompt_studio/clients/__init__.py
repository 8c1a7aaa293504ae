"""HTTP clients."""
from .combination_client import CombinationClient

__all__ = ["CombinationClient"]
