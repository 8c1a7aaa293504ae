"""Services package."""
from .combination_bridge import LocalCombinationBridge

__all__ = ["LocalCombinationBridge"]
