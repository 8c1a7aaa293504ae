"""
Interface protocols for dependency inversion.
"""

from .protocols import IEntityStore, IPromptLibrary, ICombinationBridge

__all__ = [
    "IEntityStore",
    "IPromptLibrary",
    "ICombinationBridge",
]
