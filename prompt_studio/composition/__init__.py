"""Client-held composition of prompts."""
from .items import CompositionItem, ItemBuildResult, PLACEHOLDER_TITLE, build_composition_item
from .drag import DragDescriptor, HoverGeometry, crosses_midpoint
from .state import CompositionState

__all__ = [
    "CompositionItem",
    "ItemBuildResult",
    "PLACEHOLDER_TITLE",
    "build_composition_item",
    "DragDescriptor",
    "HoverGeometry",
    "crosses_midpoint",
    "CompositionState",
]
