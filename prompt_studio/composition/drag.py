"""Drag-and-drop hover resolution"""
from dataclasses import dataclass

from prompt_studio.composition.items import PromptRef


@dataclass(frozen=True)
class DragDescriptor:
    """Item being dragged and the position it currently occupies"""
    prompt_id: PromptRef
    index: int


@dataclass(frozen=True)
class HoverGeometry:
    """Vertical bounds of the hovered item and the pointer position (screen units)"""
    top: float
    bottom: float
    pointer_y: float

    @property
    def middle_offset(self) -> float:
        return (self.bottom - self.top) / 2

    @property
    def pointer_offset(self) -> float:
        return self.pointer_y - self.top


def crosses_midpoint(drag_index: int, hover_index: int, geometry: HoverGeometry) -> bool:
    """
    Whether hovering should reorder.

    Dragging downwards moves only once the pointer is past the hovered item's
    vertical middle; dragging upwards only once it is above the middle.
    """
    if drag_index == hover_index:
        return False
    if drag_index < hover_index and geometry.pointer_offset < geometry.middle_offset:
        return False
    if drag_index > hover_index and geometry.pointer_offset > geometry.middle_offset:
        return False
    return True
