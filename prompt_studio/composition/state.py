"""Composition state: the ordered prompt chain a user is assembling"""
import logging
from dataclasses import replace
from typing import Any, Iterator, List, Optional, Tuple

from prompt_studio.composition.drag import DragDescriptor, HoverGeometry, crosses_midpoint
from prompt_studio.composition.items import CompositionItem, PromptRef, build_composition_item
from prompt_studio.domain import PromptCombination
from prompt_studio.exceptions import CombinationSaveError, SaveFailureReason
from prompt_studio.interfaces import ICombinationBridge

logger = logging.getLogger(__name__)

SEPARATOR = "\n\n"


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class CompositionState:
    """
    Ordered sequence of composition items owned by one UI session.

    Every structural change rebuilds the sequence so that each item's index
    equals its offset. Malformed input (bad payloads, out-of-range indices)
    is logged and ignored; only save_as raises.

    Example:
        state = CompositionState(bridge)
        state.add(greeting)
        state.add(format_json)
        state.move(1, 0)
        combination = await state.save_as("Support reply")
    """

    def __init__(self, bridge: Optional[ICombinationBridge] = None):
        """
        Args:
            bridge: Combination storage used by save_as
        """
        self._bridge = bridge
        self._items: List[CompositionItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[CompositionItem]:
        return iter(tuple(self._items))

    @property
    def items(self) -> Tuple[CompositionItem, ...]:
        return tuple(self._items)

    def prompt_ids(self) -> List[PromptRef]:
        return [item.prompt_id for item in self._items]

    def _replace_items(self, items: List[CompositionItem]) -> None:
        self._items = [
            item if item.index == position else replace(item, index=position)
            for position, item in enumerate(items)
        ]

    def add(self, source: Any) -> Optional[CompositionItem]:
        """
        Append a prompt at the last position.

        Returns:
            The stored item, or None when the payload was rejected
        """
        result = build_composition_item(source, index=len(self._items))
        if not result.ok:
            logger.warning(f"Ignoring dropped prompt: {result.error}")
            return None

        self._items.append(result.item)
        return result.item

    def remove(self, prompt_id: PromptRef) -> bool:
        """Remove the first item with this prompt id"""
        for position, item in enumerate(self._items):
            if item.prompt_id == prompt_id and type(item.prompt_id) is type(prompt_id):
                remaining = self._items[:position] + self._items[position + 1:]
                self._replace_items(remaining)
                return True

        logger.debug(f"Remove ignored, prompt {prompt_id!r} not in composition")
        return False

    def move(self, source_index: int, target_index: int) -> bool:
        """
        Move an item from source_index to target_index.

        The target is applied to the sequence after the item has been taken
        out, so moving forward lands one slot earlier than the pre-removal
        target position.

        Returns:
            True if the sequence changed
        """
        size = len(self._items)
        if not (_is_index(source_index) and _is_index(target_index)):
            logger.warning(f"Move ignored, non-integer indices ({source_index!r}, {target_index!r})")
            return False
        if not (0 <= source_index < size and 0 <= target_index < size):
            logger.warning(f"Move ignored, indices ({source_index}, {target_index}) outside 0..{size - 1}")
            return False
        if source_index == target_index:
            return False

        items = list(self._items)
        moved = items.pop(source_index)
        items.insert(target_index, moved)
        self._replace_items(items)
        return True

    def move_up(self, index: int) -> bool:
        """Swap an item with the one above it"""
        if not _is_index(index) or index <= 0:
            return False
        return self.move(index, index - 1)

    def move_down(self, index: int) -> bool:
        """Swap an item with the one below it"""
        if not _is_index(index) or index >= len(self._items) - 1:
            return False
        return self.move(index, index + 1)

    def hover(
        self,
        drag: DragDescriptor,
        hover_index: int,
        geometry: Optional[HoverGeometry] = None
    ) -> DragDescriptor:
        """
        Handle one hover tick of an in-composition drag.

        Reorders when the pointer has crossed the hovered item's midpoint
        (always, when no geometry is given) and returns a new descriptor with
        the dragged item's current index. The given descriptor is not changed.
        """
        if geometry is not None and _is_index(drag.index) and _is_index(hover_index):
            if not crosses_midpoint(drag.index, hover_index, geometry):
                return DragDescriptor(prompt_id=drag.prompt_id, index=drag.index)

        if self.move(drag.index, hover_index):
            return DragDescriptor(prompt_id=drag.prompt_id, index=hover_index)
        return DragDescriptor(prompt_id=drag.prompt_id, index=drag.index)

    def clear(self) -> None:
        self._items = []

    def combined_text(self) -> str:
        """Trimmed contents of all items, blank ones dropped, separated by a blank line"""
        parts = (item.content.strip() for item in self._items)
        return SEPARATOR.join(part for part in parts if part)

    def character_count(self) -> int:
        return len(self.combined_text())

    async def save_as(self, name: str) -> PromptCombination:
        """
        Persist the composition as a named combination.

        The composition itself is left untouched whether the save succeeds
        or fails, so a failed save can be retried.

        Raises:
            CombinationSaveError: With the reason the save could not happen
        """
        clean_name = name.strip() if isinstance(name, str) else ""
        if not clean_name:
            raise CombinationSaveError(
                SaveFailureReason.EMPTY_NAME,
                "Combination name must not be empty"
            )

        if not self._items:
            raise CombinationSaveError(
                SaveFailureReason.EMPTY_COMPOSITION,
                "Cannot save an empty composition"
            )

        prompt_ids = [item.prompt_id for item in self._items if item.has_stored_id]
        if not prompt_ids:
            raise CombinationSaveError(
                SaveFailureReason.NO_VALID_IDS,
                "Composition has no saved prompts to reference"
            )

        if self._bridge is None:
            raise CombinationSaveError(
                SaveFailureReason.STORAGE,
                "No combination storage configured"
            )

        order = list(range(len(prompt_ids)))
        skipped = len(self._items) - len(prompt_ids)
        if skipped:
            logger.warning(f"Saving '{clean_name}' without {skipped} unsaved draft prompt(s)")

        try:
            combination = await self._bridge.create_combination(clean_name, prompt_ids, order)
        except Exception as e:
            logger.error(f"Failed to save combination '{clean_name}': {e}")
            raise CombinationSaveError(
                SaveFailureReason.STORAGE,
                f"Failed to save combination: {e}"
            ) from e

        logger.info(f"Saved combination '{clean_name}' as {combination.id} ({len(prompt_ids)} prompts)")
        return combination
