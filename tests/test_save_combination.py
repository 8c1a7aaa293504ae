"""Tests for saving a composition through a combination bridge."""
import pytest
from unittest.mock import AsyncMock

from prompt_studio.composition import CompositionState
from prompt_studio.exceptions import CombinationSaveError, CombinationStorageError, SaveFailureReason
from prompt_studio.services.combination_bridge import LocalCombinationBridge


class TestSavePreconditions:
    """Failures that never reach storage."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", "   ", "\n\t"])
    async def test_blank_name_fails(self, abc_composition, mock_bridge, name):
        with pytest.raises(CombinationSaveError) as exc_info:
            await abc_composition.save_as(name)

        assert exc_info.value.reason is SaveFailureReason.EMPTY_NAME
        mock_bridge.create_combination.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_composition_fails(self, composition, mock_bridge):
        with pytest.raises(CombinationSaveError) as exc_info:
            await composition.save_as("My chain")

        assert exc_info.value.reason is SaveFailureReason.EMPTY_COMPOSITION
        assert "empty" in exc_info.value.message
        mock_bridge.create_combination.assert_not_called()

    @pytest.mark.asyncio
    async def test_only_draft_items_fails(self, composition, mock_bridge):
        composition.add({"title": "Unsaved", "content": "Draft text"})

        with pytest.raises(CombinationSaveError) as exc_info:
            await composition.save_as("Drafts")

        assert exc_info.value.reason is SaveFailureReason.NO_VALID_IDS
        mock_bridge.create_combination.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_bridge_fails(self, prompt_a):
        state = CompositionState()
        state.add(prompt_a)

        with pytest.raises(CombinationSaveError) as exc_info:
            await state.save_as("Nowhere")

        assert exc_info.value.reason is SaveFailureReason.STORAGE


class TestSaveSuccess:
    """Requests shaped for the bridge."""

    @pytest.mark.asyncio
    async def test_save_sends_ids_and_order(self, abc_composition, mock_bridge):
        combination = await abc_composition.save_as("  Support reply  ")

        mock_bridge.create_combination.assert_awaited_once_with("Support reply", [1, 2, 3], [0, 1, 2])
        assert combination.id == 7
        assert combination.name == "Support reply"
        assert combination.prompt_ids == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_save_follows_current_order(self, abc_composition, mock_bridge):
        abc_composition.move(0, 2)

        await abc_composition.save_as("Reordered")

        mock_bridge.create_combination.assert_awaited_once_with("Reordered", [2, 3, 1], [0, 1, 2])

    @pytest.mark.asyncio
    async def test_save_skips_draft_items(self, composition, mock_bridge, prompt_a, prompt_c):
        composition.add(prompt_a)
        composition.add({"title": "Draft", "content": "Unsaved"})
        composition.add(prompt_c)

        await composition.save_as("Mixed")

        mock_bridge.create_combination.assert_awaited_once_with("Mixed", [1, 3], [0, 1])

    @pytest.mark.asyncio
    async def test_save_does_not_change_composition(self, abc_composition):
        before = abc_composition.items

        await abc_composition.save_as("Snapshot")

        assert abc_composition.items == before


class TestSaveStorageFailure:
    """Storage errors surface as STORAGE failures."""

    @pytest.mark.asyncio
    async def test_storage_error_propagates_with_message(self, abc_composition):
        bridge = AsyncMock()
        bridge.create_combination.side_effect = CombinationStorageError("Name already taken", status_code=400)
        abc_composition._bridge = bridge
        before = abc_composition.items

        with pytest.raises(CombinationSaveError) as exc_info:
            await abc_composition.save_as("Taken")

        assert exc_info.value.reason is SaveFailureReason.STORAGE
        assert "Name already taken" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, CombinationStorageError)
        assert abc_composition.items == before

    @pytest.mark.asyncio
    async def test_unexpected_bridge_error_is_wrapped(self, prompt_a):
        bridge = AsyncMock()
        bridge.create_combination.side_effect = RuntimeError("connection reset")
        state = CompositionState(bridge=bridge)
        state.add(prompt_a)

        with pytest.raises(CombinationSaveError) as exc_info:
            await state.save_as("Retry me")

        assert exc_info.value.reason is SaveFailureReason.STORAGE
        assert len(state) == 1


class TestLocalCombinationBridge:
    """In-process bridge into the prompt library."""

    @pytest.mark.asyncio
    async def test_save_creates_combination_in_library(self, library, prompt_a, prompt_b):
        state = CompositionState(bridge=LocalCombinationBridge(library))
        state.add(prompt_b)
        state.add(prompt_a)

        combination = await state.save_as("Local")

        stored = library.combinations.get_by_id(combination.id)
        assert stored.name == "Local"
        assert stored.prompt_ids == [2, 1]
        assert stored.order == [0, 1]
        assert len(stored.order) == len(stored.prompt_ids)

    @pytest.mark.asyncio
    async def test_bridge_rejects_mismatched_order(self, library):
        bridge = LocalCombinationBridge(library)

        with pytest.raises(CombinationStorageError):
            await bridge.create_combination("Broken", [1, 2], [0])

        assert library.combinations.list() == []
