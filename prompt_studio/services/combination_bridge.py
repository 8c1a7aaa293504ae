"""In-process combination bridge (composer -> prompt library)"""
import logging
from typing import List

from prompt_studio.domain import NewCombination, PromptCombination
from prompt_studio.exceptions import CombinationStorageError
from prompt_studio.interfaces import IPromptLibrary

logger = logging.getLogger(__name__)


class LocalCombinationBridge:
    """Creates combinations directly in the prompt library."""

    def __init__(self, library: IPromptLibrary):
        self.library = library

    async def create_combination(
        self,
        name: str,
        prompt_ids: List[int],
        order: List[int]
    ) -> PromptCombination:
        """Create the combination record"""
        if len(order) != len(prompt_ids):
            raise CombinationStorageError("order must have the same length as promptIds")

        combination = self.library.combinations.create(
            NewCombination(name=name, prompt_ids=list(prompt_ids), order=list(order))
        )
        logger.debug(f"Created combination {combination.id} in-process")
        return combination
