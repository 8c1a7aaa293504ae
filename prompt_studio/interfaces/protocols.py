"""
Interface protocols for the prompt library.

Services and the composer depend on these protocols, not on the in-memory
implementations, so they can be tested with doubles.
"""

from typing import Any, Dict, List, Mapping, Optional, Protocol, TypeVar

from prompt_studio.domain import (
    Category,
    NewCategory,
    NewCombination,
    NewPrompt,
    NewTemplate,
    Prompt,
    PromptCombination,
    Template,
)

E = TypeVar("E")
I = TypeVar("I", contravariant=True)


class IEntityStore(Protocol[E, I]):
    """
    Keyed record store for one entity kind.

    Implementations:
    - InMemoryEntityStore (volatile, per process)
    """

    def list(self) -> List[E]:
        """Return all records."""
        ...

    def get_by_id(self, entity_id: int) -> Optional[E]:
        """Return the record or None."""
        ...

    def create(self, data: I) -> E:
        """Assign the next id, fill defaults, store and return the record."""
        ...

    def update(self, entity_id: int, changes: Mapping[str, Any]) -> Optional[E]:
        """Merge provided fields over the record; None when id is unknown."""
        ...

    def delete(self, entity_id: int) -> bool:
        """True if a record existed and was removed."""
        ...


class IPromptLibrary(Protocol):
    """
    Storage for the four entity kinds.

    Implementations:
    - InMemoryPromptLibrary
    """

    categories: IEntityStore[Category, NewCategory]
    prompts: IEntityStore[Prompt, NewPrompt]
    combinations: IEntityStore[PromptCombination, NewCombination]
    templates: IEntityStore[Template, NewTemplate]

    def list_prompts_by_category(self, category_id: int) -> List[Prompt]:
        """Prompts whose category_id equals the filter."""
        ...

    def category_counts(self) -> Dict[int, int]:
        """Prompt count per category id."""
        ...


class ICombinationBridge(Protocol):
    """
    Seam between the composer and combination storage.

    Implementations:
    - LocalCombinationBridge (in-process store)
    - CombinationClient (HTTP, POST /api/combinations)
    """

    async def create_combination(
        self,
        name: str,
        prompt_ids: List[int],
        order: List[int]
    ) -> PromptCombination:
        """Create the combination; raise CombinationStorageError on failure."""
        ...
