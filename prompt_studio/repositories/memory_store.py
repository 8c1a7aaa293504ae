"""In-memory keyed entity store"""
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, TypeVar

logger = logging.getLogger(__name__)

E = TypeVar("E")
I = TypeVar("I")

EntityBuilder = Callable[[int, I, datetime], E]
EntityMerger = Callable[[E, Mapping[str, Any]], E]


class InMemoryEntityStore(Generic[E, I]):
    """
    Volatile store for one entity kind.

    Ids come from a per-store counter that starts at 1 and is never rewound,
    so an id is not reused after its record is deleted. The store has no
    knowledge of other stores: deletes never cascade.
    """

    def __init__(self, kind: str, build: EntityBuilder, merge: EntityMerger):
        """
        Args:
            kind: Entity kind name, used in log messages
            build: Creates the stored entity from (id, insert data, creation time)
            merge: Returns a new entity with the provided fields applied
        """
        self.kind = kind
        self._build = build
        self._merge = merge
        self._records: Dict[int, E] = {}
        self._next_id = 1

    def __len__(self) -> int:
        return len(self._records)

    def list(self) -> List[E]:
        """Get all records"""
        return list(self._records.values())

    def get_by_id(self, entity_id: int) -> Optional[E]:
        """Get record by ID"""
        return self._records.get(entity_id)

    def create(self, data: I) -> E:
        """Create new record"""
        entity_id = self._next_id
        self._next_id += 1

        entity = self._build(entity_id, data, datetime.now(timezone.utc))
        self._records[entity_id] = entity
        logger.debug(f"Created {self.kind} {entity_id}")
        return entity

    def update(self, entity_id: int, changes: Mapping[str, Any]) -> Optional[E]:
        """Merge provided fields over an existing record"""
        existing = self._records.get(entity_id)
        if existing is None:
            return None

        updated = self._merge(existing, changes)
        self._records[entity_id] = updated
        logger.debug(f"Updated {self.kind} {entity_id}: {sorted(changes)}")
        return updated

    def delete(self, entity_id: int) -> bool:
        """Delete record"""
        if self._records.pop(entity_id, None) is None:
            return False
        logger.debug(f"Deleted {self.kind} {entity_id}")
        return True
