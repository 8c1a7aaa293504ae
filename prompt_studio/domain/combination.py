"""PromptCombination domain entity"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class NewCombination:
    """Insert shape for a combination"""
    name: str
    prompt_ids: Optional[List[int]] = None
    order: Optional[List[int]] = None


@dataclass
class PromptCombination:
    """Persisted, named snapshot of a composition"""
    id: int
    name: str
    created_at: datetime
    prompt_ids: List[int] = field(default_factory=list)
    order: List[int] = field(default_factory=list)  # Parallel to prompt_ids
