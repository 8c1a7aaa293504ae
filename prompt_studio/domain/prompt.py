"""Prompt domain entity"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class NewPrompt:
    """Insert shape for a prompt"""
    title: str
    content: str
    category_id: Optional[int] = None
    tags: Optional[List[str]] = None


@dataclass
class Prompt:
    """Stored reusable text fragment"""
    id: int
    title: str
    content: str
    created_at: datetime
    category_id: Optional[int] = None  # FK to Category, not enforced
    tags: List[str] = field(default_factory=list)
