"""API response models"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from prompt_studio.domain import Category, CategoryType, Prompt, PromptCombination, Template
from prompt_studio.models.requests import CamelModel


class CategoryResponse(CamelModel):
    id: int
    name: str

    @classmethod
    def from_domain(cls, category: Category):
        return cls(id=category.id, name=category.name)


class CategoryCountResponse(CamelModel):
    """Category with the number of prompts filed under it."""
    id: int
    name: str
    label: str
    category_type: Optional[CategoryType] = None
    count: int

    @classmethod
    def from_domain(cls, category: Category, count: int):
        return cls(
            id=category.id,
            name=category.name,
            label=category.label,
            category_type=category.category_type,
            count=count
        )


class PromptResponse(CamelModel):
    id: int
    title: str
    content: str
    category_id: Optional[int] = None
    tags: List[str] = Field(default_factory=list)
    created_at: datetime

    @classmethod
    def from_domain(cls, prompt: Prompt):
        return cls(
            id=prompt.id,
            title=prompt.title,
            content=prompt.content,
            category_id=prompt.category_id,
            tags=list(prompt.tags),
            created_at=prompt.created_at
        )


class CombinationResponse(CamelModel):
    id: int
    name: str
    prompt_ids: List[int] = Field(default_factory=list)
    order: List[int] = Field(default_factory=list)
    created_at: datetime

    @classmethod
    def from_domain(cls, combination: PromptCombination):
        return cls(
            id=combination.id,
            name=combination.name,
            prompt_ids=list(combination.prompt_ids),
            order=list(combination.order),
            created_at=combination.created_at
        )

    def to_domain(self) -> PromptCombination:
        return PromptCombination(
            id=self.id,
            name=self.name,
            prompt_ids=list(self.prompt_ids),
            order=list(self.order),
            created_at=self.created_at
        )


class TemplateResponse(CamelModel):
    id: int
    name: str
    content: str

    @classmethod
    def from_domain(cls, template: Template):
        return cls(id=template.id, name=template.name, content=template.content)
