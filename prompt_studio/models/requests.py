"""API request models"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator
from pydantic.alias_generators import to_camel

from prompt_studio.domain import (
    CategoryType,
    NewCategory,
    NewCombination,
    NewPrompt,
    NewTemplate,
    build_category_name,
)


class CamelModel(BaseModel):
    """Accepts camelCase keys on the wire and snake_case in code."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CategoryCreateRequest(CamelModel):
    """Either a full prefixed name, or a bare label plus its category type."""
    name: Optional[str] = Field(None, min_length=2, description="Full category name")
    label: Optional[str] = Field(None, min_length=2, description="Name without the type prefix")
    category_type: Optional[CategoryType] = Field(None, description="'domain' or 'utility'")

    @model_validator(mode="after")
    def _resolve_name(self):
        if self.label is not None:
            if self.category_type is None:
                raise ValueError("categoryType is required when label is given")
            if len(self.label.strip()) < 2:
                raise ValueError("Category label must be at least 2 characters")
            self.name = build_category_name(self.category_type, self.label)
        if self.name is None or len(self.name.strip()) < 2:
            raise ValueError("Category name must be at least 2 characters")
        return self

    def to_insert(self) -> NewCategory:
        return NewCategory(name=self.name.strip())


class PromptCreateRequest(CamelModel):
    title: str = Field(..., min_length=3, description="Title must be at least 3 characters")
    content: str = Field(..., min_length=5, description="Content must be at least 5 characters")
    category_id: Optional[StrictInt] = None
    tags: Optional[List[str]] = None

    def to_insert(self) -> NewPrompt:
        return NewPrompt(
            title=self.title,
            content=self.content,
            category_id=self.category_id,
            tags=self.tags
        )


class PromptUpdateRequest(CamelModel):
    """Partial prompt update; only fields present in the body are applied."""
    title: Optional[str] = Field(None, min_length=3)
    content: Optional[str] = Field(None, min_length=5)
    category_id: Optional[StrictInt] = None
    tags: Optional[List[str]] = None


class _CombinationShape(CamelModel):

    @model_validator(mode="after")
    def _order_matches_prompt_ids(self):
        if self.prompt_ids is not None and self.order is not None and len(self.order) != len(self.prompt_ids):
            raise ValueError("order must have the same length as promptIds")
        return self


class CombinationCreateRequest(_CombinationShape):
    name: str = Field(..., min_length=1)
    prompt_ids: Optional[List[StrictInt]] = None
    order: Optional[List[StrictInt]] = None

    def to_insert(self) -> NewCombination:
        return NewCombination(name=self.name, prompt_ids=self.prompt_ids, order=self.order)


class CombinationUpdateRequest(_CombinationShape):
    name: Optional[str] = Field(None, min_length=1)
    prompt_ids: Optional[List[StrictInt]] = None
    order: Optional[List[StrictInt]] = None


class TemplateCreateRequest(CamelModel):
    name: str = Field(..., min_length=1)
    content: str

    def to_insert(self) -> NewTemplate:
        return NewTemplate(name=self.name, content=self.content)
