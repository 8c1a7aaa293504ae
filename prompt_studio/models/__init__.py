"""Pydantic request/response models for the prompt studio API."""
from .requests import (
    CamelModel,
    CategoryCreateRequest,
    PromptCreateRequest,
    PromptUpdateRequest,
    CombinationCreateRequest,
    CombinationUpdateRequest,
    TemplateCreateRequest,
)
from .responses import (
    CategoryResponse,
    CategoryCountResponse,
    PromptResponse,
    CombinationResponse,
    TemplateResponse,
)

__all__ = [
    "CamelModel",
    "CategoryCreateRequest",
    "PromptCreateRequest",
    "PromptUpdateRequest",
    "CombinationCreateRequest",
    "CombinationUpdateRequest",
    "TemplateCreateRequest",
    "CategoryResponse",
    "CategoryCountResponse",
    "PromptResponse",
    "CombinationResponse",
    "TemplateResponse",
]
