"""Category API endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from prompt_studio.api.errors import not_found, parse_id
from prompt_studio.dependencies import get_prompt_library
from prompt_studio.interfaces import IPromptLibrary
from prompt_studio.models import CategoryCountResponse, CategoryCreateRequest, CategoryResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[CategoryResponse])
async def list_categories(library: IPromptLibrary = Depends(get_prompt_library)):
    """List all categories."""
    return [CategoryResponse.from_domain(category) for category in library.categories.list()]


@router.get("/counts", response_model=List[CategoryCountResponse])
async def list_category_counts(library: IPromptLibrary = Depends(get_prompt_library)):
    """
    List categories with the number of prompts filed under each.

    Returns:
        list: Categories with label, categoryType and count
    """
    counts = library.category_counts()
    return [
        CategoryCountResponse.from_domain(category, counts.get(category.id, 0))
        for category in library.categories.list()
    ]


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(category_id: str, library: IPromptLibrary = Depends(get_prompt_library)):
    """Get a category by ID."""
    category = library.categories.get_by_id(parse_id(category_id, "category"))
    if category is None:
        raise not_found("category")
    return CategoryResponse.from_domain(category)


@router.post("", response_model=CategoryResponse, status_code=201)
async def create_category(
    request: CategoryCreateRequest,
    library: IPromptLibrary = Depends(get_prompt_library)
):
    """
    Create a category.

    The body holds either a full ``name`` or a ``label`` plus ``categoryType``,
    in which case the 'Domain Topic: ' / 'Utility: ' prefix is added here.
    """
    data = request.to_insert()
    if any(existing.name == data.name for existing in library.categories.list()):
        raise HTTPException(status_code=400, detail=f"Category '{data.name}' already exists")

    try:
        category = library.categories.create(data)
    except Exception as e:
        logger.error(f"Failed to create category: {e}")
        raise HTTPException(status_code=500, detail="Failed to create category")

    logger.info(f"Created category {category.id}: {category.name}")
    return CategoryResponse.from_domain(category)


@router.delete("/{category_id}", status_code=204, response_class=Response)
async def delete_category(category_id: str, library: IPromptLibrary = Depends(get_prompt_library)):
    """
    Delete a category.

    Prompts filed under it keep their categoryId.
    """
    if not library.categories.delete(parse_id(category_id, "category")):
        raise not_found("category")
    return Response(status_code=204)
