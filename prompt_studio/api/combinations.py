"""Prompt combination API endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from prompt_studio.api.errors import not_found, parse_id
from prompt_studio.dependencies import get_prompt_library
from prompt_studio.interfaces import IPromptLibrary
from prompt_studio.models import CombinationCreateRequest, CombinationResponse, CombinationUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/combinations", tags=["combinations"])


@router.get("", response_model=List[CombinationResponse])
async def list_combinations(library: IPromptLibrary = Depends(get_prompt_library)):
    """List saved combinations."""
    return [CombinationResponse.from_domain(combination) for combination in library.combinations.list()]


@router.get("/{combination_id}", response_model=CombinationResponse)
async def get_combination(combination_id: str, library: IPromptLibrary = Depends(get_prompt_library)):
    """Get a combination by ID."""
    combination = library.combinations.get_by_id(parse_id(combination_id, "combination"))
    if combination is None:
        raise not_found("combination")
    return CombinationResponse.from_domain(combination)


@router.post("", response_model=CombinationResponse, status_code=201)
async def create_combination(
    request: CombinationCreateRequest,
    library: IPromptLibrary = Depends(get_prompt_library)
):
    """Save a named combination of prompt ids."""
    try:
        combination = library.combinations.create(request.to_insert())
    except Exception as e:
        logger.error(f"Failed to create combination: {e}")
        raise HTTPException(status_code=500, detail="Failed to create combination")

    logger.info(f"Created combination {combination.id}: {combination.name} ({len(combination.prompt_ids)} prompts)")
    return CombinationResponse.from_domain(combination)


@router.patch("/{combination_id}", response_model=CombinationResponse)
async def update_combination(
    combination_id: str,
    request: CombinationUpdateRequest,
    library: IPromptLibrary = Depends(get_prompt_library)
):
    """Rename a combination or replace its prompt ids/order."""
    entity_id = parse_id(combination_id, "combination")
    existing = library.combinations.get_by_id(entity_id)
    if existing is None:
        raise not_found("combination")

    changes = request.model_dump(exclude_unset=True)
    prompt_ids = changes.get("prompt_ids") if changes.get("prompt_ids") is not None else existing.prompt_ids
    if changes.get("order") is not None and len(changes["order"]) != len(prompt_ids):
        raise HTTPException(status_code=400, detail="order must have the same length as promptIds")

    combination = library.combinations.update(entity_id, changes)
    if combination is None:
        raise not_found("combination")
    return CombinationResponse.from_domain(combination)


@router.delete("/{combination_id}", status_code=204, response_class=Response)
async def delete_combination(combination_id: str, library: IPromptLibrary = Depends(get_prompt_library)):
    """Delete a combination."""
    if not library.combinations.delete(parse_id(combination_id, "combination")):
        raise not_found("combination")
    return Response(status_code=204)
