"""Prompt API endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from prompt_studio.api.errors import not_found, parse_id
from prompt_studio.dependencies import get_prompt_library
from prompt_studio.interfaces import IPromptLibrary
from prompt_studio.models import PromptCreateRequest, PromptResponse, PromptUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/prompts", tags=["prompts"])


@router.get("", response_model=List[PromptResponse])
async def list_prompts(
    category_id: Optional[str] = Query(None, alias="categoryId"),
    library: IPromptLibrary = Depends(get_prompt_library)
):
    """List prompts, optionally filtered by category."""
    if category_id is None or category_id == "":
        prompts = library.prompts.list()
    else:
        prompts = library.list_prompts_by_category(parse_id(category_id, "category"))
    return [PromptResponse.from_domain(prompt) for prompt in prompts]


@router.get("/{prompt_id}", response_model=PromptResponse)
async def get_prompt(prompt_id: str, library: IPromptLibrary = Depends(get_prompt_library)):
    """Get a prompt by ID."""
    prompt = library.prompts.get_by_id(parse_id(prompt_id, "prompt"))
    if prompt is None:
        raise not_found("prompt")
    return PromptResponse.from_domain(prompt)


@router.post("", response_model=PromptResponse, status_code=201)
async def create_prompt(
    request: PromptCreateRequest,
    library: IPromptLibrary = Depends(get_prompt_library)
):
    """Create a prompt."""
    try:
        prompt = library.prompts.create(request.to_insert())
    except Exception as e:
        logger.error(f"Failed to create prompt: {e}")
        raise HTTPException(status_code=500, detail="Failed to create prompt")

    logger.info(f"Created prompt {prompt.id}: {prompt.title}")
    return PromptResponse.from_domain(prompt)


@router.patch("/{prompt_id}", response_model=PromptResponse)
async def update_prompt(
    prompt_id: str,
    request: PromptUpdateRequest,
    library: IPromptLibrary = Depends(get_prompt_library)
):
    """
    Update a prompt.

    Only fields present in the body change; ``"categoryId": null`` moves the
    prompt out of its category.
    """
    entity_id = parse_id(prompt_id, "prompt")
    prompt = library.prompts.update(entity_id, request.model_dump(exclude_unset=True))
    if prompt is None:
        raise not_found("prompt")
    return PromptResponse.from_domain(prompt)


@router.delete("/{prompt_id}", status_code=204, response_class=Response)
async def delete_prompt(prompt_id: str, library: IPromptLibrary = Depends(get_prompt_library)):
    """Delete a prompt."""
    if not library.prompts.delete(parse_id(prompt_id, "prompt")):
        raise not_found("prompt")
    return Response(status_code=204)
