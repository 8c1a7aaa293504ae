"""Template API endpoints (read and create only)."""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from prompt_studio.api.errors import not_found, parse_id
from prompt_studio.dependencies import get_prompt_library
from prompt_studio.interfaces import IPromptLibrary
from prompt_studio.models import TemplateCreateRequest, TemplateResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=List[TemplateResponse])
async def list_templates(library: IPromptLibrary = Depends(get_prompt_library)):
    return [TemplateResponse.from_domain(template) for template in library.templates.list()]


@router.get("/{template_id}", response_model=TemplateResponse)
async def get_template(template_id: str, library: IPromptLibrary = Depends(get_prompt_library)):
    template = library.templates.get_by_id(parse_id(template_id, "template"))
    if template is None:
        raise not_found("template")
    return TemplateResponse.from_domain(template)


@router.post("", response_model=TemplateResponse, status_code=201)
async def create_template(
    request: TemplateCreateRequest,
    library: IPromptLibrary = Depends(get_prompt_library)
):
    """Create a template (names are unique)."""
    data = request.to_insert()
    if any(existing.name == data.name for existing in library.templates.list()):
        raise HTTPException(status_code=400, detail=f"Template '{data.name}' already exists")

    try:
        template = library.templates.create(data)
    except Exception as e:
        logger.error(f"Failed to create template: {e}")
        raise HTTPException(status_code=500, detail="Failed to create template")

    return TemplateResponse.from_domain(template)
