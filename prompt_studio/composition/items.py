"""Composition items and the boundary factory that builds them"""
import uuid
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, Tuple, Union

from prompt_studio.domain import Prompt

PLACEHOLDER_TITLE = "Untitled Prompt"

PromptRef = Union[int, str]


@dataclass(frozen=True)
class CompositionItem:
    """
    A prompt placed in the composition.

    ``index`` is assigned by CompositionState and always equals the item's
    position; items are immutable, so it cannot be set from outside.
    """
    prompt_id: PromptRef  # Stored prompt id, or a 'draft_' id for unsaved input
    title: str
    content: str
    index: int = 0
    category_id: Optional[int] = None
    tags: Tuple[str, ...] = ()

    @property
    def has_stored_id(self) -> bool:
        return _is_int(self.prompt_id)


@dataclass(frozen=True)
class ItemBuildResult:
    """Tagged outcome of build_composition_item"""
    item: Optional[CompositionItem] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.item is not None


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _draft_id() -> str:
    return f"draft_{uuid.uuid4().hex[:12]}"


def _pick(source: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in source:
            return source[key]
    return None


def build_composition_item(source: Any, index: int = 0) -> ItemBuildResult:
    """
    Validate and normalize a dropped prompt into a CompositionItem.

    Accepts a Prompt, an existing CompositionItem, or a mapping with
    snake_case or camelCase keys. Missing fields get safe defaults: a draft id,
    a placeholder title, empty content, no tags. Fields of the wrong type make
    the build fail instead of being coerced.

    Args:
        source: Prompt-like value from the library or a drag payload
        index: Position the item will occupy

    Returns:
        ItemBuildResult with either ``item`` or ``error`` set
    """
    if isinstance(source, CompositionItem):
        return ItemBuildResult(item=replace(source, index=index))

    if isinstance(source, Prompt):
        fields = {
            "id": source.id,
            "title": source.title,
            "content": source.content,
            "category_id": source.category_id,
            "tags": source.tags,
        }
    elif isinstance(source, Mapping):
        fields = {
            "id": _pick(source, "id", "prompt_id", "promptId"),
            "title": _pick(source, "title"),
            "content": _pick(source, "content"),
            "category_id": _pick(source, "category_id", "categoryId"),
            "tags": _pick(source, "tags"),
        }
    else:
        return ItemBuildResult(error=f"Unsupported prompt payload: {type(source).__name__}")

    prompt_id = fields["id"]
    if prompt_id is None:
        prompt_id = _draft_id()
    elif not (_is_int(prompt_id) or isinstance(prompt_id, str)):
        return ItemBuildResult(error=f"Invalid prompt id: {prompt_id!r}")

    title = fields["title"]
    if title is None:
        title = PLACEHOLDER_TITLE
    elif not isinstance(title, str):
        return ItemBuildResult(error=f"Invalid title for prompt {prompt_id}: {title!r}")
    elif not title.strip():
        title = PLACEHOLDER_TITLE

    content = fields["content"]
    if content is None:
        content = ""
    elif not isinstance(content, str):
        return ItemBuildResult(error=f"Invalid content for prompt {prompt_id}")

    category_id = fields["category_id"]
    if category_id is not None and not _is_int(category_id):
        return ItemBuildResult(error=f"Invalid category id for prompt {prompt_id}: {category_id!r}")

    tags = fields["tags"]
    if tags is None:
        tags = ()
    elif isinstance(tags, (list, tuple)) and all(isinstance(tag, str) for tag in tags):
        tags = tuple(tags)
    else:
        return ItemBuildResult(error=f"Invalid tags for prompt {prompt_id}: {tags!r}")

    return ItemBuildResult(item=CompositionItem(
        prompt_id=prompt_id,
        title=title,
        content=content,
        index=index,
        category_id=category_id,
        tags=tags
    ))
