"""In-memory prompt library (categories, prompts, combinations, templates)"""
import logging
from collections import Counter
from dataclasses import replace
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, TypeVar

from prompt_studio.domain import (
    Category,
    NewCategory,
    NewCombination,
    NewPrompt,
    NewTemplate,
    Prompt,
    PromptCombination,
    Template,
)
from prompt_studio.repositories.memory_store import InMemoryEntityStore
from prompt_studio.repositories import seed_data

logger = logging.getLogger(__name__)

E = TypeVar("E")


def _merge_fields(
    existing: E,
    changes: Mapping[str, Any],
    fields: Iterable[str],
    nullable: Iterable[str] = (),
    lists: Iterable[str] = ()
) -> E:
    """
    Apply provided fields over a record.

    Keys outside ``fields`` are ignored. A None value is applied only for
    nullable fields; list fields keep their prior value unless a list is given.
    """
    nullable = set(nullable)
    lists = set(lists)
    applied = {}

    for name in fields:
        if name not in changes:
            continue
        value = changes[name]
        if name in lists:
            if isinstance(value, (list, tuple)):
                applied[name] = list(value)
            continue
        if value is None and name not in nullable:
            continue
        applied[name] = value

    return replace(existing, **applied)


def _build_category(entity_id: int, data: NewCategory, now: datetime) -> Category:
    return Category(id=entity_id, name=data.name)


def _merge_category(existing: Category, changes: Mapping[str, Any]) -> Category:
    return _merge_fields(existing, changes, fields=("name",))


def _build_prompt(entity_id: int, data: NewPrompt, now: datetime) -> Prompt:
    tags = list(data.tags) if isinstance(data.tags, (list, tuple)) else []
    return Prompt(
        id=entity_id,
        title=data.title,
        content=data.content,
        category_id=data.category_id,
        tags=tags,
        created_at=now
    )


def _merge_prompt(existing: Prompt, changes: Mapping[str, Any]) -> Prompt:
    return _merge_fields(
        existing,
        changes,
        fields=("title", "content", "category_id", "tags"),
        nullable=("category_id",),
        lists=("tags",)
    )


def _build_combination(entity_id: int, data: NewCombination, now: datetime) -> PromptCombination:
    prompt_ids = list(data.prompt_ids) if isinstance(data.prompt_ids, (list, tuple)) else []
    if isinstance(data.order, (list, tuple)):
        order = list(data.order)
    else:
        order = list(range(len(prompt_ids)))
    return PromptCombination(
        id=entity_id,
        name=data.name,
        prompt_ids=prompt_ids,
        order=order,
        created_at=now
    )


def _merge_combination(existing: PromptCombination, changes: Mapping[str, Any]) -> PromptCombination:
    merged = _merge_fields(
        existing,
        changes,
        fields=("name", "prompt_ids", "order"),
        lists=("prompt_ids", "order")
    )
    # New prompt ids without an explicit order get the default sequence
    if merged.prompt_ids != existing.prompt_ids and not isinstance(changes.get("order"), (list, tuple)):
        merged = replace(merged, order=list(range(len(merged.prompt_ids))))
    return merged


def _build_template(entity_id: int, data: NewTemplate, now: datetime) -> Template:
    return Template(id=entity_id, name=data.name, content=data.content)


def _merge_template(existing: Template, changes: Mapping[str, Any]) -> Template:
    return _merge_fields(existing, changes, fields=("name", "content"))


class InMemoryPromptLibrary:
    """
    Volatile storage for all four entity kinds.

    Each kind has its own store and its own id counter. Construct one per
    process (the DI container does this) or one per test.
    """

    def __init__(self):
        self.categories: InMemoryEntityStore[Category, NewCategory] = InMemoryEntityStore(
            "category", _build_category, _merge_category
        )
        self.prompts: InMemoryEntityStore[Prompt, NewPrompt] = InMemoryEntityStore(
            "prompt", _build_prompt, _merge_prompt
        )
        self.combinations: InMemoryEntityStore[PromptCombination, NewCombination] = InMemoryEntityStore(
            "combination", _build_combination, _merge_combination
        )
        self.templates: InMemoryEntityStore[Template, NewTemplate] = InMemoryEntityStore(
            "template", _build_template, _merge_template
        )

    def list_prompts_by_category(self, category_id: int) -> List[Prompt]:
        """Get prompts filed under a category (exact match)"""
        return [
            prompt for prompt in self.prompts.list()
            if prompt.category_id is not None and prompt.category_id == category_id
        ]

    def category_counts(self) -> Dict[int, int]:
        """Count prompts per existing category (zero for empty categories)"""
        counts = Counter(
            prompt.category_id for prompt in self.prompts.list()
            if prompt.category_id is not None
        )
        return {category.id: counts.get(category.id, 0) for category in self.categories.list()}

    def seed_defaults(self) -> None:
        """
        Load the reference categories, templates and prompts.

        Prompts are filed by category name, so seeding works regardless of
        which ids the categories receive.
        """
        category_ids = {}
        for name in seed_data.CATEGORY_NAMES:
            category = self.categories.create(NewCategory(name=name))
            category_ids[name] = category.id

        for template in seed_data.TEMPLATES:
            self.templates.create(NewTemplate(**template))

        for prompt in seed_data.PROMPTS:
            self.prompts.create(NewPrompt(
                title=prompt["title"],
                content=prompt["content"],
                category_id=category_ids[prompt["category"]],
                tags=list(prompt["tags"])
            ))

        logger.info(
            f"Seeded {len(self.categories)} categories, "
            f"{len(self.templates)} templates, {len(self.prompts)} prompts"
        )
