"""Pytest configuration and shared fixtures for prompt-studio tests."""
import os
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

# Set test environment variables BEFORE importing app modules
os.environ.setdefault("SEED_DEFAULTS", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from prompt_studio.composition.state import CompositionState
from prompt_studio.container import get_container
from prompt_studio.domain import Prompt, PromptCombination
from prompt_studio.repositories.prompt_library import InMemoryPromptLibrary


def make_prompt(prompt_id: int, title: str, content: str = None, category_id: int = None, tags=None) -> Prompt:
    return Prompt(
        id=prompt_id,
        title=title,
        content=content if content is not None else f"Content of {title}",
        category_id=category_id,
        tags=list(tags or []),
        created_at=datetime(2025, 1, 1, tzinfo=timezone.utc)
    )


@pytest.fixture(name="make_prompt")
def make_prompt_fixture():
    """Factory for Prompt entities."""
    return make_prompt


@pytest.fixture
def library():
    """Fresh, empty prompt library."""
    return InMemoryPromptLibrary()


@pytest.fixture
def seeded_library():
    """Prompt library loaded with the reference content."""
    library = InMemoryPromptLibrary()
    library.seed_defaults()
    return library


@pytest.fixture
def app_library(library):
    """Install a fresh library into the global container for API tests."""
    container = get_container()
    container.prompt_library.override(library)
    container.reset_singletons()
    yield library
    container.prompt_library.reset_override()
    container.reset_singletons()


@pytest.fixture
def prompt_a():
    return make_prompt(1, "Initial Greeting", "Hello, how can I help?")


@pytest.fixture
def prompt_b():
    return make_prompt(2, "Brevity Instruction", "Be concise.")


@pytest.fixture
def prompt_c():
    return make_prompt(3, "JSON Structure", "Answer as JSON.")


@pytest.fixture
def mock_bridge():
    """Mock ICombinationBridge returning a stored combination."""
    bridge = AsyncMock()

    async def create_combination(name, prompt_ids, order):
        return PromptCombination(
            id=7,
            name=name,
            prompt_ids=list(prompt_ids),
            order=list(order),
            created_at=datetime.now(timezone.utc)
        )

    bridge.create_combination.side_effect = create_combination
    return bridge


@pytest.fixture
def composition(mock_bridge):
    return CompositionState(bridge=mock_bridge)


@pytest.fixture
def abc_composition(composition, prompt_a, prompt_b, prompt_c):
    """Composition holding A, B, C in that order."""
    composition.add(prompt_a)
    composition.add(prompt_b)
    composition.add(prompt_c)
    return composition
