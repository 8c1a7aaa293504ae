"""FastAPI dependency getters backed by the DI container."""

from prompt_studio.composition.state import CompositionState
from prompt_studio.container import get_container
from prompt_studio.interfaces import ICombinationBridge, IPromptLibrary


def get_prompt_library() -> IPromptLibrary:
    """
    Get the prompt library from the container.

    Returns:
        IPromptLibrary: Storage for categories, prompts, combinations, templates
    """
    return get_container().prompt_library()


def get_combination_bridge() -> ICombinationBridge:
    """Get the in-process combination bridge from the container."""
    return get_container().combination_bridge()


def get_composition_state() -> CompositionState:
    """
    Get a new composition bound to the in-process bridge.

    Each call returns a fresh composition; one belongs to one UI session.
    """
    return get_container().composition_state()
