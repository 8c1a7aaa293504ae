"""
Dependency Injection Container

Wires the prompt library, combination bridges and composer together using
the dependency-injector library.
"""

import logging

from dependency_injector import containers, providers

from prompt_studio.clients.combination_client import CombinationClient
from prompt_studio.composition.state import CompositionState
from prompt_studio.config import settings
from prompt_studio.repositories.prompt_library import InMemoryPromptLibrary
from prompt_studio.services.combination_bridge import LocalCombinationBridge

logger = logging.getLogger(__name__)


def create_prompt_library(seed: bool) -> InMemoryPromptLibrary:
    """Build the process-wide prompt library, optionally loaded with reference content."""
    library = InMemoryPromptLibrary()
    if seed:
        library.seed_defaults()
    return library


class Container(containers.DeclarativeContainer):
    """
    Application dependency injection container.

    Usage:
        container = Container()
        library = container.prompt_library()

        # Override for testing
        container.prompt_library.override(InMemoryPromptLibrary())
        container.reset_singletons()
    """

    # ========== Repositories ==========

    prompt_library = providers.Singleton(
        create_prompt_library,
        seed=settings.SEED_DEFAULTS
    )

    # ========== Bridges ==========

    combination_bridge = providers.Singleton(
        LocalCombinationBridge,
        library=prompt_library
    )

    combination_client = providers.Factory(
        CombinationClient,
        base_url=settings.API_BASE_URL,
        timeout=settings.HTTP_TIMEOUT_SECONDS,
        api_prefix=settings.API_PREFIX
    )

    # ========== Composition ==========

    composition_state = providers.Factory(
        CompositionState,
        bridge=combination_bridge
    )


# Global container instance
container = Container()


def get_container() -> Container:
    """
    Get the global container instance.

    Returns:
        Container: Global DI container
    """
    return container
