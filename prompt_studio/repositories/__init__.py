"""Entity storage implementations."""
from .memory_store import InMemoryEntityStore
from .prompt_library import InMemoryPromptLibrary

__all__ = ["InMemoryEntityStore", "InMemoryPromptLibrary"]
