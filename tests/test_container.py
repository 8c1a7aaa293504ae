"""Unit tests for DI wiring, settings and logger setup."""
import logging
import logging.handlers

from prompt_studio.composition import CompositionState
from prompt_studio.config import Settings
from prompt_studio.container import Container, create_prompt_library
from prompt_studio.dependencies import get_combination_bridge, get_composition_state, get_prompt_library
from prompt_studio.logging_client import setup_logger
from prompt_studio.repositories.prompt_library import InMemoryPromptLibrary
from prompt_studio.services.combination_bridge import LocalCombinationBridge


def test_create_prompt_library_seeding():
    assert len(create_prompt_library(seed=False).prompts) == 0
    assert len(create_prompt_library(seed=True).prompts) == 11


def test_prompt_library_is_singleton():
    container = Container()
    container.prompt_library.override(InMemoryPromptLibrary())

    assert container.prompt_library() is container.prompt_library()


def test_composition_state_is_bound_to_library_bridge():
    container = Container()
    library = InMemoryPromptLibrary()
    container.prompt_library.override(library)

    first = container.composition_state()
    second = container.composition_state()
    bridge = container.combination_bridge()

    assert isinstance(first, CompositionState)
    assert first is not second
    assert isinstance(bridge, LocalCombinationBridge)
    assert bridge.library is library


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SEED_DEFAULTS", "false")
    monkeypatch.setenv("API_PREFIX", "/v1")

    settings = Settings()

    assert settings.SEED_DEFAULTS is False
    assert settings.API_PREFIX == "/v1"


def test_setup_logger_console_only():
    logger = setup_logger("prompt-studio-test", level="DEBUG")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)
    assert logging.getLogger("prompt_studio").handlers == logger.handlers


def test_setup_logger_with_collector():
    logger = setup_logger("prompt-studio-test", log_host="log-collector", log_port=9999)

    socket_handlers = [h for h in logger.handlers if isinstance(h, logging.handlers.SocketHandler)]
    assert len(socket_handlers) == 1
    assert socket_handlers[0].host == "log-collector"

    # Leave the package logger without a socket target for the remaining tests
    setup_logger("prompt-studio-test", level="WARNING")


def test_dependency_getters_share_the_library(app_library):
    bridge = get_combination_bridge()
    state = get_composition_state()

    assert get_prompt_library() is app_library
    assert isinstance(bridge, LocalCombinationBridge)
    assert bridge.library is app_library
    assert isinstance(state, CompositionState)
    assert state is not get_composition_state()
