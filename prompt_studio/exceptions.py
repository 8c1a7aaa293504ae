"""Custom exceptions for prompt-studio."""
from enum import Enum


class PromptStudioError(Exception):
    """Base exception for prompt-studio."""
    pass


class CombinationStorageError(PromptStudioError):
    """Raised by a combination bridge when storage rejects or cannot be reached."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SaveFailureReason(Enum):
    """Why a composition could not be saved."""
    EMPTY_NAME = "empty_name"
    EMPTY_COMPOSITION = "empty_composition"
    NO_VALID_IDS = "no_valid_ids"
    STORAGE = "storage"


class CombinationSaveError(PromptStudioError):
    """Raised when saving a composition as a combination fails."""

    def __init__(self, reason: SaveFailureReason, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message
