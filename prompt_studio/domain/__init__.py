"""Domain entities for the prompt library."""
from .category import Category, CategoryType, NewCategory, build_category_name
from .prompt import Prompt, NewPrompt
from .combination import PromptCombination, NewCombination
from .template import Template, NewTemplate

__all__ = [
    "Category",
    "CategoryType",
    "NewCategory",
    "build_category_name",
    "Prompt",
    "NewPrompt",
    "PromptCombination",
    "NewCombination",
    "Template",
    "NewTemplate",
]
