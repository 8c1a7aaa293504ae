"""Category domain entity"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CategoryType(Enum):
    """Category kind, encoded as a name prefix."""
    DOMAIN = "domain"
    UTILITY = "utility"

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]


_PREFIXES = {
    CategoryType.DOMAIN: "Domain Topic: ",
    CategoryType.UTILITY: "Utility: ",
}


def build_category_name(category_type: CategoryType, label: str) -> str:
    """Prefix a bare label with its category type ('Utility: Format Output')."""
    return f"{category_type.prefix}{label.strip()}"


@dataclass
class NewCategory:
    """Insert shape for a category"""
    name: str


@dataclass
class Category:
    """Labeled grouping of prompts"""
    id: int
    name: str  # Unique, 'Domain Topic: X' or 'Utility: X'

    @property
    def category_type(self) -> Optional[CategoryType]:
        for category_type, prefix in _PREFIXES.items():
            if self.name.startswith(prefix.rstrip()):
                return category_type
        return None

    @property
    def label(self) -> str:
        """Name without its type prefix."""
        category_type = self.category_type
        if category_type is None:
            return self.name
        return self.name[len(category_type.prefix.rstrip()):].strip()
