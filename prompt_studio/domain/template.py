"""Template domain entity"""
from dataclasses import dataclass


@dataclass
class NewTemplate:
    """Insert shape for a template"""
    name: str
    content: str


@dataclass
class Template:
    """Read-only reference content"""
    id: int
    name: str
    content: str
