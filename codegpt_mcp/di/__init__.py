"""Dependency Injection system for the CodeGPT MCP gateway."""

from .container import DIContainer
from .bootstrap import create_container

__all__ = [
    'DIContainer',
    'create_container'
]
