"""Core infrastructure for the CodeGPT MCP gateway."""

from .service import BaseService
from .errors import (
    ServiceError,
    ConfigurationError,
    NotInitializedError,
    DependencyError,
    ValidationError,
    NetworkError,
    BackendError,
)
from .result import (
    TextBlock,
    ToolResult,
    render_error,
    NO_TEXT_PLACEHOLDER,
    NO_DATA_PLACEHOLDER,
)

__all__ = [
    'BaseService',
    'ServiceError',
    'ConfigurationError',
    'NotInitializedError',
    'DependencyError',
    'ValidationError',
    'NetworkError',
    'BackendError',
    'TextBlock',
    'ToolResult',
    'render_error',
    'NO_TEXT_PLACEHOLDER',
    'NO_DATA_PLACEHOLDER',
]
