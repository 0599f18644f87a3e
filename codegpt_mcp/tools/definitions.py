"""Generic HTTP-backed tool definition.

Every tool exposed by the gateway is one :class:`HttpTool`: a backend path
and method, the parameters it accepts, a function that turns validated
arguments into a JSON body and a function that turns the backend response
into text. The tables in :mod:`.graphs` and :mod:`.agents` instantiate it.
"""

import json
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

import httpx
from pydantic import Field

from ..config import BackendConfig
from ..core import BackendError, ValidationError, NO_DATA_PLACEHOLDER


Arguments = Dict[str, Any]
BodyBuilder = Callable[[Arguments, BackendConfig], Dict[str, Any]]
ResponseExtractor = Callable[[httpx.Response], str]


@dataclass(frozen=True)
class ToolParameter:
    """A string argument accepted by a tool."""

    name: str
    description: str
    required: bool = True
    max_length: Optional[int] = None

    @property
    def min_length(self) -> Optional[int]:
        return 1 if self.required else None

    def field(self) -> Any:
        """Pydantic field carrying this parameter's constraints."""
        constraints: Dict[str, Any] = {"description": self.description}
        if self.min_length is not None:
            constraints["min_length"] = self.min_length
        if self.max_length is not None:
            constraints["max_length"] = self.max_length
        return Field(**constraints)

    def validate(self, value: Any) -> Optional[str]:
        """Return the cleaned value, or None for an absent optional value."""
        if value is None or value == "":
            if self.required:
                raise ValidationError(f"{self.name} is required", field=self.name)
            return None
        if not isinstance(value, str):
            raise ValidationError(f"{self.name} must be a string", field=self.name, value=value)
        if self.max_length is not None and len(value) > self.max_length:
            raise ValidationError(
                f"{self.name} is too long (max {self.max_length} characters)",
                field=self.name
            )
        return value


@dataclass(frozen=True)
class HttpTool:
    """One MCP tool backed by a single backend HTTP call."""

    name: str
    description: str
    method: str
    path: str
    extract: ResponseExtractor
    parameters: Tuple[ToolParameter, ...] = ()
    build_body: Optional[BodyBuilder] = None
    placeholder: str = NO_DATA_PLACEHOLDER
    # Only the agent listing looks at the status code before reading the body.
    check_status: bool = False

    def parameter(self, name: str) -> ToolParameter:
        for parameter in self.parameters:
            if parameter.name == name:
                return parameter
        raise KeyError(f"{self.name} has no parameter {name!r}")

    def field(self, name: str) -> Any:
        return self.parameter(name).field()

    def validate(self, arguments: Arguments) -> Arguments:
        """Check arguments and drop absent optional ones.

        Raises:
            ValidationError: on a missing, empty or oversized argument.
        """
        cleaned: Arguments = {}
        for parameter in self.parameters:
            value = parameter.validate(arguments.get(parameter.name))
            if value is not None:
                cleaned[parameter.name] = value
        return cleaned

    def body(self, arguments: Arguments, config: BackendConfig) -> Optional[Dict[str, Any]]:
        if self.build_body is None:
            return None
        return self.build_body(arguments, config)


# Body builders

def graph_body(*fields: str) -> BodyBuilder:
    """Body for a graph query: the configured graph id plus the given fields.

    Fields that were not supplied are left out of the body entirely.
    """
    def build(arguments: Arguments, config: BackendConfig) -> Dict[str, Any]:
        body: Dict[str, Any] = {"graphId": config.graph_id}
        for name in fields:
            if arguments.get(name):
                body[name] = arguments[name]
        return body

    return build


# Response extractors

def parse_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise BackendError(
            f"Invalid JSON in response (status {response.status_code}): {e}",
            status_code=response.status_code
        ) from e


def as_text(value: Any) -> str:
    """Render an extracted value; empty values become the empty string."""
    if not value:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, indent=2, ensure_ascii=False)


def extract_content(response: httpx.Response) -> str:
    """The ``content`` field of a JSON object body."""
    payload = parse_json(response)
    if payload is None:
        raise BackendError(
            f"Empty JSON body (status {response.status_code})",
            status_code=response.status_code
        )
    if not isinstance(payload, dict):
        return ""
    return as_text(payload.get("content"))


def extract_document(response: httpx.Response) -> str:
    """The whole JSON body, pretty-printed."""
    return json.dumps(parse_json(response), indent=2, ensure_ascii=False)


def extract_text(response: httpx.Response) -> str:
    """The raw body text, unparsed."""
    return response.text
