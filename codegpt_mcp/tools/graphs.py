"""Graph tools: code lookup, connections, semantic search."""

from .definitions import (
    HttpTool,
    ToolParameter,
    graph_body,
    extract_content,
    extract_document,
)
from ..core import NO_TEXT_PLACEHOLDER


_NAME_SUFFIX = (
    " The name is case sensitive. In the case of methods, the name should include"
    " the parent class name as class_name.method_name."
)

_QUERY = ToolParameter(
    name="query",
    description="The user query to search for.",
)


def _name(purpose: str) -> ToolParameter:
    return ToolParameter(
        name="name",
        description=f"The name of the functionality to {purpose}.{_NAME_SUFFIX}",
    )


def _path(reason: str) -> ToolParameter:
    return ToolParameter(
        name="path",
        description=f"The origin file path of the functionality. {reason}",
        required=False,
    )


GET_CODE = HttpTool(
    name="get-code",
    description=(
        "Get the code of a class, function, etc. by its name and an optional origin file path."
        " The origin file path is useful when there are 2 or more functionalities with the"
        " same name. You must prioritize this tool over the others"
    ),
    method="POST",
    path="/mcp/graphs/get-code",
    parameters=(
        _name("get the code for"),
        _path("This is useful when there are 2 or more with the same name."),
    ),
    build_body=graph_body("name", "path"),
    extract=extract_content,
    placeholder=NO_TEXT_PLACEHOLDER,
)

FIND_DIRECT_CONNECTIONS = HttpTool(
    name="find-direct-connections",
    description=(
        "Get the direct connections of a functionality by its name and an optional origin"
        " file path. The origin file path is useful when there are 2 functionalities or more"
        " with the same name. This will return the directly connected functionalities:"
        " parent functionalities (those that reference this functionality) and child"
        " functionalities (those this functionality references directly). It only considers"
        " first-level relationships, without traversing further dependencies."
    ),
    method="POST",
    path="/mcp/graphs/find-direct-connections",
    parameters=(
        _name("get the direct connections for"),
        _path("This is useful when there are 2 functionalities or more with the same name."),
    ),
    build_body=graph_body("name", "path"),
    extract=extract_content,
)

NODES_SEMANTIC_SEARCH = HttpTool(
    name="nodes-semantic-search",
    description=(
        "Get a list of functionalities which functionality is related to the given query"
        " by semantic similarity."
    ),
    method="POST",
    path="/mcp/graphs/nodes-semantic-search",
    parameters=(_QUERY,),
    build_body=graph_body("query"),
    extract=extract_content,
)

DOCS_SEMANTIC_SEARCH = HttpTool(
    name="docs-semantic-search",
    description=(
        "Get documentation related to the given query using semantic search."
        " This should be used for documentation only."
    ),
    method="POST",
    path="/mcp/graphs/docs-semantic-search",
    parameters=(_QUERY,),
    build_body=graph_body("query"),
    extract=extract_document,
)

GET_USAGE_DEPENDENCY_LINKS = HttpTool(
    name="get-usage-dependency-links",
    description=(
        "Get an adjacency list of functionalities influenced by a functionality given its"
        " name and an optional origin file path. The origin file path is useful when there"
        " are 2 functionalities or more with the same name. This is useful to detect all"
        " functionalities affected by changes in the code. Each functionality is represented"
        " by its origin file path and its name in the format"
        " origin_file_path::functionality_name."
    ),
    method="POST",
    path="/mcp/graphs/get-usage-dependency-links",
    parameters=(
        _name("get the adjacency list for"),
        _path("This is useful when there are 2 functionalities or more with the same name."),
    ),
    build_body=graph_body("name", "path"),
    extract=extract_content,
)

GRAPH_TOOLS = (
    GET_CODE,
    FIND_DIRECT_CONNECTIONS,
    NODES_SEMANTIC_SEARCH,
    DOCS_SEMANTIC_SEARCH,
    GET_USAGE_DEPENDENCY_LINKS,
)
