"""
Names shared by every stage of the generator.

Directive, argument and type names follow the federation join spec as it
appears in composed supergraph SDL.
"""

from __future__ import annotations

# Root operation types
TYPE_QUERY = "Query"
TYPE_MUTATION = "Mutation"
TYPE_SUBSCRIPTION = "Subscription"
ROOT_TYPE_NAMES = frozenset({TYPE_QUERY, TYPE_MUTATION, TYPE_SUBSCRIPTION})

INTROSPECTION_PREFIX = "__"

# join__Graph, link__Import
NAMESPACE_SEPARATOR = "__"

# Join spec
TYPE_JOIN_GRAPH = "join__Graph"
DIRECTIVE_JOIN_GRAPH = "join__graph"
DIRECTIVE_JOIN_TYPE = "join__type"
DIRECTIVE_JOIN_FIELD = "join__field"

ARGUMENT_GRAPH = "graph"
ARGUMENT_KEY = "key"
ARGUMENT_EXTERNAL = "external"
ARGUMENT_NAME = "name"
ARGUMENT_URL = "url"

# GraphQL built-in scalars
GRAPHQL_ID_TYPE = "ID"
GRAPHQL_STRING_TYPE = "String"
GRAPHQL_INT_TYPE = "Int"
GRAPHQL_FLOAT_TYPE = "Float"
GRAPHQL_BOOLEAN_TYPE = "Boolean"

# GraphQL scalar -> rendered Python type
SCALAR_TYPE_MAP = {
    GRAPHQL_INT_TYPE: "int",
    GRAPHQL_FLOAT_TYPE: "float",
    GRAPHQL_BOOLEAN_TYPE: "bool",
    GRAPHQL_ID_TYPE: "str",
    GRAPHQL_STRING_TYPE: "str",
}
ENUM_RENDERED_TYPE = "str"
CUSTOM_SCALAR_RENDERED_TYPE = "Any"

# Generated project layout
TYPES_FILE_NAME = "schema_types.py"
QUERY_PLAN_FILE_NAME = "query_plan.py"
SERVICE_FILE_NAME = "service.py"
PLAN_DOCUMENT_FILE_NAME = "plan"
DEFAULT_PORT = 9000

# Error messages
ERROR_INVALID_SCHEMA = "Error occurred while parsing the GraphQL schema"
ERROR_INVALID_SUPERGRAPH_FILE_PATH = "Given supergraph file path is invalid"
ERROR_INVALID_OUTPUT_PATH = "Given output path is invalid"
ERROR_OUTPUT_PATH_NOT_WRITABLE = "Given out path is not writable"
ERROR_WRITING_SOURCE = "Error while writing the generated source to the file"
