"""
Join spec directive reader.

Reads the `join__Graph` enum and the `@join__type` / `@join__field`
applications straight from the SDL nodes kept on the schema.

Example supergraph fragment:

    enum join__Graph {
      ASTRONAUTS @join__graph(name: "astronauts", url: "http://localhost:4001")
      MISSIONS @join__graph(name: "missions", url: "http://localhost:4002")
    }

    type Mission
      @join__type(graph: ASTRONAUTS, key: "id")
      @join__type(graph: MISSIONS, key: "id")
    {
      id: Int!
      crew: [Astronaut] @join__field(graph: MISSIONS)
    }
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from graphql import GraphQLEnumType, GraphQLObjectType, GraphQLSchema
from graphql.language import (
    BooleanValueNode,
    DirectiveNode,
    EnumValueNode,
    NullValueNode,
    StringValueNode,
    ValueNode,
)

from .constants import (
    ARGUMENT_EXTERNAL,
    ARGUMENT_GRAPH,
    ARGUMENT_KEY,
    ARGUMENT_NAME,
    ARGUMENT_URL,
    DIRECTIVE_JOIN_FIELD,
    DIRECTIVE_JOIN_GRAPH,
    DIRECTIVE_JOIN_TYPE,
    TYPE_JOIN_GRAPH,
)
from .defs import Subgraph, SubgraphRegistry, freeze
from .errors import ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JoinType:
    """A single `@join__type` application."""
    graph: Optional[str]  # enum key
    key: Optional[str] = None


@dataclass(frozen=True)
class JoinField:
    """A single `@join__field` application."""
    graph: Optional[str]  # enum key
    external: bool = False


def find_argument(directive: DirectiveNode, name: str) -> Optional[ValueNode]:
    """Return the value node of a directive argument, or None when absent."""
    for argument in directive.arguments or ():
        if argument.name.value == name:
            return argument.value
    return None


def enum_argument(directive: DirectiveNode, name: str) -> Optional[str]:
    value = find_argument(directive, name)
    if value is None or isinstance(value, NullValueNode):
        return None
    if not isinstance(value, EnumValueNode):
        raise ValidationError(
            f"@{directive.name.value} argument '{name}' must be an enum value"
        )
    return value.value


def string_argument(directive: DirectiveNode, name: str) -> Optional[str]:
    value = find_argument(directive, name)
    if value is None or isinstance(value, NullValueNode):
        return None
    if not isinstance(value, StringValueNode):
        raise ValidationError(
            f"@{directive.name.value} argument '{name}' must be a string"
        )
    return value.value


def boolean_argument(directive: DirectiveNode, name: str, default: bool = False) -> bool:
    value = find_argument(directive, name)
    if value is None or isinstance(value, NullValueNode):
        return default
    if not isinstance(value, BooleanValueNode):
        raise ValidationError(
            f"@{directive.name.value} argument '{name}' must be a boolean"
        )
    return value.value


def applied(directives: Optional[Iterable[DirectiveNode]], name: str) -> list[DirectiveNode]:
    """Filter directive applications by name, keeping source order."""
    return [d for d in directives or () if d.name.value == name]


class DirectiveReader:
    """
    Reads join spec directives from a schema built by graphql-core.

    Usage:
        reader = DirectiveReader(schema)
        registry = reader.read_registry()
        reader.type_directives("Mission")          # [JoinType(...), ...]
        reader.field_directives("Mission", "crew")  # [JoinField(...)]
    """

    def __init__(self, schema: GraphQLSchema):
        self.schema = schema

    # -------------------------------------------------------------------------
    # Subgraph registry
    # -------------------------------------------------------------------------

    def read_registry(self) -> SubgraphRegistry:
        """
        Build the subgraph registry from the `join__Graph` enum.

        Returns an empty registry when the schema declares no such enum.

        Raises:
            ValidationError: if any enum value lacks its `@join__graph`
                application or one of its `name` / `url` arguments
        """
        graph_enum = self.schema.get_type(TYPE_JOIN_GRAPH)
        if graph_enum is None:
            logger.debug(f"No {TYPE_JOIN_GRAPH} enum in schema, registry is empty")
            return freeze({})

        if not isinstance(graph_enum, GraphQLEnumType):
            raise ValidationError(f"{TYPE_JOIN_GRAPH} must be an enum type")

        subgraphs: dict[str, Subgraph] = {}
        errors: list[str] = []

        for enum_key, enum_value in graph_enum.values.items():
            definition = enum_value.ast_node
            if definition is None:
                errors.append(f"{TYPE_JOIN_GRAPH}.{enum_key}: enum value definition cannot be null")
                continue

            join_graphs = applied(definition.directives, DIRECTIVE_JOIN_GRAPH)
            if not join_graphs:
                errors.append(f"{TYPE_JOIN_GRAPH}.{enum_key}: missing @{DIRECTIVE_JOIN_GRAPH}")
                continue

            directive = join_graphs[0]
            name = string_argument(directive, ARGUMENT_NAME)
            url = string_argument(directive, ARGUMENT_URL)
            if name is None:
                errors.append(f"{TYPE_JOIN_GRAPH}.{enum_key}: missing '{ARGUMENT_NAME}' argument")
            if url is None:
                errors.append(f"{TYPE_JOIN_GRAPH}.{enum_key}: missing '{ARGUMENT_URL}' argument")
            if name is None or url is None:
                continue

            subgraphs[enum_key] = Subgraph(enum_key=enum_key, name=name, url=url)

        if errors:
            raise ValidationError(errors)

        logger.debug(f"Read {len(subgraphs)} subgraphs: {list(subgraphs)}")
        return freeze(subgraphs)

    # -------------------------------------------------------------------------
    # Type and field directives
    # -------------------------------------------------------------------------

    def _object_type(self, type_name: str) -> Optional[GraphQLObjectType]:
        named_type = self.schema.get_type(type_name)
        if isinstance(named_type, GraphQLObjectType):
            return named_type
        return None

    def type_directives(self, type_name: str) -> list[JoinType]:
        """`@join__type` applications on the object type, in source order."""
        object_type = self._object_type(type_name)
        if object_type is None or object_type.ast_node is None:
            return []

        return [
            JoinType(
                graph=enum_argument(directive, ARGUMENT_GRAPH),
                key=string_argument(directive, ARGUMENT_KEY),
            )
            for directive in applied(object_type.ast_node.directives, DIRECTIVE_JOIN_TYPE)
        ]

    def field_directives(self, type_name: str, field_name: str) -> list[JoinField]:
        """`@join__field` applications on the field itself (never the parent type)."""
        object_type = self._object_type(type_name)
        if object_type is None:
            return []

        graphql_field = object_type.fields.get(field_name)
        if graphql_field is None or graphql_field.ast_node is None:
            return []

        return [
            JoinField(
                graph=enum_argument(directive, ARGUMENT_GRAPH),
                external=boolean_argument(directive, ARGUMENT_EXTERNAL),
            )
            for directive in applied(graphql_field.ast_node.directives, DIRECTIVE_JOIN_FIELD)
        ]
