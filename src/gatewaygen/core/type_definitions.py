"""
Type definition reader.

Collects the named types the schema declares itself, with every field
rendered as a Python type hint, for the types emitter. Root operation types,
introspection types, built-in scalars and join/link namespace types
(`join__Graph`, `link__Import`, ...) are left out.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from graphql import (
    GraphQLEnumType,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLUnionType,
    is_specified_scalar_type,
)

from .catalog import is_entity_name
from .constants import CUSTOM_SCALAR_RENDERED_TYPE, NAMESPACE_SEPARATOR
from .context import Context
from .defs import DefinitionKind, FieldDefinition, TypeDefinition
from .errors import GenerationError, UnsupportedTypeError
from .type_resolver import render_type

logger = logging.getLogger(__name__)


def is_declared_type_name(name: str) -> bool:
    return is_entity_name(name) and NAMESPACE_SEPARATOR not in name


class TypeDefinitionReader:
    """
    Reads user-declared types in schema declaration order.

    Usage:
        definitions = TypeDefinitionReader(ctx).read()
        [d.name for d in definitions if d.kind == DefinitionKind.ENUM]  # ["Rating"]
    """

    def __init__(self, ctx: Context):
        self.ctx = ctx

    def read(self) -> tuple[TypeDefinition, ...]:
        definitions = []
        for name, named_type in self.ctx.schema.type_map.items():
            if not is_declared_type_name(name):
                continue
            definition = self.read_type(named_type)
            if definition is not None:
                definitions.append(definition)

        logger.debug(f"Read {len(definitions)} type definitions")
        return tuple(definitions)

    def read_type(self, named_type: GraphQLNamedType) -> Optional[TypeDefinition]:
        """Describe one named type, or None for a built-in scalar."""
        if isinstance(named_type, GraphQLScalarType):
            if is_specified_scalar_type(named_type):
                return None
            return TypeDefinition(
                kind=DefinitionKind.SCALAR,
                name=named_type.name,
                description=named_type.description,
            )

        if isinstance(named_type, GraphQLEnumType):
            return TypeDefinition(
                kind=DefinitionKind.ENUM,
                name=named_type.name,
                members=tuple(named_type.values),
                description=named_type.description,
            )

        if isinstance(named_type, GraphQLUnionType):
            return TypeDefinition(
                kind=DefinitionKind.UNION,
                name=named_type.name,
                members=tuple(member.name for member in named_type.types),
                description=named_type.description,
            )

        if isinstance(named_type, GraphQLInputObjectType):
            kind = DefinitionKind.INPUT
        elif isinstance(named_type, GraphQLInterfaceType):
            kind = DefinitionKind.INTERFACE
        elif isinstance(named_type, GraphQLObjectType):
            kind = DefinitionKind.OBJECT
        else:
            raise GenerationError(f"unsupported named type {named_type!r}", type_name=named_type.name)

        return TypeDefinition(
            kind=kind,
            name=named_type.name,
            fields=tuple(
                self.read_field(named_type.name, field_name, graphql_field)
                for field_name, graphql_field in named_type.fields.items()
            ),
            description=named_type.description,
        )

    def read_field(
        self,
        type_name: str,
        field_name: str,
        graphql_field: Union[GraphQLField, GraphQLInputField],
    ) -> FieldDefinition:
        """
        Render one field.

        A shape TypeResolver cannot describe (a list of lists) renders as the
        opaque custom scalar type and is logged.
        """
        if graphql_field.ast_node is None:
            raise GenerationError(f"field '{field_name}' has no definition", type_name=type_name)

        try:
            rendered = render_type(self.ctx.types.resolve(graphql_field.ast_node.type))
        except UnsupportedTypeError as e:
            logger.warning(
                f"{type_name}.{field_name}: {e}, typed as {CUSTOM_SCALAR_RENDERED_TYPE}"
            )
            rendered = CUSTOM_SCALAR_RENDERED_TYPE
        return FieldDefinition(name=field_name, rendered_type=rendered)
