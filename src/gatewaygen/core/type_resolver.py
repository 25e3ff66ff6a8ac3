"""
Type reference resolution.

Turns the List/NonNull/Named wrapper nodes of a field or argument type into a
TypeDescriptor, and renders descriptors as Python type hints for the emitters.

Supported shapes (T is a scalar, enum or object type):
    T, T!, [T], [T!], [T]!, [T!]!

Everything deeper (lists of lists) raises UnsupportedTypeError.
"""

from __future__ import annotations

from typing import Optional

from graphql import GraphQLEnumType, GraphQLScalarType, GraphQLSchema
from graphql.language import ListTypeNode, NamedTypeNode, NonNullTypeNode, TypeNode

from .constants import CUSTOM_SCALAR_RENDERED_TYPE, ENUM_RENDERED_TYPE, SCALAR_TYPE_MAP
from .defs import BaseKind, TypeDescriptor
from .errors import UnsupportedTypeError

# NonNull(List(NonNull(Named))) is the deepest supported reference
MAX_WRAPPER_DEPTH = 3


class TypeResolver:
    """
    Resolves type reference nodes against a schema.

    Usage:
        resolver = TypeResolver(schema)
        descriptor = resolver.resolve(field.ast_node.type)
        resolver.nullable_form(descriptor)   # "Optional[list[str]]"
    """

    def __init__(self, schema: GraphQLSchema):
        self.schema = schema

    def resolve(self, type_node: TypeNode) -> TypeDescriptor:
        """Resolve a raw type reference node to a TypeDescriptor."""
        return self._descend(type_node, depth=0, nullable=True, list_nullable=None)

    def _descend(
        self,
        node: TypeNode,
        depth: int,
        nullable: bool,
        list_nullable: Optional[bool],
    ) -> TypeDescriptor:
        # list_nullable stays None until a list wrapper has been crossed
        if depth > MAX_WRAPPER_DEPTH:
            raise UnsupportedTypeError(
                f"Type reference nested deeper than {MAX_WRAPPER_DEPTH} wrappers"
            )

        if isinstance(node, NonNullTypeNode):
            if not nullable:
                raise UnsupportedTypeError("Non-null wrapper applied twice")
            return self._descend(node.type, depth + 1, False, list_nullable)

        if isinstance(node, ListTypeNode):
            if list_nullable is not None:
                raise UnsupportedTypeError("Nested list types are not supported")
            return self._descend(node.type, depth + 1, True, nullable)

        if isinstance(node, NamedTypeNode):
            name = node.name.value
            return TypeDescriptor(
                base_kind=self.base_kind(name),
                base_name=name,
                element_nullable=nullable,
                is_list=list_nullable is not None,
                list_nullable=bool(list_nullable),
            )

        raise UnsupportedTypeError(f"Unsupported type: {node!r}")

    def base_kind(self, type_name: str) -> BaseKind:
        """Classify a named type of the schema."""
        named_type = self.schema.get_type(type_name)
        if named_type is None:
            raise UnsupportedTypeError(f"Unknown type '{type_name}'")
        if isinstance(named_type, GraphQLScalarType):
            return BaseKind.SCALAR
        if isinstance(named_type, GraphQLEnumType):
            return BaseKind.ENUM
        return BaseKind.OBJECT

    def nullable_form(self, descriptor: TypeDescriptor) -> str:
        return render_type(descriptor)

    def non_null_form(self, descriptor: TypeDescriptor) -> str:
        return render_type(descriptor, non_null=True)

    def basic_name(self, type_node: TypeNode) -> str:
        """
        GraphQL name of the type with all wrapping stripped.

        Accepts any wrapper depth, including shapes resolve() rejects.
        """
        node = type_node
        while isinstance(node, (ListTypeNode, NonNullTypeNode)):
            node = node.type
        if not isinstance(node, NamedTypeNode):
            raise UnsupportedTypeError(f"Unsupported type: {node!r}")
        return node.name.value


def render_base_type(descriptor: TypeDescriptor) -> str:
    """Render the named type alone, without list or optional wrapping."""
    if descriptor.base_kind == BaseKind.SCALAR:
        return SCALAR_TYPE_MAP.get(descriptor.base_name, CUSTOM_SCALAR_RENDERED_TYPE)
    if descriptor.base_kind == BaseKind.ENUM:
        return ENUM_RENDERED_TYPE
    return descriptor.base_name


def render_type(descriptor: TypeDescriptor, non_null: bool = False) -> str:
    """
    Render a descriptor as a Python type hint.

    Examples:
        String      -> Optional[str]
        [Int!]      -> Optional[list[int]]
        [Mission]!  -> list[Optional[Mission]]

    With non_null=True the outermost Optional is dropped.
    """
    rendered = render_base_type(descriptor)

    if descriptor.is_list:
        if descriptor.element_nullable:
            rendered = f"Optional[{rendered}]"
        rendered = f"list[{rendered}]"

    if descriptor.nullable and not non_null:
        rendered = f"Optional[{rendered}]"
    return rendered
