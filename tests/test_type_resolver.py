from __future__ import annotations

import pytest
from graphql import parse_type

from gatewaygen.core.defs import BaseKind, TypeDescriptor
from gatewaygen.core.errors import UnsupportedTypeError
from gatewaygen.core.schema_loader import load_schema
from gatewaygen.core.type_resolver import TypeResolver, render_type

from conftest import STORE_SUPERGRAPH


@pytest.fixture
def resolver(store_schema):
    return TypeResolver(store_schema)


def resolve(resolver, source):
    return resolver.resolve(parse_type(source))


@pytest.mark.parametrize(
    "source, element_nullable, is_list, list_nullable, nullable_form, non_null_form",
    [
        ("String", True, False, False, "Optional[str]", "str"),
        ("String!", False, False, False, "str", "str"),
        ("[String]", True, True, True, "Optional[list[Optional[str]]]", "list[Optional[str]]"),
        ("[String!]", False, True, True, "Optional[list[str]]", "list[str]"),
        ("[String]!", True, True, False, "list[Optional[str]]", "list[Optional[str]]"),
        ("[String!]!", False, True, False, "list[str]", "list[str]"),
    ],
)
def test_scalar_shapes(
    resolver, source, element_nullable, is_list, list_nullable, nullable_form, non_null_form
):
    descriptor = resolve(resolver, source)

    assert descriptor == TypeDescriptor(
        base_kind=BaseKind.SCALAR,
        base_name="String",
        element_nullable=element_nullable,
        is_list=is_list,
        list_nullable=list_nullable,
    )
    assert resolver.nullable_form(descriptor) == nullable_form
    assert resolver.non_null_form(descriptor) == non_null_form


@pytest.mark.parametrize(
    "source, nullable_form, non_null_form",
    [
        ("Product", "Optional[Product]", "Product"),
        ("Product!", "Product", "Product"),
        ("[Product]", "Optional[list[Optional[Product]]]", "list[Optional[Product]]"),
        ("[Product!]", "Optional[list[Product]]", "list[Product]"),
        ("[Product]!", "list[Optional[Product]]", "list[Optional[Product]]"),
        ("[Product!]!", "list[Product]", "list[Product]"),
    ],
)
def test_object_shapes_render(resolver, source, nullable_form, non_null_form):
    descriptor = resolve(resolver, source)

    assert descriptor.is_object
    assert descriptor.base_name == "Product"
    assert render_type(descriptor) == nullable_form
    assert render_type(descriptor, non_null=True) == non_null_form


def test_builtin_scalars_render_as_python_types(resolver):
    assert render_type(resolve(resolver, "Int!")) == "int"
    assert render_type(resolve(resolver, "Float")) == "Optional[float]"
    assert render_type(resolve(resolver, "Boolean!")) == "bool"
    assert render_type(resolve(resolver, "ID!")) == "str"


def test_enum_and_custom_scalar(resolver):
    rating = resolve(resolver, "Rating")
    posted_at = resolve(resolver, "[DateTime!]!")

    assert rating.is_enum
    assert render_type(rating) == "Optional[str]"
    assert posted_at.is_scalar
    assert render_type(posted_at) == "list[Any]"


def test_nullable_and_non_null_forms(resolver):
    descriptor = resolve(resolver, "[Review]")

    assert descriptor.nullable
    assert resolver.nullable_form(descriptor) == "Optional[list[Optional[Review]]]"
    assert resolver.non_null_form(descriptor) == "list[Optional[Review]]"


def test_basic_name_strips_wrappers(resolver):
    assert resolver.basic_name(parse_type("[Review!]!")) == "Review"
    assert resolver.basic_name(parse_type("ID")) == "ID"


def test_basic_name_accepts_any_depth(resolver):
    assert resolver.basic_name(parse_type("[[Int]]")) == "Int"
    assert resolver.basic_name(parse_type("[[ID!]!]!")) == "ID"


@pytest.mark.parametrize("source", ["[[String]]", "[[String!]!]!"])
def test_nested_lists_are_rejected(resolver, source):
    with pytest.raises(UnsupportedTypeError):
        resolve(resolver, source)


def test_list_of_lists_field_in_schema_is_rejected():
    schema = load_schema(STORE_SUPERGRAPH + "\ntype Grid {\n  cells: [[Int]]\n}\n")
    resolver = TypeResolver(schema)
    cells = schema.get_type("Grid").fields["cells"]

    with pytest.raises(UnsupportedTypeError, match="Nested list"):
        resolver.resolve(cells.ast_node.type)


def test_unknown_type_is_rejected(resolver):
    with pytest.raises(UnsupportedTypeError, match="Unknown type 'Spaceship'"):
        resolve(resolver, "Spaceship")
