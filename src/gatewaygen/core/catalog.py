"""
Entity catalog - the object types that get a query plan entry.
"""

from __future__ import annotations

from graphql import GraphQLObjectType, GraphQLSchema

from .constants import INTROSPECTION_PREFIX, ROOT_TYPE_NAMES


def is_entity_name(name: str) -> bool:
    """Root operation types and introspection types are never entities."""
    return bool(name) and name not in ROOT_TYPE_NAMES and not name.startswith(INTROSPECTION_PREFIX)


class EntityCatalog:
    """
    Ordered list of user-defined object type names.

    graphql-core keeps the type map in SDL declaration order, so the catalog
    is stable across runs on the same schema.
    """

    def __init__(self, schema: GraphQLSchema):
        self.names: tuple[str, ...] = tuple(
            name
            for name, named_type in schema.type_map.items()
            if isinstance(named_type, GraphQLObjectType) and is_entity_name(name)
        )

    def __iter__(self):
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self.names
