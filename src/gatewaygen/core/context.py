"""
Generation context.

Holds the schema and everything derived from it once, so each resolver works
from the same immutable view.
"""

from __future__ import annotations

from dataclasses import dataclass

from graphql import GraphQLField, GraphQLObjectType, GraphQLSchema

from .catalog import EntityCatalog
from .defs import Subgraph, SubgraphRegistry
from .directives import DirectiveReader
from .errors import GenerationError, ValidationError
from .type_resolver import TypeResolver


@dataclass(frozen=True)
class Context:
    """
    Context passed through plan construction.

    Contains:
    - schema: the parsed supergraph schema
    - subgraphs: registry built from the join__Graph enum
    - entities: catalog of plan-worthy object types
    - directives / types: readers bound to the schema
    """
    schema: GraphQLSchema
    subgraphs: SubgraphRegistry
    entities: EntityCatalog
    directives: DirectiveReader
    types: TypeResolver

    @classmethod
    def from_schema(cls, schema: GraphQLSchema) -> "Context":
        directives = DirectiveReader(schema)
        return cls(
            schema=schema,
            subgraphs=directives.read_registry(),
            entities=EntityCatalog(schema),
            directives=directives,
            types=TypeResolver(schema),
        )

    def require_subgraph(self, enum_key: str, where: str) -> Subgraph:
        """Look up a graph referenced by a directive, failing if it is not registered."""
        subgraph = self.subgraphs.get(enum_key)
        if subgraph is None:
            raise ValidationError(f"{where}: graph '{enum_key}' is not declared in join__Graph")
        return subgraph

    def object_type(self, type_name: str) -> GraphQLObjectType:
        named_type = self.schema.get_type(type_name)
        if not isinstance(named_type, GraphQLObjectType):
            raise GenerationError(f"'{type_name}' is not an object type")
        return named_type

    def fields_of(self, type_name: str) -> list[tuple[str, GraphQLField]]:
        """Fields of an object type in declaration order."""
        return list(self.object_type(type_name).fields.items())
