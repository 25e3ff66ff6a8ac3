"""
Query plan builder - composes the resolvers into the per-entity plan.

Usage:
    from gatewaygen.core.schema_loader import load_schema
    from gatewaygen.core.builder import QueryPlanBuilder

    schema = load_schema(sdl)
    result = QueryPlanBuilder.from_schema(schema).build()
    result.query_plan["Astronaut"].keys_by_subgraph  # {"ASTRONAUTS": "id"}
"""

from __future__ import annotations

import logging

from graphql import GraphQLSchema

from .context import Context
from .defs import (
    FieldPlan,
    GenerationResult,
    PlanWarning,
    QueryPlan,
    TypePlanEntry,
    freeze,
)
from .errors import GenerationError
from .keys import KeyResolver
from .operations import RootOperationReader
from .ownership import OwnershipResolver
from .type_definitions import TypeDefinitionReader

logger = logging.getLogger(__name__)


class QueryPlanBuilder:
    """
    Builds the QueryPlan and collects warnings for dropped fields.

    For each entity (catalog order):
    1. keys_by_subgraph from every @join__type on the entity
    2. each field, in declaration order, is resolved to its owner
    3. key fields are skipped, unresolved fields dropped with a warning
    """

    def __init__(self, ctx: Context):
        self.ctx = ctx
        self.ownership = OwnershipResolver(ctx)
        self.keys = KeyResolver(ctx)
        self.warnings: list[PlanWarning] = []

    @classmethod
    def from_schema(cls, schema: GraphQLSchema) -> "QueryPlanBuilder":
        return cls(Context.from_schema(schema))

    def build(self) -> GenerationResult:
        """
        Build the full generation result.

        Raises:
            ValidationError: schema violates join spec conventions
            GenerationError: an entity cannot be planned
        """
        self.warnings = []
        query_plan = self.build_query_plan()
        root_fields = RootOperationReader(self.ctx).read()
        type_definitions = TypeDefinitionReader(self.ctx).read()

        logger.info(
            f"Built query plan: {len(self.ctx.subgraphs)} subgraphs, "
            f"{len(query_plan)} entities, {len(root_fields)} root fields, "
            f"{len(type_definitions)} type definitions, "
            f"{len(self.warnings)} warnings"
        )
        return GenerationResult(
            subgraphs=self.ctx.subgraphs,
            query_plan=query_plan,
            root_fields=root_fields,
            type_definitions=type_definitions,
            warnings=tuple(self.warnings),
        )

    def build_query_plan(self) -> QueryPlan:
        plan: dict[str, TypePlanEntry] = {}
        for type_name in self.ctx.entities:
            plan[type_name] = self.build_entry(type_name)
        return freeze(plan)

    def build_entry(self, type_name: str) -> TypePlanEntry:
        """Build the plan row of a single entity."""
        join_types = self.ctx.directives.type_directives(type_name)
        keys = self.keys.resolve_all(type_name, join_types)

        fields: list[FieldPlan] = []
        for field_name, graphql_field in self.ctx.fields_of(type_name):
            owner = self.ownership.resolve(type_name, field_name, join_types)

            if owner is None:
                # Shared key fields of multi-owner types carry no @join__field
                if field_name in keys.values():
                    continue
                self._warn(type_name, field_name, "no owning subgraph could be resolved")
                continue

            if keys.get(owner) == field_name:
                continue

            if graphql_field.ast_node is None:
                raise GenerationError(f"field '{field_name}' has no definition", type_name=type_name)

            fields.append(FieldPlan(
                name=field_name,
                type=self.ctx.types.resolve(graphql_field.ast_node.type),
                owning_subgraph=owner,
            ))

        logger.debug(f"{type_name}: keys={keys} fields={[f.name for f in fields]}")
        return TypePlanEntry(
            type_name=type_name,
            keys_by_subgraph=freeze(keys),
            fields=tuple(fields),
        )

    def _warn(self, type_name: str, field_name: str, reason: str) -> None:
        warning = PlanWarning(type_name=type_name, field_name=field_name, reason=reason)
        self.warnings.append(warning)
        logger.warning(f"Dropping field from query plan: {warning}")


def build_query_plan(schema: GraphQLSchema) -> GenerationResult:
    """
    Convenience function to build the generation result for a schema.

    Returns:
        GenerationResult with subgraphs, query plan, root fields and warnings
    """
    return QueryPlanBuilder.from_schema(schema).build()
