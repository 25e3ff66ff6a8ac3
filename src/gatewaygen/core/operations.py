"""
Root operation reader.

Lists the fields of the query and mutation root types together with the
subgraph each one is forwarded to, for the service emitter.
"""

from __future__ import annotations

import logging
from typing import Literal, Optional

from graphql import GraphQLField, GraphQLObjectType
from graphql.utilities import value_from_ast_untyped

from .context import Context
from .defs import ArgumentPlan, RootFieldPlan
from .errors import GenerationError

logger = logging.getLogger(__name__)


class RootOperationReader:
    """
    Reads root operation fields in declaration order.

    A root field is forwarded to the graph of its first `@join__field`
    naming one, otherwise to the first `@join__type` graph of the root type.
    """

    def __init__(self, ctx: Context):
        self.ctx = ctx

    def read(self) -> tuple[RootFieldPlan, ...]:
        if not self.ctx.subgraphs:
            logger.debug("No subgraphs declared, no root fields to route")
            return ()

        fields: list[RootFieldPlan] = []
        fields.extend(self._read_root(self.ctx.schema.query_type, "query"))
        fields.extend(self._read_root(self.ctx.schema.mutation_type, "mutation"))
        return tuple(fields)

    def _read_root(
        self,
        root_type: Optional[GraphQLObjectType],
        operation: Literal["query", "mutation"],
    ) -> list[RootFieldPlan]:
        if root_type is None:
            return []

        plans = []
        for field_name, graphql_field in root_type.fields.items():
            if graphql_field.ast_node is None:
                raise GenerationError(f"field '{field_name}' has no definition", type_name=root_type.name)

            plans.append(RootFieldPlan(
                operation=operation,
                name=field_name,
                type=self.ctx.types.resolve(graphql_field.ast_node.type),
                owning_subgraph=self.client_of(root_type.name, field_name),
                arguments=self._arguments(graphql_field),
                deprecation_reason=graphql_field.deprecation_reason,
            ))

        logger.debug(f"{root_type.name}: {len(plans)} root fields")
        return plans

    def client_of(self, root_type_name: str, field_name: str) -> str:
        """
        Enum key of the subgraph serving a root field.

        Raises:
            GenerationError: if neither the field nor the root type names a graph
            ValidationError: if the graph is not declared in join__Graph
        """
        graph: Optional[str] = None
        for join_field in self.ctx.directives.field_directives(root_type_name, field_name):
            if join_field.graph is not None:
                graph = join_field.graph
                break

        if graph is None:
            for join_type in self.ctx.directives.type_directives(root_type_name):
                if join_type.graph is not None:
                    graph = join_type.graph
                    break

        if graph is None:
            raise GenerationError(f"No client name found: {field_name}")

        self.ctx.require_subgraph(graph, f"{root_type_name}.{field_name}")
        return graph

    def _arguments(self, graphql_field: GraphQLField) -> tuple[ArgumentPlan, ...]:
        arguments = []
        for arg_name, argument in graphql_field.args.items():
            definition = argument.ast_node
            if definition is None:
                raise GenerationError(f"argument '{arg_name}' has no definition")

            has_default = definition.default_value is not None
            arguments.append(ArgumentPlan(
                name=arg_name,
                type=self.ctx.types.resolve(definition.type),
                default=value_from_ast_untyped(definition.default_value) if has_default else None,
                has_default=has_default,
            ))
        return tuple(arguments)
