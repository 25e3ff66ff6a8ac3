"""
Entity key resolution.

Each subgraph that claims a type with `@join__type` must expose a key field
the gateway can use to correlate the entity across subgraphs.
"""

from __future__ import annotations

import logging

from .constants import ARGUMENT_GRAPH, DIRECTIVE_JOIN_TYPE, GRAPHQL_ID_TYPE
from .context import Context
from .directives import JoinType
from .errors import GenerationError, ValidationError

logger = logging.getLogger(__name__)


class KeyResolver:
    """
    Decides the key field of an entity within one subgraph.

    An explicit `key` argument is taken verbatim (a composite selection such as
    "id sku" is kept as one opaque string). Without it, the first field typed
    `ID` in declaration order is the key.
    """

    def __init__(self, ctx: Context):
        self.ctx = ctx

    def resolve(self, type_name: str, join_type: JoinType) -> str:
        """
        Return the key field name for (type_name, join_type.graph).

        Raises:
            GenerationError: if neither the directive nor the fields yield a key
        """
        if join_type.key is not None:
            return join_type.key

        for field_name, graphql_field in self.ctx.fields_of(type_name):
            if graphql_field.ast_node is None:
                continue
            if self.ctx.types.basic_name(graphql_field.ast_node.type) == GRAPHQL_ID_TYPE:
                logger.debug(f"{type_name}: inferred key '{field_name}' for {join_type.graph}")
                return field_name

        raise GenerationError(f"no key for graph '{join_type.graph}'", type_name=type_name)

    def resolve_all(self, type_name: str, join_types: list[JoinType]) -> dict[str, str]:
        """
        Keys of every subgraph claiming the type, keyed by graph enum key.

        Raises:
            ValidationError: if a `@join__type` has no graph or names an
                undeclared graph
            GenerationError: if a claiming subgraph has no resolvable key
        """
        keys: dict[str, str] = {}
        for join_type in join_types:
            if join_type.graph is None:
                raise ValidationError(
                    f"{type_name}: @{DIRECTIVE_JOIN_TYPE} missing '{ARGUMENT_GRAPH}' argument"
                )
            self.ctx.require_subgraph(join_type.graph, type_name)
            keys[join_type.graph] = self.resolve(type_name, join_type)
        return keys
