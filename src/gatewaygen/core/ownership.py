"""
Field ownership resolution.

Federation records whole-type ownership with `@join__type` and only annotates
a field with `@join__field` when the owner cannot be inferred from the type.
Precedence, first match wins:

1. a `@join__field(graph: X)` on the field that is not `external: true`
2. the single `@join__type` of the parent type
3. unresolved
"""

from __future__ import annotations

from typing import Optional, Sequence

from .context import Context
from .directives import JoinField, JoinType


class OwnershipResolver:
    """
    Decides which subgraph resolves a field.

    Usage:
        resolver = OwnershipResolver(ctx)
        owner = resolver.resolve("Astronaut", "missions")  # "MISSIONS" or None
    """

    def __init__(self, ctx: Context):
        self.ctx = ctx

    def resolve(
        self,
        type_name: str,
        field_name: str,
        join_types: Optional[Sequence[JoinType]] = None,
    ) -> Optional[str]:
        """
        Return the enum key of the owning subgraph, or None when unresolved.

        Raises:
            ValidationError: if the owner is not declared in join__Graph
        """
        if join_types is None:
            join_types = self.ctx.directives.type_directives(type_name)

        owner = self.owner_from_fields(self.ctx.directives.field_directives(type_name, field_name))
        if owner is None:
            owner = self.owner_from_type(join_types)

        if owner is not None:
            self.ctx.require_subgraph(owner, f"{type_name}.{field_name}")
        return owner

    @staticmethod
    def owner_from_fields(join_fields: Sequence[JoinField]) -> Optional[str]:
        for join_field in join_fields:
            if join_field.graph is not None and not join_field.external:
                return join_field.graph
        return None

    @staticmethod
    def owner_from_type(join_types: Sequence[JoinType]) -> Optional[str]:
        if len(join_types) == 1:
            return join_types[0].graph
        return None
