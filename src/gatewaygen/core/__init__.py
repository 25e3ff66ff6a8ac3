"""
Core module - schema loading, join spec resolution, and query plan building.
"""

from __future__ import annotations

from .builder import QueryPlanBuilder, build_query_plan
from .catalog import EntityCatalog
from .context import Context
from .defs import (
    ArgumentPlan,
    BaseKind,
    DefinitionKind,
    FieldDefinition,
    FieldPlan,
    GenerationResult,
    PlanWarning,
    QueryPlan,
    RootFieldPlan,
    Subgraph,
    SubgraphRegistry,
    TypeDefinition,
    TypeDescriptor,
    TypePlanEntry,
)
from .directives import DirectiveReader, JoinField, JoinType
from .errors import (
    GatewayGenError,
    GenerationError,
    UnsupportedTypeError,
    ValidationError,
)
from .keys import KeyResolver
from .operations import RootOperationReader
from .ownership import OwnershipResolver
from .plan_types import (
    FieldPlanModel,
    GenerationDocument,
    RootFieldModel,
    SubgraphModel,
    TypePlanModel,
)
from .schema_loader import load_schema, load_schema_file
from .type_definitions import TypeDefinitionReader
from .type_resolver import TypeResolver, render_type

__all__ = [
    # Definitions
    "BaseKind",
    "TypeDescriptor",
    "Subgraph",
    "SubgraphRegistry",
    "FieldPlan",
    "TypePlanEntry",
    "QueryPlan",
    "PlanWarning",
    "ArgumentPlan",
    "RootFieldPlan",
    "DefinitionKind",
    "FieldDefinition",
    "TypeDefinition",
    "GenerationResult",
    # Errors
    "GatewayGenError",
    "ValidationError",
    "GenerationError",
    "UnsupportedTypeError",
    # Schema
    "load_schema",
    "load_schema_file",
    # Resolvers
    "TypeResolver",
    "render_type",
    "DirectiveReader",
    "JoinType",
    "JoinField",
    "EntityCatalog",
    "Context",
    "OwnershipResolver",
    "KeyResolver",
    "RootOperationReader",
    "TypeDefinitionReader",
    # Builder
    "QueryPlanBuilder",
    "build_query_plan",
    # Output contract
    "SubgraphModel",
    "FieldPlanModel",
    "TypePlanModel",
    "RootFieldModel",
    "GenerationDocument",
]
