"""
gatewaygen - federation gateway generator for supergraph schemas.

Compiles a supergraph SDL annotated with join spec directives into:
- a registry of the subgraph services behind the supergraph
- a static query plan: key fields and owning subgraph of every entity field

Usage:
    from gatewaygen import load_schema, build_query_plan

    result = build_query_plan(load_schema(sdl))
    result.query_plan["Astronaut"].keys_by_subgraph  # {"ASTRONAUTS": "id"}
"""

from __future__ import annotations

from .core import (
    ArgumentPlan,
    BaseKind,
    Context,
    DirectiveReader,
    EntityCatalog,
    FieldPlan,
    GatewayGenError,
    GenerationDocument,
    GenerationError,
    GenerationResult,
    KeyResolver,
    OwnershipResolver,
    PlanWarning,
    QueryPlanBuilder,
    RootFieldPlan,
    RootOperationReader,
    TypeDefinitionReader,
    Subgraph,
    TypeDescriptor,
    TypePlanEntry,
    TypeResolver,
    UnsupportedTypeError,
    ValidationError,
    build_query_plan,
    load_schema,
    load_schema_file,
    render_type,
)
from .emit import (
    generate_query_plan_module,
    generate_service_module,
    generate_types_module,
    render_document,
)
from .generator import GatewayGenerator, GatewayProject, generate_gateway

__version__ = "0.1.0"

__all__ = [
    # Definitions
    "BaseKind",
    "TypeDescriptor",
    "Subgraph",
    "FieldPlan",
    "TypePlanEntry",
    "PlanWarning",
    "ArgumentPlan",
    "RootFieldPlan",
    "GenerationResult",
    "GenerationDocument",
    # Errors
    "GatewayGenError",
    "ValidationError",
    "GenerationError",
    "UnsupportedTypeError",
    # Schema
    "load_schema",
    "load_schema_file",
    # Resolvers
    "Context",
    "TypeResolver",
    "render_type",
    "DirectiveReader",
    "EntityCatalog",
    "OwnershipResolver",
    "KeyResolver",
    "RootOperationReader",
    "TypeDefinitionReader",
    "QueryPlanBuilder",
    "build_query_plan",
    # Emitters
    "generate_query_plan_module",
    "generate_service_module",
    "generate_types_module",
    "render_document",
    # Generator
    "GatewayProject",
    "GatewayGenerator",
    "generate_gateway",
]
