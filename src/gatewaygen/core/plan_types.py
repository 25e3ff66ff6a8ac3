"""
Pydantic models for the emitter boundary.

These are the serializable view of a GenerationResult: what an emitter (or a
plan document on disk) sees.
"""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from .defs import GenerationResult, RootFieldPlan, TypePlanEntry
from .type_resolver import render_type


class SubgraphModel(BaseModel):
    """
    A subgraph service.

    Example: {"enum_key": "ASTRONAUTS", "name": "astronauts", "url": "http://localhost:4001"}
    """
    enum_key: str
    name: str
    url: str


class FieldPlanModel(BaseModel):
    name: str
    rendered_type: str  # Optional[list[Mission]]
    owning_subgraph: str


class TypePlanModel(BaseModel):
    """
    Query plan row.

    Example:
    {
        "type_name": "Astronaut",
        "keys_by_subgraph": {"ASTRONAUTS": "id"},
        "fields": [{"name": "name", "rendered_type": "str", "owning_subgraph": "ASTRONAUTS"}]
    }
    """
    type_name: str
    keys_by_subgraph: dict[str, str] = Field(default_factory=dict)
    fields: list[FieldPlanModel] = Field(default_factory=list)

    @classmethod
    def from_entry(cls, entry: TypePlanEntry) -> "TypePlanModel":
        return cls(
            type_name=entry.type_name,
            keys_by_subgraph=dict(entry.keys_by_subgraph),
            fields=[
                FieldPlanModel(
                    name=f.name,
                    rendered_type=render_type(f.type),
                    owning_subgraph=f.owning_subgraph,
                )
                for f in entry.fields
            ],
        )


class ArgumentModel(BaseModel):
    name: str
    rendered_type: str
    default: Any = None
    has_default: bool = False


class RootFieldModel(BaseModel):
    operation: Literal["query", "mutation"]
    name: str
    rendered_type: str
    owning_subgraph: str
    arguments: list[ArgumentModel] = Field(default_factory=list)
    deprecation_reason: Optional[str] = None

    @classmethod
    def from_plan(cls, plan: RootFieldPlan) -> "RootFieldModel":
        return cls(
            operation=plan.operation,
            name=plan.name,
            rendered_type=render_type(plan.type),
            owning_subgraph=plan.owning_subgraph,
            arguments=[
                ArgumentModel(
                    name=arg.name,
                    rendered_type=render_type(arg.type),
                    default=arg.default,
                    has_default=arg.has_default,
                )
                for arg in plan.arguments
            ],
            deprecation_reason=plan.deprecation_reason,
        )


class GenerationDocument(BaseModel):
    """Complete serializable output of one generation call."""
    subgraphs: list[SubgraphModel] = Field(default_factory=list)
    query_plan: list[TypePlanModel] = Field(default_factory=list)
    root_fields: list[RootFieldModel] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: GenerationResult) -> "GenerationDocument":
        return cls(
            subgraphs=[
                SubgraphModel(enum_key=s.enum_key, name=s.name, url=s.url)
                for s in result.subgraphs.values()
            ],
            query_plan=[TypePlanModel.from_entry(e) for e in result.query_plan.values()],
            root_fields=[RootFieldModel.from_plan(r) for r in result.root_fields],
            warnings=[str(w) for w in result.warnings],
        )
