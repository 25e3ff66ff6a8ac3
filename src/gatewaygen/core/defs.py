"""
Core dataclass definitions for the gateway generator.

These describe the compiled model: subgraphs, type shapes, and the
per-entity query plan handed to the emitters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Literal, Mapping, Optional


class BaseKind(str, Enum):
    """Kind of the named type at the bottom of a type reference."""
    SCALAR = "scalar"
    OBJECT = "object"
    ENUM = "enum"


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Normalized shape of a (possibly wrapped) type reference.

    Example: `[Mission!]` -> base_name="Mission", is_list=True,
    element_nullable=False, list_nullable=True.
    """
    base_kind: BaseKind
    base_name: str
    element_nullable: bool
    is_list: bool = False
    list_nullable: bool = False

    @property
    def is_scalar(self) -> bool:
        return self.base_kind == BaseKind.SCALAR

    @property
    def is_object(self) -> bool:
        return self.base_kind == BaseKind.OBJECT

    @property
    def is_enum(self) -> bool:
        return self.base_kind == BaseKind.ENUM

    @property
    def nullable(self) -> bool:
        """Whether the outermost value may be null."""
        return self.list_nullable if self.is_list else self.element_nullable


@dataclass(frozen=True)
class Subgraph:
    """A subgraph service declared by a `join__Graph` enum value."""
    enum_key: str  # "ASTRONAUTS"
    name: str  # "astronauts"
    url: str


@dataclass(frozen=True)
class FieldPlan:
    """A field of an entity together with the subgraph that resolves it."""
    name: str
    type: TypeDescriptor
    owning_subgraph: str  # enum key


@dataclass(frozen=True)
class TypePlanEntry:
    """Query plan row for a single entity."""
    type_name: str
    keys_by_subgraph: Mapping[str, str]  # enum key -> key field name
    fields: tuple[FieldPlan, ...] = ()

    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> Optional[FieldPlan]:
        for f in self.fields:
            if f.name == name:
                return f
        return None


@dataclass(frozen=True)
class PlanWarning:
    """Diagnostic for a field left out of the plan."""
    type_name: str
    field_name: str
    reason: str

    def __str__(self) -> str:
        return f"[{self.type_name}.{self.field_name}] {self.reason}"


@dataclass(frozen=True)
class ArgumentPlan:
    """An argument of a root operation field."""
    name: str
    type: TypeDescriptor
    default: Any = None  # python value of the default literal, if any
    has_default: bool = False


@dataclass(frozen=True)
class RootFieldPlan:
    """A field of the query or mutation root type."""
    operation: Literal["query", "mutation"]
    name: str
    type: TypeDescriptor
    owning_subgraph: str
    arguments: tuple[ArgumentPlan, ...] = ()
    deprecation_reason: Optional[str] = None


class DefinitionKind(str, Enum):
    """Kind of a user-declared named type emitted to the types module."""
    SCALAR = "scalar"
    ENUM = "enum"
    INPUT = "input"
    INTERFACE = "interface"
    OBJECT = "object"
    UNION = "union"


@dataclass(frozen=True)
class FieldDefinition:
    """A field of an object, interface or input type, already rendered."""
    name: str
    rendered_type: str  # Optional[list[Mission]]


@dataclass(frozen=True)
class TypeDefinition:
    """
    A named type declared by the schema itself.

    `fields` is set for objects, interfaces and inputs; `members` holds enum
    values or union member type names.
    """
    kind: DefinitionKind
    name: str
    fields: tuple[FieldDefinition, ...] = ()
    members: tuple[str, ...] = ()
    description: Optional[str] = None


# Read-only ordered mappings
SubgraphRegistry = Mapping[str, Subgraph]
QueryPlan = Mapping[str, TypePlanEntry]


def freeze(data: dict) -> Mapping:
    """Wrap an ordered dict in a read-only view."""
    return MappingProxyType(dict(data))


@dataclass(frozen=True)
class GenerationResult:
    """Everything one generation call produces."""
    subgraphs: SubgraphRegistry
    query_plan: QueryPlan
    root_fields: tuple[RootFieldPlan, ...] = ()
    type_definitions: tuple[TypeDefinition, ...] = ()
    warnings: tuple[PlanWarning, ...] = field(default_factory=tuple)

    def subgraph(self, enum_key: str) -> Subgraph:
        return self.subgraphs[enum_key]
