"""
Schema types module generator.

Generates a Python module declaring every type the rendered hints in
query_plan.py and service.py refer to:
- custom scalars as `Any` aliases
- enums as `str` enums
- input objects, interfaces and objects as TypedDicts (total=False, a
  selection set or input literal may carry any subset of fields)
- unions as `Union[...]` aliases, after every class they name

Example output:

    DateTime = Any


    class Rating(str, Enum):
        GOOD = 'GOOD'


    class Review(TypedDict, total=False):
        id: str
        rating: Optional[str]
"""

from __future__ import annotations

import keyword

from ..core.constants import CUSTOM_SCALAR_RENDERED_TYPE
from ..core.defs import DefinitionKind, GenerationResult, TypeDefinition
from ..core.utils import escape_identifier

HEADER = [
    "# Auto-generated types from the supergraph schema",
    "# Do not edit manually - regenerate with: gatewaygen generate",
    "",
    "from __future__ import annotations",
    "",
    "from enum import Enum",
    "from typing import Any, Optional, TypedDict, Union",
]

# Emission order within the module
SECTIONS = (
    DefinitionKind.SCALAR,
    DefinitionKind.ENUM,
    DefinitionKind.INPUT,
    DefinitionKind.INTERFACE,
    DefinitionKind.OBJECT,
    DefinitionKind.UNION,
)


def generate_docstring(description: str, indent: str = "    ") -> list[str]:
    """First line of a schema description as a class docstring."""
    lines = description.strip().splitlines()
    if not lines:
        return []
    text = lines[0].strip()
    if '"""' in text or "\\" in text or text.endswith('"'):
        return [f"{indent}{text!r}"]
    return [f'{indent}"""{text}"""']


def generate_scalar(definition: TypeDefinition) -> list[str]:
    return [f"{definition.name} = {CUSTOM_SCALAR_RENDERED_TYPE}"]


def generate_enum(definition: TypeDefinition) -> list[str]:
    lines = [f"class {definition.name}(str, Enum):"]
    if definition.description:
        lines.extend(generate_docstring(definition.description))
    for value in definition.members:
        lines.append(f"    {escape_identifier(value)} = {value!r}")
    return lines


def generate_typed_dict(definition: TypeDefinition) -> list[str]:
    """
    Generate a TypedDict for an object, interface or input type.

    Field names that are Python keywords (`from`, `in`, ...) cannot be class
    attributes, so such types use the functional TypedDict form.
    """
    if any(keyword.iskeyword(f.name) for f in definition.fields):
        lines = [f"{definition.name} = TypedDict({definition.name!r}, {{"]
        for f in definition.fields:
            lines.append(f"    {f.name!r}: {f.rendered_type!r},")
        lines.append("}, total=False)")
        return lines

    lines = [f"class {definition.name}(TypedDict, total=False):"]
    if definition.description:
        lines.extend(generate_docstring(definition.description))
    for f in definition.fields:
        lines.append(f"    {f.name}: {f.rendered_type}")
    if len(lines) == 1:
        lines.append("    pass")
    return lines


def generate_union(definition: TypeDefinition) -> list[str]:
    return [f"{definition.name} = Union[{', '.join(definition.members)}]"]


GENERATORS = {
    DefinitionKind.SCALAR: generate_scalar,
    DefinitionKind.ENUM: generate_enum,
    DefinitionKind.INPUT: generate_typed_dict,
    DefinitionKind.INTERFACE: generate_typed_dict,
    DefinitionKind.OBJECT: generate_typed_dict,
    DefinitionKind.UNION: generate_union,
}


def generate_types_module(result: GenerationResult) -> str:
    """
    Generate the schema types module source.

    Args:
        result: Output of QueryPlanBuilder.build()

    Returns:
        Python source code as string
    """
    lines: list[str] = list(HEADER)

    for kind in SECTIONS:
        definitions = [d for d in result.type_definitions if d.kind == kind]
        if not definitions:
            continue

        if kind in (DefinitionKind.SCALAR, DefinitionKind.UNION):
            lines.extend(["", ""])
            for definition in definitions:
                lines.extend(GENERATORS[kind](definition))
            continue

        for definition in definitions:
            lines.extend(["", ""])
            lines.extend(GENERATORS[kind](definition))

    lines.append("")
    return "\n".join(lines)
