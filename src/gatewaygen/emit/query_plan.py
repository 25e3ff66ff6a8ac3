"""
Query plan module generator.

Generates a Python module with:
- one constant per subgraph (enum key -> subgraph name)
- the QUERY_PLAN table: keys and field owners of every entity

Example output:

    ASTRONAUTS = "astronauts"

    QUERY_PLAN = {
        "Astronaut": {
            "keys": {ASTRONAUTS: "id"},
            "fields": {
                "name": {"type": "str", "client": ASTRONAUTS},
            },
        },
    }
"""

from __future__ import annotations

from ..core.defs import GenerationResult, TypePlanEntry
from ..core.type_resolver import render_type
from ..core.utils import escape_identifier

HEADER = [
    "# Auto-generated query plan from the supergraph schema",
    "# Do not edit manually - regenerate with: gatewaygen generate",
    "",
]


def generate_client_constants(result: GenerationResult) -> list[str]:
    """Generate `ENUM_KEY = "name"` declarations."""
    return [
        f"{escape_identifier(enum_key)} = {subgraph.name!r}"
        for enum_key, subgraph in result.subgraphs.items()
    ]


def generate_entry(entry: TypePlanEntry) -> list[str]:
    """Generate the QUERY_PLAN item of one entity."""
    lines = [f"    {entry.type_name!r}: {{"]

    keys = ", ".join(
        f"{escape_identifier(graph)}: {key!r}"
        for graph, key in entry.keys_by_subgraph.items()
    )
    lines.append(f'        "keys": {{{keys}}},')

    if not entry.fields:
        lines.append('        "fields": {},')
    else:
        lines.append('        "fields": {')
        for f in entry.fields:
            lines.append(
                f"            {f.name!r}: "
                f'{{"type": {render_type(f.type)!r}, '
                f'"client": {escape_identifier(f.owning_subgraph)}}},'
            )
        lines.append("        },")

    lines.append("    },")
    return lines


def generate_query_plan_module(result: GenerationResult) -> str:
    """
    Generate the query plan module source.

    Args:
        result: Output of QueryPlanBuilder.build()

    Returns:
        Python source code as string
    """
    lines: list[str] = list(HEADER)

    constants = generate_client_constants(result)
    if constants:
        lines.extend(constants)
        lines.append("")

    if not result.query_plan:
        lines.append("QUERY_PLAN = {}")
    else:
        lines.append("QUERY_PLAN = {")
        for entry in result.query_plan.values():
            lines.extend(generate_entry(entry))
        lines.append("}")

    lines.append("")
    return "\n".join(lines)
