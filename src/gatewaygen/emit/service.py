"""
Gateway service module generator.

Generates the routing tables of the gateway service: subgraph URLs, the
listening port, and one entry per root query/mutation field naming the
subgraph it is forwarded to.
"""

from __future__ import annotations

from ..core.constants import DEFAULT_PORT
from ..core.defs import GenerationResult, RootFieldPlan
from ..core.type_resolver import render_type

HEADER = [
    "# Auto-generated gateway service tables from the supergraph schema",
    "# Do not edit manually - regenerate with: gatewaygen generate",
    "",
]

GET_CLIENT_URL_FUNCTION = [
    "def get_client_url(client: str) -> str:",
    '    """Return the URL of a subgraph by name."""',
    "    if client not in SUBGRAPH_URLS:",
    '        raise KeyError(f"Unknown client: {client}")',
    "    return SUBGRAPH_URLS[client]",
]


def generate_subgraph_urls(result: GenerationResult) -> list[str]:
    if not result.subgraphs:
        return ["SUBGRAPH_URLS: dict[str, str] = {}"]

    lines = ["SUBGRAPH_URLS: dict[str, str] = {"]
    for subgraph in result.subgraphs.values():
        lines.append(f"    {subgraph.name!r}: {subgraph.url!r},")
    lines.append("}")
    return lines


def generate_root_field(result: GenerationResult, plan: RootFieldPlan) -> list[str]:
    """Generate the ROOT_FIELDS item of one root field."""
    client = result.subgraph(plan.owning_subgraph).name
    lines = [
        f"        {plan.name!r}: {{",
        f'            "type": {render_type(plan.type)!r},',
        f'            "client": {client!r},',
    ]

    if plan.arguments:
        lines.append('            "arguments": {')
        for arg in plan.arguments:
            item = f'"type": {render_type(arg.type)!r}'
            if arg.has_default:
                item += f', "default": {arg.default!r}'
            lines.append(f"                {arg.name!r}: {{{item}}},")
        lines.append("            },")
    else:
        lines.append('            "arguments": {},')

    if plan.deprecation_reason is not None:
        lines.append(f'            "deprecated": {plan.deprecation_reason!r},')

    lines.append("        },")
    return lines


def generate_root_fields(result: GenerationResult) -> list[str]:
    lines = ["ROOT_FIELDS = {"]
    for operation in ("query", "mutation"):
        plans = [p for p in result.root_fields if p.operation == operation]
        if not plans:
            lines.append(f"    {operation!r}: {{}},")
            continue

        lines.append(f"    {operation!r}: {{")
        for plan in plans:
            lines.extend(generate_root_field(result, plan))
        lines.append("    },")
    lines.append("}")
    return lines


def generate_service_module(result: GenerationResult, port: int = DEFAULT_PORT) -> str:
    """
    Generate the gateway service module source.

    Args:
        result: Output of QueryPlanBuilder.build()
        port: Port the generated gateway listens on

    Returns:
        Python source code as string
    """
    lines: list[str] = list(HEADER)
    lines.append(f"PORT = {int(port)}")
    lines.append("")
    lines.extend(generate_subgraph_urls(result))
    lines.append("")
    lines.extend(generate_root_fields(result))
    lines.append("")
    lines.append("")
    lines.extend(GET_CLIENT_URL_FUNCTION)
    lines.append("")
    return "\n".join(lines)
