"""
Plan document serialization (YAML / JSON).
"""

from __future__ import annotations

from typing import Literal

import yaml

from ..core.defs import GenerationResult
from ..core.plan_types import GenerationDocument

PlanFormat = Literal["yaml", "json"]


def to_document(result: GenerationResult) -> GenerationDocument:
    return GenerationDocument.from_result(result)


def to_yaml(result: GenerationResult) -> str:
    data = to_document(result).model_dump(mode="json")
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


def to_json(result: GenerationResult) -> str:
    return to_document(result).model_dump_json(indent=2) + "\n"


def render_document(result: GenerationResult, fmt: PlanFormat = "yaml") -> str:
    """Render the plan document in the requested format."""
    if fmt == "yaml":
        return to_yaml(result)
    if fmt == "json":
        return to_json(result)
    raise ValueError(f"Unknown plan format '{fmt}', must be 'yaml' or 'json'")
