"""
Emitters - render a GenerationResult as source files and plan documents.
"""

from __future__ import annotations

from .document import render_document, to_document, to_json, to_yaml
from .query_plan import generate_query_plan_module
from .service import generate_service_module
from .types import generate_types_module

__all__ = [
    "generate_query_plan_module",
    "generate_service_module",
    "generate_types_module",
    "render_document",
    "to_document",
    "to_json",
    "to_yaml",
]
