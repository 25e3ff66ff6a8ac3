"""
Gateway generator - main entry point for generating a gateway project.

Usage:
    from gatewaygen import GatewayGenerator, GatewayProject

    project = GatewayProject(
        name="space",
        supergraph_path="supergraph.graphql",
        output_path="build/gateway",
        port=9000,
    )
    written = GatewayGenerator(project).generate()
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .core.builder import build_query_plan
from .core.constants import (
    DEFAULT_PORT,
    ERROR_INVALID_OUTPUT_PATH,
    ERROR_OUTPUT_PATH_NOT_WRITABLE,
    ERROR_WRITING_SOURCE,
    PLAN_DOCUMENT_FILE_NAME,
    QUERY_PLAN_FILE_NAME,
    SERVICE_FILE_NAME,
    TYPES_FILE_NAME,
)
from .core.defs import GenerationResult
from .core.errors import GenerationError, ValidationError
from .core.schema_loader import load_schema_file
from .emit.document import PlanFormat, render_document
from .emit.query_plan import generate_query_plan_module
from .emit.service import generate_service_module
from .emit.types import generate_types_module

logger = logging.getLogger(__name__)


@dataclass
class GatewayProject:
    """A gateway generation request."""
    name: str
    supergraph_path: Union[Path, str]
    output_path: Union[Path, str]
    port: int = DEFAULT_PORT
    plan_format: PlanFormat = "yaml"


class GatewayGenerator:
    """
    Generates gateway sources from a supergraph schema.

    Steps:
    - Load and validate the supergraph SDL
    - Build subgraph registry, query plan and root field table
    - Render schema_types.py, query_plan.py, service.py and the plan document
    - Stage every artifact as a .partial file, then rename them into place
    """

    def __init__(self, project: GatewayProject):
        self.project = project
        self.result: Optional[GenerationResult] = None

    def build(self) -> GenerationResult:
        """Load the schema and build the generation result."""
        schema = load_schema_file(self.project.supergraph_path)
        self.result = build_query_plan(schema)
        return self.result

    def render(self, result: GenerationResult) -> dict[str, str]:
        """Render every artifact, keyed by file name."""
        document_name = f"{PLAN_DOCUMENT_FILE_NAME}.{self.project.plan_format}"
        return {
            TYPES_FILE_NAME: generate_types_module(result),
            QUERY_PLAN_FILE_NAME: generate_query_plan_module(result),
            SERVICE_FILE_NAME: generate_service_module(result, port=self.project.port),
            document_name: render_document(result, self.project.plan_format),
        }

    def generate(self) -> dict[str, Path]:
        """
        Generate the gateway project.

        Raises:
            ValidationError: invalid schema or output directory
            GenerationError: schema cannot be planned, or a file cannot be
                written (staged files are removed)

        Returns:
            Dict of file name -> written path
        """
        output_path = self._check_output_path()
        result = self.build()
        sources = self.render(result)
        written = self.write(output_path, sources)

        logger.info(f"Gateway '{self.project.name}' generated in {output_path}")
        return written

    def write(self, output_path: Path, sources: dict[str, str]) -> dict[str, Path]:
        """
        Write every source into output_path, all or nothing.

        Sources are staged as `<name>.partial` and renamed into place only once
        every one was written; staged files are removed if any write fails.
        """
        staged: list[tuple[Path, Path]] = []
        try:
            for file_name, content in sources.items():
                path = output_path / file_name
                partial = output_path / f"{file_name}.partial"
                staged.append((partial, path))
                partial.write_text(content, encoding="utf-8")
            for partial, path in staged:
                partial.replace(path)
        except OSError as e:
            for partial, _ in staged:
                partial.unlink(missing_ok=True)
            raise GenerationError(f"{ERROR_WRITING_SOURCE}: {e}") from e

        written: dict[str, Path] = {}
        for _, path in staged:
            written[path.name] = path
            logger.info(f"Wrote {path}")
        return written

    def _check_output_path(self) -> Path:
        output_path = Path(self.project.output_path)
        if not output_path.is_dir():
            raise ValidationError(ERROR_INVALID_OUTPUT_PATH)
        if not os.access(output_path, os.W_OK):
            raise ValidationError(ERROR_OUTPUT_PATH_NOT_WRITABLE)
        return output_path


def generate_gateway(
    supergraph_path: Union[Path, str],
    output_path: Union[Path, str],
    port: int = DEFAULT_PORT,
    name: Optional[str] = None,
) -> dict[str, Path]:
    """
    Convenience function to generate a gateway project.

    The project name defaults to the schema file name without extension.
    """
    project = GatewayProject(
        name=name or Path(supergraph_path).stem,
        supergraph_path=supergraph_path,
        output_path=output_path,
        port=port,
    )
    return GatewayGenerator(project).generate()
