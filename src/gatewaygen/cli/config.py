"""
Configuration loading and validation for gatewaygen projects.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from ..core.constants import DEFAULT_PORT
from ..core.errors import ValidationError

CONFIG_FILE_NAME = "gatewaygen.yaml"
PLAN_FORMATS = ("yaml", "json")


@dataclass
class GatewayGenConfig:
    """Main gatewaygen configuration."""
    version: int
    project: str
    supergraph: str = "supergraph.graphql"
    output: str = "gateway"
    port: int = DEFAULT_PORT
    plan_format: str = "yaml"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GatewayGenConfig":
        """Create config from dictionary."""
        plan_format = data.get("plan_format", "yaml")
        if plan_format not in PLAN_FORMATS:
            raise ValidationError(
                f"Invalid plan_format '{plan_format}', must be one of {list(PLAN_FORMATS)}"
            )

        port = data.get("port", DEFAULT_PORT)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValidationError(f"Invalid port '{port}', must be an integer")

        return cls(
            version=data.get("version", 1),
            project=data.get("project", "gateway"),
            supergraph=data.get("supergraph", "supergraph.graphql"),
            output=data.get("output", "gateway"),
            port=port,
            plan_format=plan_format,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for YAML serialization."""
        return {
            "version": self.version,
            "project": self.project,
            "supergraph": self.supergraph,
            "output": self.output,
            "port": self.port,
            "plan_format": self.plan_format,
        }

    def save(self, path: Union[Path, str] = CONFIG_FILE_NAME) -> None:
        """Save configuration to YAML file."""
        path = Path(path)
        content = yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)
        path.write_text(content)


def load_config(path: Union[Path, str] = CONFIG_FILE_NAME) -> Optional[GatewayGenConfig]:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        return None

    data = yaml.safe_load(path.read_text()) or {}
    if not isinstance(data, dict):
        raise ValidationError(f"{path}: configuration must be a mapping")
    return GatewayGenConfig.from_dict(data)
