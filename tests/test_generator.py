from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from gatewaygen.core.constants import (
    ERROR_INVALID_OUTPUT_PATH,
    ERROR_INVALID_SUPERGRAPH_FILE_PATH,
    ERROR_OUTPUT_PATH_NOT_WRITABLE,
    ERROR_WRITING_SOURCE,
)
from gatewaygen.core.errors import GenerationError, ValidationError
from gatewaygen.generator import GatewayGenerator, GatewayProject, generate_gateway


@pytest.fixture
def output_dir(tmp_path):
    path = tmp_path / "gateway"
    path.mkdir()
    return path


def test_generate_writes_all_artifacts(supergraph_file, output_dir):
    written = generate_gateway(supergraph_file, output_dir, port=9200)

    assert sorted(written) == ["plan.yaml", "query_plan.py", "schema_types.py", "service.py"]
    assert (output_dir / "query_plan.py").read_text().startswith("# Auto-generated query plan")
    assert "PORT = 9200" in (output_dir / "service.py").read_text()
    assert written["plan.yaml"] == output_dir / "plan.yaml"


def test_json_plan_document(supergraph_file, output_dir):
    project = GatewayProject(
        name="space",
        supergraph_path=supergraph_file,
        output_path=output_dir,
        plan_format="json",
    )
    generator = GatewayGenerator(project)
    written = generator.generate()

    data = json.loads(written["plan.json"].read_text())
    assert [e["type_name"] for e in data["query_plan"]] == ["Astronaut", "Mission"]
    assert generator.result is not None
    assert generator.result.warnings == ()


def test_render_without_writing(supergraph_file, output_dir):
    generator = GatewayGenerator(GatewayProject("space", supergraph_file, output_dir))

    sources = generator.render(generator.build())

    assert set(sources) == {"schema_types.py", "query_plan.py", "service.py", "plan.yaml"}
    assert list(output_dir.iterdir()) == []


def test_missing_output_directory(supergraph_file, tmp_path):
    with pytest.raises(ValidationError) as exc_info:
        generate_gateway(supergraph_file, tmp_path / "missing")

    assert exc_info.value.errors == [ERROR_INVALID_OUTPUT_PATH]


def test_output_path_is_a_file(supergraph_file):
    with pytest.raises(ValidationError, match=ERROR_INVALID_OUTPUT_PATH):
        generate_gateway(supergraph_file, supergraph_file)


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="needs POSIX permissions as non-root")
def test_read_only_output_directory(supergraph_file, output_dir):
    output_dir.chmod(0o500)
    try:
        with pytest.raises(ValidationError, match=ERROR_OUTPUT_PATH_NOT_WRITABLE):
            generate_gateway(supergraph_file, output_dir)
    finally:
        output_dir.chmod(0o700)


def test_invalid_supergraph_writes_nothing(tmp_path, output_dir):
    with pytest.raises(ValidationError, match=ERROR_INVALID_SUPERGRAPH_FILE_PATH):
        generate_gateway(tmp_path / "missing.graphql", output_dir)

    assert list(output_dir.iterdir()) == []


def test_failed_write_leaves_no_files(supergraph_file, output_dir, monkeypatch):
    original_write_text = Path.write_text
    calls = []

    def write_text(self, *args, **kwargs):
        calls.append(self.name)
        if len(calls) == 3:
            raise OSError("disk full")
        return original_write_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "write_text", write_text)

    with pytest.raises(GenerationError, match=ERROR_WRITING_SOURCE):
        generate_gateway(supergraph_file, output_dir)

    assert calls == ["schema_types.py.partial", "query_plan.py.partial", "service.py.partial"]
    assert list(output_dir.iterdir()) == []


def test_regenerate_replaces_previous_output(supergraph_file, output_dir):
    (output_dir / "service.py").write_text("PORT = 1\n")

    generate_gateway(supergraph_file, output_dir, port=9400)

    assert "PORT = 9400" in (output_dir / "service.py").read_text()
    assert not any(path.suffix == ".partial" for path in output_dir.iterdir())
