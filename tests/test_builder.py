from __future__ import annotations

import logging

import pytest

from gatewaygen.core.builder import QueryPlanBuilder
from gatewaygen.core.defs import PlanWarning
from gatewaygen.core.errors import GenerationError
from gatewaygen.core.schema_loader import load_schema

from conftest import (
    GRID_SUPERGRAPH,
    JOIN_DIRECTIVES,
    PLAIN_SCHEMA,
    SPACE_SUPERGRAPH,
    STORE_SUPERGRAPH,
    build,
)


class TestTwoSingleOwnedEntities:
    """Astronaut owned by ASTRONAUTS, Mission owned by MISSIONS."""

    @pytest.fixture
    def result(self):
        return build(SPACE_SUPERGRAPH)

    def test_registry(self, result):
        assert [s.name for s in result.subgraphs.values()] == ["astronauts", "missions"]

    def test_one_entry_per_entity(self, result):
        assert list(result.query_plan) == ["Astronaut", "Mission"]

    def test_astronaut_entry(self, result):
        astronaut = result.query_plan["Astronaut"]

        assert dict(astronaut.keys_by_subgraph) == {"ASTRONAUTS": "id"}
        assert [(f.name, f.owning_subgraph) for f in astronaut.fields] == [
            ("name", "ASTRONAUTS"),
            ("missions", "ASTRONAUTS"),
        ]

    def test_key_field_is_excluded(self, result):
        assert result.query_plan["Astronaut"].get_field("id") is None
        assert result.query_plan["Mission"].field_names() == ["designation"]

    def test_mission_entry(self, result):
        mission = result.query_plan["Mission"]

        assert dict(mission.keys_by_subgraph) == {"MISSIONS": "id"}
        assert mission.get_field("designation").owning_subgraph == "MISSIONS"

    def test_field_types(self, result):
        missions = result.query_plan["Astronaut"].get_field("missions")

        assert missions.type.is_object
        assert missions.type.base_name == "Mission"
        assert missions.type.is_list
        assert missions.type.list_nullable
        assert not missions.type.element_nullable

    def test_no_warnings(self, result):
        assert result.warnings == ()


class TestWithoutJoinGraph:
    """Degenerate input: no join__Graph enum and no join directives."""

    def test_empty_registry_and_empty_fields(self):
        result = build(PLAIN_SCHEMA)

        assert len(result.subgraphs) == 0
        assert list(result.query_plan) == ["Astronaut", "Mission"]
        for entry in result.query_plan.values():
            assert dict(entry.keys_by_subgraph) == {}
            assert entry.fields == ()
        assert result.root_fields == ()

    def test_every_field_is_warned(self):
        result = build(PLAIN_SCHEMA)

        assert [(w.type_name, w.field_name) for w in result.warnings] == [
            ("Astronaut", "id"),
            ("Astronaut", "name"),
            ("Mission", "id"),
            ("Mission", "designation"),
        ]


def test_root_types_are_never_planned():
    result = build(SPACE_SUPERGRAPH)

    assert "Query" not in result.query_plan
    assert "Mutation" not in result.query_plan
    assert not any(name.startswith("__") for name in result.query_plan)


def test_multi_owner_entity():
    product = build(STORE_SUPERGRAPH).query_plan["Product"]

    assert dict(product.keys_by_subgraph) == {"INVENTORY": "upc", "REVIEWS": "upc"}
    assert [(f.name, f.owning_subgraph) for f in product.fields] == [
        ("inStock", "INVENTORY"),
        ("reviews", "REVIEWS"),
    ]


def test_unresolved_fields_are_dropped_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="gatewaygen.core.builder"):
        result = build(STORE_SUPERGRAPH)

    assert result.warnings == (
        PlanWarning("Product", "weight", "no owning subgraph could be resolved"),
        PlanWarning("Product", "legacyCode", "no owning subgraph could be resolved"),
    )
    assert "[Product.legacyCode] no owning subgraph could be resolved" in caplog.text


def test_inferred_key_entity():
    review = build(STORE_SUPERGRAPH).query_plan["Review"]

    assert dict(review.keys_by_subgraph) == {"REVIEWS": "id"}
    assert review.field_names() == ["rating", "postedAt", "product"]


def test_nested_list_field_before_inferred_key():
    result = build(GRID_SUPERGRAPH)
    grid = result.query_plan["Grid"]

    assert dict(grid.keys_by_subgraph) == {"A": "id", "B": "id"}
    assert grid.field_names() == ["label"]
    assert [(w.type_name, w.field_name) for w in result.warnings] == [("Grid", "cells")]


def test_builder_is_deterministic():
    first = build(STORE_SUPERGRAPH)
    second = build(STORE_SUPERGRAPH)

    assert first.query_plan == second.query_plan
    assert first.warnings == second.warnings


def test_rebuild_resets_warnings():
    builder = QueryPlanBuilder.from_schema(load_schema(STORE_SUPERGRAPH))

    builder.build()
    result = builder.build()

    assert len(result.warnings) == 2


def test_entity_without_key_fails():
    schema = load_schema(JOIN_DIRECTIVES + """
enum join__Graph {
  CATALOG @join__graph(name: "catalog", url: "http://catalog:4000")
}

type Query { tag: Tag }

type Tag @join__type(graph: CATALOG) {
  label: String!
}
""")

    with pytest.raises(GenerationError, match="Tag: no key for graph 'CATALOG'"):
        QueryPlanBuilder.from_schema(schema).build()
