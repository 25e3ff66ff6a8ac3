from __future__ import annotations

import pytest

from gatewaygen.core.builder import build_query_plan
from gatewaygen.core.context import Context
from gatewaygen.core.schema_loader import load_schema

JOIN_DIRECTIVES = """
directive @join__type(graph: join__Graph!, key: join__FieldSet) repeatable on OBJECT | INTERFACE
directive @join__field(graph: join__Graph, external: Boolean) repeatable on FIELD_DEFINITION
directive @join__graph(name: String!, url: String!) on ENUM_VALUE

scalar join__FieldSet
"""

SPACE_SUPERGRAPH = JOIN_DIRECTIVES + """
enum join__Graph {
  ASTRONAUTS @join__graph(name: "astronauts", url: "http://localhost:4001")
  MISSIONS @join__graph(name: "missions", url: "http://localhost:4002")
}

type Query
  @join__type(graph: ASTRONAUTS)
  @join__type(graph: MISSIONS)
{
  astronaut(id: ID!): Astronaut @join__field(graph: ASTRONAUTS)
  astronauts: [Astronaut!]! @join__field(graph: ASTRONAUTS)
  mission(id: Int!): Mission @join__field(graph: MISSIONS)
  missions(first: Int = 10): [Mission!]! @join__field(graph: MISSIONS)
}

type Mutation @join__type(graph: MISSIONS) {
  launch(designation: String!): Mission
  abort(id: Int!): Boolean @deprecated(reason: "Use scrub")
}

type Astronaut @join__type(graph: ASTRONAUTS, key: "id") {
  id: ID!
  name: String!
  missions: [Mission!]
}

type Mission @join__type(graph: MISSIONS, key: "id") {
  id: Int!
  designation: String!
}
"""

STORE_SUPERGRAPH = JOIN_DIRECTIVES + """
enum join__Graph {
  INVENTORY @join__graph(name: "inventory", url: "http://inventory:4000/graphql")
  REVIEWS @join__graph(name: "reviews", url: "http://reviews:4000/graphql")
}

enum Rating {
  GOOD
  BAD
}

scalar DateTime

type Query @join__type(graph: INVENTORY) {
  product(upc: String!): Product
  topProducts(first: Int = 5): [Product]
}

type Product
  @join__type(graph: INVENTORY, key: "upc")
  @join__type(graph: REVIEWS, key: "upc")
{
  upc: String!
  inStock: Boolean @join__field(graph: INVENTORY)
  reviews: [Review!]! @join__field(graph: REVIEWS)
  weight: Float @join__field(graph: INVENTORY, external: true)
  legacyCode: String
}

type Review @join__type(graph: REVIEWS) {
  id: ID!
  rating: Rating
  postedAt: DateTime
  product: Product
}
"""

STORE_TYPES_SUPERGRAPH = STORE_SUPERGRAPH + """
"A product filter"
input ProductFilter {
  upc: String!
  inStock: Boolean = true
}

interface Node {
  id: ID!
}

union SearchResult = Product | Review

type Flight @join__type(graph: INVENTORY, key: "id") {
  id: ID!
  from: String
  to: String
}
"""

GRID_SUPERGRAPH = JOIN_DIRECTIVES + """
enum join__Graph {
  A @join__graph(name: "a", url: "http://a:4000")
  B @join__graph(name: "b", url: "http://b:4000")
}

type Query @join__type(graph: A) {
  grid: Grid
}

type Grid @join__type(graph: A) @join__type(graph: B) {
  cells: [[Int]]
  id: ID!
  label: String @join__field(graph: A)
}
"""

PLAIN_SCHEMA = """
type Query {
  astronaut(id: ID!): Astronaut
}

type Astronaut {
  id: ID!
  name: String!
}

type Mission {
  id: Int!
  designation: String!
}
"""


def build(sdl: str):
    """Load SDL and build its generation result."""
    return build_query_plan(load_schema(sdl))


@pytest.fixture
def space_schema():
    return load_schema(SPACE_SUPERGRAPH)


@pytest.fixture
def store_schema():
    return load_schema(STORE_SUPERGRAPH)


@pytest.fixture
def space_ctx(space_schema):
    return Context.from_schema(space_schema)


@pytest.fixture
def store_ctx(store_schema):
    return Context.from_schema(store_schema)


@pytest.fixture
def supergraph_file(tmp_path):
    path = tmp_path / "supergraph.graphql"
    path.write_text(SPACE_SUPERGRAPH, encoding="utf-8")
    return path
