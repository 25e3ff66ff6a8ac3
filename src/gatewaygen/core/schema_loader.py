"""
Supergraph SDL loading.

Parses and validates the SDL with graphql-core. The join spec scalars
(`join__FieldSet`, `link__Import`, ...) are declared by the supergraph itself
and need no extra wiring.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from graphql import GraphQLError, GraphQLSchema, build_schema, validate_schema

from .constants import ERROR_INVALID_SCHEMA, ERROR_INVALID_SUPERGRAPH_FILE_PATH
from .errors import ValidationError

logger = logging.getLogger(__name__)


def load_schema(sdl: str) -> GraphQLSchema:
    """
    Build a schema from supergraph SDL.

    Raises:
        ValidationError: if the SDL does not parse or is not a valid schema
    """
    try:
        schema = build_schema(sdl)
    except GraphQLError as e:
        raise ValidationError([ERROR_INVALID_SCHEMA, e.message]) from e
    except TypeError as e:
        # graphql-core reports invalid SDL documents as TypeError
        raise ValidationError([ERROR_INVALID_SCHEMA, str(e)]) from e

    errors = validate_schema(schema)
    if errors:
        raise ValidationError([ERROR_INVALID_SCHEMA] + [error.message for error in errors])

    logger.debug(f"Loaded schema with {len(schema.type_map)} types")
    return schema


def load_schema_file(path: Union[Path, str]) -> GraphQLSchema:
    """Read a supergraph SDL file and build its schema."""
    path = Path(path)
    if not path.is_file():
        raise ValidationError(ERROR_INVALID_SUPERGRAPH_FILE_PATH)

    logger.info(f"Reading supergraph schema from {path}")
    return load_schema(path.read_text(encoding="utf-8"))
