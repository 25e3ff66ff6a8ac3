"""
Custom exceptions for the gateway generator.
"""

from __future__ import annotations

from typing import Optional, Union


class GatewayGenError(Exception):
    """Base exception for all gateway generator errors."""
    pass


class ValidationError(GatewayGenError):
    """Raised when the supergraph schema violates join spec conventions."""

    def __init__(self, errors: Union[list[str], str]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = errors
        super().__init__("; ".join(errors))


class GenerationError(GatewayGenError):
    """Raised when the plan cannot be built from an otherwise valid schema."""

    def __init__(self, message: str, type_name: Optional[str] = None):
        self.type_name = type_name
        super().__init__(f"{type_name}: {message}" if type_name else message)


class UnsupportedTypeError(GenerationError):
    """Raised for a type reference shape the generator cannot describe."""
    pass
