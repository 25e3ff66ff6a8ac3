"""
gatewaygen CLI - command line tools for generating gateways.
"""

from __future__ import annotations

from .main import main, app

__all__ = ["main", "app"]
