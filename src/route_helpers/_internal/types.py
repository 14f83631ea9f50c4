"""Shared type aliases used across route_helpers modules."""

from collections.abc import Callable
from enum import Enum
from typing import Any, TypeAlias

# Controller or action name — text, or a symbol-like enum member
Identifier: TypeAlias = str | Enum

# Request handler — user-defined function with variable signature
Handler: TypeAlias = Callable[..., Any]
