"""
Compilation context passed down the AST during a visit.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from ..schema_ast.nodes import Primitive


@dataclass(frozen=True)
class CompilationContext:
    """Immutable state of one visit chain.

    Attributes:
        key: Name of the field being compiled, None outside any field
        key_meta: Metadata attached to that field
        in_array: Whether the node sits in an array's element position
        in_sum: Whether the node is a disjunct of a union
        left_type: Concrete type of the left operand of the enclosing rule
        depth: Nesting depth of the node
    """

    key: str | None = None
    key_meta: Mapping[str, Any] = field(default_factory=dict)
    in_array: bool = False
    in_sum: bool = False
    left_type: Primitive | None = None
    depth: int = 0

    @property
    def top_level(self) -> bool:
        """True outside any field, array element or union disjunct."""
        return self.key is None and not self.in_array and not self.in_sum

    def descend(self, **changes: Any) -> CompilationContext:
        """Context for a child node, one level deeper."""
        return replace(self, depth=self.depth + 1, **changes)
